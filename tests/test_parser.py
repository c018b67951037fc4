"""Tests for statement parsing."""

import pytest  # type: ignore

from builtin import BuiltinKind
from command import Builtin, Empty, External, Invalid, Literal, Pipe, Redirect
from lexer import Token, TokenKind, lex
from parser import Parser, parse
from typesystem import Boolean, Float, Integer, String


def p(line):
    return parse(lex(line))


def ext(name, *args):
    return External(Token(name, TokenKind.WORD), [Literal(String(a)) for a in args])


def test_empty_token_list():
    assert parse([]) == []
    assert Parser([]).parse() == []


@pytest.mark.parametrize(
    "line,kind",
    [("cd", BuiltinKind.CD), ("exit", BuiltinKind.EXIT), ("ls", BuiltinKind.LS), ("pwd", BuiltinKind.PWD)],
)
def test_builtin_names(line, kind):
    assert p(line) == [Builtin(kind, [])]


def test_builtin_with_args():
    assert p("cd /tmp") == [Builtin(BuiltinKind.CD, [Literal(String("/tmp"))])]
    assert p("ls a b") == [Builtin(BuiltinKind.LS, [Literal(String("a")), Literal(String("b"))])]


def test_external_with_typed_args():
    assert p("echo hi 'x y' true 42 2.5") == [
        External(
            Token("echo", TokenKind.WORD),
            [
                Literal(String("hi")),
                Literal(String("x y")),
                Literal(Boolean(True)),
                Literal(Integer(42)),
                Literal(Float(2.5)),
            ],
        )
    ]


@pytest.mark.parametrize(
    "line,value",
    [("'hello'", String("hello")), ("false", Boolean(False)), ("-7", Integer(-7)), ("0.25", Float(0.25))],
)
def test_literal_statements(line, value):
    assert p(line) == [Literal(value)]


def test_pipe():
    assert p("ls | grep x") == [Pipe(Builtin(BuiltinKind.LS, []), ext("grep", "x"))]


def test_pipe_from_string():
    assert p("'ls' | grep") == [Pipe(Literal(String("ls")), ext("grep"))]


def test_redirect_to_word_is_a_path():
    assert p("ls > out.txt") == [Redirect(Builtin(BuiltinKind.LS, []), Literal(String("out.txt")))]


def test_redirect_to_quoted_path():
    assert p("'ls' > 'my file'") == [Redirect(Literal(String("ls")), Literal(String("my file")))]


def test_pipes_are_left_associative():
    [root] = p("a | b | c")
    assert root == Pipe(Pipe(ext("a"), ext("b")), ext("c"))


def test_pipe_and_redirect_share_precedence():
    assert p("a | b > f") == [Redirect(Pipe(ext("a"), ext("b")), Literal(String("f")))]
    assert p("a > f | b") == [Pipe(Redirect(ext("a"), Literal(String("f"))), ext("b"))]


def test_multiple_statements():
    assert p("ls ; cd") == [Builtin(BuiltinKind.LS, []), Builtin(BuiltinKind.CD, [])]
    assert p("ls; pwd; cd /") == [
        Builtin(BuiltinKind.LS, []),
        Builtin(BuiltinKind.PWD, []),
        Builtin(BuiltinKind.CD, [Literal(String("/"))]),
    ]


def test_trailing_semicolon_ends_program():
    assert p("ls;") == [Builtin(BuiltinKind.LS, [])]


def test_bare_semicolons_are_empty_statements():
    assert p(";") == [Empty()]
    assert p(";;") == [Empty(), Empty()]
    assert p("ls;;") == [Builtin(BuiltinKind.LS, []), Empty()]
    assert p("; ls") == [Empty(), Builtin(BuiltinKind.LS, [])]


@pytest.mark.parametrize("line", ["| ls", "> f", "'a' b", "ls > f g"])
def test_unexpected_token(line):
    assert p(line)[-1] == Invalid("Unexpected token")


@pytest.mark.parametrize("line", ["ls |", "ls >", "echo hi | "])
def test_unexpected_end_of_input(line):
    assert p(line) == [Invalid("Unexpected end of input")]


def test_error_keeps_earlier_statements():
    assert p("pwd; ls |") == [Builtin(BuiltinKind.PWD, []), Invalid("Unexpected end of input")]


def test_error_drops_later_statements():
    assert p("| ls; pwd") == [Invalid("Unexpected token")]
