"""Parse a token sequence into command trees, one per ``;``-separated statement.

Grammar (one token of lookahead)::

    program    := statement (';' statement)* ';'?
    statement  := expression ( ('>' | '|') expression )*
    expression := WORD args* | STRING | BOOLEAN | INTEGER | FLOAT | ';'
    args       := (WORD | STRING | BOOLEAN | INTEGER | FLOAT)*

``>`` and ``|`` have the same precedence and associate to the left, so
``a | b > f`` is ``Redirect(Pipe(a, b), f)``.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from builtin import BuiltinKind
from command import Builtin, Command, Empty, External, Invalid, Literal, Pipe, Redirect
from lexer import LITERAL_KINDS, ShellSyntaxError, Token, TokenKind
from typesystem import Boolean, Float, Integer, String, Value


def literal_value(token: Token) -> Value:
    match token.kind:
        case TokenKind.WORD | TokenKind.STRING:
            return String(token.value)
        case TokenKind.BOOLEAN:
            return Boolean(token.value == "true")
        case TokenKind.INTEGER:
            return Integer(int(token.value))
        case TokenKind.FLOAT:
            return Float(float(token.value))
    raise ShellSyntaxError("Unexpected token")


class Parser:
    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens: List[Token] = list(tokens)
        self.pos: int = 0

    # --- cursor ---

    def peek(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Token:
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    # --- grammar ---

    def parse(self) -> List[Command]:
        """Parse every statement.

        A syntax error stops parsing: the statements before it are kept and an
        Invalid node carrying the message is appended last.
        """
        commands: List[Command] = []
        while self.peek() is not None:
            if commands:
                # parse_statement only stops at ';' or the end of input
                self.advance()
                if self.peek() is None:
                    break
            try:
                commands.append(self.parse_statement())
            except ShellSyntaxError as e:
                commands.append(Invalid(str(e)))
                break
        return commands

    def parse_statement(self) -> Command:
        command = self.parse_expression()
        while True:
            token = self.peek()
            if token is None or token.kind is TokenKind.SEMICOLON:
                return command
            if token.kind is TokenKind.GREATER_THAN:
                self.advance()
                command = Redirect(command, self.parse_redirect_target())
            elif token.kind is TokenKind.PIPE:
                self.advance()
                command = Pipe(command, self.parse_expression())
            else:
                raise ShellSyntaxError("Unexpected token")

    def parse_expression(self) -> Command:
        token = self.peek()
        if token is None:
            raise ShellSyntaxError("Unexpected end of input")
        if token.kind is TokenKind.WORD:
            return self.parse_word()
        if token.kind is TokenKind.SEMICOLON:
            # Left in place; it separates statements.
            return Empty()
        if token.kind in LITERAL_KINDS:
            return Literal(literal_value(self.advance()))
        raise ShellSyntaxError("Unexpected token")

    def parse_redirect_target(self) -> Command:
        # A bare word after '>' names a file, not a program.
        token = self.peek()
        if token is not None and token.kind is TokenKind.WORD:
            return Literal(String(self.advance().value))
        return self.parse_expression()

    def parse_word(self) -> Command:
        token = self.advance()
        args = self.parse_args()
        kind = BuiltinKind.lookup(token.value)
        if kind is not None:
            return Builtin(kind, args)
        return External(token, args)

    def parse_args(self) -> List[Command]:
        args: List[Command] = []
        while True:
            token = self.peek()
            if token is None or token.kind not in LITERAL_KINDS:
                return args
            args.append(Literal(literal_value(self.advance())))


def parse(tokens: Sequence[Token]) -> List[Command]:
    return Parser(tokens).parse()
