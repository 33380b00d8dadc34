"""Recursive-descent parser for the Arith language.

Grammar (lowest to highest precedence)::

    program    := statement* EOF
    statement  := ( definition | functionDef | expression ) ';'  |  ';'
    definition := 'let' IDENT '=' expression
    functionDef:= 'func' IDENT '(' [ IDENT (',' IDENT)* ] ')' '=' expression
    expression := term ( ('+'|'-') term )*
    term       := factor ( ('*'|'/') factor )*
    factor     := '(' expression ')' | call | IDENT | NUMBER
    call       := IDENT '(' [ expression (',' expression)* ] ')'

The parser keeps its own cursor into the token list and never backtracks.
A call is told apart from a variable reference by looking one token past
the identifier. The first error aborts parsing.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from .ast import (
    Program, Node, NumberLiteral, VariableRef, BinaryOp, FunctionCall,
    Definition, FunctionDef,
)
from .errors import ParseError, RecursionLimitError
from .lexer import EOF, Token, tokenize


def describe(token: Token) -> str:
    if token.kind == EOF:
        return 'end of input'
    return repr(token.lexeme)


class Parser:
    def __init__(self, tokens: Sequence[Token]):
        if not tokens or tokens[-1].kind != EOF:
            raise ValueError('token sequence must end with an EOF token')
        self.tokens = tuple(tokens)
        self.pos = 0

    def peek(self, offset: int = 0) -> Token:
        index = min(self.pos + offset, len(self.tokens) - 1)
        return self.tokens[index]

    def match(self, kind: str) -> bool:
        return self.peek().kind == kind

    def advance(self) -> Token:
        token = self.peek()
        if token.kind != EOF:
            self.pos += 1
        return token

    def consume(self, kind: str, message: Optional[str] = None) -> Token:
        token = self.peek()
        if token.kind != kind:
            if message is None:
                message = f"expected {kind!r}, got {describe(token)}"
            raise ParseError(message, token.line)
        return self.advance()

    def parse_program(self) -> Program:
        statements: List[Node] = []
        while not self.match(EOF):
            # empty statement
            if self.match(';'):
                self.advance()
                continue
            statements.append(self.parse_statement())
        return Program(statements)

    def parse_statement(self) -> Node:
        start = self.peek()
        if start.kind == 'LET':
            stmt = self.parse_definition()
        elif start.kind == 'FUNC':
            stmt = self.parse_function_def()
        else:
            stmt = self.parse_expression()
        if not self.match(';'):
            raise ParseError(
                f"missing ';' at end of statement, "
                f"got {describe(self.peek())}",
                start.line,
            )
        self.advance()
        return stmt

    def parse_definition(self) -> Definition:
        self.consume('LET')
        name = self.consume('IDENT', f"expected identifier after 'let', got {describe(self.peek())}")
        self.consume('=', f"expected '=' after 'let {name.lexeme}', got {describe(self.peek())}")
        value = self.parse_expression()
        return Definition(name.lexeme, value)

    def parse_function_def(self) -> FunctionDef:
        self.consume('FUNC')
        name = self.consume('IDENT', f"expected function name after 'func', got {describe(self.peek())}")
        self.consume('(', f"expected '(' after 'func {name.lexeme}', got {describe(self.peek())}")
        params = self.parse_param_list(name.lexeme)
        self.consume('=', f"expected '=' after parameters of {name.lexeme}, got {describe(self.peek())}")
        body = self.parse_expression()
        return FunctionDef(name.lexeme, params, body)

    def parse_param_list(self, func_name: str) -> List[str]:
        params: List[str] = []
        if self.match(')'):
            self.advance()
            return params
        while True:
            param = self.consume('IDENT', f"expected parameter name in {func_name}, got {describe(self.peek())}")
            if param.lexeme in params:
                raise ParseError(f"duplicate parameter {param.lexeme} in {func_name}", param.line)
            params.append(param.lexeme)
            if self.match(','):
                self.advance()
                continue
            self.consume(')', f"expected ',' or ')' in parameters of {func_name}, got {describe(self.peek())}")
            return params

    def parse_expression(self) -> Node:
        node = self.parse_term()
        while self.match('+') or self.match('-'):
            op = self.advance()
            right = self.parse_term()
            node = BinaryOp(op.kind, node, right)
        return node

    def parse_term(self) -> Node:
        node = self.parse_factor()
        while self.match('*') or self.match('/'):
            op = self.advance()
            right = self.parse_factor()
            node = BinaryOp(op.kind, node, right)
        return node

    def parse_factor(self) -> Node:
        token = self.peek()
        if token.kind == '(':
            self.advance()
            expr = self.parse_expression()
            if not self.match(')'):
                raise ParseError("unmatched '('", token.line)
            self.advance()
            return expr
        if token.kind == 'IDENT':
            if self.peek(1).kind == '(':
                return self.parse_call()
            self.advance()
            return VariableRef(token.lexeme)
        if token.kind == 'NUMBER':
            self.advance()
            return NumberLiteral(float(token.lexeme))
        raise ParseError(f"unexpected {describe(token)} in expression", token.line)

    def parse_call(self) -> FunctionCall:
        name = self.consume('IDENT')
        paren = self.consume('(')
        args: List[Node] = []
        if self.match(')'):
            self.advance()
            return FunctionCall(name.lexeme, args)
        while True:
            args.append(self.parse_expression())
            if self.match(','):
                self.advance()
                continue
            if self.match(')'):
                self.advance()
                return FunctionCall(name.lexeme, args)
            if self.match(EOF) or self.match(';'):
                raise ParseError(f"unmatched '(' in call to {name.lexeme}", paren.line)
            raise ParseError(
                f"expected ',' or ')' in arguments to {name.lexeme}, got {describe(self.peek())}",
                self.peek().line,
            )


def parse_tokens(tokens: Sequence[Token]) -> Program:
    parser = Parser(tokens)
    try:
        return parser.parse_program()
    except RecursionError:
        raise RecursionLimitError('expression nested too deeply', parser.peek().line) from None


def parse_program(source: str) -> Program:
    """Tokenize and parse source text into a Program AST."""
    return parse_tokens(tokenize(source))
