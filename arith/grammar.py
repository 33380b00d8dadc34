"""Grammar-based front end for the Arith language.

This module describes the same language as `arith.parser`, but
declaratively, as a Lark grammar. The resulting parse tree is turned into
the very same AST classes by `ASTTransformer`, so either front end can feed
the interpreter. The recursive-descent parser remains the default; this one
is selectable from the command line and is used by the test-suite as an
independent check of the hand-written parser.

Lark failures are converted into the package's own error types so callers
only ever see `LexError`, `ParseError` or `RecursionLimitError`.
"""

from __future__ import annotations

from typing import List

from lark import Lark, Transformer
from lark.exceptions import UnexpectedCharacters, UnexpectedInput, VisitError

from .ast import (
    Program, Node, NumberLiteral, VariableRef, BinaryOp, FunctionCall,
    Definition, FunctionDef,
)
from .errors import ArithError, LexError, ParseError, RecursionLimitError
from .parser import parse_program


ARITH_GRAMMAR = r"""
    start: program
    program: (statement | ";")*

    ?statement: (definition | func_def | expression) ";"

    definition: _LET IDENT "=" expression
    func_def: _FUNC IDENT "(" [param_list] ")" "=" expression
    param_list: IDENT ("," IDENT)*

    // Expressions with precedence
    ?expression: term (ADD_OP term)*
    ?term: factor (MUL_OP factor)*
    ?factor: "(" expression ")"
           | call
           | IDENT -> variable
           | NUMBER -> number
    call: IDENT "(" [arg_list] ")"
    arg_list: expression ("," expression)*

    // Tokens. Keywords outrank IDENT, so "letter" lexes as "let" "ter".
    _LET.2: "let"
    _FUNC.2: "func"
    ADD_OP: "+" | "-"
    MUL_OP: "*" | "/"
    IDENT: /[a-zA-Z]+/
    NUMBER: /\d*\.?\d+/

    %import common.WS
    %ignore WS
"""


ARITH_PARSER = Lark(
    ARITH_GRAMMAR,
    parser='lalr',
    lexer='basic',
    propagate_positions=True,
    maybe_placeholders=False,
)


class ASTTransformer(Transformer):
    """Transforms the raw parse tree into an AST."""

    def start(self, items):
        return items[0]

    def program(self, items):
        return Program(body=list(items))

    def definition(self, items):
        return Definition(name=str(items[0]), value=items[1])

    def func_def(self, items):
        name = str(items[0])
        params: List[str] = []
        if len(items) == 3:
            for param in items[1]:
                if str(param) in params:
                    raise ParseError(f"duplicate parameter {param} in {name}", param.line)
                params.append(str(param))
        return FunctionDef(name=name, params=params, body=items[-1])

    def param_list(self, items):
        # keep the tokens: func_def needs their lines
        return list(items)

    def fold_binary(self, items) -> Node:
        # items pattern: operand (op operand)*
        left = items[0]
        i = 1
        while i < len(items):
            left = BinaryOp(op=str(items[i]), left=left, right=items[i + 1])
            i += 2
        return left

    def expression(self, items):
        return self.fold_binary(items)

    def term(self, items):
        return self.fold_binary(items)

    def variable(self, items):
        return VariableRef(str(items[0]))

    def number(self, items):
        return NumberLiteral(float(items[0]))

    def call(self, items):
        args: List[Node] = items[1] if len(items) > 1 else []
        return FunctionCall(name=str(items[0]), args=args)

    def arg_list(self, items):
        return list(items)


def syntax_error(source: str, e: UnexpectedInput) -> ParseError:
    """Diagnose a grammar failure the way the recursive-descent parser does.

    Lark stops at the token it could not shift, but a missing ';' is reported
    at the line the statement started on and an unmatched '(' at the line it
    was opened on. The descent parser tracks both, so its error is used.
    """
    try:
        parse_program(source)
    except ParseError as err:
        return err
    token = getattr(e, 'token', None)
    if token is None or token.type == '$END':
        found = 'end of input'
    else:
        found = repr(str(token))
    line = e.line if isinstance(e.line, int) and e.line > 0 else None
    return ParseError(f"unexpected {found}", line)


def parse_program_lark(source: str) -> Program:
    """Parse Arith source code into a Program AST using the Lark grammar."""
    try:
        tree = ARITH_PARSER.parse(source)
    except UnexpectedCharacters as e:
        raise LexError(e.char, e.line) from None
    except UnexpectedInput as e:
        raise syntax_error(source, e) from None
    try:
        return ASTTransformer().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, RecursionError):
            raise RecursionLimitError('expression nested too deeply') from None
        if isinstance(e.orig_exc, ArithError):
            raise e.orig_exc from None
        raise
    except RecursionError:
        raise RecursionLimitError('expression nested too deeply') from None
