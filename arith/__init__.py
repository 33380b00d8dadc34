# Arith language package
# This package provides a lexer, parser and interpreter for the Arith expression language.
from .errors import (
    ArithError, LexError, ParseError, UndefinedNameError, DivisionByZeroError,
    ArityMismatchError, TypeMismatchError, RecursionLimitError,
)
from .lexer import Token, tokenize
from .parser import Parser, parse_program, parse_tokens
from .grammar import parse_program_lark
from .environment import Environment
from .interpreter import Interpreter, run_program

__all__ = [
    'ArithError',
    'LexError',
    'ParseError',
    'UndefinedNameError',
    'DivisionByZeroError',
    'ArityMismatchError',
    'TypeMismatchError',
    'RecursionLimitError',
    'Token',
    'tokenize',
    'Parser',
    'parse_program',
    'parse_tokens',
    'parse_program_lark',
    'Environment',
    'Interpreter',
    'run_program',
]
