"""Abstract Syntax Tree (AST) definitions for the Arith language.

A parsed program is a `Program` holding one node per top-level statement.
Statements are `Definition`, `FunctionDef` or a bare expression; expressions
are `NumberLiteral`, `VariableRef`, `BinaryOp` and `FunctionCall`. The set of
node kinds is closed: the interpreter and the JSON converter both dispatch
over exactly these classes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union


@dataclass
class Node:
    """Base class for all AST nodes."""
    pass


@dataclass
class NumberLiteral(Node):
    value: float


@dataclass
class VariableRef(Node):
    name: str


@dataclass
class BinaryOp(Node):
    op: str  # one of '+', '-', '*', '/'
    left: 'Expr'
    right: 'Expr'


@dataclass
class FunctionCall(Node):
    name: str
    args: List['Expr'] = field(default_factory=list)


@dataclass
class Definition(Node):
    name: str
    value: 'Expr'


@dataclass
class FunctionDef(Node):
    name: str
    params: List[str]
    body: 'Expr'

    def __repr__(self) -> str:
        return f"<func {self.name}({', '.join(self.params)})>"


@dataclass
class Program(Node):
    body: List['Stmt']


Expr = Union[NumberLiteral, VariableRef, BinaryOp, FunctionCall]
Stmt = Union[Definition, FunctionDef, Expr]

BINARY_OPERATORS = ('+', '-', '*', '/')
