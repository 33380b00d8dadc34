"""Interpreter for the Arith language.

The interpreter walks the AST produced by either front end. Names are
resolved through an `Environment` chain whose last scope is the global
scope. A function call prepends one fresh scope holding the bound
parameters to the chain *visible at the call site*, so a function body can
see every name its caller can see, including the caller's own parameters.
This is dynamic scoping through the call stack, not a closure over the
definition site.
"""

from __future__ import annotations

from typing import Dict, List, Optional, TextIO

from .ast import (
    Program, Node, NumberLiteral, VariableRef, BinaryOp, FunctionCall,
    Definition, FunctionDef,
)
from .environment import Environment
from .errors import (
    ArityMismatchError, DivisionByZeroError, RecursionLimitError, TypeMismatchError,
)
from .grammar import parse_program_lark
from .parser import parse_program
from .types import Value, expect_number, is_function, to_string, type_name


FRONTENDS = {
    'descent': parse_program,
    'lark': parse_program_lark,
}


class Interpreter:
    """Core interpreter that evaluates Arith ASTs."""
    def __init__(self, debug_level: int = 0, debug_file: str = 'debug.txt'):
        self.global_scope: Dict[str, Value] = {}
        self.global_env = Environment([self.global_scope])
        self.debug_level = debug_level
        self.debug_fp: Optional[TextIO] = open(debug_file, 'w', encoding='utf-8') if debug_level > 0 else None

    def debug(self, msg: str):
        if self.debug_fp:
            self.debug_fp.write(msg + '\n')
            self.debug_fp.flush()

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    # Public API
    def run(self, program: Program, env: Optional[Environment] = None) -> float:
        """Evaluate every statement in order and return the last value.

        An empty program evaluates to 0.0. The global scope and the debug
        file carry over to later calls until `close`.
        """
        if env is None:
            env = self.global_env
        result: Value = 0.0
        try:
            for index, stmt in enumerate(program.body, 1):
                result = self.evaluate(stmt, env)
                if self.debug_level >= 1:
                    self.debug(f"statement {index}: {to_string(result)}")
        except RecursionError:
            raise RecursionLimitError('maximum call depth exceeded') from None
        return expect_number(result, 'program result')

    def evaluate(self, node: Node, env: Environment) -> Value:
        if isinstance(node, NumberLiteral):
            return node.value
        if isinstance(node, VariableRef):
            value = env.lookup(node.name)
            if is_function(value):
                raise TypeMismatchError(f"{node.name} is a function; call it as {node.name}(...)")
            return value
        if isinstance(node, BinaryOp):
            left = expect_number(self.evaluate(node.left, env), f"operator {node.op}")
            right = expect_number(self.evaluate(node.right, env), f"operator {node.op}")
            return self.apply_binary_op(node.op, left, right)
        if isinstance(node, Definition):
            value = self.evaluate(node.value, env)
            env.define(node.name, value)
            if self.debug_level >= 2:
                self.debug(f"let {node.name} = {to_string(value)}")
            return value
        if isinstance(node, FunctionDef):
            env.define(node.name, node)
            if self.debug_level >= 2:
                self.debug(f"define function {node.name}({', '.join(node.params)})")
            return 0.0
        if isinstance(node, FunctionCall):
            return self.call_function(node, env)
        raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")

    def call_function(self, node: FunctionCall, env: Environment) -> Value:
        func = env.lookup(node.name)
        if not is_function(func):
            raise TypeMismatchError(f"{node.name} is not callable ({type_name(func)})")
        # arguments see the caller's chain only
        args: List[Value] = [self.evaluate(arg, env) for arg in node.args]
        if len(args) != len(func.params):
            raise ArityMismatchError(func.name, len(func.params), len(args))
        call_env = env.push_call_scope(dict(zip(func.params, args)))
        if self.debug_level >= 3:
            shown = ', '.join(to_string(a) for a in args)
            self.debug(f"call {func.name}({shown}) depth={call_env.depth}")
        return self.evaluate(func.body, call_env)

    def apply_binary_op(self, op: str, a: float, b: float) -> float:
        if op == '+':
            return a + b
        if op == '-':
            return a - b
        if op == '*':
            return a * b
        if op == '/':
            if b == 0:
                raise DivisionByZeroError(f"division by zero: {to_string(a)} / {to_string(b)}")
            return a / b
        raise TypeMismatchError(f'unknown operator {op}')


def run_program(source: str, debug_level: int = 0, frontend: str = 'descent') -> float:
    """Convenience function to parse and run an Arith program from a source string."""
    ast_program = FRONTENDS[frontend](source)
    interpreter = Interpreter(debug_level=debug_level)
    try:
        return interpreter.run(ast_program)
    finally:
        interpreter.close()
