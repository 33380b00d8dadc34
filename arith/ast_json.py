"""JSON serialization/deserialization for Arith ASTs.

This module converts between the AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. Every node is written as a
dict tagged with its class name under the `"type"` key.
"""

from __future__ import annotations

from typing import Any

from .ast import (
    BINARY_OPERATORS,
    Program,
    NumberLiteral,
    VariableRef,
    BinaryOp,
    FunctionCall,
    Definition,
    FunctionDef,
)


def ast_to_obj(node: Any) -> Any:
    if isinstance(node, Program):
        return {"type": "Program", "body": [ast_to_obj(n) for n in node.body]}
    if isinstance(node, NumberLiteral):
        return {"type": "NumberLiteral", "value": node.value}
    if isinstance(node, VariableRef):
        return {"type": "VariableRef", "name": node.name}
    if isinstance(node, BinaryOp):
        return {"type": "BinaryOp", "op": node.op, "left": ast_to_obj(node.left), "right": ast_to_obj(node.right)}
    if isinstance(node, FunctionCall):
        return {"type": "FunctionCall", "name": node.name, "args": [ast_to_obj(a) for a in node.args]}
    if isinstance(node, Definition):
        return {"type": "Definition", "name": node.name, "value": ast_to_obj(node.value)}
    if isinstance(node, FunctionDef):
        return {
            "type": "FunctionDef",
            "name": node.name,
            "params": list(node.params),
            "body": ast_to_obj(node.body),
        }

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    if t == "Program":
        return Program(body=[ast_from_obj(n) for n in obj["body"]])
    if t == "NumberLiteral":
        return NumberLiteral(value=float(obj["value"]))
    if t == "VariableRef":
        return VariableRef(name=obj["name"])
    if t == "BinaryOp":
        if obj["op"] not in BINARY_OPERATORS:
            raise ValueError(f"Unknown binary operator: {obj['op']!r}")
        return BinaryOp(op=obj["op"], left=ast_from_obj(obj["left"]), right=ast_from_obj(obj["right"]))
    if t == "FunctionCall":
        return FunctionCall(name=obj["name"], args=[ast_from_obj(a) for a in obj["args"]])
    if t == "Definition":
        return Definition(name=obj["name"], value=ast_from_obj(obj["value"]))
    if t == "FunctionDef":
        return FunctionDef(name=obj["name"], params=list(obj["params"]), body=ast_from_obj(obj["body"]))

    raise ValueError(f"Unknown AST node type: {t}")
