"""AST node variants consumed by the evaluator.

The set is closed: every node below must be handled by
``evaluator.eval_node``. Each node records the source line it came from so
failures can be reported against it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union
from typing_extensions import TypeAlias


@dataclass(frozen=True)
class Block:
    instrs: Tuple['Expr', ...]
    line: int = 0


@dataclass(frozen=True)
class Literal:
    value: object
    line: int = 0


@dataclass(frozen=True)
class FunCall:
    qualifier: 'Expr'
    args: Tuple['Expr', ...]
    line: int = 0


@dataclass(frozen=True)
class LocalVarAccess:
    name: str
    line: int = 0


@dataclass(frozen=True)
class LocalVarAssignment:
    name: str
    expr: 'Expr'
    declaration: bool
    line: int = 0


@dataclass(frozen=True)
class FunctionDefinition:
    name: Optional[str]
    parameters: Tuple[str, ...]
    body: Block
    line: int = 0


@dataclass(frozen=True)
class Return:
    expr: 'Expr'
    line: int = 0


@dataclass(frozen=True)
class If:
    condition: 'Expr'
    true_block: Block
    false_block: Block
    line: int = 0


@dataclass(frozen=True)
class ObjectConstruction:
    # (property name, initializer) pairs, evaluated in order
    inits: Tuple[Tuple[str, 'Expr'], ...]
    line: int = 0


@dataclass(frozen=True)
class FieldAccess:
    receiver: 'Expr'
    name: str
    line: int = 0


@dataclass(frozen=True)
class FieldAssignment:
    receiver: 'Expr'
    name: str
    expr: 'Expr'
    line: int = 0


@dataclass(frozen=True)
class MethodCall:
    receiver: 'Expr'
    name: str
    args: Tuple['Expr', ...]
    line: int = 0


Expr: TypeAlias = Union[
    Block,
    Literal,
    FunCall,
    LocalVarAccess,
    LocalVarAssignment,
    FunctionDefinition,
    Return,
    If,
    ObjectConstruction,
    FieldAccess,
    FieldAssignment,
    MethodCall,
]


@dataclass(frozen=True)
class Script:
    body: Block


def node_line(node: object) -> Optional[int]:
    line = getattr(node, "line", None)

    if isinstance(line, int) and line > 0:
        return line

    return None
