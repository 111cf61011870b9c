"""Source text -> `tree` nodes, via a lark LALR grammar.

Infix operators are sugar: `a + b` becomes a call of the global `+`, the same
node `+(a, b)` produces.
"""
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional, Tuple

from lark import Lark, Token, Transformer, UnexpectedInput
from lark.visitors import v_args

from .runtime import UNDEFINED, SmallJsParseError
from .tree import (
    Block,
    Expr,
    FieldAccess,
    FieldAssignment,
    FunCall,
    FunctionDefinition,
    If,
    Literal,
    LocalVarAccess,
    LocalVarAssignment,
    MethodCall,
    ObjectConstruction,
    Return,
    Script,
)

GRAMMAR = r"""
program: statement*

?statement: "var" NAME "=" expr ";"                    -> var_decl
          | NAME "=" expr ";"                          -> var_assign
          | postfix "." NAME "=" expr ";"              -> field_assign
          | "return" [expr] ";"                        -> return_stmt
          | if_stmt
          | "function" NAME "(" [params] ")" block     -> fun_decl
          | expr ";"                                   -> expr_stmt

if_stmt: "if" "(" expr ")" block ["else" else_branch]
?else_branch: block | if_stmt

block: "{" statement* "}"
params: NAME ("," NAME)*
arglist: expr ("," expr)*

?expr: comparison

?comparison: sum
           | sum comp_op sum                          -> binop

?sum: product
    | sum add_op product                              -> binop

?product: postfix
        | product mul_op postfix                      -> binop

?postfix: atom
        | call
        | postfix "." NAME                            -> field_access
        | postfix "." NAME "(" [arglist] ")"          -> method_call

call: callee "(" [arglist] ")"

?callee: NAME                                         -> var
       | op_name
       | "(" expr ")"
       | call

?atom: INT                                            -> int
     | "-" INT                                        -> neg_int
     | STRING                                         -> string
     | "undefined"                                    -> undefined
     | NAME                                           -> var
     | object
     | "function" "(" [params] ")" block              -> fun_expr
     | "(" expr ")"

object: "{" "}"
      | "{" obj_field ("," obj_field)* "}"
obj_field: (NAME | STRING) ":" expr

!comp_op: "==" | "!=" | "<" | "<=" | ">" | ">="
!add_op: "+" | "-"
!mul_op: "*" | "/" | "%"
!op_name: "+" | "-" | "*" | "/" | "%" | "==" | "!=" | "<" | "<=" | ">" | ">="

NAME: /[A-Za-z_$][A-Za-z0-9_$]*/
INT: /[0-9]+/
STRING: /"(\\.|[^"\\\n])*"/
COMMENT: /\/\/[^\n]*/

%import common.WS
%ignore WS
%ignore COMMENT
"""

_ESCAPES = {"n": "\n", "t": "\t", '"': '"', "\\": "\\"}

def _unquote(raw: str) -> str:
    body = raw[1:-1]
    out: List[str] = []
    it = iter(body)

    for ch in it:
        if ch != "\\":
            out.append(ch)
            continue
        nxt = next(it, "")
        out.append(_ESCAPES.get(nxt, "\\" + nxt))

    return "".join(out)

def _line(meta) -> int:
    return getattr(meta, "line", 0) or 0

@v_args(meta=True)
class ToAst(Transformer):
    """Lower the lark parse tree into evaluator nodes."""

    def program(self, meta, c) -> Script:
        return Script(Block(tuple(c), line=_line(meta) or 1))

    def block(self, meta, c) -> Block:
        return Block(tuple(c), line=_line(meta))

    def params(self, meta, c) -> Tuple[str, ...]:
        return tuple(str(t) for t in c)

    def arglist(self, meta, c) -> Tuple[Expr, ...]:
        return tuple(c)

    # ---- statements ----

    def var_decl(self, meta, c) -> LocalVarAssignment:
        name, expr = c
        return LocalVarAssignment(str(name), expr, True, line=_line(meta))

    def var_assign(self, meta, c) -> LocalVarAssignment:
        name, expr = c
        return LocalVarAssignment(str(name), expr, False, line=_line(meta))

    def field_assign(self, meta, c) -> FieldAssignment:
        receiver, name, expr = c
        return FieldAssignment(receiver, str(name), expr, line=_line(meta))

    def return_stmt(self, meta, c) -> Return:
        expr = c[0]
        line = _line(meta)
        if expr is None:
            expr = Literal(UNDEFINED, line=line)
        return Return(expr, line=line)

    def if_stmt(self, meta, c) -> If:
        condition, true_block, else_branch = c
        line = _line(meta)

        match else_branch:
            case None:
                false_block = Block((), line=line)
            case Block():
                false_block = else_branch
            case _:
                false_block = Block((else_branch,), line=else_branch.line)

        return If(condition, true_block, false_block, line=line)

    def fun_decl(self, meta, c) -> FunctionDefinition:
        name, params, body = c
        return FunctionDefinition(str(name), params or (), body, line=_line(meta))

    def expr_stmt(self, meta, c) -> Expr:
        return c[0]

    # ---- expressions ----

    def binop(self, meta, c) -> FunCall:
        left, op, right = c
        line = _line(meta)
        return FunCall(LocalVarAccess(op, line=line), (left, right), line=line)

    def comp_op(self, meta, c) -> str:
        return str(c[0])

    add_op = comp_op
    mul_op = comp_op

    def op_name(self, meta, c) -> LocalVarAccess:
        return LocalVarAccess(str(c[0]), line=_line(meta))

    def var(self, meta, c) -> LocalVarAccess:
        return LocalVarAccess(str(c[0]), line=_line(meta))

    def call(self, meta, c) -> FunCall:
        qualifier, args = c
        return FunCall(qualifier, args or (), line=_line(meta))

    def field_access(self, meta, c) -> FieldAccess:
        receiver, name = c
        return FieldAccess(receiver, str(name), line=_line(meta))

    def method_call(self, meta, c) -> MethodCall:
        receiver, name, args = c
        return MethodCall(receiver, str(name), args or (), line=_line(meta))

    def int(self, meta, c) -> Literal:
        return Literal(int(c[0]), line=_line(meta))

    def neg_int(self, meta, c) -> Literal:
        return Literal(-int(c[0]), line=_line(meta))

    def string(self, meta, c) -> Literal:
        return Literal(_unquote(str(c[0])), line=_line(meta))

    def undefined(self, meta, c) -> Literal:
        return Literal(UNDEFINED, line=_line(meta))

    def object(self, meta, c) -> ObjectConstruction:
        return ObjectConstruction(tuple(c), line=_line(meta))

    def obj_field(self, meta, c) -> Tuple[str, Expr]:
        key, value = c
        name = _unquote(str(key)) if key.type == "STRING" else str(key)
        return (name, value)

    def fun_expr(self, meta, c) -> FunctionDefinition:
        params, body = c
        return FunctionDefinition(None, params or (), body, line=_line(meta))

@lru_cache(maxsize=1)
def make_parser() -> Lark:
    return Lark(
        GRAMMAR,
        start="program",
        parser="lalr",
        propagate_positions=True,
        maybe_placeholders=True,
    )

def parse_source(src: str) -> Script:
    try:
        tree = make_parser().parse(src)
    except UnexpectedInput as exc:
        line: Optional[int] = getattr(exc, "line", None)
        column: Optional[int] = getattr(exc, "column", None)
        if line is not None and line < 1:
            line, column = None, None
        raise SmallJsParseError(f"syntax error: {_describe(exc)}", line, column) from exc

    return ToAst().transform(tree)

def _describe(exc: UnexpectedInput) -> str:
    token = getattr(exc, "token", None)

    if isinstance(token, Token):
        if token.type == "$END":
            return "unexpected end of input"
        return f"unexpected {token.value!r}"

    char = getattr(exc, "char", None)
    if char is not None:
        return f"unexpected character {char!r}"

    return "unexpected input"
