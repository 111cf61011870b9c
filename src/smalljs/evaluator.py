from __future__ import annotations

import sys
from typing import Optional, TextIO

from .config import InterpreterConfig
from .runtime import (
    Host,
    JsObject,
    JsValue,
    SmallJsFailure,
    SmallJsReturnSignal,
    new_global_env,
)
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
    node_line,
)

from .eval.bind import eval_local_var_access, eval_local_var_assignment
from .eval.blocks import eval_block
from .eval.chains import eval_fun_call, eval_method_call
from .eval.control import eval_if, eval_return
from .eval.fn import eval_function_definition
from .eval.objects import eval_field_access, eval_field_assignment, eval_object_construction


def _maybe_attach_location(exc: SmallJsFailure, node: Expr) -> None:
    # innermost node wins; outer frames see the line already set
    if exc.line is not None:
        return

    exc.line = node_line(node)

# ---------------- Public API ----------------

def interpret(script: Script, out: Optional[TextIO]=None, config: Optional[InterpreterConfig]=None) -> JsObject:
    """Run `script` in a fresh global environment and return that environment."""
    host = Host(out=sys.stdout if out is None else out, config=config or InterpreterConfig())
    global_env = new_global_env(host)

    try:
        eval_node(script.body, global_env)
    except SmallJsReturnSignal:
        raise SmallJsFailure("return outside of a function") from None

    return global_env

# ---------------- Core evaluator ----------------

def eval_node(n: Expr, env: JsObject) -> JsValue:
    try:
        return _eval_node_inner(n, env)
    except SmallJsFailure as e:
        _maybe_attach_location(e, n)
        raise


def _eval_node_inner(n: Expr, env: JsObject) -> JsValue:
    match n:
        case Block():
            return eval_block(n, env, eval_node)
        case Literal(value=value):
            return value  # type: ignore[return-value]
        case FunCall():
            return eval_fun_call(n, env, eval_node)
        case LocalVarAccess():
            return eval_local_var_access(n, env)
        case LocalVarAssignment():
            return eval_local_var_assignment(n, env, eval_node)
        case FunctionDefinition():
            return eval_function_definition(n, env)
        case Return():
            eval_return(n, env, eval_node)
        case If():
            return eval_if(n, env, eval_node)
        case ObjectConstruction():
            return eval_object_construction(n, env, eval_node)
        case FieldAccess():
            return eval_field_access(n, env, eval_node)
        case FieldAssignment():
            return eval_field_assignment(n, env, eval_node)
        case MethodCall():
            return eval_method_call(n, env, eval_node)
        case _:
            raise SmallJsFailure(f"internal error: no evaluation rule for {type(n).__name__}")
