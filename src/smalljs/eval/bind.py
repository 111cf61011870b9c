from __future__ import annotations

from typing import Callable

from ..runtime import (
    UNDEFINED,
    JsObject,
    JsValue,
    SmallJsNameError,
    SmallJsRedeclarationError,
)
from ..tree import Expr, LocalVarAccess, LocalVarAssignment

EvalFunc = Callable[[Expr, JsObject], JsValue]

def eval_local_var_access(n: LocalVarAccess, env: JsObject) -> JsValue:
    return env.lookup(n.name)

def eval_local_var_assignment(n: LocalVarAssignment, env: JsObject, eval_func: EvalFunc) -> JsValue:
    """Declare or assign `n.name`.

    A binding holding undefined counts as no binding at all: declaring over it
    is allowed and assigning to it fails. Either way the value is written
    into the innermost frame.
    """
    current = env.lookup(n.name)

    if n.declaration and current is not UNDEFINED:
        raise SmallJsRedeclarationError(n.name)
    if not n.declaration and current is UNDEFINED:
        raise SmallJsNameError(n.name)

    value = eval_func(n.expr, env)
    env.register(n.name, value)

    return UNDEFINED
