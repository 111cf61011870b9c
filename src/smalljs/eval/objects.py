from __future__ import annotations

from typing import Callable

from ..runtime import UNDEFINED, JsObject, JsValue, new_object
from ..tree import Expr, FieldAccess, FieldAssignment, ObjectConstruction
from .common import expect_object

EvalFunc = Callable[[Expr, JsObject], JsValue]

def eval_object_construction(n: ObjectConstruction, env: JsObject, eval_func: EvalFunc) -> JsObject:
    """Build an object literal with no prototype, initializers run in source order."""
    obj = new_object(None)

    for name, init in n.inits:
        obj.register(name, eval_func(init, env))

    return obj

def eval_field_access(n: FieldAccess, env: JsObject, eval_func: EvalFunc) -> JsValue:
    receiver = expect_object(eval_func(n.receiver, env), f"reading field {n.name}")

    return receiver.lookup(n.name)

def eval_field_assignment(n: FieldAssignment, env: JsObject, eval_func: EvalFunc) -> JsValue:
    receiver = expect_object(eval_func(n.receiver, env), f"writing field {n.name}")
    receiver.register(n.name, eval_func(n.expr, env))

    return UNDEFINED
