from __future__ import annotations

from typing import Callable, NoReturn

from ..runtime import JsObject, JsValue, SmallJsReturnSignal
from ..tree import Expr, If, Return
from .helpers import is_truthy as _is_truthy

EvalFunc = Callable[[Expr, JsObject], JsValue]

def eval_return(n: Return, env: JsObject, eval_func: EvalFunc) -> NoReturn:
    value = eval_func(n.expr, env)

    raise SmallJsReturnSignal(value)

def eval_if(n: If, env: JsObject, eval_func: EvalFunc) -> JsValue:
    condition = eval_func(n.condition, env)

    if _is_truthy(condition):
        return eval_func(n.true_block, env)

    return eval_func(n.false_block, env)
