from __future__ import annotations

from typing import Callable, Iterable, List

from ..runtime import UNDEFINED, JsObject, JsValue
from ..tree import Expr, FunCall, MethodCall
from .common import expect_function, expect_object

EvalFunc = Callable[[Expr, JsObject], JsValue]

def eval_args(args: Iterable[Expr], env: JsObject, eval_func: EvalFunc) -> List[JsValue]:
    return [eval_func(arg, env) for arg in args]

def eval_fun_call(n: FunCall, env: JsObject, eval_func: EvalFunc) -> JsValue:
    function = expect_function(eval_func(n.qualifier, env), "call")
    args = eval_args(n.args, env, eval_func)

    return function.invoke(UNDEFINED, args)

def eval_method_call(n: MethodCall, env: JsObject, eval_func: EvalFunc) -> JsValue:
    receiver = expect_object(eval_func(n.receiver, env), f"calling method {n.name}")
    method = expect_function(receiver.lookup(n.name), f"calling method {n.name}")
    args = eval_args(n.args, env, eval_func)

    return method.invoke(receiver, args)
