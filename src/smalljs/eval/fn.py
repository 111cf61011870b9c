from __future__ import annotations

from ..runtime import Closure, JsObject, new_function
from ..tree import FunctionDefinition

ANONYMOUS_NAME = "lambda"

def eval_function_definition(n: FunctionDefinition, env: JsObject) -> JsObject:
    """Build a closure over `env`; named definitions also bind themselves in `env`."""
    fn_value = new_function(n.name or ANONYMOUS_NAME, Closure(definition=n, env=env))

    if n.name is not None:
        env.register(n.name, fn_value)

    return fn_value
