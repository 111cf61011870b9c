from __future__ import annotations

import importlib
import logging
from typing import Callable, Dict, List, Optional

from .types import (
    UNDEFINED,
    Closure,
    Host,
    JsObject,
    JsUndefined,
    JsValue,
    NativeFn,
    NativeFunction,
    SmallJsArityError,
    SmallJsBuiltinError,
    SmallJsFailure,
    SmallJsNameError,
    SmallJsParseError,
    SmallJsRedeclarationError,
    SmallJsReturnSignal,
    SmallJsTypeError,
    is_int,
    new_env,
    new_function,
    new_object,
)

__all__ = [
    "UNDEFINED", "Closure", "Host", "JsObject", "JsUndefined", "JsValue",
    "NativeFunction", "SmallJsArityError", "SmallJsBuiltinError", "SmallJsFailure",
    "SmallJsNameError", "SmallJsParseError", "SmallJsRedeclarationError",
    "SmallJsReturnSignal", "SmallJsTypeError", "is_int", "new_env", "new_function",
    "new_object", "register_native", "init_stdlib", "new_global_env", "call_closure",
    "Builtins",
]

logger = logging.getLogger(__name__)

class NativeSpec:
    __slots__ = ("fn", "arity")

    def __init__(self, fn: NativeFn, arity: Optional[int]):
        self.fn = fn
        self.arity = arity

class Builtins:
    natives: Dict[str, NativeSpec] = {}

_STDLIB_INITIALIZED = False

def init_stdlib() -> None:
    """Load the stdlib module (idempotent) so register_native hooks run."""
    global _STDLIB_INITIALIZED

    if _STDLIB_INITIALIZED:
        return

    importlib.import_module("smalljs.stdlib")
    _STDLIB_INITIALIZED = True

def register_native(name: str, *, arity: Optional[int]=None) -> Callable[[NativeFn], NativeFn]:
    def dec(fn: NativeFn) -> NativeFn:
        Builtins.natives[name] = NativeSpec(fn, arity)
        return fn

    return dec

def new_global_env(host: Host) -> JsObject:
    """Root scope: `global` bound to itself plus every registered native."""
    init_stdlib()

    global_env = new_env(None)
    global_env.register("global", global_env)

    for name, entry in Builtins.natives.items():
        native = NativeFunction(name=name, fn=entry.fn, host=host, arity=entry.arity)
        global_env.register(name, new_function(name, native))

    logger.debug("global environment ready with %d natives", len(Builtins.natives))

    return global_env

def call_closure(closure: Closure, function: JsObject, receiver: JsValue, args: List[JsValue]) -> JsValue:
    """
    Invoke a user-defined function:
    - arity must match the declared parameters exactly, checked before the body runs;
    - the new frame's parent is the captured scope, never the caller's;
    - `this` is bound to the receiver;
    - a `return` anywhere in the body ends the call with its value, otherwise undefined.
    """
    from .evaluator import eval_node  # local import to avoid cycle

    definition = closure.definition
    params = definition.parameters

    if len(args) != len(params):
        raise SmallJsArityError(
            f"{function.name} expects {len(params)} args; got {len(args)}"
            f" (defined at line {definition.line})"
        )

    logger.debug("invoking %s with %d args", function.name, len(args))

    callee_env = new_env(closure.env)
    callee_env.register("this", receiver)

    for name, val in zip(params, args):
        callee_env.register(name, val)

    try:
        eval_node(definition.body, callee_env)
    except SmallJsReturnSignal as signal:
        return signal.value

    return UNDEFINED
