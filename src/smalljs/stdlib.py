"""Native functions installed in the global environment (print, arithmetic, comparison)."""

from __future__ import annotations

import logging
from typing import List, Tuple

from .runtime import (
    UNDEFINED,
    Host,
    JsObject,
    JsValue,
    SmallJsBuiltinError,
    SmallJsTypeError,
    is_int,
    register_native,
)
from .eval.common import stringify, type_name

logger = logging.getLogger(__name__)

@register_native("print")
def std_print(host: Host, args: List[JsValue]) -> JsValue:
    logger.debug("print called with %r", args)
    print(" ".join(stringify(arg) for arg in args), file=host.out)

    return UNDEFINED

# ---------- arithmetic ----------

def _int_operands(op: str, args: List[JsValue]) -> Tuple[int, int]:
    left, right = args

    if not is_int(left) or not is_int(right):
        raise SmallJsTypeError(f"{op} expects two integers; got {type_name(left)} and {type_name(right)}")

    return left, right  # type: ignore[return-value]

def _trunc_div(op: str, left: int, right: int) -> int:
    # quotient rounds toward zero, not toward negative infinity
    try:
        quotient = abs(left) // abs(right)
    except ZeroDivisionError as exc:
        raise SmallJsBuiltinError(f"{op}: division by zero") from exc

    return quotient if (left >= 0) == (right >= 0) else -quotient

@register_native("+", arity=2)
def std_add(_host: Host, args: List[JsValue]) -> JsValue:
    left, right = _int_operands("+", args)
    return left + right

@register_native("-", arity=2)
def std_sub(_host: Host, args: List[JsValue]) -> JsValue:
    left, right = _int_operands("-", args)
    return left - right

@register_native("*", arity=2)
def std_mul(_host: Host, args: List[JsValue]) -> JsValue:
    left, right = _int_operands("*", args)
    return left * right

@register_native("/", arity=2)
def std_div(_host: Host, args: List[JsValue]) -> JsValue:
    left, right = _int_operands("/", args)
    return _trunc_div("/", left, right)

@register_native("%", arity=2)
def std_mod(host: Host, args: List[JsValue]) -> JsValue:
    left, right = _int_operands("%", args)

    if host.config.legacy_modulo:
        # compatibility mode: `%` is a product, not a remainder
        return left * right

    # remainder takes the sign of the dividend
    return left - right * _trunc_div("%", left, right)

# ---------- comparison ----------

def _equals(left: JsValue, right: JsValue) -> bool:
    if isinstance(left, JsObject) or isinstance(right, JsObject):
        return left is right

    return type(left) is type(right) and left == right

def _orderable(op: str, args: List[JsValue]) -> Tuple[JsValue, JsValue]:
    left, right = args

    if is_int(left) and is_int(right):
        return left, right
    if isinstance(left, str) and isinstance(right, str):
        return left, right

    raise SmallJsTypeError(f"{op} cannot order {type_name(left)} and {type_name(right)}")

@register_native("==", arity=2)
def std_eq(_host: Host, args: List[JsValue]) -> JsValue:
    return 1 if _equals(args[0], args[1]) else 0

@register_native("!=", arity=2)
def std_ne(_host: Host, args: List[JsValue]) -> JsValue:
    return 0 if _equals(args[0], args[1]) else 1

@register_native("<", arity=2)
def std_lt(_host: Host, args: List[JsValue]) -> JsValue:
    left, right = _orderable("<", args)
    return 1 if left < right else 0  # type: ignore[operator]

@register_native("<=", arity=2)
def std_le(_host: Host, args: List[JsValue]) -> JsValue:
    left, right = _orderable("<=", args)
    return 1 if left <= right else 0  # type: ignore[operator]

@register_native(">", arity=2)
def std_gt(_host: Host, args: List[JsValue]) -> JsValue:
    left, right = _orderable(">", args)
    return 1 if left > right else 0  # type: ignore[operator]

@register_native(">=", arity=2)
def std_ge(_host: Host, args: List[JsValue]) -> JsValue:
    left, right = _orderable(">=", args)
    return 1 if left >= right else 0  # type: ignore[operator]
