from __future__ import annotations

from typing import Optional, Set

from ..runtime import JsObject, JsUndefined, JsValue, SmallJsTypeError, is_int

def type_name(value: JsValue) -> str:
    if is_int(value):
        return "integer"
    if isinstance(value, str):
        return "string"
    if isinstance(value, JsUndefined):
        return "undefined"
    if isinstance(value, JsObject):
        return "function" if value.is_callable() else "object"

    return type(value).__name__

def expect_object(value: JsValue, context: str) -> JsObject:
    if isinstance(value, JsObject):
        return value

    raise SmallJsTypeError(f"type error, {context}: {stringify(value)} is not an object")

def expect_function(value: JsValue, context: str) -> JsObject:
    obj = expect_object(value, context)

    if not obj.is_callable():
        raise SmallJsTypeError(f"type error, {context}: {stringify(obj)} is not a function")

    return obj

def stringify(value: JsValue, _seen: Optional[Set[int]]=None) -> str:
    """Textual form used by print."""
    if isinstance(value, str):
        return value

    if not isinstance(value, JsObject):
        return repr(value) if isinstance(value, JsUndefined) else str(value)

    if value.is_callable():
        return f"function {value.name}"

    seen = set() if _seen is None else _seen
    if id(value) in seen:
        return "{...}"
    seen.add(id(value))

    pairs = []

    for k, v in value.values.items():
        rendered = f'"{v}"' if isinstance(v, str) else stringify(v, seen)
        pairs.append(f"{k}: {rendered}")

    seen.discard(id(value))

    if not pairs:
        return "{}"

    return "{ " + ", ".join(pairs) + " }"
