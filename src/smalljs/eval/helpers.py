from __future__ import annotations

from ..runtime import JsValue, is_int

def is_truthy(val: JsValue) -> bool:
    """Only a value equal to the integer 0 is false."""
    return not (is_int(val) and val == 0)
