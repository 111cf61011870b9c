from __future__ import annotations

from typing import Callable

from ..runtime import UNDEFINED, JsObject, JsValue
from ..tree import Block, Expr

EvalFunc = Callable[[Expr, JsObject], JsValue]

def eval_block(block: Block, env: JsObject, eval_func: EvalFunc) -> JsValue:
    # no block scope: declarations land in the enclosing function's frame
    for instr in block.instrs:
        eval_func(instr, env)

    return UNDEFINED
