"""Tree-walking interpreter for a small prototype-based scripting language."""

from .config import InterpreterConfig
from .evaluator import eval_node, interpret
from .runner import run

__all__ = ["InterpreterConfig", "eval_node", "interpret", "run"]
