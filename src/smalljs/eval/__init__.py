"""Evaluator helper modules for the smalljs runtime."""

__all__ = [
    "bind",
    "blocks",
    "chains",
    "common",
    "control",
    "fn",
    "helpers",
    "objects",
]
