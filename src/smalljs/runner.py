from __future__ import annotations

import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, TextIO

from .config import InterpreterConfig
from .evaluator import interpret
from .parser import parse_source
from .runtime import JsObject, SmallJsFailure

logger = logging.getLogger(__name__)

def run(src: str, out: Optional[TextIO]=None, config: Optional[InterpreterConfig]=None) -> JsObject:
    """Parse and execute `src`; returns the global environment."""
    script = parse_source(src)

    return interpret(script, out=out, config=config)

def _load_source(arg: Optional[str]) -> str:
    """
    Resolve CLI input into source text.
    - None or "-" => read stdin.
    - Existing path => read file contents.
    - Otherwise treat the argument as literal source.
    """

    if arg is None or arg == "-":
        data = sys.stdin.read()
        if not data:
            raise SystemExit("No input provided on stdin")
        return data

    candidate = Path(arg)
    if candidate.exists():
        return candidate.read_text(encoding="utf-8")

    return arg

def main(argv: Optional[List[str]]=None) -> int:
    config = InterpreterConfig.from_env()
    arg = None

    for token in (sys.argv[1:] if argv is None else argv):
        if token == "--debug":
            config = replace(config, log_level="DEBUG")
            continue

        if token == "--legacy-modulo":
            config = replace(config, legacy_modulo=True)
            continue

        if arg is None:
            arg = token
        else:
            raise SystemExit(f"Unexpected argument: {token}")

    logging.basicConfig(level=config.log_level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

    source = _load_source(arg)
    logger.debug("running %d characters of source", len(source))

    try:
        run(source, out=sys.stdout, config=config)
    except SmallJsFailure as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    return 0

if __name__ == "__main__":
    sys.exit(main())
