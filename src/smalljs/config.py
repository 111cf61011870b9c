from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

_TRUTHY = {"1", "true", "yes", "on"}

@dataclass(frozen=True)
class InterpreterConfig:
    # compatibility mode: `%` multiplies instead of taking the remainder
    legacy_modulo: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]]=None) -> InterpreterConfig:
        env = os.environ if environ is None else environ
        config = cls()

        raw_modulo = env.get("SMALLJS_LEGACY_MODULO")
        if raw_modulo is not None:
            config = replace(config, legacy_modulo=raw_modulo.strip().lower() in _TRUTHY)

        raw_level = env.get("SMALLJS_LOG_LEVEL")
        if raw_level:
            config = replace(config, log_level=raw_level.strip().upper())

        return config
