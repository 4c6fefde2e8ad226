from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

# Legal CSS combinators: descendant, child, next-sibling, subsequent-sibling.
COMBINATORS = frozenset({" ", ">", "+", "~"})

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class SelectorkitConfig:
    log_level: str = "WARNING"
    strict_combinators: bool = False  # reject combinators outside COMBINATORS

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SelectorkitConfig:
        """Build a config from ``SELECTORKIT_*`` environment variables."""
        env = os.environ if environ is None else environ
        defaults = cls()
        log_level = env.get("SELECTORKIT_LOG_LEVEL", defaults.log_level).upper()
        strict_raw = env.get("SELECTORKIT_STRICT_COMBINATORS")
        if strict_raw is None:
            strict = defaults.strict_combinators
        else:
            strict = strict_raw.strip().lower() in _TRUTHY
        return cls(log_level=log_level, strict_combinators=strict)
