from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional

from dotenv import load_dotenv
from pydantic import alias_generators

NAMING_RULES: Dict[str, Callable[[str], str]] = {
    "snake": alias_generators.to_snake,
    "camel": alias_generators.to_camel,
    "pascal": alias_generators.to_pascal,
}

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class ConversionOptions:
    """
    Rules applied when binding an embedded JSON tree to a target type.

    strict:  pydantic strict mode (no str -> int coercion and so on).
    naming:  key-naming rule applied to object keys before binding; one of
             NAMING_RULES or None to leave keys alone. Keys starting with
             "_" are HAL-reserved and kept verbatim along with their subtree.
    context: validation context forwarded to pydantic validators.
    """

    strict: bool = False
    naming: Optional[str] = None
    context: Optional[Mapping[str, Any]] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.naming is not None and self.naming not in NAMING_RULES:
            raise ValueError(
                f"Unknown naming rule {self.naming!r}; "
                f"expected one of {sorted(NAMING_RULES)} or None."
            )

    @property
    def key_transform(self) -> Optional[Callable[[str], str]]:
        return NAMING_RULES[self.naming] if self.naming else None

    @classmethod
    def from_env(cls, **overrides: Any) -> "ConversionOptions":
        return load_env_config(**overrides)


DEFAULT_OPTIONS = ConversionOptions()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}.")


def load_env_config(*, use_dotenv: bool = True, **overrides: Any) -> ConversionOptions:
    """Load default conversion options from environment (optional .env)."""
    if use_dotenv:
        load_dotenv()
    naming = os.getenv("HAL_CLIENT_NAMING", "").strip().lower() or None
    settings: Dict[str, Any] = {
        "strict": _env_bool("HAL_CLIENT_STRICT", False),
        "naming": naming,
    }
    settings.update(overrides)
    return ConversionOptions(**settings)


def load_log_level(default: str = "INFO") -> str:
    return os.getenv("HAL_CLIENT_LOG_LEVEL", "").strip() or default


__all__ = [
    "ConversionOptions",
    "DEFAULT_OPTIONS",
    "NAMING_RULES",
    "load_env_config",
    "load_log_level",
]
