"""Base utilities for algorithm configuration."""

from __future__ import annotations

import json
import math
import re
from dataclasses import asdict, fields, is_dataclass
from typing import Any, ClassVar, Dict, Mapping, Optional, Type, TypeVar

from heuropt.foundation.exceptions import ConfigurationError

C = TypeVar("C", bound="_SerializableConfig")

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


class _SerializableConfig:
    """Mixin to serialize and validate dataclass configs."""

    # Display name used in error messages.
    label: ClassVar[str] = "algorithm"
    # Alternative spellings accepted by coerce_config (e.g. {"F": "f"}).
    _aliases: Dict[str, str] = {}

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)  # type: ignore[call-overload]

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)

    def validate(self) -> None:
        raise NotImplementedError


def _normalize_key(key: str, aliases: Mapping[str, str]) -> str:
    if key in aliases:
        return aliases[key]
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def coerce_config(config_cls: Type[C], config: Any, name: Optional[str] = None) -> C:
    """Turn ``None``, a builder, a dataclass or a mapping into a validated ``config_cls``.

    Keys may be snake_case, camelCase or a registered alias. Unknown keys are
    rejected.
    """
    name = name or config_cls.label
    if config is None:
        data = config_cls()
    elif isinstance(config, config_cls):
        data = config
    elif hasattr(config, "fixed") and callable(config.fixed):
        data = config.fixed()
        if not isinstance(data, config_cls):
            raise ConfigurationError(f"{name} expects {config_cls.__name__}; got {type(data).__name__}.")
    else:
        if is_dataclass(config) and not isinstance(config, type):
            raw = asdict(config)
        elif isinstance(config, Mapping):
            raw = dict(config)
        else:
            raise ConfigurationError(
                f"{name} configuration must be a mapping or {config_cls.__name__}; got {type(config).__name__}.",
            )
        aliases = getattr(config_cls, "_aliases", {})
        known = {f.name for f in fields(config_cls)}  # type: ignore[arg-type]
        normalized: Dict[str, Any] = {}
        for key, value in raw.items():
            norm = _normalize_key(str(key), aliases)
            if norm not in known:
                raise ConfigurationError(
                    f"Unknown {name} parameter '{key}'.",
                    suggestion=f"Valid parameters: {', '.join(sorted(known))}",
                    details={"parameter": key},
                )
            normalized[norm] = value
        data = config_cls(**normalized)
    data.validate()
    return data


def _require_positive_int(value: Any, field: str, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigurationError(f"{name} '{field}' must be a positive integer; got {value!r}.", details={field: value})


def _require_probability(value: Any, field: str, name: str) -> None:
    if not isinstance(value, (int, float)) or not 0.0 <= float(value) <= 1.0:
        raise ConfigurationError(f"{name} '{field}' must lie in [0, 1]; got {value!r}.", details={field: value})


def _require_finite(value: Any, field: str, name: str, *, positive: bool = False) -> None:
    if not isinstance(value, (int, float)) or not math.isfinite(float(value)):
        raise ConfigurationError(f"{name} '{field}' must be a finite number; got {value!r}.", details={field: value})
    if positive and float(value) <= 0.0:
        raise ConfigurationError(f"{name} '{field}' must be > 0; got {value!r}.", details={field: value})
