"""
Config loading shared by the CLI and programmatic entrypoints.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable

from heuropt.foundation.exceptions import ConfigurationError, MissingConfigError


def load_run_spec(path: str | Path) -> Dict[str, Any]:
    """
    Load a YAML or JSON run specification.

    The file holds algorithm parameters, optionally nested under the algorithm
    name (``{"de": {"population_size": 30}}``) and/or next to an
    ``algorithm`` key.
    """
    spec_path = Path(path).expanduser().resolve()
    if not spec_path.exists():
        raise FileNotFoundError(f"Config file '{spec_path}' does not exist.")
    suffix = spec_path.suffix.lower()
    with spec_path.open("r", encoding="utf-8") as fh:
        if suffix in {".yaml", ".yml"}:
            try:
                import yaml  # type: ignore[import-untyped]
            except ImportError as exc:  # pragma: no cover - optional dependency
                raise ImportError("YAML config requested but PyYAML is not installed. Install with 'pip install heuropt[yaml]'.") from exc
            try:
                data = yaml.safe_load(fh) or {}
            except yaml.YAMLError as exc:
                raise ConfigurationError(f"Config file '{spec_path}' is not valid YAML: {exc}") from exc
        else:
            try:
                data = json.load(fh)
            except json.JSONDecodeError as exc:
                raise ConfigurationError(f"Config file '{spec_path}' is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file '{spec_path}' must contain a mapping at the top level.")
    return data


def algorithm_section(
    spec: Dict[str, Any],
    algorithm: str,
    reserved: Iterable[str] = ("algorithm",),
) -> Dict[str, Any]:
    """Extract the parameters for ``algorithm`` from a loaded spec.

    A nested ``{algorithm: {...}}`` section wins; otherwise the flat top-level
    keys are used, minus nested sections and the ``reserved`` run-level keys.
    A section that is present but empty (``de:`` in YAML) is an error.
    """
    skip = set(reserved)
    if algorithm in spec and spec[algorithm] is None:
        raise MissingConfigError(algorithm)
    nested = spec.get(algorithm)
    if isinstance(nested, dict):
        return dict(nested)
    return {key: value for key, value in spec.items() if key not in skip and not isinstance(value, dict)}


__all__ = ["algorithm_section", "load_run_spec"]
