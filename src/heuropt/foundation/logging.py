from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(name)s [%(levelname)s] %(message)s"


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level '{level}'.")
        return resolved
    return int(level)


def configure_heuropt_logging(*, level: int | str = logging.INFO, fmt: str = _FORMAT) -> logging.Logger:
    """
    Attach a console handler to the "heuropt" logger.

    Library modules only create loggers; handlers are opt-in and installed here
    (the CLI calls this). If the root logger or the "heuropt" logger already
    has handlers, only the level is updated.
    """
    heuropt_logger = logging.getLogger("heuropt")
    heuropt_logger.setLevel(_coerce_level(level))

    if logging.getLogger().handlers or heuropt_logger.handlers:
        return heuropt_logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    heuropt_logger.addHandler(handler)
    heuropt_logger.propagate = False
    return heuropt_logger


__all__ = ["configure_heuropt_logging"]
