"""Structured logging setup for opstring."""
from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any, Dict, List

import structlog

if TYPE_CHECKING:
    from .config import AppConfig

_DEFAULT_LEVEL = "info"

_LEVELS: Dict[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def configure_logging(level: str | None = None, *, renderer: str = "json") -> None:
    """Route opstring's structlog events through the stdlib root logger.

    ``renderer="json"`` emits one JSON object per line with the keys ``level``,
    ``ts``, ``msg`` and ``component``; ``renderer="console"`` uses structlog's
    human readable renderer. Extra context passed by callers is preserved.
    """

    numeric_level = _LEVELS.get((level or _DEFAULT_LEVEL).lower(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        handlers=[logging.StreamHandler(sys.stdout)],
        format="%(message)s",
        force=True,
    )

    processors: List[Any] = [
        structlog.processors.TimeStamper(fmt="iso", key="ts"),
        structlog.stdlib.add_log_level,
        _component_processor,
    ]
    if renderer == "console":
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.extend(
            [
                _rename_event_to_msg,
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ]
        )

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


def configure_from_config(config: "AppConfig") -> None:
    configure_logging(config.logging.normalized_level(), renderer=config.logging.renderer)


def _component_processor(
    logger: Any, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    if event_dict.get("component") is None:
        event_dict["component"] = getattr(logger, "name", None) or "opstring"
    return event_dict


def _rename_event_to_msg(
    _logger: Any, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    if "msg" not in event_dict:
        event_dict["msg"] = event_dict.pop("event", "")
    return event_dict


__all__ = ["configure_logging", "configure_from_config"]
