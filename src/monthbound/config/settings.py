"""Runtime configuration read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class MonthboundConfig:
    """Settings for zone-bound calendars and log output."""

    default_zone: str = "UTC"
    log_json: bool = False
    verbose: bool = False


def _env_flag(name: str) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean flag (1/0, true/false), got {raw!r}")


def config_from_env() -> MonthboundConfig:
    """
    Build MonthboundConfig from environment variables.

    Optional:
      - MONTHBOUND_DEFAULT_ZONE (IANA key, default "UTC")
      - MONTHBOUND_LOG_JSON
      - MONTHBOUND_VERBOSE
    """
    zone = os.environ.get("MONTHBOUND_DEFAULT_ZONE", "").strip() or "UTC"
    return MonthboundConfig(
        default_zone=zone,
        log_json=_env_flag("MONTHBOUND_LOG_JSON"),
        verbose=_env_flag("MONTHBOUND_VERBOSE"),
    )
