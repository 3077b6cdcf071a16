"""Runtime configuration for the dashboard engine.

Values default to what the dashboard has always used and can be overridden
through ``PI_DASHBOARD_*`` environment variables or by installing a custom
:class:`DashboardConfig` with :func:`set_config`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

ENV_MODAL_WIDTH = "PI_DASHBOARD_MODAL_WIDTH"
ENV_KEY_TIMEOUT = "PI_DASHBOARD_KEY_TIMEOUT"
ENV_WRITE_LOG = "PI_DASHBOARD_WRITE_LOG"


@dataclass
class DashboardConfig:
    """Engine settings shared by the overlay and the dialogs."""

    max_modal_width: int = 60
    fallback_columns: int = 80
    fallback_rows: int = 24
    # Seconds between spinner frames
    spinner_interval: float = 0.08
    # Seconds to wait for a recognised key; None waits forever
    key_timeout: float | None = None
    write_log_path: str = field(default_factory=lambda: os.environ.get(ENV_WRITE_LOG, ""))

    @classmethod
    def from_env(cls) -> DashboardConfig:
        config = cls()
        width = _env_int(ENV_MODAL_WIDTH)
        if width is not None and width > 0:
            config.max_modal_width = width
        timeout = _env_float(ENV_KEY_TIMEOUT)
        if timeout is not None and timeout > 0:
            config.key_timeout = timeout
        return config


def _env_int(name: str) -> int | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _env_float(name: str) -> float | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


# ---------------------------------------------------------------------------
# Global instance
# ---------------------------------------------------------------------------

_global_config: DashboardConfig | None = None


def get_config() -> DashboardConfig:
    global _global_config
    if _global_config is None:
        _global_config = DashboardConfig.from_env()
    return _global_config


def set_config(config: DashboardConfig | None) -> None:
    """Install *config* globally; ``None`` re-reads the environment on next use."""
    global _global_config
    _global_config = config
