import pytest

from pi.dashboard.config import DashboardConfig, set_config


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Give every test a fresh config unaffected by the caller's environment."""
    for name in ("PI_DASHBOARD_MODAL_WIDTH", "PI_DASHBOARD_KEY_TIMEOUT", "PI_DASHBOARD_WRITE_LOG"):
        monkeypatch.delenv(name, raising=False)
    config = DashboardConfig()
    set_config(config)
    yield config
    set_config(None)
