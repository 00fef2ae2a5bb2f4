import logging

from app.core.config import Settings
from app.core.logging_config import configure_logging


def test_settings_env_override(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("APP_NAME", "Piano Bank")
    s = Settings(_env_file=None)
    assert s.log_level == "DEBUG"
    assert s.app_name == "Piano Bank"


def test_configure_logging_is_idempotent():
    logger = configure_logging("WARNING")
    configure_logging("WARNING")
    ours = [h for h in logger.handlers if h.get_name() == "app"]
    assert len(ours) == 1
    assert logger.level == logging.WARNING
    configure_logging("INFO")
