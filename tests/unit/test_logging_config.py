import pytest
import structlog

from school_adviser.logging_config import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.mark.unit
@pytest.mark.parametrize("fmt", ["json", "console", "JSON"])
def test_configure_logging_formats(fmt):
    configure_logging(level="debug", fmt=fmt)

    config = structlog.get_config()
    assert config["processors"][0] is structlog.stdlib.filter_by_level
    assert isinstance(config["logger_factory"], structlog.stdlib.LoggerFactory)


@pytest.mark.unit
def test_configure_logging_json_renderer_keeps_korean():
    configure_logging(level="INFO", fmt="json")

    renderer = structlog.get_config()["processors"][-1]
    assert isinstance(renderer, structlog.processors.JSONRenderer)
    assert "경기도교육청" in renderer(None, "info", {"event": "경기도교육청"})


@pytest.mark.unit
def test_configure_logging_defaults_from_settings(monkeypatch):
    from school_adviser.config import settings

    monkeypatch.setattr(settings, "log_format", "console")
    configure_logging()

    renderer = structlog.get_config()["processors"][-1]
    assert isinstance(renderer, structlog.dev.ConsoleRenderer)


@pytest.mark.unit
def test_configure_logging_rejects_unknown_format():
    with pytest.raises(ValueError, match="Unknown log format"):
        configure_logging(fmt="xml")


@pytest.mark.unit
def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging(level="LOUD")
