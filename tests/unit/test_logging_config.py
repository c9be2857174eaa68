"""Tests for structlog configuration."""

import pytest
import structlog

from fxcast_app.config.defaults import LoggingParams
from fxcast_app.logging.config import configure_logging


@pytest.fixture(autouse=True)
def restore_structlog():
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    """Renderer and level follow the logging config section."""

    def test_json_renderer(self) -> None:
        configure_logging(LoggingParams(level="DEBUG", format_json=True))
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer_by_default(self) -> None:
        configure_logging()
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_extra_processors_precede_renderer(self) -> None:
        def tag(logger, method_name, event_dict):
            event_dict["app"] = "fxcast"
            return event_dict

        configure_logging(LoggingParams(format_json=True), extra_processors=[tag])
        processors = structlog.get_config()["processors"]
        assert processors[-2] is tag

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(AttributeError):
            configure_logging(LoggingParams(level="LOUD"))
