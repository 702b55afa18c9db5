import structlog

from swing_impact.log import configure_logging


def test_configure_logging_renderer_switch():
    """JSON lines by default, console output on request."""
    try:
        configure_logging(level="DEBUG", json_output=True)
        assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)

        configure_logging(level="DEBUG", json_output=False)
        assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)
    finally:
        structlog.reset_defaults()
