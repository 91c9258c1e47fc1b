import logging

from apiapi_transporter.logger import LOGGER_NAME, BoundLogger, create_logger


class DuckLogger:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def debug(self, msg: str, *args) -> None:
        self.messages.append(msg % args)

    def warn(self, msg: str, *args) -> None:
        self.messages.append(msg % args)


def test_level_filters_messages() -> None:
    duck = DuckLogger()
    logger = create_logger(logger=duck, level="warn")
    logger.debug("hidden %s", 1)
    logger.warn("shown %s", 2)
    assert duck.messages == ["shown 2"]


def test_child_uses_python_logger_hierarchy(caplog) -> None:
    base = BoundLogger(logging.getLogger(LOGGER_NAME), level="debug")
    child = base.child("http")
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        child.debug("HTTP %s", "GET")
    assert caplog.records[-1].name == f"{LOGGER_NAME}.http"
    assert caplog.records[-1].getMessage() == "HTTP GET"


def test_create_logger_returns_bound_logger_unchanged() -> None:
    bound = create_logger(level="trace")
    assert create_logger(logger=bound) is bound


def test_default_logger_stays_silent_for_applications() -> None:
    create_logger()
    package_logger = logging.getLogger(LOGGER_NAME)
    assert any(isinstance(handler, logging.NullHandler) for handler in package_logger.handlers)
    assert not any(type(handler) is logging.StreamHandler for handler in package_logger.handlers)
    assert package_logger.level == logging.NOTSET


def test_trace_is_below_debug_threshold() -> None:
    duck = DuckLogger()
    duck.trace = duck.debug  # type: ignore[attr-defined]
    create_logger(logger=duck, level="debug").trace("hidden")
    create_logger(logger=duck, level="trace").trace("shown")
    assert duck.messages == ["shown"]
