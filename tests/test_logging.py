import logging

from huegen.logging import console, get_logger, set_level


def test_get_logger_attaches_one_handler():
    logger = get_logger("huegen.tests.once")
    get_logger("huegen.tests.once")
    assert len(logger.handlers) == 1
    assert logger.propagate is False
    assert logger.level == logging.INFO


def test_set_level_reaches_module_loggers():
    logger = get_logger("huegen.tests.level")
    other = logging.getLogger("elsewhere.tests.level")
    other.setLevel(logging.WARNING)
    try:
        set_level(logging.DEBUG)
        assert logger.level == logging.DEBUG
        assert other.level == logging.WARNING
    finally:
        set_level(logging.INFO)


def test_console_is_shared():
    assert console() is console()


def test_log_records_go_to_stderr():
    handler = get_logger("huegen.tests.stream").handlers[0]
    assert handler.console.stderr is True
    assert console().stderr is False
