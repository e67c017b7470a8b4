import logging

from kanban_board_api.app.core.logging_config import APP_LOGGER, setup_logging


def test_setup_logging_sets_application_level():
    app_logger = logging.getLogger(APP_LOGGER)
    previous = app_logger.level
    try:
        setup_logging("debug")
        assert app_logger.level == logging.DEBUG
        setup_logging("not-a-level")
        assert app_logger.level == logging.INFO
    finally:
        app_logger.setLevel(previous)
