import logging

from cv_review_ai.utils.logger import ROOT_LOGGER_NAME, configure_logging, get_logger


def test_module_loggers_nest_under_package_logger():
    assert get_logger("cv_review_ai.api.routes").name == "cv_review_ai.api.routes"
    assert get_logger("__main__").name == "cv_review_ai.__main__"


def test_configure_logging_installs_one_handler():
    root = configure_logging("debug")
    configure_logging("debug")
    assert root is logging.getLogger(ROOT_LOGGER_NAME)
    assert len(root.handlers) == 1
    assert root.level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING
    configure_logging("info")
