import logging

from flappy.logger import ROOT_LOGGER, TickFormatter, get_logger, setup_logging


def test_get_logger_nests_under_package():
    assert get_logger("flappy.game_state").name == "flappy.game_state"
    assert get_logger("tests").name == "flappy.tests"


def test_formatter_drops_package_prefix():
    record = logging.LogRecord("flappy.physics_pipes", logging.DEBUG, __file__, 1,
                               "Evicted %d oldest pipes", (2,), None)
    line = TickFormatter().format(record)
    assert line.endswith("[D] physics_pipes: Evicted 2 oldest pipes")


def test_setup_logging_replaces_handlers():
    setup_logging("debug")
    setup_logging("warning")
    root = logging.getLogger(ROOT_LOGGER)
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
