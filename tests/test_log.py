"""Tests for the cfour logging setup."""

import logging

import pytest

from cfour.log import setup_logging


@pytest.fixture
def cfour_logger():
    logger = logging.getLogger("cfour")
    saved = (logger.level, logger.handlers[:], logger.propagate)
    yield logger
    for h in logger.handlers[:]:
        logger.removeHandler(h)
        h.close()
    logger.setLevel(saved[0])
    for h in saved[1]:
        logger.addHandler(h)
    logger.propagate = saved[2]


def test_level_and_single_console_handler(cfour_logger):
    setup_logging("debug")
    setup_logging("debug")
    assert cfour_logger.level == logging.DEBUG
    assert len(cfour_logger.handlers) == 1


def test_file_handler(cfour_logger, tmp_path):
    path = tmp_path / "cfour.log"
    setup_logging(logging.INFO, log_file=str(path))
    logging.getLogger("cfour.game.state").info("Player A wins")
    for h in cfour_logger.handlers:
        h.flush()
    assert "Player A wins" in path.read_text()


def test_no_color_env(cfour_logger, monkeypatch, capsys):
    monkeypatch.setenv("NO_COLOR", "1")
    setup_logging("WARNING")
    logging.getLogger("cfour.scoreboard").warning("bad record")
    err = capsys.readouterr().err
    assert "bad record" in err
    assert "\x1b[" not in err
