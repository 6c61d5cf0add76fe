import logging

from rich.logging import RichHandler

from tetris_log import setup_logger


def test_setup_logger_uses_rich_handler_by_default():
    logger = setup_logger(name="tetris-test-rich", level="debug")
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], RichHandler)
    assert logger.level == logging.DEBUG


def test_setup_logger_plain_stream_handler():
    logger = setup_logger(name="tetris-test-plain", use_rich=False)
    assert len(logger.handlers) == 1
    handler = logger.handlers[0]
    assert type(handler) is logging.StreamHandler
    assert not isinstance(handler, RichHandler)


def test_setup_logger_is_idempotent():
    a = setup_logger(name="tetris-test", level="debug")
    b = setup_logger(name="tetris-test", use_rich=False, level="warning")
    assert a is b
    assert len(b.handlers) == 1
    assert b.level == logging.WARNING
    assert not b.propagate


def test_unknown_level_falls_back_to_info():
    assert setup_logger(name="tetris-test-2", level="chatty").level == logging.INFO


def test_game_logs_overflow_restart(caplog):
    from tests.helpers import make_game

    game = make_game("O")
    game.start()
    game.board[0][4] = 1
    with caplog.at_level(logging.INFO, logger="tetris.game"):
        game.player_reset()
    assert "restarting" in caplog.text
