import logging

from tictactoe.config import Settings, load_settings


def test_defaults_without_env():
    assert load_settings({}) == Settings()


def test_values_from_env():
    settings = load_settings({
        "TICTACTOE_LOG_LEVEL": "debug",
        "TICTACTOE_WINDOW_TITLE": "Noughts and Crosses",
        "TICTACTOE_MIN_BOARD_SIZE": "320",
        "TICTACTOE_THEME": "Dark",
    })
    assert settings == Settings(
        log_level="DEBUG",
        window_title="Noughts and Crosses",
        min_board_size=320,
        theme="dark",
    )


def test_bad_values_fall_back_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="tictactoe.config"):
        settings = load_settings({
            "TICTACTOE_LOG_LEVEL": "chatty",
            "TICTACTOE_MIN_BOARD_SIZE": "10",
            "TICTACTOE_THEME": "neon",
        })
    assert settings == Settings()
    assert len(caplog.records) == 3


def test_non_numeric_board_size_falls_back():
    assert load_settings({"TICTACTOE_MIN_BOARD_SIZE": "big"}).min_board_size == 240
