import logging

from src.reformulation import logging_util


def test_unknown_level_name_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("REFORMULATION_LOG_LEVEL", "verbose")
    assert logging_util._level_from_env() == logging.INFO


def test_level_name_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("REFORMULATION_LOG_LEVEL", " debug ")
    assert logging_util._level_from_env() == logging.DEBUG


def test_entry_point_loggers_nest_under_package():
    assert logging_util.get_logger("lambda_function").name == "src.reformulation.lambda_function"
    assert logging_util.get_logger("src.reformulation.handler").name == "src.reformulation.handler"


def test_fingerprint_hides_secret():
    fp = logging_util.fingerprint("test-gemini-key")
    assert "test-gemini-key" not in fp
    assert fp.startswith("len=15 sha8=")
