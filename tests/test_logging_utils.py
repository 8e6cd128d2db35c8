import logging

import pytest

from pinpad_auto import logging_utils
from pinpad_auto.logging_utils import LogContext, log_operation, log_performance


@pytest.fixture
def logger():
    return logging_utils.get_global_logger()


class TestPinpadLogger:
    def test_global_logger_is_singleton(self, logger):
        assert logging_utils.get_global_logger() is logger

    def test_build_context(self, logger):
        context = logger._build_context("match_slot", slot=3, digit=7, distances=(0.0, 1.5, 2.0))
        assert context == "op:match_slot | slot:3 | digit:7 | distances:(0.0, 1.5, 2.0)"

    def test_build_context_writes_slot_lists_in_full(self, logger):
        context = logger._build_context("build_keymap", missing_digits=[0, 1, 2, 3, 4], unmatched_slots=[])
        assert context == "op:build_keymap | missing_digits:[0, 1, 2, 3, 4] | unmatched_slots:[]"

    def test_build_context_elides_mappings(self, logger):
        assert logger._build_context(None, failures={1: "bad"}) == "failures:[...]"
        assert logger._build_context() == ""

    def test_log_level_from_environment(self, logger, monkeypatch):
        monkeypatch.setenv("PINPAD_LOG_LEVEL", "debug")
        assert logger._get_log_level() == logging.DEBUG
        monkeypatch.setenv("PINPAD_LOG_LEVEL", "bogus")
        assert logger._get_log_level() == logging.INFO

    def test_logs_dir_override(self, logger, monkeypatch, tmp_path):
        monkeypatch.setenv("PINPAD_LOG_DIR", str(tmp_path))
        assert logger._get_logs_dir() == tmp_path

    def test_match_result_logged_at_debug(self, logger, caplog):
        with caplog.at_level(logging.DEBUG, logger="pinpad_auto"):
            logger.log_match_result(4, None)
        assert "slot:4" in caplog.text
        assert "digit:none" in caplog.text

    def test_slow_operation_warns(self, logger, caplog):
        with caplog.at_level(logging.WARNING, logger="pinpad_auto"):
            with logger.performance_timer("noop", threshold_ms=-1.0):
                pass
        assert "Slow operation detected" in caplog.text


class TestDecorators:
    def test_log_operation_logs_duration(self, caplog):
        @log_operation("quick")
        def quick():
            return None

        with caplog.at_level(logging.INFO, logger="pinpad_auto"):
            quick()
        assert "Operation completed successfully | op:quick | duration_ms:" in caplog.text

    def test_log_operation_reraises(self, caplog):
        @log_operation("explode")
        def explode():
            raise RuntimeError("boom")

        with caplog.at_level(logging.INFO, logger="pinpad_auto"):
            with pytest.raises(RuntimeError):
                explode()
        assert "op:explode" in caplog.text
        assert "Operation failed: boom" in caplog.text

    def test_log_operation_returns_value(self):
        @log_operation()
        def answer():
            return 42

        assert answer() == 42

    def test_log_performance_preserves_metadata(self):
        @log_performance("double")
        def double(x):
            """Double x."""
            return 2 * x

        assert double(4) == 8
        assert double.__name__ == "double"


class TestLogContext:
    def test_context_logs_entry_and_exit(self, caplog):
        with caplog.at_level(logging.INFO, logger="pinpad_auto"):
            with LogContext("attempt", keys=10) as ctx:
                ctx.log_event("decoded")
        assert "Entering operation context" in caplog.text
        assert "Context event: decoded" in caplog.text
        assert "Operation context completed" in caplog.text

    def test_context_reports_exception(self, caplog):
        with caplog.at_level(logging.INFO, logger="pinpad_auto"):
            with pytest.raises(ValueError):
                with LogContext("attempt"):
                    raise ValueError("bad")
        assert "exited with exception" in caplog.text
        assert "exception:ValueError" in caplog.text
