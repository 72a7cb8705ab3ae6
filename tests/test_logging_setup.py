import logging
import sys

from mobius.logging_setup import install_global_exception_hook, setup_logging


def test_setup_logging_writes_to_rotating_file(tmp_path, clean_logger):
    logger = setup_logging("DEBUG", log_dir=tmp_path)
    logging.getLogger("mobius.repository.note").info("hello from the store")

    for handler in logger.handlers:
        handler.flush()
    text = (tmp_path / "mobius.log").read_text(encoding="utf-8")
    assert "hello from the store" in text
    assert "sid=" in text


def test_setup_logging_is_idempotent(tmp_path, clean_logger):
    setup_logging("INFO", log_dir=tmp_path)
    logger = setup_logging("WARNING", log_dir=tmp_path)

    assert len(logger.handlers) == 2
    assert logger.level == logging.WARNING


def test_exception_hook_logs_uncaught_errors(monkeypatch, clean_logger):
    records = []

    class ListHandler(logging.Handler):
        def emit(self, record):
            records.append(record)

    clean_logger.addHandler(ListHandler())
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    monkeypatch.setattr(sys, "__excepthook__", lambda *args: None)

    install_global_exception_hook(clean_logger)
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        sys.excepthook(*sys.exc_info())

    assert records[0].levelno == logging.CRITICAL
    assert records[0].getMessage() == "Uncaught exception"
