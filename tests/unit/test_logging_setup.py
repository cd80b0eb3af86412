import json
import logging

from crypto_tracker.utils.logging import JsonFormatter, setup_logging


def test_json_formatter_includes_refresh_id():
    record = logging.LogRecord("crypto_tracker.test", logging.INFO, __file__, 1, "Refreshing prices", None, None)
    record.refresh_id = 3
    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "Refreshing prices"
    assert payload["level"] == "INFO"
    assert payload["refresh_id"] == 3


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "tracker.log"
    setup_logging(level="DEBUG", log_file=str(log_file), format_type="text")

    logging.getLogger("crypto_tracker.test").debug("hello file")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "hello file" in log_file.read_text()
    setup_logging()


def test_setup_logging_without_handlers_is_silent(capsys):
    setup_logging(console=False)
    logging.getLogger("crypto_tracker.test").warning("nothing")
    captured = capsys.readouterr()
    assert "nothing" not in captured.out
    assert "nothing" not in captured.err
