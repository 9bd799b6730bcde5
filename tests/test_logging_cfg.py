import json
import logging

from app.core.logging_cfg import DetailedFormatter


def _record(**extra):
    record = logging.LogRecord("app.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_without_extra_is_plain():
    fmt = DetailedFormatter("%(levelname)s %(message)s")

    assert fmt.format(_record()) == "INFO hello world"


def test_formatter_appends_extra_as_json():
    fmt = DetailedFormatter("%(message)s")

    line = fmt.format(_record(intent="book.flight", session="projects/p/agent/sessions/s"))

    prefix = "hello world "
    assert line.startswith(prefix)
    assert json.loads(line[len(prefix):]) == {
        "intent": "book.flight",
        "session": "projects/p/agent/sessions/s",
    }
