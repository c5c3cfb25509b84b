import json
import logging

import pytest

from holeyvec import HoleyVec, NotOccupiedError
from holeyvec.config import Settings
from holeyvec import observability
from holeyvec.observability import JSONFormatter, configure_logging, logger


@pytest.fixture
def restore_logger():
    installed = observability._handler
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
    observability._handler = installed


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord(
        "holeyvec", logging.DEBUG, __file__, 1, "hole reused", None, None
    )
    record.index = 3
    data = json.loads(JSONFormatter().format(record))
    assert data["level"] == "DEBUG"
    assert data["logger"] == "holeyvec"
    assert data["message"] == "hole reused"
    assert data["index"] == 3


def test_configure_logging_does_not_duplicate_handlers(restore_logger):
    before = list(logger.handlers)
    configure_logging(Settings(log_level="DEBUG"))
    handler = configure_logging(Settings(log_level="INFO", log_format="plain"))
    assert handler in logger.handlers
    assert len(logger.handlers) == 1 + len(before)
    assert logger.level == logging.INFO
    assert not isinstance(handler.formatter, JSONFormatter)


def test_configure_logging_reads_environment(monkeypatch, restore_logger):
    monkeypatch.setenv("HOLEYVEC_LOG_LEVEL", "ERROR")
    monkeypatch.delenv("HOLEYVEC_LOG_FORMAT", raising=False)
    handler = configure_logging()
    assert logger.level == logging.ERROR
    assert isinstance(handler.formatter, JSONFormatter)


def test_container_logs_structural_events(caplog):
    caplog.set_level(logging.DEBUG, logger="holeyvec")
    vec = HoleyVec([1])
    vec.remove(0)
    vec.push(2)
    vec.remove(0)
    with pytest.raises(NotOccupiedError):
        vec.remove(0)
    messages = [r.getMessage() for r in caplog.records]
    assert messages[:4] == [
        "slot appended",
        "slot removed",
        "hole reused",
        "slot removed",
    ]
    assert messages[-1] == "slot not occupied"
    assert caplog.records[-1].index == 0


def test_configured_logger_does_not_propagate_to_root(caplog, restore_logger):
    configure_logging(Settings(log_level="DEBUG"))
    assert logger.propagate is False
    caplog.set_level(logging.DEBUG)
    HoleyVec([1])
    assert not [r for r in caplog.records if r.name == "holeyvec"]
