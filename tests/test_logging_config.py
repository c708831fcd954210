"""Tests for logging setup and JSON formatting."""
import json
import logging
import sys

import pytest

from core.logging_config import JSONFormatter, setup_logging


def make_record(**extra):
    record = logging.LogRecord(
        name="services.appointments",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="Appointment created: %s",
        args=(5,),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_basic_fields():
    data = json.loads(JSONFormatter().format(make_record()))

    assert data["level"] == "INFO"
    assert data["logger"] == "services.appointments"
    assert data["message"] == "Appointment created: 5"
    assert data["line"] == 10
    assert "appointment_id" not in data


def test_json_formatter_includes_extras():
    data = json.loads(JSONFormatter().format(make_record(appointment_id=5, dentist="Dr. Smith")))

    assert data["appointment_id"] == 5
    assert data["dentist"] == "Dr. Smith"


def test_json_formatter_includes_exception():
    try:
        raise ValueError("bad value")
    except ValueError:
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", None, exc_info=True)
        record.exc_info = sys.exc_info()

    data = json.loads(JSONFormatter().format(record))

    assert "ValueError: bad value" in data["exception"]


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_setup_logging_writes_json_files(tmp_path, restore_root_logger):
    setup_logging(log_dir=tmp_path, log_level="debug")

    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 3
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    logging.getLogger("tests").error("storage failure", extra={"appointment_id": 9})
    for handler in restore_root_logger.handlers:
        handler.flush()

    lines = (tmp_path / "errors.log").read_text(encoding="utf-8").splitlines()
    assert json.loads(lines[-1])["appointment_id"] == 9
    assert (tmp_path / "dental_appointments.log").exists()


@pytest.mark.asyncio
async def test_main_configures_logging_and_creates_tables(
    monkeypatch, tmp_path, restore_root_logger, async_engine, session_maker
):
    import database.base as db_base
    import main
    from core.config import settings

    async with async_engine.begin() as conn:
        await conn.run_sync(db_base.Base.metadata.drop_all)
    monkeypatch.setattr(settings, "log_dir", str(tmp_path))
    monkeypatch.setattr(db_base, "engine", async_engine)
    monkeypatch.setattr(main, "async_session_maker", session_maker)

    await main.main()

    assert len(restore_root_logger.handlers) == 3
    messages = [
        json.loads(line)["message"]
        for line in (tmp_path / "dental_appointments.log").read_text(encoding="utf-8").splitlines()
    ]
    assert "Database ready, 0 appointments stored" in messages
