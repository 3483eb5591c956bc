"""Unit tests for the UTC timestamp column type."""

from datetime import datetime, timedelta, timezone

from sqlalchemy.dialects import postgresql, sqlite

from minicini.infrastructure.database import UTCDateTime

_CET = timezone(timedelta(hours=1))


def test_naive_store_values_come_back_as_utc():
    column = UTCDateTime()
    value = column.process_result_value(datetime(2026, 1, 2, 3, 4, 5), sqlite.dialect())
    assert value == datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert value.utcoffset() == timedelta(0)


def test_aware_values_are_normalized_to_utc_on_read():
    column = UTCDateTime()
    value = column.process_result_value(datetime(2026, 1, 2, 4, 0, tzinfo=_CET), postgresql.dialect())
    assert value == datetime(2026, 1, 2, 3, 0, tzinfo=timezone.utc)
    assert value.tzinfo == timezone.utc


def test_bind_stores_naive_utc_where_the_store_keeps_no_offset():
    column = UTCDateTime()
    stored = column.process_bind_param(datetime(2026, 1, 2, 4, 0, tzinfo=_CET), sqlite.dialect())
    assert stored == datetime(2026, 1, 2, 3, 0)
    assert stored.tzinfo is None


def test_bind_keeps_offset_on_postgresql():
    column = UTCDateTime()
    stored = column.process_bind_param(datetime(2026, 1, 2, 4, 0, tzinfo=_CET), postgresql.dialect())
    assert stored == datetime(2026, 1, 2, 3, 0, tzinfo=timezone.utc)


def test_none_passes_through():
    column = UTCDateTime()
    assert column.process_bind_param(None, sqlite.dialect()) is None
    assert column.process_result_value(None, sqlite.dialect()) is None
