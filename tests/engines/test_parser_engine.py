#!filepath: tests/engines/test_parser_engine.py
from __future__ import annotations

import pytest

from dtconv.engines.format_engine import FormatEngine
from dtconv.engines.parser_engine import ParserEngine
from dtconv.instant import Instant
from dtconv.utils.errors import DateTimeParseError, InvalidEpochTimeError


# ============================================================
# 1. ISO 8601
# ============================================================
@pytest.mark.parametrize(
    "raw",
    [
        "2023-02-16T12:34:56.789Z",
        " 2023-02-16T12:34:56.789Z",
        "2023-02-16T12:34:56.789Z ",
    ],
)
def test_iso_8601_with_millis(parser, raw):
    assert parser.process(raw).epoch_millis == 1676550896789


@pytest.mark.parametrize(
    "raw",
    [
        "2023-02-16T12:34:56Z",
        " 2023-02-16T12:34:56Z",
        "2023-02-16T12:34:56Z ",
    ],
)
def test_iso_8601(parser, raw):
    assert parser.process(raw).epoch_millis == 1676550896000


def test_iso_8601_concrete(parser):
    inst = parser.process("2023-02-11T18:37:10.000Z")
    assert inst.epoch_seconds == 1676140630
    assert inst.epoch_millis == 1676140630000


def test_iso_8601_with_offset(parser):
    assert parser.process("2023-02-16T14:34:56.789+02:00").epoch_millis == 1676550896789
    assert parser.process("2023-02-16T07:34:56.789-05:00").epoch_millis == 1676550896789


def test_iso_8601_sub_millisecond_floors(parser):
    assert parser.process("2023-02-16T12:34:56.789999Z").epoch_millis == 1676550896789
    assert parser.process("1969-12-31T23:59:59.9995Z").epoch_millis == -1


# ============================================================
# 2. epoch seconds / milliseconds
# ============================================================
@pytest.mark.parametrize("raw", ["1676550896", " 1676550896", "1676550896 "])
def test_epoch_seconds(parser, raw):
    assert parser.process(raw).epoch_millis == 1676550896000


@pytest.mark.parametrize("raw", ["1676550896789", " 1676550896789", "1676550896789 "])
def test_epoch_milliseconds(parser, raw):
    assert parser.process(raw).epoch_millis == 1676550896789


def test_zero_is_epoch(parser):
    inst = parser.process("0")
    assert inst == Instant(0)
    assert inst.isoformat() == "1970-01-01T00:00:00.000Z"


def test_threshold_boundary(parser):
    # 最后一个按秒解释的值：2999-12-31T23:59:59Z
    last_seconds = parser.process("32503679999")
    assert last_seconds.epoch_seconds == 32503679999
    assert last_seconds.year == 2999

    # 第一个按毫秒解释的值
    first_millis = parser.process("32503680000")
    assert first_millis.epoch_millis == 32503680000
    assert first_millis.isoformat() == "1971-01-12T04:48:00.000Z"


@pytest.mark.parametrize("v", [0, 1, 86400, 1676140630, 32503679999, -1, -86400, -62135596800])
def test_seconds_interpretation_preserves_value(parser, v):
    inst = parser.process(str(v))
    assert inst.epoch_seconds == v
    assert inst.year < 3000


@pytest.mark.parametrize("v", [32503680000, 1676140630000, 1676550896789, 253402300799999])
def test_millis_interpretation_preserves_value(parser, v):
    assert parser.process(str(v)).epoch_millis == v


def test_negative_values_are_seconds(parser):
    inst = parser.process("-1")
    assert inst.epoch_millis == -1000
    assert inst.isoformat() == "1969-12-31T23:59:59.000Z"


@pytest.mark.parametrize(
    "v, year",
    [(-62135596801, 1968), (-1000000000000, 1938)],
)
def test_negative_out_of_range_seconds_fall_back_to_millis(parser, v, year):
    # 按秒早于 0001 年，按毫秒可表示
    inst = parser.process(str(v))
    assert inst.epoch_millis == v
    assert inst.year == year


def test_first_unrepresentable_negative_millis(parser):
    assert parser.process("-62135596800000").isoformat() == "0001-01-01T00:00:00.000Z"
    with pytest.raises(InvalidEpochTimeError):
        parser.process("-62135596800001")


@pytest.mark.parametrize(
    "raw",
    ["253402300800000", "99999999999999999999999", "-100000000000000", "-99999999999999999999"],
)
def test_overflow_is_structured(parser, raw):
    with pytest.raises(InvalidEpochTimeError) as exc:
        parser.process(raw)
    assert exc.value.value == int(raw)


# ============================================================
# 3. 失败
# ============================================================
@pytest.mark.parametrize(
    "raw",
    ["not-a-date", "", "   ", "+5", "1_000", "1.5", "2023-02-11", "2023-13-01T00:00:00Z"],
)
def test_unparseable(parser, raw):
    with pytest.raises(DateTimeParseError) as exc:
        parser.process(raw)
    assert exc.value.value == raw.strip()
    assert len(exc.value.causes) == 2


def test_unparseable_logged_at_debug(parser, log_sink):
    with pytest.raises(DateTimeParseError):
        parser.process("not-a-date")

    output = "\n".join(log_sink)
    assert "not-a-date" in output
    assert "DEBUG" in output



# ============================================================
# 4. parse → format → parse 幂等
# ============================================================
@pytest.mark.parametrize(
    "raw",
    [
        "0",
        "-1",
        "1676140630",
        "1676550896789",
        "32503680000",
        "2023-02-16T12:34:56.789Z",
        "2023-02-16T14:34:56.789123+02:00",
        "1969-12-31T23:59:59.9995Z",
        "0001-01-01T00:00:00Z",
        "9999-12-31T23:59:59.999999Z",
    ],
)
def test_round_trip(parser, raw):
    first = parser.process(raw)
    iso = FormatEngine().process(first).iso
    assert parser.process(iso) == first
