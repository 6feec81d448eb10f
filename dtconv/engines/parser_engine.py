#!filepath: dtconv/engines/parser_engine.py
from __future__ import annotations

from dtconv import logs
from dtconv.engines.base import BaseEngine
from dtconv.instant import Instant
from dtconv.utils.datetime_utils import DateTimeUtils
from dtconv.utils.errors import DateTimeParseError, InvalidEpochTimeError


class ParserEngine(BaseEngine[str, Instant]):
    """
    Classifier + Parser

    raw string → Instant

    判定顺序：
      1. 整数（-?[0-9]+）→ epoch 值 v
           - v 按秒解释年份 < 3000 → epoch seconds
           - 否则（或秒解释超出范围）→ epoch milliseconds
           - 两种解释都超出范围    → InvalidEpochTimeError
      2. ISO 8601 日期时间
      3. 都失败 → DateTimeParseError（带两个候选的失败原因）
    """

    def process(self, value: str) -> Instant:
        value = value.strip()

        if DateTimeUtils.is_integer(value):
            return self.parse_epoch(int(value))

        try:
            return self.parse_iso(value)
        except ValueError as iso_error:
            numeric_error = ValueError(f"not a base-10 integer: {value!r}")
            err = DateTimeParseError(value, causes=(numeric_error, iso_error))
            logs.debug(f"[ParserEngine] {err} ({err.details()})")
            raise err from iso_error

    # --------------------------------------------------
    # numeric
    # --------------------------------------------------
    def parse_epoch(self, value: int) -> Instant:
        """
        秒解释不可用（年份 >= 3000 或超出可表示范围）→ 回退到毫秒；
        两种解释都不可表示 → InvalidEpochTimeError
        """
        if DateTimeUtils.seconds_year_below_threshold(value):
            try:
                instant = Instant.from_epoch_seconds(value)
            except InvalidEpochTimeError:
                logs.debug(f"[ParserEngine] {value} out of range as seconds")
            else:
                logs.debug(f"[ParserEngine] {value} -> epoch seconds")
                return instant

        logs.debug(f"[ParserEngine] {value} -> epoch milliseconds")
        return Instant.from_epoch_millis(value)

    # --------------------------------------------------
    # ISO 8601
    # --------------------------------------------------
    def parse_iso(self, value: str) -> Instant:
        return Instant.from_datetime(DateTimeUtils.parse_iso(value))
