#!filepath: dtconv/utils/datetime_utils.py
from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone


class DateTimeUtils:
    """
    UTC 时间工具（纯函数，无状态）

    - epoch 秒 / 毫秒 ↔ datetime
    - ISO 8601 解析 / 格式化
    - 可表示范围 = Python datetime 范围（0001 ~ 9999 年）
    """

    UTC = timezone.utc
    EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
    MILLIS_PER_SECOND = 1000

    # 数值按秒解释时，年份 >= THRESHOLD_YEAR 则改按毫秒解释
    THRESHOLD_YEAR = 3000
    SECONDS_THRESHOLD = (
        datetime(THRESHOLD_YEAR, 1, 1, tzinfo=timezone.utc) - EPOCH
    ) // timedelta(seconds=1)

    MIN_EPOCH_MILLIS = (
        datetime.min.replace(tzinfo=timezone.utc) - EPOCH
    ) // timedelta(milliseconds=1)
    MAX_EPOCH_MILLIS = (
        datetime.max.replace(tzinfo=timezone.utc) - EPOCH
    ) // timedelta(milliseconds=1)

    _INT_RE = re.compile(r"-?[0-9]+")
    _ISO_RE = re.compile(
        r"(?P<date>[0-9]{4}-[0-9]{2}-[0-9]{2})"
        r"[Tt ]"
        r"(?P<time>[0-9]{2}:[0-9]{2}:[0-9]{2})"
        r"(?:\.(?P<frac>[0-9]+))?"
        r"(?P<tz>[Zz]|[+-][0-9]{2}:[0-9]{2})?"
    )

    # ================================================================
    # grammar
    # ================================================================
    @classmethod
    def is_integer(cls, s: str) -> bool:
        """base-10 整数：可选前导负号，无分隔符"""
        return cls._INT_RE.fullmatch(s) is not None

    # ================================================================
    # epoch → datetime
    # ================================================================
    @classmethod
    def in_range(cls, epoch_millis: int) -> bool:
        return cls.MIN_EPOCH_MILLIS <= epoch_millis <= cls.MAX_EPOCH_MILLIS

    @classmethod
    def from_epoch_millis(cls, epoch_millis: int) -> datetime:
        if not cls.in_range(epoch_millis):
            raise OverflowError(f"epoch millis out of range: {epoch_millis}")
        return cls.EPOCH + timedelta(milliseconds=epoch_millis)

    @classmethod
    def to_epoch_millis(cls, dt: datetime) -> int:
        """
        aware datetime → epoch 毫秒（向下取整）
        naive datetime 视为 UTC
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=cls.UTC)
        return (dt - cls.EPOCH) // timedelta(milliseconds=1)

    @classmethod
    def seconds_year_below_threshold(cls, epoch_seconds: int) -> bool:
        """
        epoch_seconds 按秒解释时，年份是否 < THRESHOLD_YEAR。
        对任意大小 / 负数都成立（单调比较，不构造 datetime）。
        """
        return epoch_seconds < cls.SECONDS_THRESHOLD

    # ================================================================
    # ISO 8601
    # ================================================================
    @classmethod
    def parse_iso(cls, s: str) -> datetime:
        """
        解析 ISO 8601 日期时间，返回 UTC aware datetime。

        支持：
            2023-02-11T18:37:10Z
            2023-02-11T18:37:10.123456789+08:00
            2023-02-11 18:37:10          # 无 offset → UTC
        小数秒超过 6 位时截断到微秒。
        """
        m = cls._ISO_RE.fullmatch(s)
        if m is None:
            raise ValueError(f"not an ISO 8601 datetime: {s!r}")

        frac = (m.group("frac") or "").ljust(6, "0")[:6]
        tz = m.group("tz")
        offset = "" if tz is None or tz in ("Z", "z") else tz

        dt = datetime.fromisoformat(f"{m.group('date')}T{m.group('time')}.{frac}{offset}")
        if dt.tzinfo is None:
            return dt.replace(tzinfo=cls.UTC)

        try:
            return dt.astimezone(cls.UTC)
        except OverflowError as e:
            raise ValueError(f"datetime out of range after UTC conversion: {s!r}") from e

    @classmethod
    def to_iso(cls, dt: datetime) -> str:
        """UTC, 毫秒精度, 'Z' 结尾：2023-02-11T18:37:10.000Z"""
        utc = dt.astimezone(cls.UTC) if dt.tzinfo else dt
        return utc.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"
