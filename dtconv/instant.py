#!filepath: dtconv/instant.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from dtconv.utils.datetime_utils import DateTimeUtils
from dtconv.utils.errors import InvalidEpochTimeError, UserInputError


@dataclass(frozen=True, slots=True)
class Instant:
    """
    Instant = 绝对时间点（UTC，毫秒精度）

    - 唯一字段 epoch_millis（相对 1970-01-01T00:00:00Z）
    - 不可变，每次解析新建
    - 三种输出（ISO / 秒 / 毫秒）都是它的投影
    """

    epoch_millis: int

    def __post_init__(self):
        if not DateTimeUtils.in_range(self.epoch_millis):
            raise InvalidEpochTimeError(self.epoch_millis)

    # --------------------------------------------------
    # constructors
    # --------------------------------------------------
    @classmethod
    def from_epoch_millis(cls, value: int) -> "Instant":
        return cls(value)

    @classmethod
    def from_epoch_seconds(cls, value: int) -> "Instant":
        millis = value * DateTimeUtils.MILLIS_PER_SECOND
        if not DateTimeUtils.in_range(millis):
            raise InvalidEpochTimeError(value)
        return cls(millis)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "Instant":
        return cls(DateTimeUtils.to_epoch_millis(dt))

    # --------------------------------------------------
    # projections
    # --------------------------------------------------
    @property
    def epoch_seconds(self) -> int:
        # floor，pre-epoch 也向负无穷取整
        return self.epoch_millis // DateTimeUtils.MILLIS_PER_SECOND

    @property
    def year(self) -> int:
        return self.to_datetime().year

    def to_datetime(self) -> datetime:
        return DateTimeUtils.from_epoch_millis(self.epoch_millis)

    def isoformat(self) -> str:
        return DateTimeUtils.to_iso(self.to_datetime())


@dataclass(frozen=True, slots=True)
class FormattedTime:
    """同一个 Instant 的三种展示值"""

    iso: str
    epoch_seconds: int
    epoch_millis: int


@dataclass(slots=True)
class ConversionResult:
    """
    单个输入值的处理结果（成功 / 失败二选一）
    """

    raw: str
    line_no: int = 1
    output: Optional[FormattedTime] = None
    error: Optional[UserInputError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
