#!filepath: dtconv/engines/format_engine.py
from __future__ import annotations

from rich import box
from rich.table import Table

from dtconv.config.output_config import OutputConfig
from dtconv.engines.base import BaseEngine
from dtconv.instant import FormattedTime, Instant


class FormatEngine(BaseEngine[Instant, FormattedTime]):
    """
    Formatter：Instant → 三种投影

    - ISO 8601（UTC，毫秒，'Z'）
    - epoch seconds（floor）
    - epoch milliseconds
    """

    def process(self, value: Instant) -> FormattedTime:
        return FormattedTime(
            iso=value.isoformat(),
            epoch_seconds=value.epoch_seconds,
            epoch_millis=value.epoch_millis,
        )


class TableRenderer:
    """
    FormattedTime → rich Table（固定两列：label / value）

    表格布局只为可读性，不是契约。
    """

    LABELS = (
        ("ISO 8601 timestamp", "iso"),
        ("Epoch seconds", "epoch_seconds"),
        ("Epoch milliseconds", "epoch_millis"),
    )

    def __init__(self, cfg: OutputConfig | None = None):
        self.cfg = cfg or OutputConfig()

    def render(self, formatted: FormattedTime) -> Table:
        table = Table(
            box=getattr(box, self.cfg.box),
            show_header=self.cfg.show_header,
            show_lines=True,
        )
        table.add_column("Format", no_wrap=True)
        table.add_column("Value", justify="right", no_wrap=True, min_width=24)

        for label, attr in self.LABELS:
            table.add_row(label, str(getattr(formatted, attr)))

        return table
