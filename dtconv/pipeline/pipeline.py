#!filepath: dtconv/pipeline/pipeline.py
from __future__ import annotations

from typing import Iterable, Iterator

from dtconv import logs
from dtconv.engines.format_engine import FormatEngine
from dtconv.engines.parser_engine import ParserEngine
from dtconv.instant import ConversionResult, FormattedTime
from dtconv.utils.errors import UserInputError


class ConversionPipeline:
    """
    ConversionPipeline = 调度器

    raw string ──ParserEngine──▶ Instant ──FormatEngine──▶ FormattedTime

    设计铁律：
    - 每个输入值独立，失败只影响当前值
    - stdin 模式：报告并继续（report and continue）
    - 输出顺序 = 输入行顺序
    """

    def __init__(
            self,
            parser: ParserEngine | None = None,
            formatter: FormatEngine | None = None,
    ):
        self.parser = parser or ParserEngine()
        self.formatter = formatter or FormatEngine()

    @logs.catch("conversion failed")
    def convert(self, raw: str) -> FormattedTime:
        """单值：失败直接抛 UserInputError 子类"""
        instant = self.parser.process(raw)
        return self.formatter.process(instant)

    def run(self, lines: Iterable[str]) -> Iterator[ConversionResult]:
        """
        多行：每个非空行产出一个 ConversionResult（成功或失败）
        """
        for line_no, line in enumerate(lines, start=1):
            raw = line.strip()
            if not raw:
                logs.debug(f"[Pipeline] line {line_no} blank -> skip")
                continue

            try:
                output = self.convert(raw)
            except UserInputError as e:
                yield ConversionResult(raw=raw, line_no=line_no, error=e)
                continue

            yield ConversionResult(raw=raw, line_no=line_no, output=output)
