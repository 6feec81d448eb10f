# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger

from dtconv.engines.parser_engine import ParserEngine
from dtconv.pipeline import ConversionPipeline


@pytest.fixture(autouse=True)
def disable_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture
def parser() -> ParserEngine:
    return ParserEngine()


@pytest.fixture
def pipeline() -> ConversionPipeline:
    return ConversionPipeline()


@pytest.fixture
def log_sink():
    """
    收集 loguru 输出（测试日志内容用）
    """
    captured: list[str] = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)), level="DEBUG")
    yield captured
    try:
        logger.remove(sink_id)
    except ValueError:
        pass
