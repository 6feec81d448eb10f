#!filepath: dtconv/engines/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar


In = TypeVar("In")
Out = TypeVar("Out")


class BaseEngine(ABC, Generic[In, Out]):
    """
    转换引擎基类：单值进，单值出，无 I/O。

    逐行循环 / 容错在 ConversionPipeline，不在 engine。
    """

    @abstractmethod
    def process(self, value: In) -> Out:
        raise NotImplementedError
