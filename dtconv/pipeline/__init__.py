#!filepath: dtconv/pipeline/__init__.py

from .pipeline import ConversionPipeline

__all__ = ["ConversionPipeline"]
