#!filepath: dtconv/__init__.py

from .utils.logger import Logging, logs
from .utils.datetime_utils import DateTimeUtils
from .config.app_config import AppConfig
from .instant import Instant, FormattedTime, ConversionResult

__version__ = "0.1.0"

datetime_utils = DateTimeUtils

__all__ = [
    "logs", "Logging",
    "AppConfig",
    "datetime_utils",
    "Instant", "FormattedTime", "ConversionResult",
]
