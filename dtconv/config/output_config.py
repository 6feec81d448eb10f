#!filepath: dtconv/config/output_config.py
from typing import Literal

from pydantic import BaseModel

# rich.box 里的样式名
BoxStyle = Literal["SQUARE", "ROUNDED", "HEAVY", "DOUBLE", "ASCII", "SIMPLE", "MINIMAL"]


class OutputConfig(BaseModel):
    box: BoxStyle = "SQUARE"
    show_header: bool = False
