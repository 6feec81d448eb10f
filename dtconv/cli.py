#!filepath: dtconv/cli.py
import sys
from pathlib import Path
from typing import Iterator, Optional

import typer
from pydantic import ValidationError
from rich import print
from rich.console import Console
from rich.markup import escape

from dtconv import AppConfig, __version__, logs
from dtconv.config.log_config import LogConfig
from dtconv.engines.format_engine import TableRenderer
from dtconv.pipeline import ConversionPipeline
from dtconv.utils.errors import ConfigError, UserInputError

app = typer.Typer(add_completion=False)

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    # 允许负数 epoch 作为位置参数：datetime -1
    "ignore_unknown_options": True,
}


def _version_callback(value: bool):
    if value:
        print(f"v{__version__}")
        raise typer.Exit()


def _load_config(path: Optional[Path], log_level: Optional[str]) -> AppConfig:
    cfg = AppConfig.load(path)
    if log_level:
        try:
            cfg.log = LogConfig(**{**cfg.log.model_dump(), "level": log_level.upper()})
        except ValidationError as e:
            raise ConfigError(f"Invalid log level: {log_level}") from e
    return cfg


def _stdin_lines() -> Iterator[str]:
    """
    逐行读取 stdin 原始字节，非法 UTF-8 替换为 U+FFFD（该行按无法解析报告）
    """
    for raw in sys.stdin.buffer:
        yield raw.decode("utf-8", errors="replace")


def _report(err_console: Console, error: UserInputError, prefix: str = "") -> None:
    err_console.print(f"[red]error:[/red] {escape(prefix + str(error))}", soft_wrap=True)


@app.command(context_settings=CONTEXT_SETTINGS)
def convert(
    date_time: Optional[str] = typer.Argument(
        None,
        metavar="[DATE_TIME]",
        help="Input to be parsed. If omitted standard input is used.",
        show_default=False,
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML config file (default: packaged base.yml)."
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", "-l", help="Override the configured log level."
    ),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True,
        help="Print version and exit.",
    ),
):
    """
    Parses an input from standard input or from the first argument as
    ISO 8601 datetime or as epoch (milli)seconds and prints it as
    ISO 8601 datetime, epoch seconds and epoch milliseconds.

    Numeric values are handled as epoch seconds if the year of the result
    is less than 3000. Otherwise, they are handled as epoch milliseconds.
    """
    console = Console()
    err_console = Console(stderr=True)

    try:
        cfg = _load_config(config, log_level)
    except ConfigError as e:
        _report(err_console, e)
        raise typer.Exit(code=1)

    logs.configure(
        log_dir=cfg.log.dir,
        rotation=cfg.log.rotation,
        retention=cfg.log.retention,
        log_level=cfg.log.level,
    )

    pipeline = ConversionPipeline()
    renderer = TableRenderer(cfg.output)

    # --------------------------------------------------
    # 单值模式
    # --------------------------------------------------
    if date_time is not None:
        try:
            formatted = pipeline.convert(date_time)
        except UserInputError as e:
            _report(err_console, e)
            raise typer.Exit(code=1)

        console.print(renderer.render(formatted))
        return

    # --------------------------------------------------
    # stdin 模式：逐行，报告并继续
    # --------------------------------------------------
    try:
        for result in pipeline.run(_stdin_lines()):
            if result.ok:
                console.print(renderer.render(result.output))
            else:
                _report(err_console, result.error, prefix=f"line {result.line_no}: ")
    except KeyboardInterrupt:
        raise typer.Exit(code=130)
    except OSError as e:
        logs.error(f"[cli] I/O failure: {e}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
