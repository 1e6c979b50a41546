"""
Logging setup using loguru.

The console sink writes through ``tqdm.write`` so log lines from the results
fetcher don't tear its progress bar. Sink levels and file rotation come from
``cfg.logging``.
"""
import sys
from pathlib import Path

from loguru import logger as _logger
from tqdm import tqdm

from f1_wins.config import LogConfig, cfg


def _console_sink(message) -> None:
    tqdm.write(str(message), file=sys.stderr, end="")


def setup_logger(
    log_dir: Path | None = None,
    level: str | None = None,
    config: LogConfig | None = None,
) -> None:
    """
    Configure the loguru logger with a console sink and an optional file sink.

    Args:
        log_dir: Directory for log files. If None, file logging is skipped.
        level: Minimum log level; falls back to ``config.level``.
        config: Log settings. Defaults to ``cfg.logging``.
    """
    config = config or cfg.logging
    level = (level or config.level).upper()

    _logger.remove()
    _logger.add(_console_sink, level=level, format=config.console_format, colorize=True)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        _logger.add(
            log_dir / config.file_name,
            level=level,
            format=config.file_format,
            rotation=config.rotation,
            retention=config.retention,
        )


logger = _logger
