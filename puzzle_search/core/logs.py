# puzzle_search/core/logs.py
from __future__ import annotations
import logging
from typing import Optional, Union


def setup_logging(level: Union[int, str] = logging.INFO, format_string: Optional[str] = None) -> None:
    """Configure root logging for command-line entry points.

    Args:
        level: Logging level, as an int or a name such as ``"DEBUG"``
        format_string: Custom format string
    """
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"unknown log level: {name!r}")

    if format_string is None:
        if level <= logging.DEBUG:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_string = "%(levelname)s: %(message)s"

    logging.basicConfig(level=level, format=format_string, datefmt="%Y-%m-%d %H:%M:%S")

    # matplotlib is chatty at DEBUG
    logging.getLogger("matplotlib").setLevel(logging.WARNING)
