# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(name)s: %(message)s"


def configure_logging(level: str = "WARNING", verbose: bool = False) -> None:
    """Route the standard logging module through rich on stderr."""
    effective_level = logging.DEBUG if verbose else level.upper()
    logging.basicConfig(
        level=effective_level,
        format=LOG_FORMAT,
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                show_path=False,
                rich_tracebacks=True,
            )
        ],
        force=True,
    )
