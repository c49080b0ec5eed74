# src/config/logging_config.py

"""Logging for the flora storefront.

Every launch writes ``logs/run_<timestamp>.log``; only the newest
``Settings.LOG_KEEP_RUNS`` run files are kept. What goes to the terminal
depends on the mode: the headless CLI prints warnings to stderr, while
the TUI owns the screen, so its records go through Textual's handler
(visible with ``textual console``) instead.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from textual.logging import TextualHandler

from src.config.settings import Settings

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | "
    "%(message)s"
)
_CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _prune_old_runs(logs_dir: Path, keep: int) -> int:
    """Delete all but the newest *keep* run logs; return how many went."""
    runs = sorted(logs_dir.glob("run_*.log"))
    stale = runs[:-keep] if keep > 0 else runs
    for path in stale:
        path.unlink(missing_ok=True)
    return len(stale)


def setup_logging(tui: bool = False) -> Path:
    """Attach the run-file and terminal handlers to the ``flora`` logger.

    Safe to call more than once; handlers are only added the first time.
    Returns the path of this run's log file.
    """
    flora_logger = logging.getLogger("flora")
    for handler in flora_logger.handlers:
        if isinstance(handler, logging.FileHandler):
            return Path(handler.baseFilename)

    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / f"run_{datetime.now():%Y%m%d_%H%M%S}.log"

    flora_logger.setLevel(logging.DEBUG)
    flora_logger.propagate = False

    pruned = _prune_old_runs(logs_dir, Settings.LOG_KEEP_RUNS - 1)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(Settings.LOG_LEVEL)
    file_handler.setFormatter(
        logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT)
    )
    flora_logger.addHandler(file_handler)

    console_handler: logging.Handler
    if tui:
        console_handler = TextualHandler()
    else:
        console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    flora_logger.addHandler(console_handler)

    flora_logger.info(
        "Logging to %s (%s mode, pruned %d old runs)",
        log_file,
        "tui" if tui else "cli",
        pruned,
    )
    return log_file
