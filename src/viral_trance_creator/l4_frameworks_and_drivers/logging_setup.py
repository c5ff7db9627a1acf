"""Logging setup for the CLI."""

from __future__ import annotations

import logging
from pathlib import Path

_FORMAT = '%(asctime)s %(levelname)s %(name)s %(message)s'


def setup_logging(*, verbose: bool = False, log_file: Path | None = None) -> None:
    """Configure the ``vtc`` logger: stderr always, plus a debug file when *log_file* is given."""
    root = logging.getLogger('vtc')
    root.setLevel(logging.DEBUG)
    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()

    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding='utf-8')
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
        logging.getLogger('vtc.llm').info('Debug logging started → %s', log_file)
