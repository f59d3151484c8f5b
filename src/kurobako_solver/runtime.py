from __future__ import annotations

import logging
import sys


def configure_logging(level: int = logging.WARNING) -> None:
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return
    # stdout carries protocol messages; logs must stay on stderr.
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
