from __future__ import annotations

import logging
from typing import BinaryIO

from kurobako_solver.errors import TransportError

logger = logging.getLogger(__name__)


class LineTransport:
    def __init__(self, reader: BinaryIO, writer: BinaryIO, *, trace: bool = False) -> None:
        self.reader = reader
        self.writer = writer
        self.trace = trace

    def read_line(self) -> bytes | None:
        try:
            raw = self.reader.readline()
        except OSError as exc:
            raise TransportError(f"failed to read message line: {exc}") from exc
        if not raw:
            return None
        line = raw.rstrip(b"\r\n")
        if not line.strip():
            raise TransportError("received an empty message line")
        if self.trace:
            logger.debug("transport recv line=%s", line.decode("utf-8", errors="replace"))
        return line

    def write_line(self, data: bytes) -> None:
        if self.trace:
            logger.debug("transport send line=%s", data.decode("utf-8", errors="replace"))
        try:
            self.writer.write(data + b"\n")
            self.writer.flush()
        except OSError as exc:
            raise TransportError(f"failed to write message line: {exc}") from exc
