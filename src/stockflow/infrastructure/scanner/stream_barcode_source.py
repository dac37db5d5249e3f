"""Barcode source reading one code per line from a text stream.

Hand scanners in keyboard-wedge mode type the code followed by Enter,
so stdin is a working barcode source for a terminal register.
"""

from __future__ import annotations

import logging
from typing import TextIO

from stockflow.domain.gateway.barcode_source import BarcodeSource

logger = logging.getLogger(__name__)


class StreamBarcodeSource(BarcodeSource):

    def __init__(self, stream: TextIO, stop_on_blank: bool = True) -> None:
        super().__init__()
        self._stream = stream
        self._stop_on_blank = stop_on_blank
        self._running = False

    def start(self) -> None:
        """Emit codes until EOF, a blank line (if enabled), or ``stop()``."""
        self._running = True
        for line in self._stream:
            if not self._running:
                break
            code = line.strip()
            if not code:
                if self._stop_on_blank:
                    break
                continue
            logger.debug("Detected barcode %s", code)
            self._emit(code)
        self._running = False

    def stop(self) -> None:
        self._running = False
