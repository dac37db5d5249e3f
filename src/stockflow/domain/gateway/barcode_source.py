"""Abstract barcode source.

Anything that turns a camera frame, an image, or a hand scanner into a
decoded code implements this.  The rest of the system only ever sees
the decoded string.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

DetectedCallback = Callable[[str], None]


class BarcodeSource(ABC):

    def __init__(self) -> None:
        self._callbacks: list[DetectedCallback] = []

    def on_detected(self, callback: DetectedCallback) -> None:
        """Register *callback* to receive every decoded code."""
        self._callbacks.append(callback)

    @abstractmethod
    def start(self) -> None:
        """Begin decoding; returns once the source is exhausted or stopped."""

    @abstractmethod
    def stop(self) -> None:
        """Stop decoding; codes detected afterwards are dropped."""

    def _emit(self, code: str) -> None:
        code = code.strip()
        if not code:
            return
        for callback in list(self._callbacks):
            callback(code)
