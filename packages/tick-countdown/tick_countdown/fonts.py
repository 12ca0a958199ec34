"""FontCycle - rotate through a font list without repeating back-to-back."""
from __future__ import annotations

import logging
from typing import Sequence

logger = logging.getLogger(__name__)


class FontCycle:

    def __init__(self, fonts: Sequence[str]) -> None:
        if not fonts:
            raise ValueError("FontCycle requires at least one font")
        self._fonts = tuple(fonts)
        self._current = 0
        self._previous = 0

    @property
    def fonts(self) -> tuple[str, ...]:
        return self._fonts

    @property
    def index(self) -> int:
        return self._current

    @property
    def current(self) -> str:
        return self._fonts[self._current]

    def advance(self) -> str:
        n = len(self._fonts)
        nxt = (self._current + 1) % n
        if nxt == self._previous and n > 1:
            nxt = (nxt + 1) % n
        self._current = nxt
        self._previous = nxt
        logger.debug("font advanced to %s", self._fonts[nxt])
        return self._fonts[nxt]
