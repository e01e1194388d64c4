"""Repository layer for recorded draws (process memory only)."""

from __future__ import annotations

from collections.abc import Sequence

from lotto649.models.draw import Draw


class DrawRepository:
    """Ordered, append-only draw store."""

    def __init__(self) -> None:
        self._draws: list[Draw] = []

    def append(self, draw: Draw) -> Draw:
        self._draws.append(draw)
        return draw

    def list_all(self) -> Sequence[Draw]:
        """Draws in submission order."""

        return tuple(self._draws)

    def count(self) -> int:
        return len(self._draws)

    def clear(self) -> None:
        self._draws.clear()
