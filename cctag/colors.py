"""RGBA colours and a few named ones."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Iterator


@dataclass(frozen=True)
class Color:
    """An RGBA colour with float components."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    alpha: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))

    def __getitem__(self, index: int) -> float:
        return astuple(self)[index]

    def __len__(self) -> int:
        return 4


COLOR_WHITE = Color(1.0, 1.0, 1.0, 1.0)
COLOR_RED = Color(1.0, 0.0, 0.0, 1.0)
COLOR_GREEN = Color(0.0, 1.0, 0.0, 1.0)
COLOR_BLUE = Color(0.0, 0.0, 1.0, 1.0)