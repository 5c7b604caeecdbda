"""Time-indexed signals and ways to combine them."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


class Signal(ABC):
    """A value that varies with time t."""

    @abstractmethod
    def f(self, t: float) -> Any:
        """Value of the signal at time t."""


@dataclass(frozen=True)
class Sin(Signal):
    """sin(t)."""

    def f(self, t: float) -> float:
        return math.sin(t)


@dataclass(frozen=True)
class Const(Signal):
    """The same value at every time."""

    x: Any

    def f(self, t: float) -> Any:
        return self.x


@dataclass(frozen=True)
class ScaleTime(Signal):
    """The wrapped signal with time multiplied by s."""

    signal: Signal
    s: float

    def f(self, t: float) -> float:
        return self.signal.f(t * self.s)


@dataclass(frozen=True)
class Adder(Signal):
    """The sum of two signals."""

    a: Signal
    b: Signal

    def f(self, t: float) -> float:
        return self.a.f(t) + self.b.f(t)


@dataclass(frozen=True)
class PostCompose(Signal):
    """The wrapped signal's value passed through ff."""

    signal: Signal
    ff: Callable[[Any], Any]

    def f(self, t: float) -> Any:
        return self.ff(self.signal.f(t))


def add(a: Signal, b: Signal) -> Signal:
    return Adder(a, b)


def scale_range(a: float, b: float) -> Callable[[float], float]:
    """Map the range -1..1 linearly onto a..b."""

    def scale(x: float) -> float:
        return a + (b - a) * ((x + 1.0) / 2.0)

    return scale