"""Footswitch inputs and an on/off toggle driven by one of them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from pedalrig.spew import spew


class Switches(ABC):
    """A bank of momentary switches."""

    @abstractmethod
    def read(self, switch_id: int) -> bool:
        """Whether the switch is pressed right now."""

    @abstractmethod
    def process(self) -> None:
        """Refresh the switch readings."""

    def spew(self) -> None:
        spew("switches", self.read(0), self.read(1))


class DummySwitches(Switches):
    """Switches with fixed readings; by default none is ever pressed."""

    def __init__(self, pressed: Iterable[int] = ()) -> None:
        self._pressed = frozenset(pressed)
        self.polls = 0

    def read(self, switch_id: int) -> bool:
        return switch_id in self._pressed

    def process(self) -> None:
        self.polls += 1


class Toggle:
    """Flips its state each time the switch goes from released to pressed.

    The state starts out False.
    """

    def __init__(self, switches: Switches, switch_id: int) -> None:
        self.switches = switches
        self.switch_id = switch_id
        self._state = False
        self._last_pressed = False

    @property
    def state(self) -> bool:
        return self._state

    def process(self) -> None:
        self.switches.process()
        pressed = self.switches.read(self.switch_id)
        if pressed and not self._last_pressed:
            self._state = not self._state
        self._last_pressed = pressed

    def spew(self) -> None:
        self.switches.spew()
        spew("toggle", self.switch_id, self.state)