import pytest

from pedalrig.switch import DummySwitches, Switches, Toggle


class ScriptedSwitches(Switches):
    def __init__(self, presses):
        self._presses = iter(presses)
        self._current = False
        self.process_calls = 0
        self.read_ids = []

    def process(self):
        self.process_calls += 1
        self._current = next(self._presses)

    def read(self, switch_id):
        self.read_ids.append(switch_id)
        return self._current


def test_switches_is_abstract():
    with pytest.raises(TypeError):
        Switches()


def test_dummy_never_pressed():
    switches = DummySwitches()
    switches.process()
    assert switches.read(0) is False
    assert switches.read(1) is False


def test_toggle_starts_false_and_stays_with_dummy():
    toggle = Toggle(DummySwitches(), 0)
    assert toggle.state is False
    for _ in range(5):
        toggle.process()
    assert toggle.state is False


def test_toggle_flips_on_rising_edge_only():
    switches = ScriptedSwitches([True, True, False, True, False, False])
    toggle = Toggle(switches, 1)
    states = []
    for _ in range(6):
        toggle.process()
        states.append(toggle.state)
    assert states == [True, True, True, False, False, False]
    assert switches.process_calls == 6
    assert set(switches.read_ids) == {1}


def test_toggle_spew(capsys):
    Toggle(DummySwitches(), 0).spew()
    assert capsys.readouterr().out == "switches false false \ntoggle 0 false \n"