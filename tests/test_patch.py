import pytest

from pedalrig.patch import Patch


class Doubler(Patch):
    def process_audio(self, input_block, output_block, knobs, playhead):
        output_block[: len(input_block)] = [2 * x for x in input_block]


class Finished(Doubler):
    def done(self):
        return True

    def passed(self):
        return False


def test_patch_is_abstract():
    with pytest.raises(TypeError):
        Patch()


def test_default_done_raises():
    with pytest.raises(TypeError):
        Patch.done(Doubler())


def test_default_passed_raises():
    with pytest.raises(TypeError):
        Patch.passed(Doubler())


def test_base_defaults_still_raise_for_overriding_subclass():
    finished = Finished()
    with pytest.raises(TypeError):
        Patch.done(finished)
    with pytest.raises(TypeError):
        Patch.passed(finished)