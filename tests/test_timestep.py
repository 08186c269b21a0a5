import pytest

from mapo.timestep import Timestep


def test_default_is_zero():
    assert Timestep().seconds == 0.0
    assert float(Timestep()) == 0.0


def test_seconds_and_float_agree():
    step = Timestep(1.25)
    assert step.seconds == 1.25
    assert float(step) == 1.25


def test_milliseconds():
    assert Timestep(2.0).milliseconds == pytest.approx(2000.0)


def test_milliseconds_scale_with_seconds():
    small = Timestep(0.016)
    large = Timestep(0.032)
    assert large.milliseconds == pytest.approx(2 * small.milliseconds)


def test_ordering_and_equality():
    assert Timestep(0.1) < Timestep(0.2)
    assert Timestep(0.3) == Timestep(0.3)


def test_is_immutable():
    step = Timestep(0.5)
    with pytest.raises(AttributeError):
        step.time = 1.0
    assert step.seconds == 0.5
    assert float(step) == 0.5