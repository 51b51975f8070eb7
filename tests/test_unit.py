import pickle

from linqgarden import UNIT, Unit


def test_all_units_are_equal():
    assert Unit() == UNIT
    assert hash(Unit()) == hash(UNIT)


def test_repr():
    assert repr(UNIT) == "UNIT"


def test_pickling():
    assert pickle.loads(pickle.dumps(UNIT)) == UNIT
