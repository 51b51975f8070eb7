import pickle

import pytest

from linqgarden import NoneValueError
from linqgarden.maybe import Maybe


def make_error() -> NoneValueError:
    try:
        Maybe.some(None)
    except NoneValueError as error:
        return error
    pytest.fail("NoneValueError was not raised")


def test_none_value_error_pickling():
    error = make_error()

    loaded = pickle.loads(pickle.dumps(error))

    assert isinstance(loaded, NoneValueError)
    assert loaded.args == error.args
    assert loaded.__traceback__ is not None
