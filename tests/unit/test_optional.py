"""Unit tests for the tri-state field helpers."""
import pickle

import pytest

from core.optional import UNSET, Present, from_key, is_set, set_if, value_or


def test_unset_is_a_falsy_singleton():
    assert not UNSET
    assert repr(UNSET) == "UNSET"
    assert type(UNSET)() is UNSET
    assert pickle.loads(pickle.dumps(UNSET)) is UNSET


def test_present_keeps_falsy_values_set():
    for value in (0, "", False, []):
        opt = Present(value)
        assert is_set(opt)
        assert value_or(opt, "default") == value


def test_set_if():
    assert set_if(True, 3) == Present(3)
    assert set_if(False, 3) is UNSET


def test_value_or_falls_back_only_when_unset():
    assert value_or(UNSET, 0.0) == 0.0
    assert value_or(Present(0.5), 0.0) == 0.5


def test_from_key_missing_and_null_are_unset():
    assert from_key({}, "author") is UNSET
    assert from_key({"author": None}, "author") is UNSET
    assert from_key({"author": ""}, "author") == Present("")


def test_from_key_converter_errors_propagate():
    def as_float(value):
        if not isinstance(value, float):
            raise TypeError("expected number")
        return value

    assert from_key({"score": 0.25}, "score", as_float) == Present(0.25)
    with pytest.raises(TypeError):
        from_key({"score": "high"}, "score", as_float)
