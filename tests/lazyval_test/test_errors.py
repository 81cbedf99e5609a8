import importlib

import pytest

from lazyval import constants
from lazyval.errors import LazyError, Undefined, WrappedFailure, as_exception


def test_as_exception_keeps_exception_instances():
    error = ValueError("boom")
    assert as_exception(error) is error


def test_as_exception_instantiates_exception_classes():
    assert isinstance(as_exception(KeyError), KeyError)


@pytest.mark.parametrize("payload", ["boom", 42, {"reason": "boom"}])
def test_as_exception_wraps_other_objects(payload):
    error = as_exception(payload)
    assert isinstance(error, WrappedFailure)
    assert error.payload is payload
    assert str(error) == str(payload)


def test_error_hierarchy():
    assert issubclass(Undefined, LazyError)
    assert issubclass(WrappedFailure, LazyError)


@pytest.mark.parametrize(
    "value, expected",
    [("0", False), ("off", False), ("False", False), ("1", True), ("yes", True)],
)
def test_detect_reentrancy_from_env(monkeypatch, value, expected):
    monkeypatch.setenv("LAZYVAL_DETECT_REENTRANCY", value)
    try:
        assert importlib.reload(constants).DETECT_REENTRANCY is expected
    finally:
        monkeypatch.delenv("LAZYVAL_DETECT_REENTRANCY")
        importlib.reload(constants)
