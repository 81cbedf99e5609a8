import types

import pytest

from lazyval import fp
from lazyval.oop import Lazy


class EventLog:
    """Records side effects in the order they happen."""

    def __init__(self):
        self.events = []

    def __call__(self, event):
        self.events.append(event)

    def show(self, value):
        return [*self.events, value]


@pytest.fixture
def log():
    return EventLog()


# the same operations, once per interface, so every property runs against both
FP_API = types.SimpleNamespace(
    name="fp",
    lazy=fp.lazy,
    from_val=fp.from_val,
    from_error=fp.from_error,
    force=fp.force,
    map=fp.map,
    map_val=fp.map_val,
    is_val=fp.is_val,
)

OOP_API = types.SimpleNamespace(
    name="oop",
    lazy=Lazy,
    from_val=Lazy.from_val,
    from_error=Lazy.from_error,
    force=lambda x: x.force(),
    map=lambda f, x: x.map(f),
    map_val=lambda f, x: x.map_val(f),
    is_val=lambda x: x.is_val(),
)


@pytest.fixture(params=[FP_API, OOP_API], ids=lambda api: api.name)
def api(request):
    return request.param
