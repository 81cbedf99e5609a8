"""
Functional interface to deferred computations.

A lazy value is an opaque cell, built with `lazy` and used through the free
functions of this module:

    x = lazy(lambda: expensive())
    y = map_val(lambda v: v + 1, x)
    force(y)

Forcing is not safe for concurrent use; see `lazyval.suspension.Suspension`.
"""
from typing import Callable, TypeVar

from lazyval.errors import Undefined
from lazyval.suspension import engine
from lazyval.suspension.engine import Suspension

__all__ = [
    "LazyValue",
    "Undefined",
    "lazy",
    "from_fun",
    "from_val",
    "from_error",
    "force",
    "map",
    "map_val",
    "is_val",
]

T = TypeVar("T")
U = TypeVar("U")

LazyValue = Suspension


def lazy(f: Callable[[], T]) -> LazyValue[T]:
    """Suspends the computation `f` without running it."""
    return engine.from_fun(f)


def from_fun(f: Callable[[], T]) -> LazyValue[T]:
    return engine.from_fun(f)


def from_val(v: T) -> LazyValue[T]:
    """Returns an already-forced lazy value of `v`.

    It behaves as ``lazy(lambda: v)`` after being forced once.
    """
    return engine.from_val(v)


def from_error(e) -> LazyValue:
    return engine.from_error(e)


def force(x: LazyValue[T]) -> T:
    return engine.force(x)


def map(f: Callable[[T], U], x: LazyValue[T]) -> LazyValue[U]:  # noqa: A001
    return engine.map(f, x)


def map_val(f: Callable[[T], U], x: LazyValue[T]) -> LazyValue[U]:
    return engine.map_val(f, x)


def is_val(x: LazyValue) -> bool:
    return engine.is_val(x)
