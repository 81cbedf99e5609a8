from typing import Callable, Generic, TypeVar

from lazyval import errors
from lazyval.suspension import engine
from lazyval.suspension.engine import Suspension

__all__ = ["Lazy"]

T = TypeVar("T")
U = TypeVar("U")


class Lazy(Generic[T]):
    """Object interface to deferred computations.

    ``Lazy(f)`` suspends the computation ``f``; ``.force()`` runs it once and
    memoizes the value or the exception. Each instance wraps one
    `lazyval.suspension.Suspension`, available as ``.suspension``, and every
    method delegates to the functions that operate on it.

    Forcing is not safe for concurrent use.
    """

    __slots__ = ("suspension",)

    Undefined = errors.Undefined

    def __init__(self, computation: Callable[[], T]):
        self.suspension: Suspension[T] = engine.from_fun(computation)

    @classmethod
    def wrap(cls, suspension: Suspension[T]) -> "Lazy[T]":
        x = cls.__new__(cls)
        x.suspension = suspension
        return x

    @classmethod
    def from_fun(cls, computation: Callable[[], T]) -> "Lazy[T]":
        return cls(computation)

    @classmethod
    def from_val(cls, v: T) -> "Lazy[T]":
        return cls.wrap(engine.from_val(v))

    @classmethod
    def from_error(cls, e) -> "Lazy":
        return cls.wrap(engine.from_error(e))

    def force(self) -> T:
        return engine.force(self.suspension)

    def map(self, f: Callable[[T], U]) -> "Lazy[U]":
        return self.wrap(engine.map(f, self.suspension))

    def map_val(self, f: Callable[[T], U]) -> "Lazy[U]":
        return self.wrap(engine.map_val(f, self.suspension))

    def is_val(self) -> bool:
        return engine.is_val(self.suspension)

    def __repr__(self):
        return f"Lazy({getattr(self.suspension, '_state', None)!r})"
