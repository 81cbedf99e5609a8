import logging
import traceback
from typing import Callable, Generic, TypeVar

from lazyval import constants
from lazyval.errors import Undefined, as_exception
from lazyval.suspension.state import FORCING, Done, Failed, Pending, State

__all__ = [
    "Suspension",
    "advance",
    "force",
    "map",
    "map_val",
    "is_val",
    "from_val",
    "from_fun",
    "from_error",
]

T = TypeVar("T")
U = TypeVar("U")


class Suspension(Generic[T]):
    """A deferred computation with a result of type T.

    ``Suspension(f)`` suspends the zero-argument computation ``f`` without
    running it. Forcing the suspension runs ``f`` once and memoizes what it
    returned or raised; every later force gives back that same outcome.

    Note: forcing is not safe for concurrent use. Concurrent forcing of one
    suspension from several threads will not corrupt it, but which outcome is
    recorded is unspecified; add a lock around `force` if you need that.
    """

    __slots__ = ("_state",)

    def __init__(self, computation: Callable[[], T]):
        self._state: State = Pending(computation)

    @classmethod
    def _of_state(cls, state: State) -> "Suspension":
        x = cls.__new__(cls)
        x._state = state
        return x

    def __repr__(self):
        return f"{type(self).__name__}({getattr(self, '_state', None)!r})"


def advance(x: Suspension[T], pending: Pending[T]) -> State:
    """Run the computation of a pending suspension and record its outcome.

    The outcome is stored only if the suspension still holds the state it had
    when the computation started; otherwise an outcome recorded meanwhile by a
    nested force wins. Returns the state recorded in the suspension.

    Once the computation has run, neither this frame nor a stored traceback
    refers to it: the traceback of a failure keeps its line information, but
    the locals of its frames are cleared.
    """
    computation = pending.computation
    x._state = FORCING if constants.DETECT_REENTRANCY else pending
    try:
        outcome = Done(computation())
    except Exception as e:
        # the first traceback entry is this frame
        tb = e.__traceback__.tb_next
        traceback.clear_frames(tb)
        outcome = Failed(as_exception(e).with_traceback(tb), tb)
    except BaseException:
        # interrupted, not failed: the computation can be run again
        if x._state is FORCING:
            x._state = pending
        raise
    owned = x._state is FORCING or x._state is pending
    # a failure's traceback reaches this frame through f_back
    computation = pending = None
    if owned:
        x._state = outcome
        logging.debug(f"Suspension {id(x):#x} evaluated to {type(outcome).__name__}")
    return x._state


def _undefined(x: Suspension, message: str) -> Failed:
    state = Failed(Undefined(message))
    logging.warning(f"Suspension {id(x):#x} is undefined: {message}")
    x._state = state
    return state


def force(x: Suspension[T]) -> T:
    """Forces the suspension and returns its result.

    If the suspension was already forced, the same value is returned again
    without recomputing it. If its computation raised, the same exception
    object is raised again.
    """
    if not isinstance(x, Suspension):
        raise TypeError(f"expected a Suspension, got {type(x).__name__}")
    state = getattr(x, "_state", None)
    if isinstance(state, Done):
        return state.value
    if isinstance(state, Pending):
        state = advance(x, state)
    elif state is FORCING:
        state = _undefined(x, constants.REENTRANT_MESSAGE)
    elif not isinstance(state, Failed):
        state = _undefined(x, constants.UNDEFINED_MESSAGE)

    if isinstance(state, Failed):
        state.reraise()
    return state.value


def map(f: Callable[[T], U], x: Suspension[T]) -> Suspension[U]:  # noqa: A001
    """Returns a suspension that, when forced, forces `x` and applies `f` to its value.

    It is equivalent to ``Suspension(lambda: f(force(x)))``.
    """
    return Suspension(lambda: f(force(x)))


def is_val(x: Suspension) -> bool:
    """Returns True if the suspension has already been forced and did not raise."""
    return isinstance(getattr(x, "_state", None), Done)


def from_val(v: T) -> Suspension[T]:
    """Returns an already-forced suspension of `v`. No code is run."""
    return Suspension._of_state(Done(v))


def from_fun(f: Callable[[], T]) -> Suspension[T]:
    return Suspension(f)


def from_error(e) -> Suspension:
    """Returns a suspension that has already failed with `e`.

    `e` is normalized with `as_exception`, so any object may be given.
    """
    error = as_exception(e)
    return Suspension._of_state(Failed(error, error.__traceback__))


def map_val(f: Callable[[T], U], x: Suspension[T]) -> Suspension[U]:
    """Applies `f` directly if `x` is already forced, otherwise behaves as `map(f, x)`.

    When `x` is already forced, this saves the construction of a suspension,
    but performs work eagerly that may be wasted if the result is never forced.

    If `f` raises, the exception propagates out of `map_val` itself when
    ``is_val(x)``; otherwise it is raised only when forcing the result.
    A suspension that failed is not ``is_val``, so `f` is never applied to it.

    If ``map_val(f, x)`` does not raise, then ``is_val(map_val(f, x))`` equals
    ``is_val(x)``.
    """
    state = getattr(x, "_state", None)
    if isinstance(state, Done):
        return from_val(f(state.value))
    return map(f, x)
