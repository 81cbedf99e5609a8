import dataclasses
import types
from typing import Callable, Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class Pending(Generic[T]):
    computation: Callable[[], T]


@dataclasses.dataclass(frozen=True)
class Done(Generic[T]):
    value: T


@dataclasses.dataclass(frozen=True)
class Failed:
    error: BaseException
    # the traceback of the original failure, restored on every re-raise
    traceback: Optional[types.TracebackType] = dataclasses.field(
        default=None, repr=False, compare=False
    )

    def reraise(self):
        raise self.error.with_traceback(self.traceback)


class Forcing:
    """Marks a cell whose computation is currently running.

    It is not one of the states a caller may observe: forcing a cell in this
    state is treated like forcing an uninitialised cell.
    """

    def __repr__(self):
        return "Forcing()"


FORCING = Forcing()

State = Union[Pending[T], Done[T], Failed]
