__all__ = ["LazyError", "Undefined", "WrappedFailure", "as_exception"]


class LazyError(Exception):
    """Base class of the errors created by lazyval itself."""


class Undefined(LazyError):
    """Raised when forcing a lazy value that holds neither a computation nor a result.

    This happens for a cell that was never initialised, or, when re-entrancy
    detection is on, for a cell forced from inside its own computation.
    Like any other failure, it is memoized by the cell that raised it.
    """


class WrappedFailure(LazyError):
    """A failure object that is not an exception, wrapped so it can be raised."""

    def __init__(self, payload):
        super().__init__(str(payload))
        self.payload = payload


def as_exception(obj) -> BaseException:
    """Normalize a failure into an exception instance.

    >>> e = ValueError("boom")
    >>> as_exception(e) is e
    True
    >>> as_exception(KeyError)
    KeyError()
    >>> as_exception("boom")
    WrappedFailure('boom')
    """
    if isinstance(obj, BaseException):
        return obj
    if isinstance(obj, type) and issubclass(obj, BaseException):
        return obj()
    return WrappedFailure(obj)
