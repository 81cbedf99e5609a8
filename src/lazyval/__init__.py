"""
Deferred computations with memoized results.

Two interfaces share one implementation:
- `lazyval.fp`: free functions over an opaque lazy value (`lazy`, `force`, `map`, ...)
- `lazyval.oop`: the `Lazy` class with the same operations as methods
"""

from lazyval.errors import LazyError, Undefined, WrappedFailure
from lazyval.oop import Lazy
from lazyval.suspension import Suspension
from lazyval import fp

__version__ = "0.1.0"
