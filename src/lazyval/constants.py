import os

# A cell being forced is marked so that forcing it again from inside its own
# computation raises `Undefined` instead of re-running the computation.
# override from env, e.g. LAZYVAL_DETECT_REENTRANCY=0
DETECT_REENTRANCY = True
if os.environ.get("LAZYVAL_DETECT_REENTRANCY", "1").strip().lower() in (
    "0",
    "false",
    "no",
    "off",
):
    DETECT_REENTRANCY = False

UNDEFINED_MESSAGE = "expected a computation or a result, but the lazy value holds neither"
REENTRANT_MESSAGE = (
    "lazy value was forced concurrently or from inside its own computation"
)
