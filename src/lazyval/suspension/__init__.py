from lazyval.suspension.state import Done, Failed, Pending, State
from lazyval.suspension.engine import (
    Suspension,
    advance,
    force,
    from_error,
    from_fun,
    from_val,
    is_val,
    map,
    map_val,
)
