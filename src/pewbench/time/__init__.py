"""Time sources used by the clock and the logger."""

from .time import (
    cpu_time_ns as cpu_time_ns,
)
from .time import (
    datetime_now as datetime_now,
)
