from time import (
    process_time_ns as _process_time_ns,
    strftime,
    time_ns as time_nano,
)


def cpu_time_ns() -> int:
    """
    Get the CPU time consumed by the current process, in nanoseconds.

    Backed by the per-process CPU clock (CLOCK_PROCESS_CPUTIME_ID on POSIX),
    so it does not advance while the process is descheduled and is not
    affected by system clock adjustments.

    Returns
    -------
    int
        Process CPU time in nanoseconds.
    """
    return _process_time_ns()


def datetime_now() -> str:
    """
    Get the current time in the format 'YYYY-MM-DD HH:MM:SS.mmm'.

    Returns
    -------
    str
        The current time string.
    """
    return strftime("%Y-%m-%d %H:%M:%S") + f".{(time_nano() // 1_000_000) % 1000:03d}"
