"""Exception types raised by the benchmark harness."""


class PewError(Exception):
    """Base class for all harness errors."""


class ConfigurationError(PewError, ValueError):
    """A benchmark set or runner configuration cannot be run as given."""


class InvalidStateError(PewError, RuntimeError):
    """A Clock or State was driven through an illegal transition.

    Raised for pause-while-paused, resume-while-running, and stop/finish or
    get_input while paused. These indicate a benchmark misusing its State.
    """


class PatternError(PewError, ValueError):
    """A benchmark filter pattern failed to compile."""
