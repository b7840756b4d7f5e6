"""Micro-benchmarking harness with a pausable CPU-time clock."""

from .barrier import (
    clobber as clobber,
)
from .barrier import (
    do_not_optimize as do_not_optimize,
)
from .benchmark import (
    Benchmark as Benchmark,
)
from .benchmark import (
    pew_bench as pew_bench,
)
from .cli import (
    BenchmarkCLI as BenchmarkCLI,
)
from .cli import (
    main as main,
)
from .clock import (
    Clock as Clock,
)
from .config import (
    RunnerConfig as RunnerConfig,
)
from .config import (
    get_config as get_config,
)
from .config import (
    set_config as set_config,
)
from .errors import (
    ConfigurationError as ConfigurationError,
)
from .errors import (
    InvalidStateError as InvalidStateError,
)
from .errors import (
    PatternError as PatternError,
)
from .errors import (
    PewError as PewError,
)
from .filter import (
    BenchmarkFilter as BenchmarkFilter,
)
from .generator import (
    GeneratorChain as GeneratorChain,
)
from .generator import (
    compose as compose,
)
from .reporting import (
    CsvReporter as CsvReporter,
)
from .runner import (
    BenchmarkRunner as BenchmarkRunner,
)
from .state import (
    State as State,
)
from .stats import (
    Measurement as Measurement,
)

__all__ = [
    # Measurement engine
    "Clock",
    "State",
    "GeneratorChain",
    "compose",
    "Benchmark",
    "pew_bench",
    "BenchmarkRunner",
    "BenchmarkFilter",
    "Measurement",
    # Output and configuration
    "CsvReporter",
    "RunnerConfig",
    "get_config",
    "set_config",
    "BenchmarkCLI",
    "main",
    # Barriers
    "do_not_optimize",
    "clobber",
    # Errors
    "PewError",
    "ConfigurationError",
    "InvalidStateError",
    "PatternError",
]
