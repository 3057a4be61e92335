import importlib

from .core.enums import Notation, NonFiniteToken
from .core.types import FitResult, PrecisionSpec
from .fit import fit_precision
from .formatters import build_formatter, format_sequence, formatter
from .precision import analyze, order_of_magnitude
from .template import FormatTemplate

_lazy_submodules = [
    "log_config",
    "frame",
    "utils",
]

def __getattr__(name):
    if name in _lazy_submodules:
        # Lazy load the submodule
        return importlib.import_module(f".{name}", __package__)
    raise AttributeError(f"Module '{__name__}' has no attribute '{name}'")

def __dir__():
    return list(globals().keys()) + _lazy_submodules


__version__ = "0.1.0"
