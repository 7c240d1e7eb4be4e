# gp1d/__init__.py

from . import config
from . import num
from . import core
from . import kernel
from .core import Model, predict, regress, DimensionError, NotPositiveDefiniteError
from .kernel import optimize

__all__ = [
    "num",
    "kernel",
    "Model",
    "predict",
    "regress",
    "optimize",
    "DimensionError",
    "NotPositiveDefiniteError",
    "__version__",
]

__version__ = config.__version__
