"""Bootstrapped skewness and period of noisy, roughly periodic shapes."""
from .stats import *
from .phase import *
from .extrema import *
from .bootstrap import *

__version__ = "0.1.0"
