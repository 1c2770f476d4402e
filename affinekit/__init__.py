# flake8: noqa:F401
from .core import *
from .core import __all__
