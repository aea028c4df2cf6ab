"""Module which defines all the data structures used in the package."""

from .particle import *
from .interaction import *
from .spill import *
