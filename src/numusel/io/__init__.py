"""Input/output modules."""

from .write import *
