"""Writers used to store the output of the analysis."""

from .csv import *
