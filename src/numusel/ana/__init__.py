"""Analysis scripts which turn spills into rows of text output."""

from .base import AnaBase
from .reporter import Reporter, MatchIndexError
