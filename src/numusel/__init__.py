"""Top-level module of the numusel source code."""

# Import main workflow entry point
from .driver import Driver
from .version import __version__

# Import commonly used data structures and analysis scripts
from .ana import Reporter
from .data import (RecoParticle, TruthParticle, RecoInteraction,
                   TruthInteraction, Spill)
