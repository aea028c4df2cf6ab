"""Selection cuts and variables applied to true and reconstructed objects.

Contains two function libraries:
- :mod:`cuts`: boolean selection cuts
- :mod:`variables`: scalar quantities derived from particles and interactions
"""

from . import cuts, variables
