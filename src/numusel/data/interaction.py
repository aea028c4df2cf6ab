"""Module with data class objects which represent output interactions."""

from dataclasses import dataclass
from typing import List

import numpy as np

from .base import DataBase
from .particle import RecoParticle, TruthParticle

__all__ = ['RecoInteraction', 'TruthInteraction']


@dataclass(eq=False)
class InteractionBase(DataBase):
    """Base interaction-specific information.

    Attributes
    ----------
    id : int
        Unique index of the interaction within the interaction list
    nu_id : int
        Index of the simulated neutrino this interaction is matched to,
        -1 if it is a cosmic
    current_type : int
        Neutrino current type (CC (0), NC (1))
    pdg_code : int
        PDG code of the incident neutrino
    interaction_mode : int
        Generator-level interaction process category
    vertex : np.ndarray
        (3) Coordinates of the interaction vertex
    is_fiducial : bool
        Whether this interaction vertex is inside the fiducial volume
    is_contained : bool
        Whether this interaction is fully contained within the detector
    flash_time : float
        Time of the optical flash matched to the interaction in microseconds
    is_flash_matched : bool
        True if the interaction was matched to an optical flash
    match_ids : np.ndarray
        List of interaction IDs in the opposite collection this interaction
        is matched to, best match first
    particles : List[object]
        List of particles that make up the interaction
    is_truth : bool
        Whether this object contains truth information or not
    """
    id: int = -1
    nu_id: int = -1
    current_type: int = -1
    pdg_code: int = 0
    interaction_mode: int = -1
    vertex: np.ndarray = None
    is_fiducial: bool = False
    is_contained: bool = False
    flash_time: float = np.nan
    is_flash_matched: bool = False
    match_ids: np.ndarray = None
    particles: List[object] = None
    is_truth: bool = None

    # Particle class used to build the particle list from dictionaries
    _particle_cls = None

    # Fixed-length attributes
    _fixed_length_attrs = {'vertex': 3}

    # Variable-length attributes
    _var_length_attrs = {'match_ids': np.int64}

    # Attributes specifying coordinates
    _pos_attrs = ['vertex']

    # Boolean attributes
    _bool_attrs = [
            'is_fiducial', 'is_contained', 'is_flash_matched', 'is_truth']

    # Attributes that must never be flattened
    _skip_attrs = ['particles']

    def __post_init__(self):
        """Provides a fresh particle list and casts nested dictionaries."""
        super().__post_init__()
        if self.particles is None:
            self.particles = []
        else:
            self.particles = self._build_particles(self.particles)

    def __str__(self):
        """Human-readable string representation of the interaction object.

        Results
        -------
        str
            Basic information about the interaction properties
        """
        match = self.match_ids[0] if len(self.match_ids) > 0 else -1
        info = (f"Interaction(ID: {self.id:<3} | Neutrino: {self.nu_id:<3} "
                f"| Particles: {len(self.particles):<3} | Match: {match:<3})")
        if len(self.particles):
            info += '\n' + len(info) * '-'
            for particle in self.particles:
                info += '\n' + str(particle)

        return info

    def _build_particles(self, particles):
        """Casts particle dictionaries to the appropriate particle class.

        Parameters
        ----------
        particles : List[Union[dict, ParticleBase]]
            List of particles or particle dictionaries

        Returns
        -------
        List[ParticleBase]
            List of particle objects
        """
        return [self._particle_cls.from_dict(p) if isinstance(p, dict) else p
                for p in particles]

    @property
    def is_matched(self):
        """Whether this interaction was matched to an interaction in the
        opposite collection.

        Returns
        -------
        bool
            `True` if there is at least one match
        """
        return len(self.match_ids) > 0

    @property
    def primary_particles(self):
        """List of primary particles associated with this interaction.

        Returns
        -------
        List[object]
            List of primary particle objects
        """
        return [part for part in self.particles if part.is_primary]


@dataclass(eq=False)
class RecoInteraction(InteractionBase):
    """Reconstructed interaction information."""
    is_truth: bool = False

    _particle_cls = RecoParticle

    def __str__(self):
        return 'Reco' + super().__str__()


@dataclass(eq=False)
class TruthInteraction(InteractionBase):
    """Truth interaction information.

    Attributes
    ----------
    truth_particles : List[object]
        List of generator-level particles, parallel to `particles`
    momentum : np.ndarray
        (3) Momentum of the incident neutrino in MeV/c
    """
    truth_particles: List[object] = None
    momentum: np.ndarray = None
    is_truth: bool = True

    _particle_cls = TruthParticle

    # Fixed-length attributes
    _fixed_length_attrs = {**InteractionBase._fixed_length_attrs, 'momentum': 3}

    # Attributes specifying vector components
    _vec_attrs = ['momentum']

    # Attributes that must never be flattened
    _skip_attrs = [*InteractionBase._skip_attrs, 'truth_particles']

    def __post_init__(self):
        """Provides a fresh truth particle list."""
        super().__post_init__()
        if self.truth_particles is None:
            self.truth_particles = []
        else:
            self.truth_particles = self._build_particles(self.truth_particles)

    def __str__(self):
        return 'Truth' + super().__str__()
