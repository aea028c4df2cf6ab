"""Module with data class objects which represent output particles."""

from dataclasses import dataclass

import numpy as np

from numusel.utils.globals import NUM_PID, PID_LABELS

from .base import DataBase

__all__ = ['RecoParticle', 'TruthParticle']


@dataclass(eq=False)
class ParticleBase(DataBase):
    """Base particle-specific information.

    Attributes
    ----------
    id : int
        Unique index of the particle within the particle list
    interaction_id : int
        Index of the interaction this particle belongs to
    pid : int
        Particle spcies (Photon (0), Electron (1), Muon (2), Charged Pion (3),
        Proton (4)) of this particle
    is_primary : bool
        Whether this particle was produced at the interaction vertex
    calo_ke : float
        Kinetic energy reconstructed from the energy depositions alone in MeV
    csda_ke : float
        Kinetic energy reconstructed from the particle range in MeV
    momentum : np.ndarray
        (3) 3-momentum of the particle at the production point in MeV/c
    start_point : np.ndarray
        (3) Particle start point
    start_dir : np.ndarray
        (3) Particle direction w.r.t. the start point
    match_ids : np.ndarray
        List of particle IDs in the opposite collection this particle
        is matched to
    is_truth : bool
        Whether this object contains truth information or not
    """
    id: int = -1
    interaction_id: int = -1
    pid: int = -1
    is_primary: bool = False
    calo_ke: float = -1.
    csda_ke: float = -1.
    momentum: np.ndarray = None
    start_point: np.ndarray = None
    start_dir: np.ndarray = None
    match_ids: np.ndarray = None
    is_truth: bool = None

    # Fixed-length attributes
    _fixed_length_attrs = {'momentum': 3, 'start_point': 3, 'start_dir': 3}

    # Variable-length attributes
    _var_length_attrs = {'match_ids': np.int64}

    # Attributes specifying coordinates
    _pos_attrs = ['start_point']

    # Attributes specifying vector components
    _vec_attrs = ['momentum', 'start_dir']

    # Boolean attributes
    _bool_attrs = ['is_primary', 'is_truth']

    def __str__(self):
        """Human-readable string representation of the particle object.

        Results
        -------
        str
            Basic information about the particle properties
        """
        pid_label = PID_LABELS.get(self.pid, PID_LABELS[-1])
        match = self.match_ids[0] if len(self.match_ids) > 0 else -1
        return (f"Particle(ID: {self.id:<3} | PID: {pid_label:<8} "
                f"| Primary: {self.is_primary:<2} "
                f"| KE: {self.visible_ke:<8.2f} | Match: {match:<3})")

    @property
    def is_matched(self):
        """Whether this particle was matched to an object in the opposite
        collection.

        Returns
        -------
        bool
            `True` if there is at least one match
        """
        return len(self.match_ids) > 0

    @property
    def p(self):
        """Computes the magnitude of the initial momentum.

        Returns
        -------
        float
            Norm of the initial momentum vector
        """
        return float(np.linalg.norm(self.momentum))

    @property
    def visible_ke(self):
        """Kinetic energy used to apply thresholds and sum visible energy.

        Returns
        -------
        float
            Visible kinetic energy in MeV
        """
        raise NotImplementedError


@dataclass(eq=False)
class RecoParticle(ParticleBase):
    """Reconstructed particle information.

    Attributes
    ----------
    pid_scores : np.ndarray
        (P) Array of softmax scores associated with each of particle class
    """
    pid_scores: np.ndarray = None
    is_truth: bool = False

    # Fixed-length attributes
    _fixed_length_attrs = {
            **ParticleBase._fixed_length_attrs, 'pid_scores': NUM_PID}

    def __str__(self):
        return 'Reco' + super().__str__()

    @property
    def visible_ke(self):
        """Calorimetric energy for EM showers, range-based energy for tracks.

        Returns
        -------
        float
            Visible kinetic energy in MeV
        """
        return self.calo_ke if self.pid < 2 else self.csda_ke


@dataclass(eq=False)
class TruthParticle(ParticleBase):
    """Truth particle information.

    Attributes
    ----------
    energy_deposit : float
        Total energy deposited in the active volume by the particle in MeV
    ke_init : float
        Initial kinetic energy of the particle in MeV
    """
    energy_deposit: float = -1.
    ke_init: float = -1.
    is_truth: bool = True

    def __str__(self):
        return 'Truth' + super().__str__()

    @property
    def visible_ke(self):
        """Energy deposited in the detector by the particle.

        Returns
        -------
        float
            Visible kinetic energy in MeV
        """
        return self.energy_deposit
