"""Variables computed on true and reconstructed objects.

Each variable is a function which takes a single particle or interaction
object and returns a number (or a string). Variables which rely on a leading
particle return NaN when the interaction does not contain the requested
particle species. Angles are expressed in radians, energies in MeV and
momenta in MeV/c.
"""

import numpy as np

from numusel.utils.globals import (
        ELEC_PID, MUON_PID, PROT_PID, PID_MASS_ADDENDS, CC_TYPE, NC_TYPE,
        NUMU_PDG, INTERACTION_MODE_CATS, NUMI_TARGET, INVAL_IDX)

from . import cuts

__all__ = [
        'count', 'id', 'category', 'category_topology',
        'category_interaction_mode', 'visible_energy', 'momentum',
        'polar_angle', 'azimuthal_angle', 'NuMI_angle',
        'leading_particle_index', 'leading_muon_ke', 'leading_muon_p',
        'leading_proton_ke', 'leading_proton_p', 'true_leading_proton_p',
        'electron_polar_angle', 'electron_azimuthal_angle',
        'electron_NuMI_angle', 'proton_polar_angle', 'proton_azimuthal_angle',
        'opening_angle', 'interaction_pt', 'phiT', 'alphaT',
        'electron_softmax', 'proton_softmax']


def count(obj):
    """Variable used to count objects.

    Parameters
    ----------
    obj : Union[ParticleBase, InteractionBase]
        Object to apply the variable on

    Returns
    -------
    float
        1.0 (always)
    """
    return 1.


def id(obj): # pylint: disable=redefined-builtin
    """Unique identifier of the object within its collection.

    Parameters
    ----------
    obj : Union[ParticleBase, InteractionBase]
        Object to apply the variable on

    Returns
    -------
    float
        ID of the object
    """
    return float(obj.id)


def category(interaction):
    """Basic categorization of the interaction.

    Uses only signal, neutrino background and cosmic background:
    - 0: 1muNp (contained and fiducial)
    - 1: 1muNp (not contained or fiducial)
    - 2: Other neutrino
    - 3: Cosmic

    Parameters
    ----------
    interaction : InteractionBase
        Interaction to apply the variable on

    Returns
    -------
    float
        Enumerated category of the interaction
    """
    if cuts.signal_1muNp(interaction):
        if cuts.fiducial_cut(interaction) and cuts.containment_cut(interaction):
            return 0.
        return 1.

    if cuts.other_nu_1muNp(interaction):
        return 2.

    return 3.


def category_topology(interaction):
    """Categorization of the interaction based on its visible final state.

    - 2: 1muNp, no pion (contained and fiducial)
    - 4: Other CC
    - 5: NC
    - 6: Cosmic (or unclassified)
    - 7: 1muNp, no pion (not contained or fiducial)

    Parameters
    ----------
    interaction : InteractionBase
        Interaction to apply the variable on

    Returns
    -------
    float
        Enumerated category of the interaction
    """
    if interaction.nu_id < 0:
        return 6.

    counts = cuts.count_primaries(interaction)
    is_cc = interaction.current_type == CC_TYPE
    if counts[0] == 0 and counts[1] == 0 and counts[2] == 1:
        num_pi, num_p = counts[3], counts[4]
        selected = interaction.is_contained and interaction.is_fiducial
        if num_pi == 0 and num_p > 0:
            return 2. if selected else 7.
        if num_pi == 0 and num_p == 0:
            return 4.
        if num_pi == 1 and num_p == 1:
            return 4.
        return 4. if is_cc else 6.

    if is_cc:
        return 4.
    if interaction.current_type == NC_TYPE:
        return 5.

    return 6.


def category_interaction_mode(interaction):
    """Categorization of the interaction based on the generator truth.

    - 0: nu_mu CC QE
    - 1: nu_mu CC Res
    - 2: nu_mu CC MEC
    - 3: nu_mu CC DIS
    - 4: nu_mu CC Coh
    - 5: nu_e CC
    - 6: NC
    - 7: Cosmic
    - 8: nu_mu CC with an unrecognized interaction mode

    Parameters
    ----------
    interaction : InteractionBase
        Interaction to apply the variable on

    Returns
    -------
    float
        Enumerated category of the interaction
    """
    if interaction.nu_id < 0:
        return 7.

    if interaction.current_type != CC_TYPE:
        return 6.

    if abs(interaction.pdg_code) != NUMU_PDG:
        return 5.

    return float(INTERACTION_MODE_CATS.get(interaction.interaction_mode, 8))


def visible_energy(interaction):
    """Total visible energy of the interaction.

    Sums the visible kinetic energy of all primary particles and adds the
    rest mass of muons and charged pions.

    Parameters
    ----------
    interaction : InteractionBase
        Interaction to apply the variable on

    Returns
    -------
    float
        Total visible energy of the interaction
    """
    energy = 0.
    for part in interaction.primary_particles:
        energy += part.visible_ke
        energy += PID_MASS_ADDENDS.get(part.pid, 0.)

    return energy


def momentum(particle):
    """Magnitude of the momentum of a particle.

    Parameters
    ----------
    particle : ParticleBase
        Particle to apply the variable on

    Returns
    -------
    float
        Norm of the momentum of the particle
    """
    return particle.p


def polar_angle(particle):
    """Polar angle of the particle w.r.t. the z axis.

    Parameters
    ----------
    particle : ParticleBase
        Particle to apply the variable on

    Returns
    -------
    float
        Polar angle of the particle
    """
    with np.errstate(invalid='ignore'):
        return float(np.arccos(particle.start_dir[2]))


def azimuthal_angle(particle):
    """Azimuthal angle of the particle w.r.t. the x axis.

    Parameters
    ----------
    particle : ParticleBase
        Particle to apply the variable on

    Returns
    -------
    float
        Azimuthal angle of the particle, in [0, pi]
    """
    dx, dy = particle.start_dir[:2]
    with np.errstate(invalid='ignore', divide='ignore'):
        return float(np.arccos(dx/np.sqrt(dx**2 + dy**2)))


def NuMI_angle(particle): # pylint: disable=invalid-name
    """Angle between the particle direction and the NuMI beam direction.

    The reference direction is the unit vector pointing from the start
    point of the particle towards the NuMI target. A start direction which
    is not a unit vector may yield NaN.

    Parameters
    ----------
    particle : ParticleBase
        Particle to apply the variable on

    Returns
    -------
    float
        Angle of the particle w.r.t. the NuMI beam
    """
    to_target = NUMI_TARGET - particle.start_point
    to_target = to_target/np.linalg.norm(to_target)
    with np.errstate(invalid='ignore'):
        return float(np.arccos(np.dot(to_target, particle.start_dir)))


def leading_particle_index(interaction, pid):
    """Finds the primary particle of a given species with the highest
    visible kinetic energy.

    Parameters
    ----------
    interaction : InteractionBase
        Interaction to search
    pid : int
        Particle species

    Returns
    -------
    int
        Index of the leading particle in the interaction particle list, -1
        if there is no primary particle of the requested species
    """
    index, max_ke = INVAL_IDX, -np.inf
    for i, part in enumerate(interaction.particles):
        if part.is_primary and part.pid == pid and part.visible_ke > max_ke:
            index, max_ke = i, part.visible_ke

    return index


def _leading_particle(interaction, pid):
    """Returns the leading particle of a given species, if any."""
    index = leading_particle_index(interaction, pid)
    if index == INVAL_IDX:
        return None

    return interaction.particles[index]


def _kinetic_energy(particle):
    """Initial kinetic energy for true particles, CSDA estimate otherwise."""
    return particle.ke_init if particle.is_truth else particle.csda_ke


def leading_muon_ke(interaction):
    """Kinetic energy of the leading muon.

    Parameters
    ----------
    interaction : InteractionBase
        Interaction to apply the variable on

    Returns
    -------
    float
        Kinetic energy of the leading muon
    """
    muon = _leading_particle(interaction, MUON_PID)
    return _kinetic_energy(muon) if muon is not None else np.nan


def leading_muon_p(interaction):
    """Momentum magnitude of the leading muon."""
    muon = _leading_particle(interaction, MUON_PID)
    return momentum(muon) if muon is not None else np.nan


def leading_proton_ke(interaction):
    """Kinetic energy of the leading proton."""
    proton = _leading_particle(interaction, PROT_PID)
    return _kinetic_energy(proton) if proton is not None else np.nan


def leading_proton_p(interaction):
    """Momentum magnitude of the leading proton.

    Parameters
    ----------
    interaction : InteractionBase
        Interaction to apply the variable on

    Returns
    -------
    float
        Momentum magnitude of the leading proton
    """
    proton = _leading_particle(interaction, PROT_PID)
    return momentum(proton) if proton is not None else np.nan


def true_leading_proton_p(interaction):
    """Generator-level momentum magnitude of the leading proton.

    The leading proton is picked from the interaction particle list and its
    momentum read from the parallel list of generator-level particles.

    Parameters
    ----------
    interaction : TruthInteraction
        Interaction to apply the variable on

    Returns
    -------
    float
        True momentum magnitude of the leading proton
    """
    index = leading_particle_index(interaction, PROT_PID)
    if index == INVAL_IDX or index >= len(interaction.truth_particles):
        return np.nan

    return momentum(interaction.truth_particles[index])


def electron_polar_angle(interaction):
    """Polar angle of the leading electron."""
    electron = _leading_particle(interaction, ELEC_PID)
    return polar_angle(electron) if electron is not None else np.nan


def electron_azimuthal_angle(interaction):
    """Azimuthal angle of the leading electron."""
    electron = _leading_particle(interaction, ELEC_PID)
    return azimuthal_angle(electron) if electron is not None else np.nan


def electron_NuMI_angle(interaction): # pylint: disable=invalid-name
    """Angle of the leading electron w.r.t. the NuMI beam."""
    electron = _leading_particle(interaction, ELEC_PID)
    return NuMI_angle(electron) if electron is not None else np.nan


def proton_polar_angle(interaction):
    """Polar angle of the leading proton."""
    proton = _leading_particle(interaction, PROT_PID)
    return polar_angle(proton) if proton is not None else np.nan


def proton_azimuthal_angle(interaction):
    """Azimuthal angle of the leading proton."""
    proton = _leading_particle(interaction, PROT_PID)
    return azimuthal_angle(proton) if proton is not None else np.nan


def opening_angle(interaction):
    """Opening angle between the leading electron and the leading proton.

    Parameters
    ----------
    interaction : InteractionBase
        Interaction to apply the variable on

    Returns
    -------
    float
        Opening angle between the two leading particles
    """
    electron = _leading_particle(interaction, ELEC_PID)
    proton = _leading_particle(interaction, PROT_PID)
    if electron is None or proton is None:
        return np.nan

    with np.errstate(invalid='ignore'):
        return float(np.arccos(np.dot(electron.start_dir, proton.start_dir)))


def interaction_pt(interaction):
    """Transverse momentum of the sum of the primary particle momenta.

    Parameters
    ----------
    interaction : InteractionBase
        Interaction to apply the variable on

    Returns
    -------
    float
        Transverse momentum of the interaction
    """
    pt = np.zeros(2)
    for part in interaction.primary_particles:
        pt += part.momentum[:2]

    return float(np.linalg.norm(pt))


def _transverse_angle(pt_a, pt_b):
    """Angle between the opposite of a first transverse momentum vector and
    a second one. Returns NaN if either vector is null.
    """
    with np.errstate(invalid='ignore', divide='ignore'):
        cos = -np.dot(pt_a, pt_b)/(np.linalg.norm(pt_a)*np.linalg.norm(pt_b))
        return float(np.arccos(cos))


def phiT(interaction): # pylint: disable=invalid-name
    """Transverse angle between the muon and the hadronic system.

    The lepton system is made of the final state signal muons, the hadronic
    system of the final state signal pions and protons.

    Parameters
    ----------
    interaction : InteractionBase
        Interaction to apply the variable on

    Returns
    -------
    float
        phi_T of the interaction (NaN if either system is empty)
    """
    lepton_pt, hadron_pt = np.zeros(2), np.zeros(2)
    for part in interaction.particles:
        if cuts.final_state_signal(part):
            if part.pid > MUON_PID:
                hadron_pt += part.momentum[:2]
            elif part.pid == MUON_PID:
                lepton_pt += part.momentum[:2]

    return _transverse_angle(hadron_pt, lepton_pt)


def alphaT(interaction): # pylint: disable=invalid-name
    """Transverse boosting angle of the interaction.

    Angle between the lepton system (photons, electrons and muons) transverse
    momentum and the total missing transverse momentum.

    Parameters
    ----------
    interaction : InteractionBase
        Interaction to apply the variable on

    Returns
    -------
    float
        alpha_T of the interaction (NaN if either system is empty)
    """
    lepton_pt, total_pt = np.zeros(2), np.zeros(2)
    for part in interaction.particles:
        if cuts.final_state_signal(part):
            if part.pid <= MUON_PID:
                lepton_pt += part.momentum[:2]
            total_pt += part.momentum[:2]

    return _transverse_angle(total_pt, lepton_pt)


def electron_softmax(interaction):
    """Electron softmax score of the leading electron.

    Parameters
    ----------
    interaction : RecoInteraction
        Interaction to apply the variable on

    Returns
    -------
    float
        Electron softmax score of the leading electron
    """
    electron = _leading_particle(interaction, ELEC_PID)
    return electron.pid_scores[ELEC_PID] if electron is not None else np.nan


def proton_softmax(interaction):
    """Proton softmax score of the leading proton.

    Parameters
    ----------
    interaction : RecoInteraction
        Interaction to apply the variable on

    Returns
    -------
    float
        Proton softmax score of the leading proton
    """
    proton = _leading_particle(interaction, PROT_PID)
    return proton.pid_scores[PROT_PID] if proton is not None else np.nan
