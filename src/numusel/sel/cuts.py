"""Selection cuts applied to true and reconstructed objects.

Each cut is a function which takes a single particle or interaction object
and returns a boolean. The same cut applies to both the truth and the
reconstructed declination of an object: the only difference between the two,
the energy estimator of a particle, is encapsulated in the
:attr:`visible_ke` property of the particle classes.
"""

import numpy as np

from numusel.utils.globals import (
        NUM_PID, PHOT_PID, ELEC_PID, MUON_PID, PION_PID, PROT_PID, PID_TAGS,
        MUON_KE_THRESHOLD, PROT_KE_THRESHOLD, OTHER_KE_THRESHOLD,
        DEAD_REGION_X_MIN, DEAD_REGION_Y_MIN, DEAD_REGION_Z_RANGE,
        BNB_FLASH_WINDOW, NUMI_FLASH_WINDOW)

__all__ = [
        'no_cut', 'matched', 'valid_flashmatch', 'final_state_signal',
        'count_primaries', 'topology', 'topological_1muNp_cut',
        'fiducial_cut', 'containment_cut', 'flash_cut_bnb', 'flash_cut_numi',
        'all_1muNp_cut', 'all_1muNp_cut_bnb', 'neutrino', 'cosmic',
        'matched_neutrino', 'matched_cosmic', 'signal_1muNp', 'other_nu_1muNp']

# Kinetic energy threshold of each species counted in the final state
KE_THRESHOLDS = {
    PHOT_PID: OTHER_KE_THRESHOLD,
    ELEC_PID: OTHER_KE_THRESHOLD,
    MUON_PID: MUON_KE_THRESHOLD,
    PION_PID: OTHER_KE_THRESHOLD,
    PROT_PID: PROT_KE_THRESHOLD
}

# Primary counts which define the 1muNp topology (-1: any number >= 1)
SIGNAL_1MUNP_COUNTS = (0, 0, 1, 0, -1)


def no_cut(obj):
    """Dummy cut which accepts every object.

    Parameters
    ----------
    obj : Union[ParticleBase, InteractionBase]
        Object to select on

    Returns
    -------
    bool
        Always `True`
    """
    return True


def matched(obj):
    """Checks that a match exists.

    Parameters
    ----------
    obj : Union[ParticleBase, InteractionBase]
        Object to select on

    Returns
    -------
    bool
        `True` if the object is matched
    """
    return len(obj.match_ids) > 0


def valid_flashmatch(interaction):
    """Checks the validity of the flash match.

    Parameters
    ----------
    interaction : InteractionBase
        Interaction to select on

    Returns
    -------
    bool
        `True` if the interaction is flash matched and the time is valid
    """
    return (bool(np.isfinite(interaction.flash_time))
            and bool(interaction.is_flash_matched))


def final_state_signal(particle):
    """Checks if the particle meets the final state signal requirements.

    Particles must be primary and have a kinetic energy above threshold.
    Muons must have a length of at least 50 cm (143.425 MeV), protons
    must have an energy above 50 MeV, and all other particles must have
    an energy above 25 MeV.

    Parameters
    ----------
    particle : ParticleBase
        Particle to check

    Returns
    -------
    bool
        `True` if the particle is a final state signal particle
    """
    if not particle.is_primary or particle.pid not in KE_THRESHOLDS:
        return False

    return particle.visible_ke > KE_THRESHOLDS[particle.pid]


def count_primaries(interaction):
    """Counts the final state signal primaries of each species.

    Parameters
    ----------
    interaction : InteractionBase
        Interaction to count the primaries of

    Returns
    -------
    np.ndarray
        (5) Number of primaries of each particle species
    """
    counts = np.zeros(NUM_PID, dtype=np.int64)
    for part in interaction.particles:
        if final_state_signal(part):
            counts[part.pid] += 1

    return counts


def topology(interaction):
    """Formats the primary counts of an interaction as a string.

    Parameters
    ----------
    interaction : InteractionBase
        Interaction to find the topology of

    Returns
    -------
    str
        Topology of the interaction (e.g. 0ph0e1mu0pi1p)
    """
    counts = count_primaries(interaction)
    return ''.join(f'{counts[pid]}{tag}' for pid, tag in PID_TAGS.items())


def topological_1muNp_cut(interaction):
    """Applies the 1muNp topology selection.

    The interaction must contain exactly one muon, at least one proton and
    nothing else. Any count beyond the five tracked species must be zero.

    Parameters
    ----------
    interaction : InteractionBase
        Interaction to select on

    Returns
    -------
    bool
        `True` if the interaction has a 1muNp topology
    """
    counts = count_primaries(interaction)
    for pid, required in enumerate(SIGNAL_1MUNP_COUNTS):
        if required < 0 and counts[pid] < 1:
            return False
        if required > -1 and counts[pid] != required:
            return False

    return not np.any(counts[len(SIGNAL_1MUNP_COUNTS):])


def fiducial_cut(interaction):
    """Applies the fiducial volume cut.

    The interaction vertex must be flagged as fiducial and must not sit in
    the region of the detector excluded at the downstream end of the
    high-x, high-y corner.

    Parameters
    ----------
    interaction : InteractionBase
        Interaction to select on

    Returns
    -------
    bool
        `True` if the vertex is in the fiducial volume
    """
    x, y, z = interaction.vertex
    z_min, z_max = DEAD_REGION_Z_RANGE
    in_dead_region = (x > DEAD_REGION_X_MIN and y > DEAD_REGION_Y_MIN
                      and z_min < z < z_max)

    return bool(interaction.is_fiducial) and not in_dead_region


def containment_cut(interaction):
    """Applies the containment cut.

    Parameters
    ----------
    interaction : InteractionBase
        Interaction to select on

    Returns
    -------
    bool
        `True` if the interaction is contained
    """
    return bool(interaction.is_contained)


def _flash_cut(interaction, window):
    """Checks that the interaction is matched to a flash within a window."""
    if not valid_flashmatch(interaction):
        return False

    t_min, t_max = window
    return t_min <= interaction.flash_time <= t_max


def flash_cut_bnb(interaction):
    """Applies the in-time flash cut valid for BNB simulation.

    Parameters
    ----------
    interaction : InteractionBase
        Interaction to select on

    Returns
    -------
    bool
        `True` if the interaction was matched to an in-time flash
    """
    return _flash_cut(interaction, BNB_FLASH_WINDOW)


def flash_cut_numi(interaction):
    """Applies the in-time flash cut valid for NuMI simulation.

    Parameters
    ----------
    interaction : InteractionBase
        Interaction to select on

    Returns
    -------
    bool
        `True` if the interaction was matched to an in-time flash
    """
    return _flash_cut(interaction, NUMI_FLASH_WINDOW)


def all_1muNp_cut(interaction):
    """Applies the full 1muNp selection (NuMI flash window).

    Logical AND of the topological, fiducial, containment and flash cuts.

    Parameters
    ----------
    interaction : InteractionBase
        Interaction to select on

    Returns
    -------
    bool
        `True` if the interaction passes all the cuts
    """
    return (topological_1muNp_cut(interaction)
            and fiducial_cut(interaction)
            and containment_cut(interaction)
            and flash_cut_numi(interaction))


def all_1muNp_cut_bnb(interaction):
    """Applies the full 1muNp selection with the BNB flash window."""
    return (topological_1muNp_cut(interaction)
            and fiducial_cut(interaction)
            and containment_cut(interaction)
            and flash_cut_bnb(interaction))


def neutrino(interaction):
    """True neutrino interaction classification."""
    return interaction.nu_id > -1


def cosmic(interaction):
    """True cosmic interaction classification."""
    return interaction.nu_id == -1


def matched_neutrino(interaction):
    """Matched neutrino interaction classification."""
    return matched(interaction) and neutrino(interaction)


def matched_cosmic(interaction):
    """Matched cosmic interaction classification."""
    return matched(interaction) and cosmic(interaction)


def signal_1muNp(interaction):
    """True 1muNp neutrino interaction classification.

    Parameters
    ----------
    interaction : InteractionBase
        Interaction to select on

    Returns
    -------
    bool
        `True` if the interaction is a 1muNp neutrino interaction
    """
    return topological_1muNp_cut(interaction) and neutrino(interaction)


def other_nu_1muNp(interaction):
    """Non-1muNp neutrino interaction classification."""
    return not topological_1muNp_cut(interaction) and neutrino(interaction)
