"""Sets up fixtures general to the entire test suite of this package.

This file is read during the collection phase of pytest when running anything
inside this directory.
"""

import os

import pytest

from numusel.data import (
        RecoParticle, TruthParticle, RecoInteraction, TruthInteraction, Spill)


@pytest.fixture(name="make_particle")
def fixture_make_particle():
    """Returns a function which builds a primary particle with a given visible
    kinetic energy, for either the truth or the reconstructed declination.
    """
    def make_particle(pid, ke, truth=False, **kwargs):
        kwargs.setdefault("is_primary", True)
        kwargs.setdefault("momentum", [0., 0., 1.])
        kwargs.setdefault("start_point", [0., 0., 0.])
        kwargs.setdefault("start_dir", [0., 0., 1.])
        if truth:
            return TruthParticle(pid=pid, energy_deposit=ke, **kwargs)

        if pid < 2:
            return RecoParticle(pid=pid, calo_ke=ke, **kwargs)

        return RecoParticle(pid=pid, csda_ke=ke, **kwargs)

    return make_particle


@pytest.fixture(name="make_interaction")
def fixture_make_interaction():
    """Returns a function which builds a neutrino interaction, fiducial,
    contained and in time with the NuMI beam unless specified otherwise.
    """
    def make_interaction(particles, truth=False, **kwargs):
        kwargs.setdefault("nu_id", 0)
        kwargs.setdefault("current_type", 0)
        kwargs.setdefault("pdg_code", 14)
        kwargs.setdefault("interaction_mode", 0)
        kwargs.setdefault("vertex", [0., 0., 0.])
        kwargs.setdefault("is_fiducial", True)
        kwargs.setdefault("is_contained", True)
        kwargs.setdefault("flash_time", 5.)
        kwargs.setdefault("is_flash_matched", True)
        cls = TruthInteraction if truth else RecoInteraction
        return cls(particles=particles, **kwargs)

    return make_interaction


@pytest.fixture(name="signal_truth")
def fixture_signal_truth(make_particle, make_interaction):
    """True 1mu1p interaction matched to the reconstructed interaction 0."""
    particles = [
        make_particle(2, 200., truth=True, id=0, momentum=[100., 0., 200.]),
        make_particle(4, 60., truth=True, id=1, momentum=[-50., 20., 300.])
    ]
    return make_interaction(particles, truth=True, id=0, match_ids=[0])


@pytest.fixture(name="signal_reco")
def fixture_signal_reco(make_particle, make_interaction):
    """Reconstructed 1mu1p interaction matched to the true interaction 0."""
    particles = [
        make_particle(2, 200., id=0, momentum=[100., 0., 200.]),
        make_particle(4, 60., id=1, momentum=[-50., 20., 300.])
    ]
    return make_interaction(particles, id=0, match_ids=[0])


@pytest.fixture(name="signal_spill")
def fixture_signal_spill(signal_truth, signal_reco):
    """Spill containing one matched true/reconstructed 1mu1p pair."""
    hdr = {
        "run": 1, "subrun": 2, "evt": 3, "source_name": "numi_mc.root",
        "triggerinfo": {"global_trigger_det_time": 1.5}
    }
    return Spill(hdr=hdr, dlp_true=[signal_truth], dlp=[signal_reco])


@pytest.fixture(name="output_path")
def fixture_output_path(tmp_path):
    """Create a dummy path for a text output file.

    Parameters
    ----------
    tmp_path : str
       Generic pytest fixture used to handle temporary test files
    """
    return os.path.join(tmp_path, "output_mc.log")


def read_rows(file_name):
    """Reads a comma-separated output file into a list of field lists."""
    with open(file_name, "r", encoding="utf-8") as f:
        return [line.rstrip("\n").split(",") for line in f]


@pytest.fixture(name="read_rows")
def fixture_read_rows():
    """Returns the row reader function."""
    return read_rows

