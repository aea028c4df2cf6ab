"""Test that the spill, interaction and particle records build properly."""

import numpy as np
import pytest

from numusel.data import (
        Header, RecoInteraction, RecoParticle, Spill, TriggerInfo,
        TruthInteraction, TruthParticle)


class TestParticles:
    """Test the particle data classes."""

    def test_defaults(self):
        """Test that the default array attributes are not shared."""
        a, b = RecoParticle(), RecoParticle()
        assert a.momentum is not b.momentum
        assert len(a.momentum) == 3 and np.all(np.isinf(a.momentum))
        assert len(a.pid_scores) == 5
        assert len(a.match_ids) == 0 and a.match_ids.dtype == np.int64
        assert not a.is_truth and TruthParticle().is_truth

    def test_casting(self):
        """Test that lists and integer flags are cast."""
        part = TruthParticle(
                momentum=[1, 2, 2], match_ids=[4], is_primary=1)
        assert isinstance(part.momentum, np.ndarray)
        assert part.momentum.dtype == np.float64
        assert part.is_primary is True
        assert part.p == pytest.approx(3.)
        assert part.is_matched

    def test_wrong_length(self):
        """Test that a fixed-length attribute of the wrong size is refused."""
        with pytest.raises(AssertionError):
            RecoParticle(start_dir=[0., 1.])

    def test_scalar_dict(self):
        """Test the flattening of the particle attributes."""
        part = RecoParticle(id=2, pid=4, start_point=[1., 2., 3.])
        attrs = part.scalar_dict(['id', 'pid', 'start_point'])
        assert attrs == {
                'id': 2, 'pid': 4, 'start_point_x': 1., 'start_point_y': 2.,
                'start_point_z': 3.}

        with pytest.raises(AttributeError):
            part.scalar_dict(['not_an_attribute'])

    def test_str(self):
        """Test the string representation of particles."""
        assert str(RecoParticle(pid=2, csda_ke=10.)).startswith('RecoParticle')
        assert 'Muon' in str(TruthParticle(pid=2, energy_deposit=10.))


class TestInteractions:
    """Test the interaction data classes."""

    def test_defaults(self):
        """Test the default values of an interaction."""
        inter = RecoInteraction()
        assert inter.particles == []
        assert np.isnan(inter.flash_time)
        assert not inter.is_flash_matched and not inter.is_matched

        truth = TruthInteraction()
        assert truth.truth_particles == [] and len(truth.momentum) == 3

    def test_from_dict(self):
        """Test that nested particle dictionaries are cast."""
        inter = TruthInteraction.from_dict({
            'id': 1, 'nu_id': 0, 'match_ids': [2],
            'particles': [{'pid': 2, 'is_primary': True, 'energy_deposit': 5.}],
            'truth_particles': [{'pid': 2, 'momentum': [0., 0., 10.]}]
        })
        assert isinstance(inter.particles[0], TruthParticle)
        assert isinstance(inter.truth_particles[0], TruthParticle)
        assert inter.match_ids[0] == 2
        assert len(inter.primary_particles) == 1

        reco = RecoInteraction(particles=[{'pid': 4}])
        assert isinstance(reco.particles[0], RecoParticle)

    def test_primary_particles(self):
        """Test the primary particle selection."""
        particles = [RecoParticle(is_primary=True), RecoParticle(),
                     RecoParticle(is_primary=True)]
        inter = RecoInteraction(particles=particles)
        assert inter.primary_particles == [particles[0], particles[2]]

    def test_str(self, signal_truth):
        """Test that the interaction string lists its particles."""
        info = str(signal_truth)
        assert info.startswith('TruthInteraction')
        assert info.count('TruthParticle') == 2


class TestSpill:
    """Test the spill data class."""

    def test_defaults(self):
        """Test the default spill content."""
        spill = Spill()
        assert isinstance(spill.hdr, Header)
        assert isinstance(spill.hdr.triggerinfo, TriggerInfo)
        assert spill.dlp_true == [] and spill.dlp == []

    def test_from_dict(self):
        """Test that a spill can be built from nested dictionaries."""
        spill = Spill.from_dict({
            'hdr': {'run': 5, 'subrun': 6, 'evt': 7,
                    'source_name': b'bnb_mc.root',
                    'triggerinfo': {'global_trigger_det_time': 2.}},
            'dlp_true': [{'id': 0, 'nu_id': 0}],
            'dlp': [{'id': 0}, {'id': 1}]
        })
        assert spill.hdr.run == 5 and spill.hdr.source_name == 'bnb_mc.root'
        assert spill.hdr.triggerinfo.global_trigger_det_time == 2.
        assert isinstance(spill.dlp_true[0], TruthInteraction)
        assert all(isinstance(i, RecoInteraction) for i in spill.dlp)
        assert 'Run: 5' in str(spill)
