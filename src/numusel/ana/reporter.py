"""Analysis script which dumps matched true/reconstructed 1muNp interaction
pairs to a comma-separated text file.

For each spill, two kinds of rows are written:
- `SIGNAL`: true 1muNp interactions (contained and fiducial) paired with
  their best reconstructed match, used to measure the efficiency;
- `SELECTED`: reconstructed interactions passing the full 1muNp selection
  paired with their best true match, used to measure the purity.
"""

from collections import Counter

from numusel.sel import cuts, variables
from numusel.utils.logger import logger

from .base import AnaBase

__all__ = ['Reporter', 'MatchIndexError']


class MatchIndexError(IndexError):
    """Raised when a match ID does not point to an object of the opposite
    collection."""

    def __init__(self, obj, collection, size):
        """Initialize with the faulty object.

        Parameters
        ----------
        obj : InteractionBase
            Interaction with an invalid match
        collection : str
            Name of the collection the match ID points to
        size : int
            Size of the collection the match ID points to
        """
        self.match_id = int(obj.match_ids[0])
        super().__init__(
                f"Interaction {obj.id} is matched to {collection}[{self.match_id}] "
                f"but the collection only holds {size} interaction(s).")


class Reporter(AnaBase):
    """Writes one row per matched true/reconstructed interaction pair.

    The output file is opened once, when the reporter is initialized, and is
    appended to for every pair of interactions of interest. It must be closed
    at the end of the run, either explicitly with :meth:`close` or by using
    the reporter as a context manager.

    Each pair row contains the following fields, prefixed by its tag:

    .. code-block:: text

        run, evt, subrun, source_name, nu_id, truth_id, reco_id,
        global_trigger_det_time, category, category_topology,
        category_interaction_mode, truth_visible_energy,
        reco_visible_energy, all_1muNp_cut
    """

    # Name of the analysis script (as specified in the configuration)
    name = 'reporter'

    # Tags written at the start of each type of row
    signal_tag = 'SIGNAL'
    selected_tag = 'SELECTED'

    def __init__(self, file_name='output_mc.log', **kwargs):
        """Initialize the reporter, open the output file.

        Parameters
        ----------
        file_name : str, default 'output_mc.log'
            Path to the output file
        **kwargs : dict, optional
            Parameters to pass to :class:`AnaBase`
        """
        # Initialize the parent class
        super().__init__(**kwargs)

        # Initialize the output file, row counters
        self.file_name = file_name
        self.initialize_writer('pairs', file_name)
        self.counts = Counter()

    def process(self, spill):
        """Write the rows for all the interaction pairs of one spill.

        Parameters
        ----------
        spill : Spill
            Spill record

        Returns
        -------
        List[float]
            Constant place-holder, the output is written to file
        """
        # Loop over true interactions (efficiency, signal-level variables)
        for truth in spill.dlp_true:
            if (cuts.neutrino(truth) and variables.category(truth) == 0
                    and cuts.matched(truth)):
                reco = self.get_match(truth, spill.dlp, 'dlp')
                self.write_pair(spill, truth, reco, self.signal_tag)

        # Loop over reconstructed interactions (purity, reco-level variables)
        for reco in spill.dlp:
            if cuts.all_1muNp_cut(reco) and cuts.matched(reco):
                truth = self.get_match(reco, spill.dlp_true, 'dlp_true')
                self.write_pair(spill, truth, reco, self.selected_tag)

        return [1.]

    @staticmethod
    def get_match(obj, others, collection):
        """Fetch the best match of an object in the opposite collection.

        Parameters
        ----------
        obj : InteractionBase
            Matched interaction
        others : List[InteractionBase]
            Opposite collection of interactions
        collection : str
            Name of the opposite collection

        Returns
        -------
        InteractionBase
            Best match of the interaction
        """
        match_id = obj.match_ids[0]
        if match_id < 0 or match_id >= len(others):
            raise MatchIndexError(obj, collection, len(others))

        return others[match_id]

    def write_pair(self, spill, truth, reco, tag):
        """Writes the variables of a true/reconstructed interaction pair.

        Parameters
        ----------
        spill : Spill
            Spill record the interactions belong to
        truth : TruthInteraction
            True interaction
        reco : RecoInteraction
            Reconstructed interaction
        tag : str
            Label of the row
        """
        hdr = spill.hdr
        row = [
            hdr.run, hdr.evt, hdr.subrun, hdr.source_name,
            truth.nu_id, variables.id(truth), variables.id(reco),
            hdr.triggerinfo.global_trigger_det_time,
            variables.category(truth),
            variables.category_topology(truth),
            variables.category_interaction_mode(truth),
            variables.visible_energy(truth),
            variables.visible_energy(reco),
            cuts.all_1muNp_cut(reco)
        ]

        self.append('pairs', row, tag)
        self.counts[tag] += 1

    def write_file_info(self, spill, truth, tag=None):
        """Writes a short diagnostic row about a true interaction.

        Parameters
        ----------
        spill : Spill
            Spill record the interaction belongs to
        truth : TruthInteraction
            True interaction
        tag : str, optional
            Label of the row
        """
        hdr = spill.hdr
        row = [
            hdr.run, hdr.evt, hdr.subrun, truth.nu_id,
            variables.leading_muon_p(truth), variables.id(truth), hdr.source_name
        ]

        self.append('pairs', row, tag)
        self.counts[tag or 'INFO'] += 1

    def close(self):
        """Log the number of rows written and close the output file."""
        if not self.writers['pairs'].closed:
            summary = ', '.join(f'{k}: {v}' for k, v in sorted(self.counts.items()))
            logger.info(
                    "Wrote %d row(s) to %s (%s)", sum(self.counts.values()),
                    self.file_name, summary or 'empty')

        super().close()
