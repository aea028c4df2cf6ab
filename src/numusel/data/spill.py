"""Module with data class objects which represent one spill of data.

A spill bundles the header information (run, subrun, event, trigger) with
the list of true and reconstructed interactions it contains.
"""

from dataclasses import dataclass
from typing import List

from .base import DataBase
from .interaction import RecoInteraction, TruthInteraction

__all__ = ['TriggerInfo', 'Header', 'Spill']


@dataclass(eq=False)
class TriggerInfo(DataBase):
    """Trigger information.

    Attributes
    ----------
    global_trigger_det_time : float
        Global trigger time in the detector clock
    """
    global_trigger_det_time: float = -1.


@dataclass(eq=False)
class Header(DataBase):
    """Spill header information.

    Attributes
    ----------
    run : int
        Run ID
    subrun : int
        Sub-run ID
    evt : int
        Event ID
    source_name : str
        Name of the source file the spill was read from
    triggerinfo : TriggerInfo
        Trigger information
    """
    run: int = -1
    subrun: int = -1
    evt: int = -1
    source_name: str = ''
    triggerinfo: TriggerInfo = None

    # String attributes
    _str_attrs = ['source_name']

    # Attributes that must never be flattened
    _skip_attrs = ['triggerinfo']

    def __post_init__(self):
        """Provides a default trigger information object."""
        super().__post_init__()
        if self.triggerinfo is None:
            self.triggerinfo = TriggerInfo()
        elif isinstance(self.triggerinfo, dict):
            self.triggerinfo = TriggerInfo.from_dict(self.triggerinfo)


@dataclass(eq=False)
class Spill(DataBase):
    """One spill worth of true and reconstructed interactions.

    Attributes
    ----------
    hdr : Header
        Spill header
    dlp_true : List[TruthInteraction]
        List of true interactions
    dlp : List[RecoInteraction]
        List of reconstructed interactions
    """
    hdr: Header = None
    dlp_true: List[TruthInteraction] = None
    dlp: List[RecoInteraction] = None

    # Attributes that must never be flattened
    _skip_attrs = ['hdr', 'dlp_true', 'dlp']

    def __post_init__(self):
        """Provides default values and casts nested dictionaries."""
        super().__post_init__()
        if self.hdr is None:
            self.hdr = Header()
        elif isinstance(self.hdr, dict):
            self.hdr = Header.from_dict(self.hdr)

        self.dlp_true = self._build_interactions(
                self.dlp_true, TruthInteraction)
        self.dlp = self._build_interactions(self.dlp, RecoInteraction)

    def __str__(self):
        return (f"Spill(Run: {self.hdr.run:<5} | Subrun: {self.hdr.subrun:<4} "
                f"| Event: {self.hdr.evt:<6} | Truth: {len(self.dlp_true):<3} "
                f"| Reco: {len(self.dlp):<3})")

    @staticmethod
    def _build_interactions(interactions, cls):
        """Casts interaction dictionaries to the appropriate class.

        Parameters
        ----------
        interactions : List[Union[dict, InteractionBase]], optional
            List of interactions or interaction dictionaries
        cls : type
            Interaction class to build

        Returns
        -------
        List[InteractionBase]
            List of interaction objects
        """
        if interactions is None:
            return []

        return [cls.from_dict(i) if isinstance(i, dict) else i
                for i in interactions]
