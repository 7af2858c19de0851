"""
A minimal concrete location. Features only need the start and end positions of their location, so anything
satisfying :class:`~biofeature.LocationLike` can be attached to a feature; :class:`FeatureLocation` is the value
object this package uses when it has to build a location itself (BioPython conversion, dictionary round trips).
"""
import logging
from enum import Enum
from typing import Any, Dict, Union

from Bio.SeqFeature import SimpleLocation, CompoundLocation

from inscripta.biofeature.location.strand import Strand
from inscripta.biofeature.util.object_validation import ObjectValidation

logger = logging.getLogger(__name__)


class FeatureLocation:
    """A contiguous, 0-based, half-open interval on a sequence with a strand.

    Instances are treated as immutable values: they are compared and hashed by position and strand, and may be
    shared between any number of features.
    """

    def __init__(self, start: int, end: int, strand: Strand = Strand.UNSTRANDED):
        """
        Parameters
        ----------
        start
            0-based start position
        end
            0-based exclusive end position
        strand
            Strand of this location
        """
        self.start = start
        self.end = end
        self.strand = strand
        ObjectValidation.require_location_ordered(self)

    def __len__(self):
        return self.end - self.start

    def __str__(self):
        return f"{self.start}-{self.end}:{self.strand}"

    def __repr__(self):
        return f"<FeatureLocation {self}>"

    def __eq__(self, other):
        if type(other) is not FeatureLocation:
            return False
        return (self.start, self.end, self.strand) == (other.start, other.end, other.strand)

    def __hash__(self):
        return hash((FeatureLocation, self.start, self.end, self.strand))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dict usable by :class:`~biofeature.models.FeatureLocationModel`."""
        return dict(start=self.start, end=self.end, strand=self.strand.name)

    @staticmethod
    def from_dict(vals: Dict[str, Any]) -> "FeatureLocation":
        return FeatureLocation(vals["start"], vals["end"], Strand[vals["strand"]])

    def to_biopython(self) -> SimpleLocation:
        return SimpleLocation(self.start, self.end, strand=self.strand.to_biopython())

    @staticmethod
    def from_biopython(location: Union[SimpleLocation, CompoundLocation]) -> "FeatureLocation":
        """Builds a :class:`FeatureLocation` from a BioPython location. Compound locations collapse to their
        full span, since features here only track a start and an end."""
        if isinstance(location, CompoundLocation):
            logger.warning(f"Compound location {location} collapsed to its full span")
        return FeatureLocation(int(location.start), int(location.end), Strand.from_biopython(location.strand))

    @staticmethod
    def from_location_like(location: Any) -> "FeatureLocation":
        """Coerce any object with ``start`` and ``end`` attributes into a :class:`FeatureLocation`. A ``strand``
        attribute is honored when present: a :class:`Strand`, a ``+``/``-``/``.`` symbol, an integer in BioPython
        form, or another enumeration with integer values (such as a BioCantor strand)."""
        if isinstance(location, FeatureLocation):
            return location
        if isinstance(location, (SimpleLocation, CompoundLocation)):
            return FeatureLocation.from_biopython(location)
        strand = getattr(location, "strand", None)
        if isinstance(strand, Enum) and not isinstance(strand, Strand):
            strand = strand.value
        if isinstance(strand, str):
            strand = Strand.from_symbol(strand)
        elif not isinstance(strand, Strand):
            strand = Strand.from_biopython(strand)
        return FeatureLocation(location.start, location.end, strand)
