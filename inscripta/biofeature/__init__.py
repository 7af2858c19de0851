__version__ = "0.1.0"

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LocationLike(Protocol):
    """Narrow capability required of a feature location.

    Locations are owned by an external collaborator; this package only compares and subtracts the
    ``start`` and ``end`` positions. Any totally ordered numeric type works, so a
    :class:`~biofeature.location.location.FeatureLocation`, a BioPython ``SimpleLocation`` or a
    BioCantor ``Location`` can all be attached to a feature.
    """

    # The start position of this location on its sequence
    start: Any

    # The end position of this location on its sequence
    end: Any
