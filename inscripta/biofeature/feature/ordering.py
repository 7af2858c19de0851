"""
Orderings over features for layout and export code.

Every comparator is a plain function of two features returning -1, 0 or 1, so it can be handed to
:func:`functools.cmp_to_key`, combined with :func:`chain_comparators`, or selected by name through
:class:`FeatureOrdering`. None of them keep any state.

Location based orderings need a location on both features; a feature without one raises
:class:`~biofeature.exc.NullLocationException` instead of sorting as if it were at position zero.
"""
from enum import Enum
from functools import cmp_to_key
from typing import Callable, Iterable, List, Union

from inscripta.biofeature.util.object_validation import ObjectValidation

Comparator = Callable[[object, object], int]


def _sign(first, second) -> int:
    if first < second:
        return -1
    if first > second:
        return 1
    return 0


def compare_location_longest_first(first, second) -> int:
    """Sort features by start position and then longest length. Delivering overlapping features in this order lets
    a layout place the enclosing feature before the ones it overlaps."""
    ObjectValidation.require_feature_has_location(first)
    ObjectValidation.require_feature_has_location(second)
    by_start = _sign(first.location.start, second.location.start)
    if by_start:
        return by_start
    return _sign(second.location.end, first.location.end)


def compare_length(first, second) -> int:
    """Sort features by the span of their location, shortest first. Not strand aware; equal spans compare equal."""
    ObjectValidation.require_feature_has_location(first)
    ObjectValidation.require_feature_has_location(second)
    return _sign(
        abs(first.location.end - first.location.start),
        abs(second.location.end - second.location.start),
    )


def compare_type(first, second) -> int:
    """Sort features lexicographically by feature type."""
    return _sign(first.feature_type, second.feature_type)


def chain_comparators(*comparators: Comparator) -> Comparator:
    """Combine comparators into a multi-key comparator: later comparators break ties left by earlier ones."""

    def compare(first, second) -> int:
        for comparator in comparators:
            result = comparator(first, second)
            if result:
                return result
        return 0

    return compare


class FeatureOrdering(Enum):
    """Named feature orderings."""

    LOCATION_LENGTH = "location_length"
    LENGTH = "length"
    TYPE = "type"

    @property
    def comparator(self) -> Comparator:
        return {
            FeatureOrdering.LOCATION_LENGTH: compare_location_longest_first,
            FeatureOrdering.LENGTH: compare_length,
            FeatureOrdering.TYPE: compare_type,
        }[self]

    def compare(self, first, second) -> int:
        return self.comparator(first, second)

    @property
    def key(self):
        """A sort key for ``sorted()`` and ``list.sort()``."""
        return cmp_to_key(self.comparator)


def sort_features(features: Iterable, *orderings: Union[FeatureOrdering, Comparator]) -> List:
    """Return a new list of ``features`` sorted by one or more orderings, applied as primary key, secondary key and
    so on. The sort is stable, so features that compare equal keep their relative order. With no orderings given,
    features are sorted by location with the longest first."""
    comparators = [o.comparator if isinstance(o, FeatureOrdering) else o for o in orderings]
    if not comparators:
        comparators = [compare_location_longest_first]
    return sorted(features, key=cmp_to_key(chain_comparators(*comparators)))
