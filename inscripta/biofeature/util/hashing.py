"""
MD5 digests of feature contents. Objects are unpacked and their string representations are digested, so two
features with the same annotation content produce the same UUID regardless of object identity.
"""
import hashlib
from typing import Hashable, Any, List, Set, Iterable
from uuid import UUID


def _order_set(s: Set[Hashable]) -> List[str]:
    """
    Lexicographically orders a set and converts all values to strings to enable order comparison.

    Args:
        s: A set of hashable items

    Returns:
        An lexicographically ordered list of strings
    """
    return sorted(str(x) for x in s)


def _encode_member(member: Any) -> Iterable[str]:
    """
    Encode a single member. Dictionaries are visited in key order and sets are sorted, because neither has a
    stable string representation. Lists and tuples are order-significant (qualifier order matters) and are
    visited in place.
    """
    if isinstance(member, dict):
        for key in sorted(member, key=str):
            yield str(key)
            yield from _encode_member(member[key])
    elif isinstance(member, (set, frozenset)):
        yield str(_order_set(member))
    elif isinstance(member, (list, tuple)):
        yield "["
        for item in member:
            yield from _encode_member(item)
        yield "]"
    else:
        yield str(member)


def _encode_object_for_digest(*args, **kwargs) -> Iterable[str]:
    """
    Inner function for :meth:`digest_object()` that produces the string representations. This helps with debugging.
    """
    for member in args:
        yield from _encode_member(member)
    yield from _encode_member(kwargs)


def digest_object(*args, **kwargs) -> UUID:
    """MD5 digest of any arbitrary set of python objects. Must be utf-8 encodeable.

    Sets and dictionaries are ordered before encoding so that the digest is stable across interpreters. Lists
    and tuples keep their order, which means two qualifier lists holding the same entries in a different order
    produce different digests.

    Kwargs names are part of the hash produced.
    """
    hasher = hashlib.md5()
    for val in _encode_object_for_digest(*args, **kwargs):
        hasher.update(val.encode("utf-8"))
    return UUID(hasher.hexdigest())
