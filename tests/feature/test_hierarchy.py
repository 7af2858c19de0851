import gc

import pytest

from inscripta.biofeature.exc import (
    FeatureAlreadyHasParentException,
    FeatureCycleException,
    FeatureHierarchyException,
    NotAChildException,
)
from inscripta.biofeature.feature.feature import FeatureNode
from inscripta.biofeature.feature.ordering import FeatureOrdering
from inscripta.biofeature.location.location import FeatureLocation


def build_tree():
    """domain -> (helix -> (turn), strand)"""
    domain = FeatureNode("domain", "Pfam", location=FeatureLocation(0, 100))
    helix = FeatureNode("helix", "PDB", location=FeatureLocation(10, 40))
    strand = FeatureNode("strand", "PDB", location=FeatureLocation(50, 60))
    turn = FeatureNode("turn", "PDB", location=FeatureLocation(20, 25))
    domain.attach_child(helix)
    domain.attach_child(strand)
    helix.attach_child(turn)
    return domain, helix, strand, turn


class TestAttach:
    def test_attach_links_both_directions(self):
        domain, helix, strand, turn = build_tree()
        assert domain.children == (helix, strand)
        assert helix.parent is domain
        assert strand.parent is domain
        assert turn.parent is helix
        assert domain.parent is None

    def test_attach_at_index(self):
        domain, helix, strand, _ = build_tree()
        loop = FeatureNode("loop", "PDB")
        domain.attach_child(loop, 1)
        assert domain.children == (helix, loop, strand)

    def test_attach_child_with_parent(self):
        domain, helix, _, turn = build_tree()
        with pytest.raises(FeatureAlreadyHasParentException):
            domain.attach_child(turn)
        assert turn.parent is helix
        assert turn not in domain.children

    def test_attach_self(self):
        feature = FeatureNode("domain", "Pfam")
        with pytest.raises(FeatureCycleException):
            feature.attach_child(feature)
        assert feature.children == ()

    def test_attach_ancestor(self):
        domain, helix, _, turn = build_tree()
        with pytest.raises(FeatureCycleException):
            turn.attach_child(domain)
        assert domain.parent is None
        assert turn.children == ()

    def test_children_snapshot(self):
        domain, helix, strand, _ = build_tree()
        children = domain.children
        domain.detach_child(strand)
        assert children == (helix, strand)
        assert domain.children == (helix,)


class TestDetach:
    def test_detach_child(self):
        domain, helix, strand, turn = build_tree()
        domain.detach_child(helix)
        assert domain.children == (strand,)
        assert helix.parent is None
        # the subtree moves with the detached feature
        assert turn.parent is helix

    def test_detach_non_child(self):
        domain, helix, strand, turn = build_tree()
        with pytest.raises(NotAChildException):
            domain.detach_child(turn)
        with pytest.raises(NotAChildException):
            strand.detach_child(helix)

    def test_detach(self):
        domain, helix, _, _ = build_tree()
        helix.detach()
        assert helix.parent is None
        assert helix not in domain.children
        # detaching a root is a no-op
        domain.detach()
        assert domain.parent is None

    def test_move_between_parents(self):
        domain, helix, strand, turn = build_tree()
        turn.detach()
        strand.attach_child(turn)
        assert turn.parent is strand
        assert helix.children == ()
        assert strand.children == (turn,)

    def test_parent_is_weak(self):
        child = FeatureNode("helix", "PDB")
        FeatureNode("domain", "Pfam").attach_child(child)
        gc.collect()
        assert child.parent is None


class TestSetChildren:
    def test_replace(self):
        domain, helix, strand, _ = build_tree()
        loop = FeatureNode("loop", "PDB")
        domain.set_children([loop, strand])
        assert domain.children == (loop, strand)
        assert helix.parent is None
        assert loop.parent is domain
        assert strand.parent is domain

    def test_clear(self):
        domain, helix, strand, _ = build_tree()
        domain.set_children([])
        assert domain.children == ()
        assert helix.parent is None
        assert strand.parent is None

    def test_reorder(self):
        domain, helix, strand, _ = build_tree()
        domain.set_children([strand, helix])
        assert domain.children == (strand, helix)

    def test_invalid_leaves_tree_untouched(self):
        domain, helix, strand, turn = build_tree()
        with pytest.raises(FeatureAlreadyHasParentException):
            domain.set_children([strand, turn])
        assert domain.children == (helix, strand)
        assert turn.parent is helix

    def test_duplicate(self):
        domain, helix, _, _ = build_tree()
        with pytest.raises(FeatureHierarchyException):
            domain.set_children([helix, helix])

    def test_cycle(self):
        domain, helix, _, turn = build_tree()
        with pytest.raises(FeatureCycleException):
            turn.set_children([FeatureNode("loop", "PDB"), domain])
        assert turn.children == ()


class TestNavigation:
    def test_ancestors(self):
        domain, helix, _, turn = build_tree()
        assert list(turn.ancestors()) == [helix, domain]
        assert list(domain.ancestors()) == []

    def test_root_and_depth(self):
        domain, helix, _, turn = build_tree()
        assert turn.root is domain
        assert domain.root is domain
        assert turn.depth == 2
        assert domain.depth == 0

    def test_is_root_is_leaf(self):
        domain, helix, _, turn = build_tree()
        assert domain.is_root
        assert not helix.is_root
        assert turn.is_leaf
        assert not helix.is_leaf

    def test_walk(self):
        domain, helix, strand, turn = build_tree()
        assert list(domain.walk()) == [domain, helix, turn, strand]
        assert list(turn.walk()) == [turn]

    def test_sort_children(self):
        domain = FeatureNode("domain", "Pfam")
        long_child = FeatureNode("helix", "PDB", location=FeatureLocation(10, 50))
        short_child = FeatureNode("turn", "PDB", location=FeatureLocation(10, 12))
        early_child = FeatureNode("strand", "PDB", location=FeatureLocation(0, 5))
        domain.set_children([short_child, long_child, early_child])
        domain.sort_children(FeatureOrdering.LOCATION_LENGTH)
        assert domain.children == (early_child, long_child, short_child)
        domain.sort_children(FeatureOrdering.TYPE)
        assert domain.children == (long_child, early_child, short_child)
        assert all(child.parent is domain for child in domain.children)
