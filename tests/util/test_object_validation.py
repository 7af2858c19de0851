import pytest

from inscripta.biofeature.exc import (
    InvalidQualifierException,
    InvalidDatabaseReferenceException,
    LocationException,
    NullLocationException,
    FeatureAlreadyHasParentException,
    FeatureCycleException,
    NotAChildException,
)
from inscripta.biofeature.feature.feature import FeatureNode
from inscripta.biofeature.location.location import FeatureLocation
from inscripta.biofeature.qualifiers.qualifier import Qualifier, DatabaseCrossReference
from inscripta.biofeature.util.object_validation import ObjectValidation


class TestObjectValidation:
    @pytest.mark.parametrize("qualifier", [Qualifier("gene", ""), DatabaseCrossReference("", "")])
    def test_require_qualifier_has_name(self, qualifier):
        ObjectValidation.require_qualifier_has_name(qualifier)

    @pytest.mark.parametrize("qualifier", [Qualifier("", "value"), Qualifier(None, "value"), Qualifier(5, "value")])
    def test_require_qualifier_has_name_error(self, qualifier):
        with pytest.raises(InvalidQualifierException):
            ObjectValidation.require_qualifier_has_name(qualifier)

    def test_require_database_name_unambiguous(self):
        ObjectValidation.require_database_name_unambiguous("GO", ":")
        ObjectValidation.require_database_name_unambiguous("", ":")
        with pytest.raises(InvalidDatabaseReferenceException):
            ObjectValidation.require_database_name_unambiguous("taxon:x", ":")

    def test_require_location_ordered(self):
        class Span:
            start = 5
            end = 1

        ObjectValidation.require_location_ordered(FeatureLocation(1, 1))
        with pytest.raises(LocationException):
            ObjectValidation.require_location_ordered(Span())

    def test_require_feature_has_location(self):
        ObjectValidation.require_feature_has_location(FeatureNode("a", "b", location=FeatureLocation(0, 0)))
        with pytest.raises(NullLocationException):
            ObjectValidation.require_feature_has_location(FeatureNode("a", "b"))

    def test_hierarchy(self):
        parent = FeatureNode("domain", "Pfam")
        child = FeatureNode("helix", "PDB")
        other = FeatureNode("turn", "PDB")
        parent.attach_child(child)

        ObjectValidation.require_feature_has_no_parent(parent)
        with pytest.raises(FeatureAlreadyHasParentException):
            ObjectValidation.require_feature_has_no_parent(child)

        ObjectValidation.require_feature_not_ancestor(other, child)
        with pytest.raises(FeatureCycleException):
            ObjectValidation.require_feature_not_ancestor(parent, child)
        with pytest.raises(FeatureCycleException):
            ObjectValidation.require_feature_not_ancestor(child, child)

        ObjectValidation.require_feature_is_child(parent, child)
        with pytest.raises(NotAChildException):
            ObjectValidation.require_feature_is_child(parent, other)
