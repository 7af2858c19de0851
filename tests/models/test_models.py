import pytest
from marshmallow import ValidationError

from inscripta.biofeature.feature.feature import FeatureNode
from inscripta.biofeature.location.location import FeatureLocation
from inscripta.biofeature.location.strand import Strand
from inscripta.biofeature.models import FeatureLocationModel, FeatureNodeModel, QualifierModel
from inscripta.biofeature.qualifiers.database_reference import DatabaseReference
from inscripta.biofeature.qualifiers.qualifier import Qualifier, DatabaseCrossReference

tree = {
    "feature_type": "domain",
    "source": "Pfam",
    "description": "Protein kinase domain",
    "short_description": "kinase",
    "location": {"start": 0, "end": 100, "strand": "PLUS"},
    "qualifiers": [
        {"name": "db_xref", "value": "Pfam:PF00069"},
        {"name": "note", "value": "catalytic"},
    ],
    "children": [
        {
            "feature_type": "helix",
            "source": "PDB",
            "location": {"start": 10, "end": 40, "strand": "PLUS"},
            "qualifiers": [{"name": "db_xref", "value": "PDB:1ATP"}],
        },
        {"feature_type": "strand", "source": "PDB"},
    ],
}


class TestQualifierModel:
    def test_plain(self):
        model = QualifierModel.Schema().load({"name": "gene", "value": "ABC1"})
        assert model.to_qualifier() == Qualifier("gene", "ABC1")

    def test_database_reference(self):
        model = QualifierModel.Schema().load({"name": "db_xref", "value": "GO:0005515"})
        assert model.to_qualifier() == DatabaseCrossReference("GO", "0005515")
        assert isinstance(model.to_qualifier(), DatabaseCrossReference)

    def test_missing_value(self):
        with pytest.raises(ValidationError):
            QualifierModel.Schema().load({"name": "gene"})


class TestFeatureLocationModel:
    def test_load(self):
        model = FeatureLocationModel.Schema().load({"start": 1, "end": 5, "strand": "MINUS"})
        assert model.to_location() == FeatureLocation(1, 5, Strand.MINUS)

    def test_default_strand(self):
        model = FeatureLocationModel.Schema().load({"start": 1, "end": 5})
        assert model.to_location() == FeatureLocation(1, 5)

    def test_invalid_strand(self):
        with pytest.raises(ValidationError):
            FeatureLocationModel.Schema().load({"start": 1, "end": 5, "strand": "SIDEWAYS"})


class TestFeatureNodeModel:
    def test_to_feature_node(self):
        feature = FeatureNodeModel.Schema().load(tree).to_feature_node()
        assert feature.feature_type == "domain"
        assert feature.source == "Pfam"
        assert feature.description == "Protein kinase domain"
        assert feature.short_description == "kinase"
        assert feature.location == FeatureLocation(0, 100, Strand.PLUS)
        assert feature.database_reference_aggregate() == DatabaseReference([("Pfam", "PF00069")])
        assert feature.qualifiers_by_name("note") == [Qualifier("note", "catalytic")]

        helix, strand = feature.children
        assert helix.parent is feature
        assert strand.parent is feature
        assert helix.first_database_reference_for("PDB") == "1ATP"
        assert strand.location is None
        assert strand.qualifiers == []
        assert strand.description == ""

    def test_round_trip(self):
        feature = FeatureNodeModel.Schema().load(tree).to_feature_node()
        model = FeatureNodeModel.from_feature_node(feature)
        rebuilt = model.to_feature_node()
        assert rebuilt.to_dict() == feature.to_dict()
        assert rebuilt.content_digest() == feature.content_digest()

    def test_dump(self):
        feature = FeatureNode("site", "UniProt", location=FeatureLocation(3, 4, Strand.MINUS))
        feature.add_qualifier(Qualifier("note", "active site"))
        dumped = FeatureNodeModel.Schema().dump(FeatureNodeModel.from_feature_node(feature))
        assert dumped["feature_type"] == "site"
        assert dumped["location"] == {"start": 3, "end": 4, "strand": "MINUS"}
        assert dumped["qualifiers"] == [{"name": "note", "value": "active site"}]
        assert dumped["children"] == []

    def test_missing_type(self):
        with pytest.raises(ValidationError):
            FeatureNodeModel.Schema().load({"source": "Pfam"})
