import pytest

from inscripta.biofeature.feature.feature import FeatureNode
from inscripta.biofeature.location.location import FeatureLocation
from inscripta.biofeature.location.strand import Strand
from inscripta.biofeature.qualifiers.qualifier import Qualifier


@pytest.fixture
def annotated_feature() -> FeatureNode:
    """A UniProt feature with two GO cross references and a gene name."""
    feature = FeatureNode("misc_feature", "UniProt", location=FeatureLocation(10, 50, Strand.PLUS))
    feature.add_qualifier(Qualifier("db_xref", "GO:0005515"))
    feature.add_qualifier(Qualifier("gene", "ABC1"))
    feature.add_qualifier(Qualifier("db_xref", "GO:0006412"))
    return feature
