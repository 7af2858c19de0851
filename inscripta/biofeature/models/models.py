"""
Data models. These models allow for validation of inputs to a BioFeature model, acting as a JSON schema for
serializing and deserializing feature trees.
"""
from dataclasses import field
from typing import List, Optional, ClassVar, Type

from marshmallow import Schema
from marshmallow_dataclass import dataclass

from inscripta.biofeature.feature.feature import FeatureNode
from inscripta.biofeature.location.location import FeatureLocation
from inscripta.biofeature.location.strand import Strand
from inscripta.biofeature.qualifiers.qualifier import QualifierType, make_qualifier


@dataclass
class BaseModel:
    """Base for all of the models."""

    Schema: ClassVar[Type[Schema]] = Schema  # noqa: F811

    class Meta:
        ordered = True


@dataclass
class QualifierModel(BaseModel):
    """Data model for a single qualifier. Database cross references use their GenBank text form, so
    ``name="db_xref", value="GO:0005515"`` loads as a cross reference into ``GO``."""

    name: str
    value: str

    def to_qualifier(self) -> QualifierType:
        return make_qualifier(self.name, self.value)


@dataclass
class FeatureLocationModel(BaseModel):
    """Data model that allows construction of a :class:`~biofeature.location.location.FeatureLocation` object."""

    start: int
    end: int
    strand: Strand = Strand.UNSTRANDED

    def to_location(self) -> FeatureLocation:
        return FeatureLocation(self.start, self.end, self.strand)


@dataclass
class FeatureNodeModel(BaseModel):
    """
    Data model that allows construction of a :class:`~biofeature.feature.feature.FeatureNode` tree.

    Children are nested models of the same type. The user payload of a feature is opaque and is not part of the
    model.
    """

    feature_type: str
    source: str
    description: str = ""
    short_description: str = ""
    location: Optional[FeatureLocationModel] = None
    qualifiers: List[QualifierModel] = field(default_factory=list)
    children: List["FeatureNodeModel"] = field(default_factory=list)

    def to_feature_node(self) -> FeatureNode:
        """Produce a :class:`FeatureNode` tree from this model."""
        feature = FeatureNode(
            self.feature_type,
            self.source,
            location=self.location.to_location() if self.location else None,
            description=self.description,
            short_description=self.short_description,
            qualifiers=[q.to_qualifier() for q in self.qualifiers],
        )
        for child in self.children:
            feature.attach_child(child.to_feature_node())
        return feature

    @staticmethod
    def from_feature_node(feature: FeatureNode) -> "FeatureNodeModel":
        """Convert to a :class:`~biofeature.models.FeatureNodeModel`"""
        return FeatureNodeModel.Schema().load(feature.to_dict())
