from inscripta.biofeature.exc import (
    InvalidQualifierException,
    InvalidDatabaseReferenceException,
    LocationException,
    NullLocationException,
    FeatureAlreadyHasParentException,
    FeatureCycleException,
    NotAChildException,
)


class ObjectValidation:
    @staticmethod
    def require_qualifier_has_name(qualifier):
        if not isinstance(qualifier.name, str) or not qualifier.name:
            raise InvalidQualifierException("Qualifier must have a non-empty name:\n{}".format(repr(qualifier)))

    @staticmethod
    def require_database_name_unambiguous(database, separator):
        if separator in database:
            raise InvalidDatabaseReferenceException(
                "Database name must not contain {}:\n{}".format(repr(separator), repr(database))
            )

    @staticmethod
    def require_location_ordered(location):
        if location.start > location.end:
            raise LocationException("Location start must not be after its end:\n{}".format(repr(location)))

    @staticmethod
    def require_feature_has_location(feature):
        if feature.location is None:
            raise NullLocationException("Feature must have non-null location attribute:\n{}".format(repr(feature)))

    @staticmethod
    def require_feature_has_no_parent(feature):
        if feature.parent is not None:
            raise FeatureAlreadyHasParentException(
                "Feature must be detached from its parent first:\n{}\n  parent: {}".format(
                    repr(feature), repr(feature.parent)
                )
            )

    @staticmethod
    def require_feature_not_ancestor(feature, descendant):
        if feature is descendant or any(ancestor is feature for ancestor in descendant.ancestors()):
            raise FeatureCycleException(
                "Feature cannot be attached beneath itself:\n{}\n{}".format(repr(feature), repr(descendant))
            )

    @staticmethod
    def require_feature_is_child(parent, child):
        if not any(c is child for c in parent.children):
            raise NotAChildException("Feature is not a child of parent:\n{}\n{}".format(repr(child), repr(parent)))
