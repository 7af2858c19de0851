class BioFeatureException(Exception):
    """
    Base exception class for BioFeature.
    """

    pass


class ValidationException(BioFeatureException):
    """
    Raised when object constructors or mutators are given invalid inputs that are not LocationExceptions.
    """

    pass


class InvalidQualifierException(ValidationException):
    """
    Raised when a qualifier cannot be stored in a QualifierIndex, usually because its name is empty.
    """

    pass


class InvalidDatabaseReferenceException(ValidationException):
    """
    Raised when a database cross reference names a database containing the reference separator, which would make
    its text form ambiguous.
    """

    pass


class LocationException(BioFeatureException):
    """
    Raised when a FeatureLocation constructor is given invalid inputs, such as a start position after the end
    position.
    """

    pass


class NullLocationException(LocationException):
    """
    Raised when an operation that requires a location is performed on a feature that has no location assigned.
    """

    pass


class FeatureHierarchyException(BioFeatureException):
    """
    Generic exception involving the parent/child relationships of FeatureNode objects.
    """

    pass


class FeatureAlreadyHasParentException(FeatureHierarchyException):
    """
    Raised when a feature is attached to a parent while it is still attached to another parent. The feature
    must be detached from its current parent first.
    """

    pass


class FeatureCycleException(FeatureHierarchyException):
    """
    Raised when attaching a child would make a feature its own ancestor.
    """

    pass


class NotAChildException(FeatureHierarchyException):
    """
    Raised when detaching a feature from a parent that does not list it as a child.
    """

    pass


class MalformedDatabaseReferenceWarning(UserWarning):
    """
    Warns when a database reference qualifier value has no database separator and is kept as a plain qualifier.
    """

    pass
