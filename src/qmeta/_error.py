"""Error classes and helpers"""

__all__ = ["MetaError", "NotRecordError"]


class MetaError(Exception):
    """Error in internal processing of qmeta introspection."""


class NotRecordError(MetaError):
    """Exception raised when field access is attempted on a non-record value.

    Args:
        typename: (str) Type name of the inspected value

    Attributes:
        typename: (str) Type name of the inspected value
    """

    def __init__(self, typename):
        self.typename = typename
        super().__init__(f"type is not a record: {typename}")
