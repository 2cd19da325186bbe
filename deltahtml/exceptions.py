"""Library exceptions."""


class DeltaHtmlException(Exception):
    """Base deltahtml exception."""


class OpContractError(DeltaHtmlException):
    """An operation was built or used against its documented preconditions.

    This signals a programming error (zero-length span, attributes on an
    embed through the strict constructor, insert-only accessor on a retain
    or delete). It is not meant to be caught and recovered from.
    """


class InsertError(DeltaHtmlException, ValueError):
    """Recoverable insert validation failure raised by ``Op.try_insert``."""


class DeltaLoadError(DeltaHtmlException):
    """A Delta document could not be read or validated."""

    def __init__(self, message: str, source: object = None):
        super().__init__(message)
        self.source = source
