"""Domain-level exceptions.

All refusals are expressed as subclasses of DomainException so the CLI
layer can catch them uniformly and display user-friendly messages.
A refused operation always leaves the store unchanged.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Malformed input or a business rule was violated."""


class StockInsufficientError(ValidationError):
    """A sale asked for more units than the variant has in stock."""


class NotFoundError(DomainException):
    """A referenced product or variant does not exist (stale selection)."""


class ImportFormatError(DomainException):
    """A snapshot document could not be parsed into shop state."""


class GatewayError(DomainException):
    """An external collaborator failed. Always recoverable by retrying."""


class RecognitionError(GatewayError):
    """The image-recognition service failed or returned garbage."""


class PrintError(GatewayError):
    """The receipt could not be delivered to the printer."""


class PersistenceError(GatewayError):
    """Stored state could not be read or written."""
