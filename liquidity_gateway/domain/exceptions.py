"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class DataGatewayError(DomainException):
    """Ledger data could not be read from the backing store"""

    pass


class LedgerAPIError(DataGatewayError):
    """External ledger API returned an error or is unavailable"""

    pass


class InvalidLedgerDataError(DataGatewayError):
    """Ledger record is malformed or has a non-numeric amount"""

    pass


class ValidationError(DomainException):
    """Caller-supplied identifier or horizon was rejected"""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR", field: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.field = field
