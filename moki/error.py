"""Exceptions for the Moki library."""


class MokiError(RuntimeError):
    """Base class for all Moki exceptions."""


class ConfigurationError(MokiError):
    """Exception raised when the API url, tenant id or API key is missing."""


class InvalidIdentifierError(MokiError):
    """Exception raised for a device id that is neither a UDID nor a serial."""


class MissingArgumentError(MokiError):
    """Exception raised when a required argument is absent."""


class TransportError(MokiError):
    """Exception raised for network failures and non-2xx responses."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Keep the HTTP status code, if the server answered at all."""
        super().__init__(message)
        self.status_code = status_code


class DecodeError(MokiError):
    """Exception raised for response bodies that cannot be decoded."""
