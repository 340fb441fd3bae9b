class CepLookupError(Exception):
    """Base CEP lookup exception."""


class ProviderRequestError(CepLookupError):
    """Raised when a provider request could not be completed."""


class ProviderTimeoutError(ProviderRequestError):
    """Raised when the provider did not answer within the client timeout."""


class ProviderHTTPStatusError(ProviderRequestError):
    """Raised when the provider answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProviderNormalizationError(CepLookupError):
    """Raised when provider payload schema cannot be normalized."""


class LookupTimeoutError(CepLookupError):
    """Raised when no provider responded before the race deadline."""

    def __init__(self, timeout_seconds: float) -> None:
        super().__init__(f"no provider responded within {timeout_seconds:g}s")
        self.timeout_seconds = timeout_seconds
