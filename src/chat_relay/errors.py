"""Package specific exception hierarchy."""


class ChatRelayError(Exception):
    """Base exception for chat_relay package.

    ``message`` is always safe to show to the end user; ``http_status`` is the
    status the HTTP layer answers with.
    """

    http_status: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ChatRelayError):
    """Raised when a request body is malformed."""

    http_status = 400


class AuthError(ChatRelayError):
    """Raised when demo credentials are missing or wrong."""

    http_status = 401


class ProviderUnavailable(ChatRelayError):
    """Raised when the requested provider has no credentials configured.

    The router turns this into a displayable string instead of failing.
    """

    def __init__(self, provider: str, reason: str) -> None:
        super().__init__(reason)
        self.provider = provider


class UnsupportedProviderError(ProviderUnavailable):
    """Raised when a provider name is not one the server knows about."""

    def __init__(self, provider: str) -> None:
        super().__init__(provider, "Proveedor no soportado.")


class UpstreamError(ChatRelayError):
    """Represents provider-specific HTTP or API errors."""

    def __init__(self, provider: str, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code

    def __str__(self) -> str:
        suffix = f" (status {self.status_code})" if self.status_code is not None else ""
        return f"{self.provider}: {self.message}{suffix}"


class CatalogFetchError(ChatRelayError):
    """Raised when the dynamic model listing cannot be loaded."""

    def __init__(self, message: str = "No se pudieron cargar los modelos.") -> None:
        super().__init__(message)
