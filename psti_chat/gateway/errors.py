"""Classified gateway failures.

Each error carries a plain-language remediation hint that the conversation
shows to the user as a bot message.
"""


class GatewayError(Exception):
    """Base class for every failure raised by BackendGateway.send().

    Attributes:
        kind: Short machine-readable failure category.
        hint: User-facing remediation text.
    """

    kind = "unknown"

    def __init__(self, hint: str) -> None:
        super().__init__(hint)
        self.hint = hint


class EndpointNotFoundError(GatewayError):
    """The backend answered 404 for the chat endpoint."""

    kind = "endpoint_not_found"

    def __init__(self, base_url: str) -> None:
        super().__init__(
            f"Endpoint /chat tidak ditemukan. Pastikan backend berjalan di {base_url}"
        )
        self.base_url = base_url


class NetworkUnreachableError(GatewayError):
    """The backend could not be reached at all."""

    kind = "network_unreachable"

    def __init__(self, base_url: str) -> None:
        super().__init__(
            "Tidak dapat terhubung ke backend. "
            f"Pastikan server backend berjalan di {base_url}\n"
            "Jalankan: npm start di folder backend"
        )
        self.base_url = base_url


class CorsBlockedError(GatewayError):
    """The request was blocked by a CORS policy between client and backend."""

    kind = "cors_blocked"

    def __init__(self) -> None:
        super().__init__(
            "CORS error. Backend sudah menggunakan cors(), "
            "tapi pastikan tidak ada firewall/proxy yang memblokir."
        )


class HttpStatusError(GatewayError):
    """The backend answered with a non-2xx status other than 404."""

    kind = "http_error"

    def __init__(self, status: int) -> None:
        super().__init__(
            f"Server mengembalikan kesalahan (HTTP {status}). Silakan coba lagi nanti."
        )
        self.status = status


class UnknownGatewayError(GatewayError):
    """Any other failure. The original message is passed through."""

    kind = "unknown"

    def __init__(self, message: str) -> None:
        super().__init__(f"Maaf, terjadi kesalahan saat menghubungi server: {message}")
        self.message = message
