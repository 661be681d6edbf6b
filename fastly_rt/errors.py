from typing import Optional


class FastlyRTError(RuntimeError): ...


class ConfigurationError(FastlyRTError):
    """The HTTP transport (or the settings feeding it) could not be set up."""


class RequestError(FastlyRTError):
    """The HTTP exchange failed or came back with a non-2xx status.

    ``status`` and ``body`` are set for status failures; transport failures
    (DNS, connect, timeout) leave them ``None`` and chain the httpx error.
    """

    def __init__(self, url: str, status: Optional[int] = None, body: Optional[str] = None, cause: Optional[BaseException] = None) -> None:
        self.url = url
        self.status = status
        self.body = body
        self.cause = cause
        if status is not None:
            msg = f"HTTP {status}: {(body or '')[:300]}"
        else:
            msg = f"request to {url} failed: {cause}"
        super().__init__(msg)


class DecodeError(FastlyRTError):
    """Response body did not match the expected schema."""

    def __init__(self, url: str, message: str) -> None:
        self.url = url
        super().__init__(f"could not decode response from {url}: {message}")
