class JustCmsError(Exception):
    """Base class for every error raised by the JustCMS client."""


class JustCmsConfigError(JustCmsError, ValueError):
    """The client was constructed without a usable token or project id."""


class JustCmsApiError(JustCmsError):
    """A request failed at the transport level.

    Client errors, server errors and network failures are not told apart;
    ``status_code`` is ``0`` when no response was received.
    """

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"JustCMS API error {status_code}: {message}")
