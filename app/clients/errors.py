"""Error taxonomy shared by the upstream API clients."""


class ClientError(Exception):
    """Base class for every failure raised at an upstream client boundary."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(ClientError):
    """The upstream API reported the requested resource as absent (404)."""


class DeserializationError(ClientError):
    """The upstream API answered 200 but the payload cannot be trusted."""


class TooManyRequestsError(ClientError):
    """The upstream API rate limited the call (429)."""


class UpstreamError(ClientError):
    """Any other status code, or a transport failure."""
