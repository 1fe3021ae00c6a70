from starlette.status import HTTP_404_NOT_FOUND, HTTP_500_INTERNAL_SERVER_ERROR


class BrokerError(Exception):
    """
    Base for failures surfaced to the caller as `{"error": message}`.
    The status code travels with the exception so the handler stays dumb.
    """
    status_code: int = HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UpstreamError(BrokerError):
    """Transport failure, non-2xx status or unparseable body from an upstream."""

    def __init__(self, upstream: str, message: str):
        super().__init__(message)
        self.upstream = upstream


class ConfigurationError(BrokerError):
    """A required credential or setting is missing."""


class InvalidRequestBody(BrokerError):
    """The inbound JSON body could not be read as a coordinate pair."""


class PropertyNotFound(BrokerError):
    status_code = HTTP_404_NOT_FOUND

    def __init__(self, message: str = "No property data found"):
        super().__init__(message)
