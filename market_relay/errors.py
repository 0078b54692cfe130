"""Client-visible failure conditions of the relay endpoint."""


class RelayError(Exception):
    """Base error rendered as ``{"error": message}`` with ``status_code``."""

    status_code = 500
    message = "Internal Server Error"

    def __init__(self, message: str | None = None, status_code: int | None = None) -> None:
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class MissingParameter(RelayError):
    status_code = 400
    message = "Missing productId query parameter"


class UpstreamError(RelayError):
    """The Admin API answered with a non-2xx status; the relay mirrors it."""

    message = "Failed to fetch metafields"

    def __init__(self, status_code: int) -> None:
        super().__init__(status_code=status_code)


class UnexpectedFailure(RelayError):
    status_code = 500
    message = "Internal Server Error"
