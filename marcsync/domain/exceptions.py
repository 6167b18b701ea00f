"""Domain-specific exceptions — transport-independent."""


class MarcSyncError(Exception):
    """Base class for every error raised by the MarcSync client."""


class RemoteError(MarcSyncError):
    """Raised when the backend answers with a status other than 200."""

    def __init__(self, status_code: int, message: str, action: str = "call MarcSync"):
        self.status_code = status_code
        self.message = message
        self.action = action
        super().__init__(f"Failed to {action}: {status_code} {message}")


class TransportError(MarcSyncError):
    """Raised when no response status could be obtained (DNS, refused, bad URL)."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.message = message
        self.cause = cause
        super().__init__(message)


class DecodeError(MarcSyncError):
    """Raised when a response body is not JSON or does not have the expected shape."""

    def __init__(self, message: str, body: str = ""):
        self.message = message
        self.body = body
        super().__init__(message)


class EmptyResultError(MarcSyncError):
    """Raised when a lookup by id matches no entry."""

    def __init__(self, collection_name: str, entry_id: str):
        self.collection_name = collection_name
        self.entry_id = entry_id
        super().__init__(
            f"No entry with _id '{entry_id}' in collection '{collection_name}'"
        )


class BulkOperationNotConfirmedError(MarcSyncError):
    """Raised when an empty filter would touch every entry without confirmation."""

    def __init__(self, collection_name: str, operation: str):
        self.collection_name = collection_name
        self.operation = operation
        super().__init__(
            f"Refusing to {operation} every entry of '{collection_name}' "
            "with an empty filter; pass confirm_all=True"
        )
