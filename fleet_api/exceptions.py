"""
Domain exceptions raised by repositories and services.

Routers never build error responses themselves; the handlers registered in
``fleet_api.main`` map these to HTTP status codes.
"""


class FleetError(Exception):
    """Base class for fleet errors."""

    status_code = 500

    def __init__(self, detail: str = "Internal server error"):
        super().__init__(detail)
        self.detail = detail


class RecordNotFoundError(FleetError):
    """The referenced record does not exist."""

    status_code = 404

    def __init__(self, record_type: str, record_id: int):
        super().__init__(f"{record_type} {record_id} not found")
        self.record_type = record_type
        self.record_id = record_id


class InvalidRecordError(FleetError):
    """A record violates a data constraint."""

    status_code = 400


class IdMismatchError(InvalidRecordError):
    """The id in the path differs from the id in the body."""

    def __init__(self, path_id: int, body_id):
        super().__init__(f"Path id {path_id} does not match body id {body_id}")
        self.path_id = path_id
        self.body_id = body_id


class UpdateConflictError(FleetError):
    """A replace touched no row even though the record still exists."""

    status_code = 409


class StorageUnavailableError(FleetError):
    """The underlying store could not be reached."""

    status_code = 500

    def __init__(self, message: str, error: str):
        super().__init__(message)
        self.message = message
        self.error = error
