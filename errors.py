"""
Application error taxonomy.

Services raise these; the handlers registered in main.py turn them into
JSON responses of the form {"error": "<message>"}. `detail` is only logged.
"""


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str, detail: str = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class NotFoundError(AppError):
    """The id does not resolve to a stored document."""
    status_code = 404


class ValidationError(AppError):
    """A required field is missing or malformed. Callers see only the operation's message."""
    status_code = 500


class StoreError(AppError):
    """Any underlying persistence failure. The cause is logged, never returned to the caller."""
    status_code = 500
