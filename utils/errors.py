"""
Error taxonomy for the todo service.

Every error carries the HTTP status it is reported with; the handler
registered in main.py renders it as {"error": <message>}.
"""


class TodoServiceError(Exception):
    """Base class for errors surfaced directly to the client."""

    status_code = 400
    message = "Bad request"

    def __init__(self, message: str = None, status_code: int = None):
        self.message = message or self.message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class InvalidIdFormat(TodoServiceError):
    status_code = 400
    message = "Invalid id"


class DuplicateUsername(TodoServiceError):
    status_code = 400
    message = "Username already exists"


class AlreadyPro(TodoServiceError):
    status_code = 400
    message = "Pro plan is already activated."


class InvalidDeadlineFormat(TodoServiceError):
    status_code = 400
    message = "Invalid deadline"


class UserNotFound(TodoServiceError):
    status_code = 404
    message = "User not found"


class TodoNotFound(TodoServiceError):
    status_code = 404
    message = "Todo not found"


class TodoLimitExceeded(TodoServiceError):
    status_code = 403
    message = "Todo limit exceeded for current user plan"
