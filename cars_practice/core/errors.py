"""Domain errors raised by services and translated to JSON by the app."""


class AppError(Exception):
    """Base error: carries the HTTP status and the JSON `error` title."""

    status_code = 500
    error = "Internal Server Error"
    default_message = "Unexpected error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.error, "message": self.message}


# ---------- 400 ----------

class ValidationFailed(AppError):
    status_code = 400
    error = "Validation failed"
    default_message = "Invalid request"


class DuplicateEmail(AppError):
    status_code = 400
    error = "Signup failed"
    default_message = "User with this email already exists"


class SessionAlreadyCompleted(AppError):
    status_code = 400
    error = "Session already completed"
    default_message = "Session already completed"


class SessionNotCompleted(AppError):
    status_code = 400
    error = "Session not yet completed"
    default_message = "Session not yet completed"


class QuestionNotInSession(AppError):
    status_code = 400
    error = "Failed to submit answer"
    default_message = "Question not found in session"


class InvalidChoice(AppError):
    status_code = 400
    error = "Failed to submit answer"
    default_message = "Answer choice does not belong to this question"


# ---------- 401 ----------

class Unauthorized(AppError):
    status_code = 401
    error = "Unauthorized"
    default_message = "Missing or invalid authorization header"


class InvalidCredentials(Unauthorized):
    error = "Login failed"
    default_message = "Invalid email or password"


class InvalidOrExpiredToken(Unauthorized):
    default_message = "Invalid or expired token"


# ---------- 404 ----------

class NotFound(AppError):
    status_code = 404
    error = "Not Found"
    default_message = "The requested resource was not found"


class UserNotFound(NotFound):
    default_message = "User not found"


class PassageNotFound(NotFound):
    default_message = "Passage not found"


class SessionNotFound(NotFound):
    default_message = "Session not found"
