# blogapp/core/exceptions.py

"""Domain errors raised by the crud layer.

Each error carries the HTTP status it maps to; ``blogapp.main`` turns any
``BlogAppError`` into a JSON response with that status and ``detail``.
"""


class BlogAppError(Exception):
    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class BadRequestError(BlogAppError):
    status_code = 400


class UnauthorizedError(BlogAppError):
    status_code = 401


class ForbiddenError(BlogAppError):
    status_code = 403


class NotFoundError(BlogAppError):
    status_code = 404


class ConflictError(BlogAppError):
    status_code = 409
