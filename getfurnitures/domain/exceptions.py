"""Domain exceptions.

Every error the service reports to a caller is one of these. The ``code`` is a
stable discriminant that ends up in the error envelope, so renaming one is a
breaking API change.
"""


class DomainError(Exception):
    code = "server_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """Missing or malformed input"""
    code = "validation_error"


class ConflictError(DomainError):
    """Duplicate email, duplicate favourite, duplicate live order, illegal status change"""
    code = "conflict"


class NotFoundError(DomainError):
    code = "not_found"


class UnauthorizedError(DomainError):
    """Bad credentials or a missing/invalid session token"""
    code = "unauthorized"


class ForbiddenError(DomainError):
    """Authenticated, but not allowed (unverified account, wrong role)"""
    code = "forbidden"


class ExpiredError(DomainError):
    code = "expired"
