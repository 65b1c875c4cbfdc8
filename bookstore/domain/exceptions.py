"""
Wyjatki domenowe. Kazdy rodzaj ma swoj status HTTP,
tlumaczenie na odpowiedz robi bookstore/api/errors.py.
"""


class BookstoreError(Exception):
    """Base exception for all bookstore errors"""
    status_code = 500

    def __init__(self, message: str, code: str = "BOOKSTORE_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class EntityNotFoundError(BookstoreError):
    status_code = 404

    def __init__(self, message: str):
        super().__init__(message=message, code="NOT_FOUND")


class ValidationError(BookstoreError):
    status_code = 400

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message=message, code="VALIDATION_ERROR")


class ConflictError(BookstoreError):
    status_code = 409

    def __init__(self, message: str, code: str = "CONFLICT"):
        super().__init__(message=message, code=code)


class RegistrationError(ConflictError):
    def __init__(self, message: str):
        super().__init__(message=message, code="REGISTRATION_ERROR")


class AuthenticationError(BookstoreError):
    status_code = 401

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message=message, code="AUTHENTICATION_ERROR")


class AuthorizationError(BookstoreError):
    status_code = 403

    def __init__(self, message: str = "Access denied"):
        super().__init__(message=message, code="AUTHORIZATION_ERROR")
