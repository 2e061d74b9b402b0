"""Engine-level exceptions."""


class AppError(Exception):
    """Base exception for ledger errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        super().__init__(message, code=code)


class InvalidTransaction(ValidationError):
    """Raised when a transaction is missing fields required by its type."""

    def __init__(self, message: str):
        super().__init__(message, code="INVALID_TRANSACTION")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str, code: str = "NOT_FOUND"):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}", code=code)


class UnknownAccount(NotFoundError):
    """Raised when an operation references an account that does not exist."""

    def __init__(self, account_id: str):
        super().__init__("Account", account_id, code="UNKNOWN_ACCOUNT")


class InsufficientFunds(AppError):
    """Raised when a debit would overdraw an account and overdraft is disabled."""

    def __init__(self, account_id: str, requested: str, available: str):
        super().__init__(
            f"Insufficient cash in {account_id}: requested {requested}, available {available}",
            code="INSUFFICIENT_FUNDS",
        )
