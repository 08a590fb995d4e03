"""Domain-level exceptions.

Every failure the core reports is a subclass of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.
Raw driver errors never leave the persistence package.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input has the wrong shape or is out of range."""


class ProductInUseError(ValidationError):
    """A product cannot be deleted while sale items still reference it."""


class NotFoundError(DomainException):
    """A requested entity does not exist."""


class DuplicateCodeError(DomainException):
    """A product or sale code is already taken."""


class EmptyCartError(DomainException):
    """Checkout was attempted with no cart lines."""


class StorageError(DomainException):
    """The store could not complete an operation.

    ``sale_code`` is set when a checkout failed, so the caller can look
    the code up before deciding to retry.
    """

    def __init__(self, message: str, sale_code: str | None = None) -> None:
        super().__init__(message)
        self.sale_code = sale_code


class StorageInitError(StorageError):
    """The store could not be opened or its schema could not be created."""
