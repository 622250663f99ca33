"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ConfigurationMissingError(DomainException):
    """Admin or collaborator addresses have not been configured yet"""

    pass


class AlreadyInitializedError(DomainException):
    """An admin identity is already registered"""

    pass


class UnauthorizedError(DomainException):
    """Caller is not the identity required for the operation"""

    pass


class CollaboratorError(DomainException):
    """An upstream collaborator call failed or returned unusable data"""

    def __init__(self, collaborator: str, message: str):
        super().__init__(f"{collaborator}: {message}")
        self.collaborator = collaborator


class ArithmeticOverflowError(DomainException):
    """A report figure does not fit its fixed-width integer type"""

    pass
