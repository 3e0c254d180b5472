"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidContributionError(DomainException):
    """Goal contribution amount is zero or negative"""

    pass


class ProjectionUnavailableError(DomainException):
    """Growth projection inputs cannot produce a projection"""

    pass
