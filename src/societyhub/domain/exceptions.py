"""Domain exceptions."""


class SocietyHubError(Exception):
    """Base exception for SocietyHub."""

    pass


class ValidationError(SocietyHubError):
    """Validation failed for input data."""

    pass


class MembershipError(SocietyHubError):
    """Student is not an active member of the society."""

    pass


class InvalidRoleError(SocietyHubError):
    """One or more role ids do not belong to the society."""

    pass


class InvalidPrivilegeError(SocietyHubError):
    """One or more privilege keys are not in the catalog."""

    pass


class DuplicateRoleError(SocietyHubError):
    """Role with the same name already exists in the society."""

    pass


class NotFound(SocietyHubError):
    """Requested resource was not found."""

    def __init__(self, resource: str, key: object) -> None:
        super().__init__(f"{resource} not found: {key}")
        self.resource = resource
        self.key = key


class PersistenceError(SocietyHubError):
    """Atomic write failed and was rolled back."""

    pass
