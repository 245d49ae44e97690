"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class AuthenticationRequiredError(InterfaceError):
    """Raised when a request carries no valid viewer token."""

    def __init__(self, reason: str = "Authentication required"):
        self.reason = reason
        super().__init__(reason)
