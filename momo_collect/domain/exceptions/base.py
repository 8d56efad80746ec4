"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Every failure that can end a payment run derives from this class,
    so the command line only has to handle a single type.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)
