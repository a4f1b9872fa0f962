"""Shared exceptions for ticket purchasing."""


class CinemaTicketsError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(CinemaTicketsError):
    """Pricing configuration is missing, malformed or invalid."""


class InvalidPurchaseError(CinemaTicketsError):
    """A purchase request broke a business rule."""
