"""Errors raised by the payment workflow and stores.

Each carries the HTTP status the API layer answers with.
"""


class KioskError(Exception):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(KioskError):
    """Payment gateway credentials missing or still placeholders. Not retried."""
    status_code = 500


class ValidationError(KioskError):
    """Bad caller input, e.g. empty song title."""
    status_code = 400


class NotFoundError(KioskError):
    """Unknown payment reference or song id."""
    status_code = 404


class GatewayError(KioskError):
    """Transport or response failure talking to the provider; safe to retry."""
    status_code = 502


class PaymentNotConfirmedError(KioskError):
    """Submit without a paid, unconsumed payment."""
    status_code = 402
