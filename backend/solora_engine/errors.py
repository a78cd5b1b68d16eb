"""Exception types shared by the quote engine and the irradiance provider."""

from __future__ import annotations


class QuoteValidationError(ValueError):
    """Raised when quote inputs are malformed.

    Always raised at construction of ``QuoteInputs``, before any
    irradiance lookup or computation takes place.
    """

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class DataUnavailable(Exception):
    """Irradiance data could not be obtained or parsed for a location.

    Only raised inside the provider; ``fetch`` converts it into an
    ``IrradianceUnavailable`` result.
    """
