from domain.models.result import FailureKind


class CurrencyException(Exception):
    kind = FailureKind.UNEXPECTED


class InvalidCurrencyError(CurrencyException):
    kind = FailureKind.INVALID_CURRENCY


class InvalidAmountError(CurrencyException):
    kind = FailureKind.INVALID_AMOUNT


class ProviderError(CurrencyException):
    kind = FailureKind.PROVIDER


class ProviderAPIError(ProviderError):
    """The provider understood the request and rejected it."""

    def __init__(self, message: str, error_type: str | None = None):
        super().__init__(message)
        self.error_type = error_type


class ProviderTimeoutError(ProviderError):
    kind = FailureKind.TIMEOUT


class ProviderConnectionError(ProviderError):
    kind = FailureKind.CONNECTION


class ProviderHTTPError(ProviderError):
    kind = FailureKind.HTTP

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class ProviderResponseError(ProviderError):
    kind = FailureKind.INVALID_RESPONSE
