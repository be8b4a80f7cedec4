from .exchangerate_api import ExchangeRateAPIClient

__all__ = ['ExchangeRateAPIClient']
