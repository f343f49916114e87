from .conversion_engine import convert, reference_rates
from .rate_store import RateStore

__all__ = ['RateStore', 'convert', 'reference_rates']
