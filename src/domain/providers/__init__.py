"""Domain provider interfaces.

Abstractions are defined with abc.ABC and @abstractmethod.  Concrete
implementations live in src/infrastructure/market_data/.
"""

from .prices import PriceProvider

__all__ = ["PriceProvider"]
