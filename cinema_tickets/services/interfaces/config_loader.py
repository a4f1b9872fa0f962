"""
Pricing configuration loader interface.
"""

from abc import ABC, abstractmethod
from typing import IO, Optional

from cinema_tickets.schemas.ticket import PricingConfig


class ConfigurationLoader(ABC):
    """
    Interface for pricing configuration sources.

    Implementations:
    - DefaultConfigurationLoader: key=value properties file or stream
    """

    @abstractmethod
    def load(self) -> PricingConfig:
        """
        Load prices from the configured source.

        Raises:
            ConfigurationError: source missing, unreadable, empty, or
                lacking a required price key
        """
        pass

    @abstractmethod
    def load_from_stream(self, stream: Optional[IO]) -> PricingConfig:
        """
        Load prices from an already opened byte or text stream.

        Raises:
            ConfigurationError: stream is None, or its content fails the
                same checks as load()
        """
        pass
