"""
Pytest fixtures for the ticket service and its collaborators.

Gateways and the pricing loader are autospecced doubles, so tests can
assert exactly what the service sent to each of them.
"""

from unittest.mock import create_autospec

import pytest

from cinema_tickets.core.config import get_settings
from cinema_tickets.schemas.ticket import PricingConfig, TicketType, TicketTypeRequest
from cinema_tickets.services.interfaces import (
    ConfigurationLoader,
    SeatReservationService,
    TicketPaymentService,
)
from cinema_tickets.services.ticket_service import TicketServiceImpl


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so env overrides apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def payment_service() -> TicketPaymentService:
    return create_autospec(TicketPaymentService, instance=True)


@pytest.fixture
def reservation_service() -> SeatReservationService:
    return create_autospec(SeatReservationService, instance=True)


@pytest.fixture
def config_loader() -> ConfigurationLoader:
    """Loader returning adult=25, child=15."""
    loader = create_autospec(ConfigurationLoader, instance=True)
    loader.load.return_value = PricingConfig(adult_price=25, child_price=15)
    return loader


@pytest.fixture
def ticket_service(payment_service, reservation_service, config_loader) -> TicketServiceImpl:
    return TicketServiceImpl(payment_service, reservation_service, config_loader)


def adult(count: int) -> TicketTypeRequest:
    return TicketTypeRequest(ticket_type=TicketType.ADULT, no_of_tickets=count)


def child(count: int) -> TicketTypeRequest:
    return TicketTypeRequest(ticket_type=TicketType.CHILD, no_of_tickets=count)


def infant(count: int) -> TicketTypeRequest:
    return TicketTypeRequest(ticket_type=TicketType.INFANT, no_of_tickets=count)
