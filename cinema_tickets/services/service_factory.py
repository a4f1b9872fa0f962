"""
Ticket service factory.
Wires the purchase service to its gateways and pricing source.
"""

from typing import Optional

from cinema_tickets.core.config import get_settings
from cinema_tickets.services.config_loader import DefaultConfigurationLoader
from cinema_tickets.services.interfaces.config_loader import ConfigurationLoader
from cinema_tickets.services.interfaces.payment import TicketPaymentService
from cinema_tickets.services.interfaces.seat_reservation import SeatReservationService
from cinema_tickets.services.thirdparty import (
    SeatReservationServiceImpl,
    TicketPaymentServiceImpl,
)
from cinema_tickets.services.ticket_service import TicketServiceImpl


def get_ticket_service(
    payment_service: Optional[TicketPaymentService] = None,
    reservation_service: Optional[SeatReservationService] = None,
    config_loader: Optional[ConfigurationLoader] = None,
) -> TicketServiceImpl:
    """
    Build a ticket service.

    Missing collaborators fall back to:
    - the no-op payment and seat gateways
    - DefaultConfigurationLoader reading settings.PRICES_FILE
    """
    if config_loader is None:
        config_loader = DefaultConfigurationLoader(get_settings().PRICES_FILE)

    return TicketServiceImpl(
        payment_service or TicketPaymentServiceImpl(),
        reservation_service or SeatReservationServiceImpl(),
        config_loader,
    )
