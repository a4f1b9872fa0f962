"""
Service interfaces for dependency inversion.
Allows swapping collaborators without changing purchase rules.
"""

from .config_loader import ConfigurationLoader
from .payment import TicketPaymentService
from .seat_reservation import SeatReservationService
from .ticket_service import TicketService

__all__ = [
    'ConfigurationLoader',
    'TicketPaymentService',
    'SeatReservationService',
    'TicketService',
]
