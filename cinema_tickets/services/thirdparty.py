"""
Stand-in payment and seat booking gateways.
Accept every call and log it; nothing is charged or reserved.
"""

from cinema_tickets.core.logging import get_logger
from cinema_tickets.services.interfaces.payment import TicketPaymentService
from cinema_tickets.services.interfaces.seat_reservation import SeatReservationService

logger = get_logger(__name__)


class TicketPaymentServiceImpl(TicketPaymentService):
    """
    No-op payment gateway.

    Use when:
    - Local development
    - Wiring checks without a real provider
    """

    def make_payment(self, account_id: int, total_amount_to_pay: int):
        logger.debug(
            "payment_stubbed",
            account_id=account_id,
            amount=total_amount_to_pay,
        )


class SeatReservationServiceImpl(SeatReservationService):
    """No-op seat booking gateway."""

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int):
        logger.debug(
            "seat_reservation_stubbed",
            account_id=account_id,
            seats=total_seats_to_allocate,
        )
