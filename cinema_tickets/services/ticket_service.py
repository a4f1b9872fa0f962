"""
Ticket purchase service: validates requests, takes payment, reserves seats.

RULES
=====
  - Account IDs are positive integers
  - Every request names a ticket type and a positive count
  - Between 1 and MAX_TICKETS tickets per purchase, all types counted
  - Child and infant tickets need at least one adult ticket
  - Infants pay nothing and sit on an adult's lap (no seat)

All rules are checked before either gateway is called, so a rejected
purchase never charges an account or holds a seat. Gateway failures
propagate to the caller unchanged.

Prices are read once at construction. The service keeps no other state,
so one instance can serve concurrent callers when the gateways allow it.
"""

from typing import Iterable, Optional

import structlog

from cinema_tickets.core.exceptions import ConfigurationError, InvalidPurchaseError
from cinema_tickets.core.logging import get_logger
from cinema_tickets.core.metrics import (
    record_purchase,
    record_purchase_amount,
    record_tickets_sold,
)
from cinema_tickets.schemas.ticket import PurchaseOutcome, TicketType, TicketTypeRequest
from cinema_tickets.services.interfaces.config_loader import ConfigurationLoader
from cinema_tickets.services.interfaces.payment import TicketPaymentService
from cinema_tickets.services.interfaces.seat_reservation import SeatReservationService
from cinema_tickets.services.interfaces.ticket_service import TicketService

logger = get_logger(__name__)

MAX_TICKETS = 25

ERR_INVALID_ACCOUNT = "Invalid account ID"
ERR_NO_TICKETS = "No ticket requests provided"
ERR_NULL_REQUEST = "Null ticket request encountered"
ERR_UNEXPECTED_TYPE = "Unexpected ticket type encountered: {}"
ERR_INVALID_COUNT = "Invalid ticket count: Ticket count must be a positive number."
ERR_TICKET_LIMIT = (
    "Invalid ticket purchase: You must buy at least 1 ticket, "
    f"and a maximum of {MAX_TICKETS} tickets can be purchased at a time."
)
ERR_ADULT_REQUIRED = "Child and Infant tickets require an accompanying Adult ticket purchase."
ERR_INVALID_PRICES = "Ticket prices must be positive numbers."


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class TicketServiceImpl(TicketService):

    def __init__(
        self,
        payment_service: TicketPaymentService,
        reservation_service: SeatReservationService,
        config_loader: ConfigurationLoader,
    ):
        if payment_service is None:
            raise ValueError("PaymentService must not be null")
        if reservation_service is None:
            raise ValueError("ReservationService must not be null")
        if config_loader is None:
            raise ValueError("ConfigurationLoader must not be null")

        self.payment_service = payment_service
        self.reservation_service = reservation_service

        pricing = config_loader.load()
        if not (_is_positive_int(pricing.adult_price) and _is_positive_int(pricing.child_price)):
            logger.error(
                "invalid_ticket_prices",
                adult_price=pricing.adult_price,
                child_price=pricing.child_price,
            )
            raise ConfigurationError(ERR_INVALID_PRICES)
        self._pricing = pricing

    @property
    def adult_ticket_price(self) -> int:
        return self._pricing.adult_price

    @property
    def child_ticket_price(self) -> int:
        return self._pricing.child_price

    def purchase_tickets(
        self,
        account_id: Optional[int],
        ticket_requests: Optional[Iterable[Optional[TicketTypeRequest]]],
    ) -> PurchaseOutcome:
        with structlog.contextvars.bound_contextvars(account_id=account_id):
            try:
                outcome = self._purchase(account_id, ticket_requests)
            except InvalidPurchaseError as e:
                record_purchase("rejected")
                logger.warning("purchase_rejected", reason=e.message)
                raise

            record_purchase("success")
            record_tickets_sold(
                outcome.adult_tickets, outcome.child_tickets, outcome.infant_tickets
            )
            record_purchase_amount(outcome.total_amount)
            logger.info(
                "tickets_purchased",
                adults=outcome.adult_tickets,
                children=outcome.child_tickets,
                infants=outcome.infant_tickets,
                amount=outcome.total_amount,
                seats=outcome.seats_reserved,
            )
            return outcome

    def _purchase(self, account_id, ticket_requests) -> PurchaseOutcome:
        if not _is_positive_int(account_id):
            raise InvalidPurchaseError(ERR_INVALID_ACCOUNT)

        # An empty generator is truthy, so check the materialised list
        requests = list(ticket_requests or ())
        if not requests:
            raise InvalidPurchaseError(ERR_NO_TICKETS)

        totals = {ticket_type: 0 for ticket_type in TicketType}
        for request in requests:
            if request is None:
                raise InvalidPurchaseError(ERR_NULL_REQUEST)
            if not isinstance(request.ticket_type, TicketType):
                shown = "null" if request.ticket_type is None else request.ticket_type
                raise InvalidPurchaseError(ERR_UNEXPECTED_TYPE.format(shown))
            if request.no_of_tickets <= 0:
                raise InvalidPurchaseError(ERR_INVALID_COUNT)
            totals[request.ticket_type] += request.no_of_tickets

        adults = totals[TicketType.ADULT]
        children = totals[TicketType.CHILD]
        infants = totals[TicketType.INFANT]

        total_tickets = adults + children + infants
        if total_tickets == 0 or total_tickets > MAX_TICKETS:
            raise InvalidPurchaseError(ERR_TICKET_LIMIT)

        if adults == 0 and (children > 0 or infants > 0):
            raise InvalidPurchaseError(ERR_ADULT_REQUIRED)

        total_amount = adults * self.adult_ticket_price + children * self.child_ticket_price
        self.payment_service.make_payment(account_id, total_amount)

        # Infants sit on an adult's lap
        seats = adults + children
        self.reservation_service.reserve_seat(account_id, seats)

        return PurchaseOutcome(
            account_id=account_id,
            adult_tickets=adults,
            child_tickets=children,
            infant_tickets=infants,
            total_amount=total_amount,
            seats_reserved=seats,
        )
