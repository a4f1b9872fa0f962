"""
Ticket purchase interface.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from cinema_tickets.schemas.ticket import PurchaseOutcome, TicketTypeRequest


class TicketService(ABC):

    @abstractmethod
    def purchase_tickets(
        self,
        account_id: Optional[int],
        ticket_requests: Optional[Iterable[Optional[TicketTypeRequest]]],
    ) -> PurchaseOutcome:
        """
        Validate a purchase, take payment and reserve seats.

        Args:
            account_id: Account to charge; must be a positive integer
            ticket_requests: One or more ticket type requests, any iterable

        Returns:
            The amounts charged and seats reserved

        Raises:
            InvalidPurchaseError: the purchase breaks a business rule.
                Nothing is charged or reserved in that case.
        """
        pass
