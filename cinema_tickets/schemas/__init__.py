from cinema_tickets.schemas.ticket import (
    PricingConfig,
    PurchaseOutcome,
    TicketType,
    TicketTypeRequest,
)

__all__ = [
    "TicketType", "TicketTypeRequest",
    "PricingConfig", "PurchaseOutcome",
]
