"""
Pydantic schemas for ticket purchase requests, pricing and outcomes.

Requests accept a missing ticket type and non-positive counts on purpose:
those are purchase rule violations reported by the ticket service, not
schema errors.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, computed_field


class TicketType(str, Enum):
    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


class TicketTypeRequest(BaseModel):
    ticket_type: Optional[TicketType]
    no_of_tickets: int

    model_config = {"frozen": True}


class PricingConfig(BaseModel):
    adult_price: int
    child_price: int

    model_config = {"frozen": True}


class PurchaseOutcome(BaseModel):
    account_id: int
    adult_tickets: int
    child_tickets: int
    infant_tickets: int
    total_amount: int
    seats_reserved: int

    model_config = {"frozen": True}

    @computed_field
    @property
    def total_tickets(self) -> int:
        return self.adult_tickets + self.child_tickets + self.infant_tickets
