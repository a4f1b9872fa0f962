"""
Tests for ticket request, pricing and outcome schemas.
"""

import pytest
from pydantic import ValidationError

from cinema_tickets.schemas.ticket import (
    PricingConfig,
    PurchaseOutcome,
    TicketType,
    TicketTypeRequest,
)


def test_ticket_type_parsed_from_string():
    request = TicketTypeRequest(ticket_type="CHILD", no_of_tickets=2)
    assert request.ticket_type is TicketType.CHILD


def test_unknown_ticket_type_rejected_by_schema():
    with pytest.raises(ValidationError):
        TicketTypeRequest(ticket_type="SENIOR", no_of_tickets=1)


def test_request_allows_values_the_service_rejects():
    """Missing types and zero counts are purchase errors, not schema errors."""
    request = TicketTypeRequest(ticket_type=None, no_of_tickets=0)
    assert request.ticket_type is None
    assert request.no_of_tickets == 0


def test_request_is_immutable():
    request = TicketTypeRequest(ticket_type=TicketType.ADULT, no_of_tickets=1)
    with pytest.raises(ValidationError):
        request.no_of_tickets = 5


def test_pricing_is_immutable():
    pricing = PricingConfig(adult_price=25, child_price=15)
    with pytest.raises(ValidationError):
        pricing.adult_price = 1


def test_outcome_total_tickets():
    outcome = PurchaseOutcome(
        account_id=1,
        adult_tickets=2,
        child_tickets=1,
        infant_tickets=1,
        total_amount=65,
        seats_reserved=3,
    )
    assert outcome.total_tickets == 4
    assert outcome.model_dump()["total_tickets"] == 4
