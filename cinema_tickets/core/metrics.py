"""
Metrics instrumentation for observability.
Prometheus-compatible counters for ticket purchases.
"""

from prometheus_client import Counter, Histogram

# Purchase metrics
ticket_purchases = Counter(
    'ticket_purchases_total',
    'Total ticket purchase attempts',
    ['status']  # success, rejected
)

tickets_sold = Counter(
    'tickets_sold_total',
    'Tickets sold per ticket type',
    ['ticket_type']  # adult, child, infant
)

purchase_amount = Histogram(
    'purchase_amount',
    'Payable amount per successful purchase',
    buckets=[10, 25, 50, 100, 250, 500, 1000]
)


# Convenience functions for instrumentation
def record_purchase(status: str):
    """Record purchase attempt. Status: success, rejected"""
    ticket_purchases.labels(status=status).inc()

def record_tickets_sold(adult: int, child: int, infant: int):
    """Record tickets sold, broken down by type."""
    tickets_sold.labels(ticket_type="adult").inc(adult)
    tickets_sold.labels(ticket_type="child").inc(child)
    tickets_sold.labels(ticket_type="infant").inc(infant)

def record_purchase_amount(amount: int):
    purchase_amount.observe(amount)
