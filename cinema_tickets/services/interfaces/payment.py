"""
Payment gateway interface.
"""

from abc import ABC, abstractmethod


class TicketPaymentService(ABC):
    """
    External payment provider. Assumed authoritative: a call that returns
    means the account was charged.
    """

    @abstractmethod
    def make_payment(self, account_id: int, total_amount_to_pay: int):
        pass
