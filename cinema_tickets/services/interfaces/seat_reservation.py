"""
Seat booking interface.
"""

from abc import ABC, abstractmethod


class SeatReservationService(ABC):
    """
    External seat booking provider. Seat selection is its own concern;
    callers only say how many seats an account needs.
    """

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int):
        pass
