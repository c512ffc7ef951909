import math

from app.exceptions.custom import InvalidInputError

_GUESTS_PER_ROOM = {"Standard": 2, "Deluxe": 3}
_DEFAULT_GUESTS_PER_ROOM = 5


def guests_per_room(room_type: str) -> int:
    """How many guests share one room of the given type (Suite and others: 5)."""
    return _GUESTS_PER_ROOM.get(room_type, _DEFAULT_GUESTS_PER_ROOM)


def compute_rate(room_type: str, rate: float, num_guests: int) -> float:
    """Price of a booking: rooms needed for the party times the nightly room rate.

    Examples:
      - Standard, 1000, 3 guests -> ceil(3/2)=2 rooms -> 2000
      - Deluxe,    900, 4 guests -> ceil(4/3)=2 rooms -> 1800
    """
    if num_guests <= 0:
        raise InvalidInputError("numGuests must be a positive integer")
    return math.ceil(num_guests / guests_per_room(room_type)) * rate
