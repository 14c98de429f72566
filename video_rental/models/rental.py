from dataclasses import dataclass
from decimal import Decimal

from ..exceptions import InvalidRentalError, InvalidRentalPeriodError
from .movie import Movie


def _check_rental_days(days) -> int:
    if isinstance(days, bool) or not isinstance(days, int):
        raise InvalidRentalPeriodError(f"Error: days rented must be an integer, got {days!r}")
    if days < 1:
        raise InvalidRentalPeriodError(f"Error: a rental lasts at least one day, got {days}")
    return days


@dataclass(eq=False)
class Rental:
    """
    Binds a duration to a shared Movie. Nothing derived is stored here, so
    charge and points always reflect the movie's current pricing.
    """
    movie: Movie
    days_rented: int

    def __post_init__(self) -> None:
        if not isinstance(self.movie, Movie):
            raise InvalidRentalError(f"Error: a rental needs a movie, got {self.movie!r}")
        _check_rental_days(self.days_rented)

    def correct_days(self, days: int) -> None:
        """Fix a mistyped duration."""
        self.days_rented = _check_rental_days(days)

    def charge(self) -> Decimal:
        return self.movie.charge(self.days_rented)

    def frequent_renter_points(self) -> int:
        return self.movie.frequent_renter_points(self.days_rented)
