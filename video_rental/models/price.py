from abc import ABC, abstractmethod
from decimal import Decimal

from ..exceptions import InvalidRentalPeriodError
from ..utils.constants import PriceCode


def _check_days(days_rented) -> int:
    """Reject anything that is not a non-negative integer number of days."""
    if isinstance(days_rented, bool) or not isinstance(days_rented, int):
        raise InvalidRentalPeriodError(f"Error: days rented must be an integer, got {days_rented!r}")
    if days_rented < 0:
        raise InvalidRentalPeriodError(f"Error: days rented cannot be negative, got {days_rented}")
    return days_rented


class PricingStrategy(ABC):
    """
    Base pricing rule. A strategy turns a rental duration into a charge and a
    frequent renter point award. Subclasses decide the charge; the default
    point award is one per rental.
    """
    code: str = ""

    @abstractmethod
    def charge(self, days_rented: int) -> Decimal:
        """Charge for renting `days_rented` days; never rounded."""

    def frequent_renter_points(self, days_rented: int) -> int:
        _check_days(days_rented)
        return 1

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return f"{type(self).__name__}()"


class RegularPrice(PricingStrategy):
    """
    Regular titles: 2 for the first two days, then 1.5 per extra day.
    """
    code = PriceCode.REGULAR

    def charge(self, days_rented: int) -> Decimal:
        days = _check_days(days_rented)
        result = Decimal("2")
        if days > 2:
            result += (days - 2) * Decimal("1.5")
        return result


class NewReleasePrice(PricingStrategy):
    """
    New releases: 3 per day, and a bonus point for rentals longer than a day.
    """
    code = PriceCode.NEW_RELEASE

    def charge(self, days_rented: int) -> Decimal:
        return _check_days(days_rented) * Decimal("3")

    def frequent_renter_points(self, days_rented: int) -> int:
        return 2 if _check_days(days_rented) > 1 else 1


class ChildrensPrice(PricingStrategy):
    """
    Children's titles: 1.5 for the first three days, then 1.5 per extra day.
    """
    code = PriceCode.CHILDRENS

    def charge(self, days_rented: int) -> Decimal:
        days = _check_days(days_rented)
        result = Decimal("1.5")
        if days > 3:
            result += (days - 3) * Decimal("1.5")
        return result
