from dataclasses import dataclass
from decimal import Decimal

from ..exceptions import InvalidTitleError, MissingPricingError
from .price import PricingStrategy


@dataclass(eq=False)
class Movie:
    """
    A title plus its current pricing strategy. The strategy can be swapped
    at any time (e.g. a new release becoming regular); rentals pointing at
    this movie pick up the change on their next charge computation.
    """
    title: str
    price: PricingStrategy

    def __post_init__(self) -> None:
        if not isinstance(self.title, str) or not self.title.strip():
            raise InvalidTitleError()
        self.set_price(self.price)

    def set_price(self, new_price: PricingStrategy) -> None:
        """Replace the pricing strategy; the title is never touched."""
        if not isinstance(new_price, PricingStrategy):
            raise MissingPricingError(
                f"Error: expected a pricing strategy for {self.title!r}, got {new_price!r}"
            )
        self.price = new_price

    def charge(self, days_rented: int) -> Decimal:
        return self.price.charge(days_rented)

    def frequent_renter_points(self, days_rented: int) -> int:
        return self.price.frequent_renter_points(days_rented)
