from decimal import Decimal
from typing import Union

from ..exceptions import InvalidCustomerNameError, InvalidRentalError
from .rental import Rental
from .statement import HtmlStatement, StatementFormat, StatementRenderer, TextStatement, get_statement_format


class Customer:
    """
    Owns an ordered list of rentals. Totals are recomputed from the list on
    every call, so they always match the current rentals and movie pricing.
    """

    def __init__(self, name: str) -> None:
        if not isinstance(name, str) or not name.strip():
            raise InvalidCustomerNameError()
        self.name = name
        self._rentals: list[Rental] = []

    def __repr__(self) -> str:
        return f"Customer(name={self.name!r}, rentals={len(self._rentals)})"

    @property
    def rentals(self) -> tuple[Rental, ...]:
        return tuple(self._rentals)

    def add_rental(self, rental: Rental) -> None:
        """Append a rental; duplicates are kept."""
        if not isinstance(rental, Rental):
            raise InvalidRentalError(f"Error: expected a Rental, got {rental!r}")
        self._rentals.append(rental)

    def amount_for(self, rental: Rental) -> Decimal:
        return rental.charge()

    def total_charge(self) -> Decimal:
        return sum((rental.charge() for rental in self._rentals), Decimal("0"))

    def total_frequent_renter_points(self) -> int:
        return sum(rental.frequent_renter_points() for rental in self._rentals)

    def statement(self, fmt: Union[StatementFormat, str]) -> str:
        """
        Render this customer's statement. `fmt` may be a StatementFormat or a
        registered format name; anything else, None included, is rejected.
        """
        if isinstance(fmt, str):
            fmt = get_statement_format(fmt)
        return StatementRenderer(fmt).render(self)

    def text_statement(self) -> str:
        return self.statement(TextStatement())

    def html_statement(self) -> str:
        return self.statement(HtmlStatement())
