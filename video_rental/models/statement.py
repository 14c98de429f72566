"""
Statement rendering.

`StatementRenderer.render` owns the one traversal every statement shares:
header, one line per rental in insertion order, then a footer with the
customer's totals. A `StatementFormat` only supplies the fragments, so text
and HTML output cannot drift apart structurally.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from ..exceptions import UnknownStatementFormatError
from ..utils.constants import StatementKind


def format_amount(amount) -> str:
    """
    Display string for a charge: full precision, no trailing zeros and never
    scientific notation. 8.0 -> "8", 6.50 -> "6.5".
    """
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    return format(value.normalize(), "f")


class StatementFormat(ABC):
    """Format-specific fragments consumed by StatementRenderer."""
    name: str = ""
    media_type: str = "text/plain"

    @abstractmethod
    def render_header(self, customer_name: str) -> str: ...

    @abstractmethod
    def render_rental_line(self, movie_title: str, charge: Decimal) -> str: ...

    @abstractmethod
    def render_footer(self, total_charge: Decimal, total_points: int) -> str: ...

    def format_amount(self, amount) -> str:
        return format_amount(amount)


class TextStatement(StatementFormat):
    name = StatementKind.TEXT
    media_type = "text/plain"

    def render_header(self, customer_name: str) -> str:
        return f"Rental Record for {customer_name}\n"

    def render_rental_line(self, movie_title: str, charge: Decimal) -> str:
        return f"\t{movie_title}\t{self.format_amount(charge)}\n"

    def render_footer(self, total_charge: Decimal, total_points: int) -> str:
        return (
            f"Amount owed is {self.format_amount(total_charge)}\n"
            f"You earned {total_points} frequent renter points"
        )


class HtmlStatement(StatementFormat):
    name = StatementKind.HTML
    media_type = "text/html"

    def render_header(self, customer_name: str) -> str:
        return f"<h1>Rental Record for <em>{customer_name}</em></h1><p>\n"

    def render_rental_line(self, movie_title: str, charge: Decimal) -> str:
        return f"\t{movie_title}\t{self.format_amount(charge)}<br>\n"

    def render_footer(self, total_charge: Decimal, total_points: int) -> str:
        return (
            f"<p>You owed <em>{self.format_amount(total_charge)}</em></p>\n"
            f"<p>On this rental you earned <em>{total_points}</em> frequent renter points</p>"
        )


_FORMATS = {
    StatementKind.TEXT: TextStatement,
    StatementKind.HTML: HtmlStatement,
}


def get_statement_format(name: str) -> StatementFormat:
    """Look up a registered format by name ("text" or "html"), case-insensitively."""
    key = (name or "").strip().lower()
    if key not in _FORMATS:
        raise UnknownStatementFormatError(
            f"Error: unknown statement format {name!r} (expected one of {sorted(_FORMATS)})"
        )
    return _FORMATS[key]()


class StatementRenderer:
    """Template method: fixed header/body/footer traversal over a customer's rentals."""

    def __init__(self, fmt: StatementFormat) -> None:
        if not isinstance(fmt, StatementFormat):
            raise UnknownStatementFormatError(f"Error: expected a statement format, got {fmt!r}")
        self.fmt = fmt

    def render(self, customer) -> str:
        parts = [self.fmt.render_header(customer.name)]
        for rental in customer.rentals:
            parts.append(self.fmt.render_rental_line(rental.movie.title, rental.charge()))
        parts.append(
            self.fmt.render_footer(customer.total_charge(), customer.total_frequent_renter_points())
        )
        return "".join(parts)
