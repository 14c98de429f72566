"""Shared service helpers and factories."""

from typing import Union

from video_rental.exceptions import InvalidRentalPeriodError, UnknownPriceCodeError
from video_rental.models.catalog import Catalog
from video_rental.models.movie import Movie
from video_rental.models.price import ChildrensPrice, NewReleasePrice, PricingStrategy, RegularPrice
from video_rental.models.statement import format_amount
from video_rental.utils.constants import PRICE_CODE_ALIASES, PriceCode

_PRICES = {
    PriceCode.REGULAR: RegularPrice,
    PriceCode.NEW_RELEASE: NewReleasePrice,
    PriceCode.CHILDRENS: ChildrensPrice,
}


def _catalog() -> Catalog:
    """Get the singleton catalog instance."""
    return Catalog.instance()


def norm_code(value: Union[str, int, None]) -> str:
    """Normalize a price code; integer aliases (0/1/2) map to their names."""
    if isinstance(value, int) and not isinstance(value, bool):
        return PRICE_CODE_ALIASES.get(value, str(value))
    text = (value or "").strip().lower().replace("-", "_").replace(" ", "_")
    if text.isdigit():
        return PRICE_CODE_ALIASES.get(int(text), text)
    return text


def price_for_code(code: Union[str, int, None]) -> PricingStrategy:
    """Build a fresh pricing strategy for a price code."""
    key = norm_code(code)
    if key not in _PRICES:
        raise UnknownPriceCodeError(
            f"Error: unknown price code {code!r} (expected one of {sorted(_PRICES)})"
        )
    return _PRICES[key]()


def parse_days(value) -> int:
    """Parse a form/query value into a day count; raise InvalidRentalPeriodError on bad input."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise InvalidRentalPeriodError(f"Error: days rented must be a whole number, got {value!r}")


# -------- model -> dict mappers --------
def movie_to_dict(movie: Movie) -> dict:
    return {"title": movie.title, "price_code": movie.price.code}


def rental_to_dict(rental) -> dict:
    return {
        "title": rental.movie.title,
        "days_rented": rental.days_rented,
        "charge": format_amount(rental.charge()),
        "frequent_renter_points": rental.frequent_renter_points(),
    }
