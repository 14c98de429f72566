"""Rental-related service layer utilities."""

import logging
from typing import Optional

from video_rental.exceptions import (
    CustomerNotFoundError,
    DuplicateMovieError,
    InvalidCustomerNameError,
    InvalidRentalPeriodError,
    InvalidTitleError,
    MovieNotFoundError,
    UnknownPriceCodeError,
    UnknownStatementFormatError,
)
from video_rental.models.catalog import Catalog
from video_rental.models.rental import Rental
from video_rental.models.statement import get_statement_format
from video_rental.services import common
from video_rental.services.common import parse_days, price_for_code

logger = logging.getLogger(__name__)


class RentalService:
    """
    Add movies, rent, reclassify, and render statements.
    Pricing itself lives in the model classes; this layer resolves names,
    validates raw input and reports outcomes as (ok, message, payload).
    On failure the payload is the raised error, so callers can branch on its
    type rather than on the message text.
    """

    @staticmethod
    def _get_catalog(catalog: Optional[Catalog] = None) -> Catalog:
        """Prefer an injected catalog (tests); otherwise the shared singleton."""
        if catalog is not None:
            return catalog
        return common._catalog()

    @staticmethod
    def add_movie(title: str, price_code, catalog: Optional[Catalog] = None):
        """
        Register a movie under a price code. A title already in the catalog is
        rejected; use reclassify to change its pricing.

        Returns:
            (ok: bool, message: str, movie or error)
        """
        cat = RentalService._get_catalog(catalog)
        try:
            movie = cat.add_movie((title or "").strip(), price_for_code(price_code))
        except (InvalidTitleError, UnknownPriceCodeError, DuplicateMovieError) as e:
            logger.warning("Rejected movie %r: %s", title, e.message)
            return False, e.message, e
        return True, "Movie added", movie

    @staticmethod
    def rent(customer_name: str, title: str, days, catalog: Optional[Catalog] = None):
        """
        Record a rental of `title` for `days` days on the named customer's
        account. The customer is created on first rental.

        Returns:
            (ok: bool, message: str, rental or error)
        """
        cat = RentalService._get_catalog(catalog)
        try:
            movie = cat.get_movie(title)
            rental = Rental(movie, parse_days(days))
            customer = cat.customer((customer_name or "").strip())
        except (MovieNotFoundError, InvalidRentalPeriodError, InvalidCustomerNameError) as e:
            logger.warning("Rejected rental of %r for %r: %s", title, customer_name, e.message)
            return False, e.message, e

        customer.add_rental(rental)
        logger.info("Recorded rental of %r for %s day(s) by %r", title, rental.days_rented, customer.name)
        return True, "OK", rental

    @staticmethod
    def reclassify(title: str, price_code, catalog: Optional[Catalog] = None):
        """
        Swap a movie's pricing strategy. Existing rentals of the movie are
        charged under the new strategy from now on.

        Returns:
            (ok: bool, message: str, movie or error)
        """
        cat = RentalService._get_catalog(catalog)
        try:
            movie = cat.get_movie(title)
            movie.set_price(price_for_code(price_code))
        except (MovieNotFoundError, UnknownPriceCodeError) as e:
            logger.warning("Rejected reclassification of %r: %s", title, e.message)
            return False, e.message, e
        logger.info("Reclassified %r as %s", title, movie.price.code)
        return True, "Movie reclassified", movie

    @staticmethod
    def statement(customer_name: str, fmt_name: str = "text", catalog: Optional[Catalog] = None):
        """
        Render a customer's statement in the named format.

        Returns:
            (ok: bool, message: str, (body, media_type) or error)
        """
        cat = RentalService._get_catalog(catalog)
        try:
            customer = cat.get_customer(customer_name)
            fmt = get_statement_format(fmt_name)
        except (CustomerNotFoundError, UnknownStatementFormatError) as e:
            return False, e.message, e
        return True, "OK", (customer.statement(fmt), fmt.media_type)

    @staticmethod
    def totals(customer_name: str, catalog: Optional[Catalog] = None):
        """
        Look up a customer for a totals summary.

        Returns:
            (ok: bool, message: str, customer or error)
        """
        cat = RentalService._get_catalog(catalog)
        try:
            customer = cat.get_customer(customer_name)
        except CustomerNotFoundError as e:
            return False, e.message, e
        return True, "OK", customer
