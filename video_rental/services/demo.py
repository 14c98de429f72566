"""Demo catalog used by seeds.py and by create_app when SEED_DEMO_DATA is set."""

from video_rental.models.catalog import Catalog
from video_rental.models.rental import Rental
from video_rental.services.common import price_for_code
from video_rental.utils.constants import PriceCode

DEMO_CUSTOMER = "C. Swayze"


def seed_demo_catalog(catalog: Catalog) -> None:
    """
    Ensure the demo movies exist and the demo customer has rented them.
    Idempotent: a customer that already has rentals is left alone.
    """
    if "The Watchmen" not in catalog.movies:
        catalog.add_movie("The Watchmen", price_for_code(PriceCode.NEW_RELEASE))
    if "Road House" not in catalog.movies:
        # Was a new release; reclassified once its window closed.
        road_house = catalog.add_movie("Road House", price_for_code(PriceCode.NEW_RELEASE))
        road_house.set_price(price_for_code(PriceCode.REGULAR))
    if "The Iron Giant" not in catalog.movies:
        catalog.add_movie("The Iron Giant", price_for_code(PriceCode.CHILDRENS))

    customer = catalog.customer(DEMO_CUSTOMER)
    if not customer.rentals:
        customer.add_rental(Rental(catalog.get_movie("The Watchmen"), 2))
        customer.add_rental(Rental(catalog.get_movie("Road House"), 2))
