from video_rental import create_app
from video_rental.models.catalog import Catalog
from video_rental.services.demo import DEMO_CUSTOMER, seed_demo_catalog


def main():
    app = create_app()
    with app.app_context():
        catalog = Catalog.instance()

        # ---- Demo movies and the demo customer's rentals ----
        seed_demo_catalog(catalog)

        customer = catalog.get_customer(DEMO_CUSTOMER)
        print(customer.text_statement())
        print()
        print(customer.html_statement())


if __name__ == "__main__":
    main()
