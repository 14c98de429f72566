import logging
import threading

from ..exceptions import CustomerNotFoundError, DuplicateMovieError, MovieNotFoundError
from .customer import Customer
from .movie import Movie
from .price import PricingStrategy

logger = logging.getLogger(__name__)


class Catalog:
    """
    In-memory registry of movies (by title) and customers (by name) for the
    lifetime of the process. Nothing is written to disk.

    The lock guards the registry dicts only; Movie and Customer objects are
    not synchronized, so concurrent writers must serialize add_rental/set_price.
    """
    _inst = None
    _inst_lock = threading.Lock()

    def __init__(self):
        self.movies: dict[str, Movie] = {}
        self.customers: dict[str, Customer] = {}
        self._rw = threading.RLock()

    # ---------- Singleton ----------
    @classmethod
    def instance(cls):
        """Return the global singleton instance of Catalog."""
        with cls._inst_lock:
            if cls._inst is None:
                cls._inst = Catalog()
        return cls._inst

    @classmethod
    def reset(cls):
        """Drop the singleton; the next instance() call starts empty."""
        with cls._inst_lock:
            cls._inst = None

    def clear(self):
        with self._rw:
            self.movies.clear()
            self.customers.clear()

    # ---------- Movies ----------
    def add_movie(self, title: str, price: PricingStrategy) -> Movie:
        """
        Register a new movie. A title can be registered once; existing rentals
        hold the Movie object, so pricing changes go through set_price instead.
        """
        movie = Movie(title, price)
        with self._rw:
            if title in self.movies:
                raise DuplicateMovieError(f"Error: movie {title!r} already exists")
            self.movies[title] = movie
        logger.info("Added movie %r priced as %s", title, price.code)
        return movie

    def get_movie(self, title: str) -> Movie:
        movie = self.movies.get(title)
        if movie is None:
            raise MovieNotFoundError(f"Error: movie {title!r} not found")
        return movie

    def all_movies(self) -> list[Movie]:
        return sorted(self.movies.values(), key=lambda m: m.title)

    # ---------- Customers ----------
    def customer(self, name: str) -> Customer:
        """Find a customer by name, creating one on first use."""
        with self._rw:
            found = self.customers.get(name)
            if found is None:
                found = Customer(name)
                self.customers[name] = found
                logger.info("Created customer %r", name)
            return found

    def get_customer(self, name: str) -> Customer:
        found = self.customers.get(name)
        if found is None:
            raise CustomerNotFoundError(f"Error: customer {name!r} not found")
        return found
