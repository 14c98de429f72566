from decimal import Decimal

import pytest

from video_rental.exceptions import (
    InvalidRentalError,
    InvalidRentalPeriodError,
    InvalidTitleError,
    MissingPricingError,
)
from video_rental.models.movie import Movie
from video_rental.models.price import ChildrensPrice, NewReleasePrice, RegularPrice
from video_rental.models.rental import Rental


def test_movie_forwards_to_current_price():
    movie = Movie("The Watchmen", NewReleasePrice())
    assert movie.charge(2) == 6
    assert movie.frequent_renter_points(2) == 2

    movie.set_price(RegularPrice())
    assert movie.charge(2) == 2
    assert movie.frequent_renter_points(2) == 1

    movie.set_price(ChildrensPrice())
    assert movie.charge(2) == Decimal("1.5")
    assert movie.frequent_renter_points(2) == 1
    assert movie.title == "The Watchmen"


@pytest.mark.parametrize("title", ["", "   ", None, 42])
def test_movie_rejects_bad_title(title):
    with pytest.raises(InvalidTitleError):
        Movie(title, RegularPrice())


def test_movie_requires_a_price():
    with pytest.raises(MissingPricingError):
        Movie("Alien", None)
    movie = Movie("Alien", RegularPrice())
    with pytest.raises(MissingPricingError):
        movie.set_price("regular")
    assert movie.price == RegularPrice()


def test_rental_delegates_to_movie():
    rental = Rental(Movie("Alien", RegularPrice()), 5)
    assert rental.charge() == Decimal("6.5")
    assert rental.frequent_renter_points() == 1


def test_reclassification_reaches_existing_rentals():
    movie = Movie("The Watchmen", NewReleasePrice())
    first = Rental(movie, 3)
    second = Rental(movie, 1)
    assert first.charge() == 9
    assert second.charge() == 3

    movie.set_price(RegularPrice())
    assert first.charge() == Decimal("3.5")
    assert second.charge() == 2
    assert first.frequent_renter_points() == 1


@pytest.mark.parametrize("days", [0, -3, 1.5, "2", None])
def test_rental_rejects_bad_days(days):
    with pytest.raises(InvalidRentalPeriodError):
        Rental(Movie("Alien", RegularPrice()), days)


def test_rental_requires_movie():
    with pytest.raises(InvalidRentalError):
        Rental("Alien", 2)


def test_correct_days_updates_charge():
    rental = Rental(Movie("Alien", RegularPrice()), 2)
    assert rental.charge() == 2
    rental.correct_days(4)
    assert rental.days_rented == 4
    assert rental.charge() == 5
    with pytest.raises(InvalidRentalPeriodError):
        rental.correct_days(0)
    assert rental.days_rented == 4
