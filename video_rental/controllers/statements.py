from flask import Blueprint, Response, current_app, jsonify, request

from ..exceptions import CustomerNotFoundError, DuplicateMovieError, MovieNotFoundError
from ..models.statement import format_amount
from ..services.common import movie_to_dict, rental_to_dict
from ..services.rental_service import RentalService

bp = Blueprint("statements", __name__, url_prefix="/")


def _error_response(msg, error):
    """Map a failed service call to a JSON error with a status picked by error type."""
    if isinstance(error, (MovieNotFoundError, CustomerNotFoundError)):
        status = 404
    elif isinstance(error, DuplicateMovieError):
        status = 409
    else:
        status = 400
    return jsonify(error=msg), status


@bp.get("/movies")
def list_movies():
    """All catalog movies with their current price code."""
    movies = RentalService._get_catalog().all_movies()
    return jsonify([movie_to_dict(m) for m in movies])


@bp.post("/movies")
def add_movie():
    form = request.form
    ok, msg, result = RentalService.add_movie(form.get("title"), form.get("price_code"))
    if not ok:
        return _error_response(msg, result)
    return jsonify(movie_to_dict(result)), 201


@bp.post("/movies/<title>/price")
def reclassify_movie(title):
    """Swap the pricing of a movie; existing rentals follow on their next charge."""
    ok, msg, result = RentalService.reclassify(title, request.form.get("price_code"))
    if not ok:
        return _error_response(msg, result)
    return jsonify(movie_to_dict(result))


@bp.post("/rentals")
def rent_movie():
    """Record a rental for a customer (created on first rental)."""
    form = request.form
    ok, msg, result = RentalService.rent(
        customer_name=form.get("customer"),
        title=form.get("title"),
        days=form.get("days"),
    )
    if not ok:
        return _error_response(msg, result)
    payload = rental_to_dict(result)
    payload["customer"] = (form.get("customer") or "").strip()
    return jsonify(payload), 201


@bp.get("/customers/<name>/statement")
def customer_statement(name):
    """Statement as text/plain or text/html depending on ?format=."""
    fmt_name = (request.args.get("format") or "").strip() or current_app.config["DEFAULT_STATEMENT_FORMAT"]
    ok, msg, result = RentalService.statement(name, fmt_name)
    if not ok:
        current_app.logger.info("Statement for %r not rendered: %s", name, msg)
        return _error_response(msg, result)
    body, media_type = result
    return Response(body, mimetype=media_type)


@bp.get("/customers/<name>/totals")
def customer_totals(name):
    ok, msg, result = RentalService.totals(name)
    if not ok:
        return _error_response(msg, result)
    return jsonify(
        customer=result.name,
        rentals=[rental_to_dict(r) for r in result.rentals],
        total_charge=format_amount(result.total_charge()),
        total_frequent_renter_points=result.total_frequent_renter_points(),
    )
