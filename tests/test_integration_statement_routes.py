"""
HTTP round-trips through the statements blueprint: add movies, rent,
reclassify, then fetch the text and HTML statements.
"""


def _seed(client):
    r = client.post("/movies", data={"title": "The Watchmen", "price_code": "new_release"})
    assert r.status_code == 201
    r = client.post("/movies", data={"title": "Road House", "price_code": "new_release"})
    assert r.status_code == 201
    r = client.post("/movies/Road House/price", data={"price_code": "regular"})
    assert r.status_code == 200
    assert r.get_json() == {"title": "Road House", "price_code": "regular"}

    for title in ("The Watchmen", "Road House"):
        r = client.post("/rentals", data={"customer": "C. Swayze", "title": title, "days": "2"})
        assert r.status_code == 201, r.data


def test_text_statement_route(client):
    _seed(client)
    r = client.get("/customers/C. Swayze/statement")
    assert r.status_code == 200
    assert r.mimetype == "text/plain"
    body = r.get_data(as_text=True)
    assert body.startswith("Rental Record for C. Swayze\n")
    assert "\tThe Watchmen\t6\n" in body
    assert body.endswith("Amount owed is 8\nYou earned 3 frequent renter points")


def test_html_statement_route(client):
    _seed(client)
    r = client.get("/customers/C. Swayze/statement?format=html")
    assert r.status_code == 200
    assert r.mimetype == "text/html"
    body = r.get_data(as_text=True)
    assert body.startswith("<h1>Rental Record for <em>C. Swayze</em></h1><p>\n")
    assert "<p>You owed <em>8</em></p>" in body


def test_default_format_comes_from_config(catalog):
    from video_rental import create_app
    app = create_app({"TESTING": True, "DEFAULT_STATEMENT_FORMAT": "html"})
    with app.test_client() as c:
        _seed(c)
        r = c.get("/customers/C. Swayze/statement")
        assert r.mimetype == "text/html"


def test_rental_payload_and_totals(client):
    _seed(client)
    r = client.post("/rentals", data={"customer": "C. Swayze", "title": "Road House", "days": "5"})
    assert r.status_code == 201
    assert r.get_json() == {
        "customer": "C. Swayze",
        "title": "Road House",
        "days_rented": 5,
        "charge": "6.5",
        "frequent_renter_points": 1,
    }

    r = client.get("/customers/C. Swayze/totals")
    data = r.get_json()
    assert data["total_charge"] == "14.5"
    assert data["total_frequent_renter_points"] == 4
    assert [row["title"] for row in data["rentals"]] == ["The Watchmen", "Road House", "Road House"]


def test_list_movies(client):
    _seed(client)
    r = client.get("/movies")
    assert r.get_json() == [
        {"title": "Road House", "price_code": "regular"},
        {"title": "The Watchmen", "price_code": "new_release"},
    ]


def test_error_statuses(client):
    _seed(client)
    assert client.get("/customers/Nobody/statement").status_code == 404
    assert client.get("/customers/Nobody/totals").status_code == 404
    assert client.get("/customers/C. Swayze/statement?format=pdf").status_code == 400
    assert client.post("/rentals", data={"customer": "X", "title": "Nope", "days": "2"}).status_code == 404
    assert client.post("/rentals", data={"customer": "X", "title": "Road House", "days": "-1"}).status_code == 400
    assert client.post("/movies", data={"title": "Alien", "price_code": "premium"}).status_code == 400
    assert client.post("/movies/Nope/price", data={"price_code": "regular"}).status_code == 404


def test_input_echoing_not_found_is_still_bad_request(client):
    _seed(client)
    r = client.post("/rentals", data={"customer": "X", "title": "Road House", "days": "not found"})
    assert r.status_code == 400
    r = client.post("/movies/Road House/price", data={"price_code": "not found"})
    assert r.status_code == 400


def test_readding_a_title_conflicts_and_reclassify_reaches_rentals(client):
    client.post("/movies", data={"title": "Alien", "price_code": "new_release"})
    r = client.post("/rentals", data={"customer": "Ripley", "title": "Alien", "days": "3"})
    assert r.get_json()["charge"] == "9"

    r = client.post("/movies", data={"title": "Alien", "price_code": "new_release"})
    assert r.status_code == 409

    r = client.post("/movies/Alien/price", data={"price_code": "regular"})
    assert r.status_code == 200
    body = client.get("/customers/Ripley/statement").get_data(as_text=True)
    assert "\tAlien\t3.5\n" in body
    assert body.endswith("Amount owed is 3.5\nYou earned 1 frequent renter points")
