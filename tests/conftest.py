"""Shared fixtures: sample upstream payloads, a fake API and a test client."""

from unittest.mock import MagicMock

import pytest
import requests
from pytest_mock import MockerFixture

from app import create_app

BASE_URL = "http://groupie.test/api"

ARTISTS = [
    {
        "id": 1,
        "image": "https://groupie.test/images/queen.jpeg",
        "name": "Queen",
        "members": [
            "Freddie Mercury",
            "Brian May",
            "John Daecon",
            "Roger Meddows-Taylor",
            "Mike Grose",
            "Barry Mitchell",
            "Doug Fogie",
        ],
        "creationDate": 1970,
        "firstAlbum": "14-12-1973",
        "locations": "https://groupie.test/api/locations/1",
        "concertDates": "https://groupie.test/api/dates/1",
        "relations": "https://groupie.test/api/relation/1",
    },
    {
        "id": 2,
        "image": "https://groupie.test/images/abba.jpeg",
        "name": "ABBA",
        "members": ["Agnetha Fältskog", "Björn Ulvaeus", "Benny Andersson", "Anni-Frid Lyngstad"],
        "creationDate": 1972,
        "firstAlbum": "26-03-1973",
    },
    {
        "id": 3,
        "image": "https://groupie.test/images/blacksabbath.jpeg",
        "name": "Black Sabbath",
        "members": ["Ozzy Osbourne", "Tony Iommi", "Geezer Butler", "Bill Ward"],
        "creationDate": 1968,
        "firstAlbum": "13-02-1970",
    },
    {
        "id": 4,
        "image": "https://groupie.test/images/bobdylan.jpeg",
        "name": "Bob Dylan",
        "members": ["Bob Dylan"],
        "creationDate": 1959,
        "firstAlbum": "19-03-1962",
    },
    {
        "id": 5,
        "image": "https://groupie.test/images/chemicalbrothers.jpeg",
        "name": "The Chemical Brothers",
        "members": ["Tom Rowlands", "Ed Simons"],
        "creationDate": 1989,
        "firstAlbum": "29-05-1995",
    },
    {
        "id": 6,
        "image": "https://groupie.test/images/nirvana.jpeg",
        "name": "Nirvana",
        "members": ["Kurt Cobain", "Krist Novoselic", "Dave Grohl"],
        "creationDate": 1987,
        "firstAlbum": "15-06-1989",
    },
]

# Artist 5 is deliberately missing from the locations index.
LOCATIONS = {
    "index": [
        {"id": 1, "locations": ["north_carolina-usa", "dunedin-new_zealand"]},
        {"id": 2, "locations": ["stockholm-sweden"]},
        {"id": 3, "locations": ["birmingham-uk", "london-uk"]},
        {"id": 4, "locations": ["new_york-usa"]},
        {"id": 6, "locations": ["seattle-usa"]},
    ]
}

DATES = {
    "index": [
        {"id": 1, "dates": ["*23-08-2019", "10-02-2020"]},
        {"id": 2, "dates": ["06-04-1974"]},
        {"id": 3, "dates": ["*17-11-2016"]},
        {"id": 4, "dates": ["12-04-1963"]},
        {"id": 5, "dates": ["01-07-2023"]},
        {"id": 6, "dates": ["08-01-1994"]},
    ]
}

RELATION = {
    "index": [
        {"id": 1, "datesLocations": {"dunedin-new_zealand": ["10-02-2020"], "north_carolina-usa": ["23-08-2019"]}},
        {"id": 2, "datesLocations": {"06-04-1974": "brighton-uk"}},
        {"id": 3, "datesLocations": {}},
    ]
}


def make_response(payload=None, status=200, invalid_json=False):
    """Build a fake requests response usable as a context manager."""
    response = MagicMock()
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    response.status_code = status
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status} Server Error")
    if invalid_json:
        response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    else:
        response.json.return_value = payload
    return response


class FakeUpstream:
    """Route table for the patched requests.get, keyed by endpoint path."""

    def __init__(self):
        self.routes = {
            "/artists": make_response(ARTISTS),
            "/locations": make_response(LOCATIONS),
            "/dates": make_response(DATES),
            "/relation": make_response(RELATION),
        }
        self.calls = []

    def fail(self, path, error=None):
        self.routes[path] = error or requests.ConnectionError("connection refused")

    def set(self, path, response):
        self.routes[path] = response

    def get(self, url, *args, **kwargs):
        self.calls.append(url)
        assert url.startswith(BASE_URL), url
        route = self.routes[url[len(BASE_URL):]]
        if isinstance(route, Exception):
            raise route
        return route


@pytest.fixture
def upstream(mocker: MockerFixture) -> FakeUpstream:
    """Patch the HTTP layer of the API client with a FakeUpstream."""
    fake = FakeUpstream()
    mocker.patch("api.services.groupie_client.requests.get", side_effect=fake.get)
    return fake


@pytest.fixture
def app():
    app = create_app({
        "API_BASE_URL": BASE_URL,
        "LOG_LEVEL": "CRITICAL",
        "QUERY_MAX_LENGTH": 30,
    })
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
