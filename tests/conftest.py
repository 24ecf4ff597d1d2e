# /tests/conftest.py

import pytest

from app import create_app
from api.models.tracker_models import Artist, DateEntry, Location, Relation

BASE = "https://groupietrackers.herokuapp.com/api"


@pytest.fixture
def client():
    """A Flask test client on a fresh application."""
    app = create_app({'TESTING': True})
    return app.test_client()


@pytest.fixture
def queen_payload():
    """The upstream JSON for a single artist."""
    return {
        "id": 1,
        "image": f"{BASE}/images/queen.jpeg",
        "name": "Queen",
        "members": ["Freddie Mercury", "Brian May", "John Daecon", "Roger Meddows-Taylor"],
        "creationDate": 1970,
        "firstAlbum": "14-12-1973",
        "locations": f"{BASE}/locations/1",
        "concertDates": f"{BASE}/dates/1",
        "relations": f"{BASE}/relation/1",
    }


@pytest.fixture
def artists(queen_payload):
    """A small artist list as decoded models."""
    return [
        Artist.model_validate(queen_payload),
        Artist(id=2, name="SOJA", members=["Jacob Hemphill", "Bob Jefferson"],
               creation_date=1997, first_album="05-06-2002",
               locations=f"{BASE}/locations/2", concert_dates=f"{BASE}/dates/2"),
        Artist(id=3, name="Pink Floyd", members=["Roger Waters", "David Gilmour"],
               creation_date=1965, first_album="05-08-1967",
               locations=f"{BASE}/locations/3", concert_dates=f"{BASE}/dates/3"),
    ]


@pytest.fixture
def queen_related():
    """Dates, locations and relations records for artist 1."""
    return {
        'dates': DateEntry(id=1, dates=["*23-08-2019", "22-08-2019", "*20-08-2019"]),
        'locations': Location(id=1, locations=["north_carolina-usa", "georgia-usa", "saitama-japan"],
                              dates=f"{BASE}/dates/1"),
        'relations': Relation.model_validate({
            "id": 1,
            "datesLocations": {
                "north_carolina-usa": ["23-08-2019"],
                "georgia-usa": ["22-08-2019"],
                "saitama-japan": ["20-08-2019"],
            },
        }),
    }
