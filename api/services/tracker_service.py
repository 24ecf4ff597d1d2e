"""
Tracker service module for reading records from the groupie tracker API
"""
import os
import urllib.parse

import requests
from requests import RequestException
from dotenv import load_dotenv
from pydantic import ValidationError

from utils.logger import logger
from ..models.tracker_models import Artist, DateEntry, Location, Relation
from .exceptions import TrackerAPIError

load_dotenv()


def read_timeout():
    """Upstream request timeout in seconds from TRACKER_API_TIMEOUT"""
    value = os.getenv('TRACKER_API_TIMEOUT', '10')
    try:
        timeout = float(value)
    except ValueError:
        raise ValueError(f"TRACKER_API_TIMEOUT must be a number of seconds, got {value!r}") from None
    if timeout <= 0:
        raise ValueError(f"TRACKER_API_TIMEOUT must be positive, got {value!r}")
    return timeout


CONFIG = {
    'BASE_URL': os.getenv('TRACKER_API_URL', 'https://groupietrackers.herokuapp.com/api').rstrip('/'),
    'TIMEOUT': read_timeout(),
}


class TrackerService:
    """Service class for upstream API calls"""

    @staticmethod
    def build_url(endpoint, record_id=None):
        """Build the URL of an endpoint, or of one record under it"""
        url = f"{CONFIG['BASE_URL']}/{endpoint}"
        if record_id is not None:
            url = f"{url}/{urllib.parse.quote(str(record_id), safe='')}"
        return url

    @staticmethod
    def get_json(url):
        """GET a URL and return the decoded JSON body"""
        logger(f"GET {url}", "DEBUG")
        try:
            with requests.get(url, timeout=CONFIG['TIMEOUT']) as response:
                response.raise_for_status()
                return response.json()
        except (RequestException, ValueError) as e:
            logger(f"Tracker API request failed [{url}]: {e}", "ERROR")
            raise TrackerAPIError(url, str(e)) from e

    @staticmethod
    def read_record(model, endpoint, record_id):
        """Fetch a single record and decode it into ``model``"""
        url = TrackerService.build_url(endpoint, record_id)
        payload = TrackerService.get_json(url)
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            logger(f"Unexpected {endpoint} payload [{url}]: {e}", "ERROR")
            raise TrackerAPIError(url, f"invalid {endpoint} record") from e

    @staticmethod
    def read_artists():
        """Get the full artist list"""
        url = TrackerService.build_url('artists')
        payload = TrackerService.get_json(url)
        if not isinstance(payload, list):
            logger(f"Expected a list of artists [{url}], got {type(payload).__name__}", "ERROR")
            raise TrackerAPIError(url, "artist list is not a JSON array")
        try:
            return [Artist.model_validate(item) for item in payload]
        except ValidationError as e:
            logger(f"Unexpected artists payload [{url}]: {e}", "ERROR")
            raise TrackerAPIError(url, "invalid artist record") from e

    @staticmethod
    def read_artist(artist_id):
        return TrackerService.read_record(Artist, 'artists', artist_id)

    @staticmethod
    def read_dates(artist_id):
        return TrackerService.read_record(DateEntry, 'dates', artist_id)

    @staticmethod
    def read_locations(artist_id):
        return TrackerService.read_record(Location, 'locations', artist_id)

    @staticmethod
    def read_relations(artist_id):
        return TrackerService.read_record(Relation, 'relation', artist_id)
