"""
Artist service module for building the artist list and detail view data
"""
import re

from utils.logger import logger
from ..models.tracker_models import ArtistData
from .exceptions import ArtistDataError, ArtistNotFound, SectionNotFound, TrackerAPIError
from .tracker_service import TrackerService

ARTIST_ID_REGEX = re.compile(r'[0-9]+')

SECTIONS = ('', 'locations', 'dates', 'relations', 'all')


class ArtistService:
    """Service class for artist-related operations"""

    @staticmethod
    def get_all_artists():
        """Get every artist known to the API"""
        artists = TrackerService.read_artists()
        logger(f"Fetched {len(artists)} artists", "DEBUG")
        return artists

    @staticmethod
    def build_artist_data(artist_id, section=''):
        """Fetch an artist and its dates, locations and relations

        The related records are read one after the other and the first
        failure stops the sequence.
        """
        if section not in SECTIONS:
            raise SectionNotFound(section)

        if not ARTIST_ID_REGEX.fullmatch(artist_id):
            raise ArtistNotFound(artist_id)

        try:
            artist = TrackerService.read_artist(artist_id)
        except TrackerAPIError as e:
            raise ArtistNotFound(artist_id) from e
        if artist.id == 0:
            raise ArtistNotFound(artist_id)

        related = {}
        for part, reader in (('dates', TrackerService.read_dates),
                             ('locations', TrackerService.read_locations),
                             ('relations', TrackerService.read_relations)):
            try:
                related[part] = reader(artist_id)
            except TrackerAPIError as e:
                raise ArtistDataError(part, artist_id) from e

        return ArtistData(artist=artist, section=section, **related)
