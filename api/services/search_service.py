"""
Search service module for filtering the in-memory artist list
"""
import re

from ..models.tracker_models import SearchResult

YEAR_REGEX = re.compile(r'[+-]?[0-9]+')


class SearchService:
    """Service class for artist search"""

    @staticmethod
    def artist_matches(artist, query):
        """Check one artist against an already lower-cased query"""
        if query in artist.name.lower():
            return True
        if any(query in member.lower() for member in artist.members):
            return True
        if query in artist.locations.lower():
            return True
        if query in artist.concert_dates.lower():
            return True
        return bool(YEAR_REGEX.fullmatch(query)) and int(query) == artist.creation_date

    @staticmethod
    def search_artists(artists, query):
        """Artists whose name, members, locations, concert dates or creation year match the query"""
        query = query.lower()
        return [artist for artist in artists if SearchService.artist_matches(artist, query)]

    @staticmethod
    def search_dates(artists, query):
        """Search the first album and creation dates

        An artist can show up twice, once per matching field.
        """
        query = query.lower()
        results = []
        for artist in artists:
            if query in artist.first_album.lower():
                results.append(SearchResult(name=artist.name, type='first album date'))
            if query in str(artist.creation_date):
                results.append(SearchResult(name=artist.name, type='creation date'))
        return results
