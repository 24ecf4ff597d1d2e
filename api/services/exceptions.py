"""
Exceptions raised by the service layer and translated into error pages by the routes
"""


class TrackerError(Exception):
    """Base class for every failure the routes know how to render"""


class TrackerAPIError(TrackerError):
    """The upstream API could not be reached or returned an unusable body"""

    def __init__(self, url, reason):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class ArtistNotFound(TrackerError):
    def __init__(self, artist_id):
        super().__init__(f"Artist not found: {artist_id!r}")
        self.artist_id = artist_id


class SectionNotFound(TrackerError):
    def __init__(self, section):
        super().__init__(f"Unknown section: {section!r}")
        self.section = section


class ArtistDataError(TrackerError):
    """One of the records related to an artist could not be fetched"""

    def __init__(self, part, artist_id):
        super().__init__(f"Error fetching {part} for artist {artist_id}")
        self.part = part
        self.artist_id = artist_id
