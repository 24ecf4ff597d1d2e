"""
Pydantic models for the groupie tracker API records.

Upstream payloads use camelCase keys. The models expose snake_case
attributes and keep the upstream names as aliases so that
``model_dump(by_alias=True)`` gives back the upstream shape for the
JSON search endpoints. Missing keys fall back to empty values: the API
answers unknown IDs with a zeroed record rather than a 404, and the
``id == 0`` check in the artist service relies on that.
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TrackerModel(BaseModel):
    """Base for every upstream record: accept both alias and field names."""

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def null_to_default(cls, value, info):
        """A JSON null decodes to the field default, like a missing key"""
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class Artist(TrackerModel):
    """One band or artist as listed by ``/artists``.

    ``locations``, ``concert_dates`` and ``relations`` are the URLs of
    the related records, not the records themselves.
    """

    id: int = 0
    image: str = ""
    name: str = ""
    members: List[str] = Field(default_factory=list)
    creation_date: int = Field(default=0, alias="creationDate")
    # DD-MM-YYYY
    first_album: str = Field(default="", alias="firstAlbum")
    locations: str = ""
    concert_dates: str = Field(default="", alias="concertDates")
    relations: str = ""


class DateEntry(TrackerModel):
    """Concert dates of one artist. A leading ``*`` starts a tour leg."""

    id: int = 0
    dates: List[str] = Field(default_factory=list)


class Location(TrackerModel):
    """Concert locations of one artist as ``city-country`` slugs."""

    id: int = 0
    locations: List[str] = Field(default_factory=list)
    dates: str = ""


class Relation(TrackerModel):
    """Concert dates keyed by location slug."""

    id: int = 0
    dates_locations: Dict[str, List[str]] = Field(
        default_factory=dict, alias="datesLocations")


class SearchResult(BaseModel):
    name: str
    type: str


class ArtistData(BaseModel):
    """View model for the artist detail page."""

    artist: Artist
    dates: DateEntry
    locations: Location
    relations: Relation
    section: str = ""

    def shows(self, name):
        """Whether the section ``name`` is rendered on the page"""
        return self.section in ("", "all") or self.section == name
