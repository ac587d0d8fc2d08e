"""
Data models for artists and the per-request page view-models
"""
from dataclasses import dataclass, field
from typing import List, Tuple


def _optional_int(value, default=0):
    """Best-effort int for optional upstream fields; bad values fall back to default"""
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


@dataclass(frozen=True)
class Artist:
    """
    A performer or band as returned by the artists endpoint.

    Attributes:
        id: Join key shared with the locations, dates and relation collections
        name: Display name
        image: Image URL
        first_album: First album date as sent upstream (e.g. "14-12-1973")
        members: Member names in upstream order
        creation_date: Year the band was formed, 0 when unknown
    """

    id: int
    name: str
    image: str = ''
    first_album: str = ''
    members: Tuple[str, ...] = ()
    creation_date: int = 0

    @property
    def member_count(self) -> int:
        return len(self.members)

    @classmethod
    def from_json(cls, payload: dict) -> 'Artist':
        """Build an Artist from one record of the artists endpoint"""
        if not isinstance(payload, dict):
            raise TypeError(f"artist record must be an object, got {type(payload).__name__}")
        artist_id = payload['id']
        if isinstance(artist_id, bool) or not isinstance(artist_id, int):
            raise TypeError(f"artist id must be an integer, got {artist_id!r}")
        members = payload.get('members') or []
        return cls(
            id=artist_id,
            name=str(payload['name']),
            image=str(payload.get('image') or ''),
            first_album=str(payload.get('firstAlbum') or ''),
            members=tuple(str(member) for member in members),
            creation_date=_optional_int(payload.get('creationDate')),
        )


@dataclass
class ArtistPageData:
    """One artist joined with its locations, dates and relations"""
    artist: Artist
    locations: List[str] = field(default_factory=list)
    dates: List[str] = field(default_factory=list)
    relations: List[str] = field(default_factory=list)


@dataclass
class PageData:
    """View-model for the index listing"""
    entries: List[ArtistPageData] = field(default_factory=list)
    query: str = ''
    members_filter: str = ''

    @property
    def artists(self) -> List[Artist]:
        return [entry.artist for entry in self.entries]


@dataclass
class ErrorData:
    code: int
    title: str
    message: str
