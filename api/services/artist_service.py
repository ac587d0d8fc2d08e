"""
Artist service: joins the four remote collections and applies the index filters
"""
import re
from typing import Dict, List, Optional

from utils.logger import logger
from ..errors import ClientInputError, NotFoundError, UpstreamError
from ..models import Artist, ArtistPageData, PageData
from . import groupie_client

# Selectors "1".."4" match exactly, "5" means five or more
MEMBER_BUCKETS = {
    '1': lambda count: count == 1,
    '2': lambda count: count == 2,
    '3': lambda count: count == 3,
    '4': lambda count: count == 4,
    '5': lambda count: count >= 5,
}

ARTIST_ID_REGEX = re.compile(r'[+-]?[0-9]+')

# Ids must fit a signed 64-bit integer
ARTIST_ID_MIN = -2 ** 63
ARTIST_ID_MAX = 2 ** 63 - 1


def validate_query(query: str, limit: int) -> None:
    if len(query) >= limit:
        raise ClientInputError("Limit reached")


def filter_by_name(artists: List[Artist], query: str) -> List[Artist]:
    """Keep artists whose name contains the query, ignoring case"""
    query = query.lower()
    if not query:
        return list(artists)
    return [a for a in artists if query in a.name.lower()]


def filter_by_members(artists: List[Artist], selector: Optional[str]) -> List[Artist]:
    """Keep artists in the member-count bucket; unknown or empty selectors keep everyone"""
    matches = MEMBER_BUCKETS.get(selector or '')
    if matches is None:
        return list(artists)
    return [a for a in artists if matches(a.member_count)]


def lookup(mapping: Dict[int, List[str]], artist_id: int) -> List[str]:
    return list(mapping.get(artist_id, []))


def join_artist(artist: Artist, locations, dates, relations) -> ArtistPageData:
    return ArtistPageData(
        artist=artist,
        locations=lookup(locations, artist.id),
        dates=lookup(dates, artist.id),
        relations=lookup(relations, artist.id),
    )


def parse_artist_id(raw: Optional[str]) -> int:
    if raw is None or raw == '':
        raise ClientInputError("Missing artist id")
    if not ARTIST_ID_REGEX.fullmatch(raw):
        raise ClientInputError("Invalid artist id")
    artist_id = int(raw)
    if not ARTIST_ID_MIN <= artist_id <= ARTIST_ID_MAX:
        raise ClientInputError("Invalid artist id")
    return artist_id


class ArtistService:
    """Service class for building the index and artist page view-models"""

    def __init__(self, base_url, query_limit=30):
        self.base_url = base_url
        self.query_limit = query_limit

    def get_artists(self):
        """Fetch the artist list; a failure here ends the request"""
        try:
            return groupie_client.fetch_artists(self.base_url)
        except UpstreamError as e:
            logger(f"Error fetching artists: {e.message}", "ERROR")
            raise UpstreamError("Failed to fetch artists") from e

    def get_auxiliary_data(self):
        """Fetch locations, dates and relations, degrading each to {} on failure"""
        fetchers = (
            ('locations', groupie_client.fetch_locations),
            ('dates', groupie_client.fetch_dates),
            ('relations', groupie_client.fetch_relations),
        )
        results = []
        for name, fetch in fetchers:
            try:
                results.append(fetch(self.base_url))
            except UpstreamError as e:
                logger(f"Error fetching {name}, continuing without them: {e.message}", "WARNING")
                results.append({})
        return tuple(results)

    def build_index_page(self, query='', members_filter=''):
        """Filter the artist list by name and member count and attach their data"""
        query = (query or '').lower()
        members_filter = members_filter or ''
        validate_query(query, self.query_limit)

        artists = self.get_artists()
        filtered = filter_by_members(filter_by_name(artists, query), members_filter)

        locations, dates, relations = self.get_auxiliary_data()
        entries = [join_artist(a, locations, dates, relations) for a in filtered]
        return PageData(entries=entries, query=query, members_filter=members_filter)

    def build_artist_page(self, raw_id):
        """Resolve a single artist by id and attach its data"""
        artist_id = parse_artist_id(raw_id)

        artist = next((a for a in self.get_artists() if a.id == artist_id), None)
        if artist is None:
            raise NotFoundError("Artist not found")

        locations, dates, relations = self.get_auxiliary_data()
        return join_artist(artist, locations, dates, relations)
