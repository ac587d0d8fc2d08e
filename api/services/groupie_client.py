"""
Client for the Groupie Trackers JSON API.

Each category (artists, locations, dates, relation) is fetched with one
blocking GET and decoded into typed records. No retry and no caching: every
call goes to the network. Any failure is raised as UpstreamError, the
caller decides whether it is fatal.
"""
import requests
from requests import RequestException

from config import endpoint_url
from ..errors import UpstreamError
from ..models import Artist


def _get_json(url):
    try:
        with requests.get(url) as response:
            response.raise_for_status()
            return response.json()
    except RequestException as e:
        raise UpstreamError(f"Request to {url} failed: {e}") from e
    except ValueError as e:
        raise UpstreamError(f"Invalid JSON from {url}: {e}") from e


def _index_entries(payload, url):
    """Return the list under "index" for the locations/dates/relation endpoints"""
    entries = payload.get('index') if isinstance(payload, dict) else None
    if not isinstance(entries, list):
        raise UpstreamError(f"Unexpected payload from {url}: missing 'index' list")
    return entries


def _list_index(base_url, category, key):
    url = endpoint_url(base_url, category)
    result = {}
    try:
        for entry in _index_entries(_get_json(url), url):
            result[int(entry['id'])] = [str(item) for item in entry.get(key) or []]
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise UpstreamError(f"Unexpected payload from {url}: {e}") from e
    return result


def format_relation(date, location) -> str:
    return f"{date} → {location}"


def fetch_artists(base_url) -> list:
    """Fetch and decode the artist list"""
    url = endpoint_url(base_url, 'artists')
    payload = _get_json(url)
    if not isinstance(payload, list):
        raise UpstreamError(f"Unexpected payload from {url}: expected a list of artists")
    try:
        return [Artist.from_json(record) for record in payload]
    except (KeyError, TypeError, ValueError) as e:
        raise UpstreamError(f"Unexpected payload from {url}: {e}") from e


def fetch_locations(base_url) -> dict:
    """Fetch concert locations keyed by artist id"""
    return _list_index(base_url, 'locations', 'locations')


def fetch_dates(base_url) -> dict:
    """Fetch concert dates keyed by artist id"""
    return _list_index(base_url, 'dates', 'dates')


def fetch_relations(base_url) -> dict:
    """Fetch the datesLocations maps keyed by artist id, formatted as "date → location" strings"""
    url = endpoint_url(base_url, 'relation')
    result = {}
    try:
        for entry in _index_entries(_get_json(url), url):
            relations = []
            for key, value in (entry.get('datesLocations') or {}).items():
                # The live API maps location -> [dates], older dumps date -> location
                if isinstance(value, list):
                    relations.extend(format_relation(date, key) for date in value)
                else:
                    relations.append(format_relation(key, value))
            result[int(entry['id'])] = relations
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise UpstreamError(f"Unexpected payload from {url}: {e}") from e
    return result
