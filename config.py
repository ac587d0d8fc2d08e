"""
Configuration for the Groupie Tracker web front end
"""
import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_BASE_URL = 'https://groupietrackers.herokuapp.com/api'

ENDPOINTS = {
    'artists': '/artists',
    'locations': '/locations',
    'dates': '/dates',
    'relation': '/relation',
}


def _get_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _get_int(name, default):
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f'{name} must be an integer, got {value!r}')


def load_config():
    """Read settings from the environment (and .env), falling back to defaults"""
    return {
        'API_BASE_URL': os.getenv('GROUPIE_API_URL', DEFAULT_API_BASE_URL).rstrip('/'),
        'HOST': os.getenv('HOST', '0.0.0.0'),
        'PORT': _get_int('PORT', 8080),
        'DEBUG': _get_bool('DEBUG'),
        'LOG_LEVEL': os.getenv('LOG_LEVEL', 'INFO').upper(),
        'QUERY_MAX_LENGTH': _get_int('QUERY_MAX_LENGTH', 30),
    }


def endpoint_url(base_url, category):
    """Build the full URL for one data category (artists, locations, dates, relation)"""
    return base_url.rstrip('/') + ENDPOINTS[category]
