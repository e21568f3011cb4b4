"""Populate the country table from restcountries.com, or from sample data."""
import logging
from typing import Iterable, List
import requests
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from toolz import get_in
from country_atlas.repository.country_repository import count_countries, existing_alpha3_codes, insert_country
from country_atlas.schema.country import CountryCreate
from country_atlas.service.normalize_service import normalize_payload
from country_atlas.service.sample_data import SAMPLE_COUNTRIES

logger = logging.getLogger(__name__)

COUNTRY_API_SOURCES = (
    "https://restcountries.com/v3.1/all",
    "https://restcountries.com/v2/all",
)
REQUEST_TIMEOUT = 15
REQUEST_HEADERS = {
    'Accept': 'application/json',
    'User-Agent': 'Mozilla/5.0 (compatible; CountryAtlas/1.0)',
}
# below this many countries the table is treated as incomplete
COMPLETE_THRESHOLD = 200
# below this many countries, with nothing imported, the samples are inserted
SAMPLE_THRESHOLD = 6


def fetch_remote_countries(sources: Iterable[str] = COUNTRY_API_SOURCES) -> List[dict]:
    """Return the first non-empty country list any source serves, else []."""
    for url in sources:
        logger.info("Trying to fetch countries from %s", url)
        try:
            response = requests.get(url, timeout=REQUEST_TIMEOUT, headers=REQUEST_HEADERS)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("Error fetching from %s: %s", url, e)
            continue
        if isinstance(data, list) and data:
            logger.info("Fetched %d countries from %s", len(data), url)
            return data
    return []


def map_remote_country(data: dict) -> dict:
    """Translate a v2 or v3 restcountries record into a country payload."""
    is_v3 = 'cca3' in data
    if is_v3:
        capitals = data.get('capital') or []
        capital = capitals[0] if capitals else None
    else:
        capital = data.get('capital') or None
    population = data.get('population') or None
    return {
        "name": get_in(['name', 'common'], data) if is_v3 else data.get('name'),
        "alpha2Code": data.get('cca2') if is_v3 else data.get('alpha2Code'),
        "alpha3Code": data.get('cca3') if is_v3 else data.get('alpha3Code'),
        "capital": capital,
        "region": data.get('region') or None,
        "subregion": data.get('subregion') or None,
        "population": population,
        "area": data.get('area') or None,
        "flagUrl": get_in(['flags', 'svg'], data),
        "coatOfArmsUrl": get_in(['coatOfArms', 'svg'], data) if is_v3 else None,
        "mapUrl": get_in(['maps', 'googleMaps'], data) if is_v3 else None,
        "independent": bool(data.get('independent')),
        "unMember": bool(data.get('unMember')),
        "currencies": data.get('currencies') or None,
        "languages": data.get('languages') or None,
        "borders": data.get('borders') or None,
        "timezones": data.get('timezones') or None,
        "startOfWeek": data.get('startOfWeek') or None,
        "capitalInfo": data.get('capitalInfo') or None,
        "postalCode": data.get('postalCode') or None,
        # v2 serves a flag image URL here, v3 the emoji
        "flag": data.get('flag') if is_v3 else None,
        "countryInfo": {
            "capital": capital,
            "region": data.get('region') or None,
            "subregion": data.get('subregion') or None,
            "population": population,
            "governmentForm": None,
        },
    }


def import_countries(remote: List[dict], known_codes: set) -> int:
    added = 0
    for data in remote:
        payload = map_remote_country(data)
        if payload["alpha3Code"] in known_codes:
            continue
        try:
            insert_country(normalize_payload(CountryCreate, payload, partial=False))
        except (ValidationError, SQLAlchemyError) as e:
            logger.error("Error processing country %s: %s", payload.get("name") or "unknown", e)
            continue
        known_codes.add(payload["alpha3Code"])
        added += 1
    logger.info("Added %d new countries to the database", added)
    return added


def create_sample_countries() -> int:
    logger.info("Creating sample countries as fallback")
    known_codes = existing_alpha3_codes()
    created = 0
    for payload in SAMPLE_COUNTRIES:
        if payload["alpha3Code"] in known_codes:
            continue
        insert_country(normalize_payload(CountryCreate, payload, partial=False))
        created += 1
    return created


def initialize_countries() -> dict:
    existing = count_countries()
    if existing >= COMPLETE_THRESHOLD:
        logger.info("Database already has %d countries. Skipping fetch.", existing)
        return {"existing": existing, "added": 0, "samples": 0}

    logger.info("Found %d countries. Attempting to fetch more from API.", existing)
    remote = fetch_remote_countries()
    added = import_countries(remote, existing_alpha3_codes()) if remote else 0
    if not remote:
        logger.warning("Could not fetch countries from any API source")

    samples = 0
    if added == 0 and existing < SAMPLE_THRESHOLD:
        samples = create_sample_countries()
    return {"existing": existing, "added": added, "samples": samples}
