from typing import Dict, List, Optional
from toolz import groupby
from country_atlas.errors import BadRequestError, NotFoundError
from country_atlas.repository.country_repository import find_country_by_id, find_country_by_code, insert_country, \
    update_country
from country_atlas.schema.country import CountryCreate, CountryUpdate
from country_atlas.service.normalize_service import normalize_payload

UNKNOWN_REGION = 'Other'
# country columns mirrored in the countryInfo summary
COUNTRY_INFO_FIELDS = ("capital", "region", "subregion", "population")


def require_country(country_id: int):
    country = find_country_by_id(country_id)
    if country is None:
        raise NotFoundError("Country not found")
    return country


def get_country_by_code(code: str):
    country = find_country_by_code(code)
    if country is None:
        raise NotFoundError("Country not found")
    return country


def _country_info(fields: dict) -> dict:
    return {
        "capital": fields.get("capital"),
        "region": fields.get("region"),
        "subregion": fields.get("subregion"),
        "population": fields.get("population"),
        "governmentForm": None,
    }


def _ensure_unique_code(alpha3_code: Optional[str], country_id: Optional[int] = None):
    if not alpha3_code:
        return
    existing = find_country_by_code(alpha3_code)
    if existing is not None and existing.id != country_id:
        raise BadRequestError(f"Country with code {alpha3_code} already exists")


def create_country(payload):
    fields = normalize_payload(CountryCreate, payload, partial=False)
    _ensure_unique_code(fields.get("alpha3_code"))
    if fields.get("country_info") is None:
        fields["country_info"] = _country_info(fields)
    return insert_country(fields)


def _refreshed_country_info(country_info: Optional[dict], fields: dict) -> Optional[dict]:
    """Copy edited summary fields into the stored countryInfo, keeping the rest of it."""
    changed = {name: fields[name] for name in COUNTRY_INFO_FIELDS if name in fields}
    if not changed:
        return None
    return {**(country_info or _country_info({})), **changed}


def patch_country(country_id: int, payload):
    country = require_country(country_id)
    fields = normalize_payload(CountryUpdate, payload)
    _ensure_unique_code(fields.get("alpha3_code"), country_id)
    if "country_info" not in fields:
        country_info = _refreshed_country_info(country.country_info, fields)
        if country_info is not None:
            fields["country_info"] = country_info
    country = update_country(country_id, fields)
    if country is None:
        raise NotFoundError("Country not found")
    return country


def filter_countries(countries: List, search: Optional[str]) -> List:
    if not search:
        return countries
    needle = search.strip().lower()
    return [country for country in countries if needle in country.name.lower()]


def group_countries_by_region(countries: List, search: Optional[str] = None) -> Dict[str, List]:
    return groupby(lambda country: country.region or UNKNOWN_REGION, filter_countries(countries, search))
