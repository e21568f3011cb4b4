"""Create, merge and upsert the one-to-one entities of a country."""
import logging
from sqlalchemy.exc import IntegrityError
from country_atlas.errors import BadRequestError, NotFoundError
from country_atlas.repository.profile_repository import find_profile_by_country, insert_profile, update_profile
from country_atlas.service.country_service import require_country
from country_atlas.service.normalize_service import normalize_payload

logger = logging.getLogger(__name__)


def get_profile(model, country_id: int, label: str):
    profile = find_profile_by_country(model, country_id)
    if profile is None:
        raise NotFoundError(f"{label} not found")
    return profile


def create_profile(model, schema, country_id: int, payload, label: str):
    require_country(country_id)
    if find_profile_by_country(model, country_id) is not None:
        raise BadRequestError(f"{label} already exists for this country. Use PATCH to update.")
    fields = normalize_payload(schema, payload, partial=False)
    try:
        return insert_profile(model, country_id, fields)
    except IntegrityError:
        # a concurrent request created it between the check and the insert
        raise BadRequestError(f"{label} already exists for this country. Use PATCH to update.")


def merge_profile(model, schema, country_id: int, payload, label: str, profile_id=None):
    require_country(country_id)
    existing = find_profile_by_country(model, country_id)
    if existing is None or (profile_id is not None and existing.id != profile_id):
        raise NotFoundError(f"{label} not found for this country")
    fields = normalize_payload(schema, payload)
    logger.debug("Merging %s into %s %s", sorted(fields), label, existing.id)
    profile = update_profile(model, existing.id, fields)
    if profile is None:
        raise NotFoundError(f"{label} not found for this country")
    return profile


def upsert_profile(model, create_schema, update_schema, country_id: int, payload, label: str, defaults=None):
    """Merge into the country's row, creating it with ``defaults`` on first write.

    Returns the row and whether it was created.
    """
    require_country(country_id)
    if find_profile_by_country(model, country_id) is None:
        seeded = {**(defaults or {}), **payload} if isinstance(payload, dict) else payload
        fields = normalize_payload(create_schema, seeded, partial=False)
        try:
            return insert_profile(model, country_id, fields), True
        except IntegrityError:
            logger.info("%s for country %s created concurrently, merging instead", label, country_id)
    return merge_profile(model, update_schema, country_id, payload, label), False
