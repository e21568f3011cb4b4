"""Insert demo economic data for the countries that have none yet."""
import logging
from country_atlas.db.psql.models import EconomicData
from country_atlas.repository.country_repository import find_country_by_code
from country_atlas.repository.profile_repository import find_profile_by_country, insert_profile
from country_atlas.schema.economy import EconomicDataPayload
from country_atlas.service.normalize_service import normalize_payload
from country_atlas.service.sample_data import DEMO_ECONOMIC_DATA

logger = logging.getLogger(__name__)


def seed_economy(demo_data=None) -> list:
    seeded = []
    for code, payload in (demo_data or DEMO_ECONOMIC_DATA).items():
        country = find_country_by_code(code)
        if country is None:
            logger.warning("No country with code %s, skipping", code)
            continue
        if find_profile_by_country(EconomicData, country.id) is not None:
            logger.info("Economic data already exists for %s", country.name)
            continue
        insert_profile(EconomicData, country.id, normalize_payload(EconomicDataPayload, payload, partial=False))
        logger.info("Added %s economic data", country.name)
        seeded.append(code)
    return seeded


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed_economy()
