import logging
from country_atlas.db.psql.database import engine
from country_atlas.db.psql.models import Base

logger = logging.getLogger(__name__)


def create_tables():
    Base.metadata.create_all(engine)
    logger.info("Created tables: %s", ", ".join(sorted(Base.metadata.tables)))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_tables()
