"""Add the currency_code column to economic_data on databases created before it existed."""
import logging
from sqlalchemy import inspect, text
from country_atlas.db.psql.database import engine

logger = logging.getLogger(__name__)


def add_currency_code_column(bind=engine) -> bool:
    columns = {column['name'] for column in inspect(bind).get_columns('economic_data')}
    if 'currency_code' in columns:
        logger.info("economic_data already has a currency_code column")
        return False
    with bind.begin() as connection:
        connection.execute(text('ALTER TABLE economic_data ADD COLUMN currency_code VARCHAR'))
    logger.info("Added currency_code column to economic_data")
    return True


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    add_currency_code_column()
