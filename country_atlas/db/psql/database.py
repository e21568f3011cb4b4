import os
from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

load_dotenv(verbose=True)
db_url = os.getenv("PSQL_URL", "sqlite:///country_atlas.db")

engine = create_engine(db_url)
# rows are handed to the routes after the session closes
session_maker = sessionmaker(bind=engine, expire_on_commit=False)
