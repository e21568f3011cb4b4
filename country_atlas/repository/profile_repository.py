"""Storage for the one-to-one entities of a country (economy, political system)."""
from typing import Optional
from country_atlas.db.psql.database import session_maker


def find_profile_by_country(model, country_id: int) -> Optional[object]:
    with session_maker() as session:
        return session.query(model).filter(model.country_id == country_id).first()


def insert_profile(model, country_id: int, fields: dict):
    # raises IntegrityError when the country already has a row
    with session_maker() as session:
        profile = model(country_id=country_id, **fields)
        session.add(profile)
        session.commit()
        session.refresh(profile)
        return profile


def update_profile(model, profile_id: int, fields: dict) -> Optional[object]:
    with session_maker() as session:
        profile = session.get(model, profile_id)
        if profile is None:
            return None
        for key, value in fields.items():
            setattr(profile, key, value)
        session.commit()
        session.refresh(profile)
        return profile
