from typing import List, Optional
from sqlalchemy import func, or_
from country_atlas.db.psql.database import session_maker
from country_atlas.db.psql.models import Country


def find_all_countries() -> List[Country]:
    with session_maker() as session:
        return session.query(Country).order_by(Country.name).all()


def find_countries_by_region(region: str) -> List[Country]:
    with session_maker() as session:
        return session.query(Country).filter(
            func.lower(Country.region) == region.lower()
        ).order_by(Country.name).all()


def find_country_by_id(country_id: int) -> Optional[Country]:
    with session_maker() as session:
        return session.get(Country, country_id)


def find_country_by_code(code: str) -> Optional[Country]:
    code = code.upper()
    with session_maker() as session:
        return session.query(Country).filter(
            or_(func.upper(Country.alpha3_code) == code, func.upper(Country.alpha2_code) == code)
        ).first()


def count_countries() -> int:
    with session_maker() as session:
        return session.query(func.count(Country.id)).scalar()


def existing_alpha3_codes() -> set:
    with session_maker() as session:
        return {code for (code,) in session.query(Country.alpha3_code).filter(Country.alpha3_code.isnot(None))}


def insert_country(fields: dict) -> Country:
    with session_maker() as session:
        country = Country(**fields)
        session.add(country)
        session.commit()
        session.refresh(country)
        return country


def update_country(country_id: int, fields: dict) -> Optional[Country]:
    with session_maker() as session:
        country = session.get(Country, country_id)
        if country is None:
            return None
        for key, value in fields.items():
            setattr(country, key, value)
        session.commit()
        session.refresh(country)
        return country
