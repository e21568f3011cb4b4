"""Storage for the one-to-many children of a country.

Every function takes the model class, so timeline events, leaders, parties,
relations, laws and statistics share one accessor.
"""
from typing import List, Optional
from country_atlas.db.psql.database import session_maker


def find_records_by_country(model, country_id: int) -> List:
    with session_maker() as session:
        return session.query(model).filter(model.country_id == country_id).order_by(model.id).all()


def insert_record(model, fields: dict):
    with session_maker() as session:
        record = model(**fields)
        session.add(record)
        session.commit()
        session.refresh(record)
        return record


def update_record(model, record_id: int, fields: dict) -> Optional[object]:
    with session_maker() as session:
        record = session.get(model, record_id)
        if record is None:
            return None
        for key, value in fields.items():
            setattr(record, key, value)
        session.commit()
        session.refresh(record)
        return record


def delete_record(model, record_id: int) -> bool:
    with session_maker() as session:
        record = session.get(model, record_id)
        if record is None:
            return False
        session.delete(record)
        session.commit()
        return True
