"""Mutations of country children that first prove the child belongs to the country.

A child id that exists under a different country is reported exactly like a
missing one, so ids cannot be probed across countries.
"""
from country_atlas.errors import NotFoundError
from country_atlas.repository.record_repository import find_records_by_country, insert_record, update_record, \
    delete_record
from country_atlas.service.country_service import require_country
from country_atlas.service.normalize_service import normalize_payload


def find_owned_record(model, country_id: int, record_id: int, label: str):
    require_country(country_id)
    # collections are tens of rows per country, a scan is fine
    record = next((r for r in find_records_by_country(model, country_id) if r.id == record_id), None)
    if record is None:
        raise NotFoundError(f"{label} not found for this country")
    return record


def create_owned_record(model, schema, country_id: int, payload):
    require_country(country_id)
    fields = normalize_payload(schema, payload, partial=False)
    return insert_record(model, {**fields, "country_id": country_id})


def update_owned_record(model, schema, country_id: int, record_id: int, payload, label: str):
    find_owned_record(model, country_id, record_id, label)
    fields = normalize_payload(schema, payload)
    record = update_record(model, record_id, fields)
    if record is None:
        raise NotFoundError(f"{label} not found for this country")
    return record


def delete_owned_record(model, country_id: int, record_id: int, label: str):
    find_owned_record(model, country_id, record_id, label)
    if not delete_record(model, record_id):
        raise NotFoundError(f"{label} not found for this country")
