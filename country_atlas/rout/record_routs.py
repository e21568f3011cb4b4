"""CRUD blueprints for the one-to-many children of a country."""
from flask import Blueprint, jsonify, request
from country_atlas.db.psql.models import TimelineEvent, PoliticalLeader, PoliticalParty, InternationalRelation, \
    HistoricalLaw, Statistic
from country_atlas.repository.record_repository import find_records_by_country
from country_atlas.schema.records import TimelineEventCreate, TimelineEventUpdate, PoliticalLeaderCreate, \
    PoliticalLeaderUpdate, PoliticalPartyCreate, PoliticalPartyUpdate, InternationalRelationCreate, \
    InternationalRelationUpdate, HistoricalLawCreate, HistoricalLawUpdate, StatisticCreate, StatisticUpdate
from country_atlas.service.ownership_service import create_owned_record, update_owned_record, delete_owned_record


def record_blueprint(name, path, model, create_schema, update_schema, label):
    blueprint = Blueprint(name, __name__)
    collection = f'/countries/<int:country_id>/{path}'
    item = f'{collection}/<int:record_id>'

    @blueprint.route(collection)
    def list_records(country_id):
        return jsonify([record.to_dict() for record in find_records_by_country(model, country_id)])

    @blueprint.route(collection, methods=['POST'])
    def create_record(country_id):
        record = create_owned_record(model, create_schema, country_id, request.get_json(silent=True))
        return jsonify(record.to_dict()), 201

    @blueprint.route(item, methods=['PATCH'])
    def update_record(country_id, record_id):
        record = update_owned_record(model, update_schema, country_id, record_id, request.get_json(silent=True),
                                     label)
        return jsonify(record.to_dict())

    @blueprint.route(item, methods=['DELETE'])
    def delete_record(country_id, record_id):
        delete_owned_record(model, country_id, record_id, label)
        return jsonify({"success": True})

    return blueprint


timeline_blueprint = record_blueprint('timeline', 'timeline', TimelineEvent,
                                      TimelineEventCreate, TimelineEventUpdate, "Timeline event")
leaders_blueprint = record_blueprint('leaders', 'leaders', PoliticalLeader,
                                     PoliticalLeaderCreate, PoliticalLeaderUpdate, "Political leader")
parties_blueprint = record_blueprint('parties', 'parties', PoliticalParty,
                                     PoliticalPartyCreate, PoliticalPartyUpdate, "Political party")
relations_blueprint = record_blueprint('relations', 'relations', InternationalRelation,
                                       InternationalRelationCreate, InternationalRelationUpdate,
                                       "International relation")
laws_blueprint = record_blueprint('laws', 'laws', HistoricalLaw,
                                  HistoricalLawCreate, HistoricalLawUpdate, "Historical law")
statistics_blueprint = record_blueprint('statistics', 'statistics', Statistic,
                                        StatisticCreate, StatisticUpdate, "Statistic")

record_blueprints = [timeline_blueprint, leaders_blueprint, parties_blueprint, relations_blueprint,
                     laws_blueprint, statistics_blueprint]
