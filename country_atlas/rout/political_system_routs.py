from flask import Blueprint, jsonify, request
from country_atlas.db.psql.models import PoliticalSystem
from country_atlas.schema.political_system import DEFAULT_SYSTEM_TYPE, PoliticalSystemCreate, PoliticalSystemUpdate
from country_atlas.service.profile_service import create_profile, get_profile, merge_profile, upsert_profile

LABEL = "Political system"

political_system_blueprint = Blueprint('political_system', __name__)


@political_system_blueprint.route('/countries/<int:country_id>/political-system')
def political_system(country_id):
    return jsonify(get_profile(PoliticalSystem, country_id, LABEL).to_dict())


@political_system_blueprint.route('/countries/<int:country_id>/political-system', methods=['POST'])
def add_political_system(country_id):
    system = create_profile(PoliticalSystem, PoliticalSystemCreate, country_id, request.get_json(silent=True),
                            LABEL)
    return jsonify(system.to_dict()), 201


@political_system_blueprint.route('/countries/<int:country_id>/political-system', methods=['PUT'])
def upsert_political_system(country_id):
    system, created = upsert_profile(PoliticalSystem, PoliticalSystemCreate, PoliticalSystemUpdate, country_id,
                                     request.get_json(silent=True), LABEL, defaults={"type": DEFAULT_SYSTEM_TYPE})
    return jsonify(system.to_dict()), 201 if created else 200


@political_system_blueprint.route('/countries/<int:country_id>/political-system', methods=['PATCH'])
def update_political_system(country_id):
    system = merge_profile(PoliticalSystem, PoliticalSystemUpdate, country_id, request.get_json(silent=True), LABEL)
    return jsonify(system.to_dict())


@political_system_blueprint.route('/countries/<int:country_id>/political-system/<int:system_id>',
                                  methods=['PATCH'])
def update_political_system_by_id(country_id, system_id):
    system = merge_profile(PoliticalSystem, PoliticalSystemUpdate, country_id, request.get_json(silent=True), LABEL,
                           profile_id=system_id)
    return jsonify(system.to_dict())
