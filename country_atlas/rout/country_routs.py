import logging
from flask import Blueprint, Response, jsonify, request
from sqlalchemy.exc import SQLAlchemyError
from country_atlas.repository.country_repository import find_all_countries, find_countries_by_region
from country_atlas.service.bootstrap_service import initialize_countries
from country_atlas.service.chart_service import countries_map_service
from country_atlas.service.country_service import create_country, filter_countries, get_country_by_code, \
    group_countries_by_region, patch_country, require_country

logger = logging.getLogger(__name__)

country_blueprint = Blueprint('countries', __name__)


@country_blueprint.route('/initialize')
def initialize():
    try:
        summary = initialize_countries()
    except SQLAlchemyError:
        logger.exception("Error initializing countries data")
        return jsonify({"success": False, "message": "Failed to initialize countries data"}), 500
    return jsonify({"success": True, "message": "Countries data initialized successfully", **summary})


@country_blueprint.route('/countries')
def list_countries():
    region = request.args.get('region', type=str)
    search = request.args.get('search', type=str)
    countries = find_countries_by_region(region) if region else find_all_countries()
    return jsonify([country.to_dict() for country in filter_countries(countries, search)])


@country_blueprint.route('/countries', methods=['POST'])
def add_country():
    country = create_country(request.get_json(silent=True))
    return jsonify(country.to_dict()), 201


@country_blueprint.route('/countries/debug/codes')
def country_codes():
    return jsonify([
        {"name": c.name, "alpha2Code": c.alpha2_code, "alpha3Code": c.alpha3_code}
        for c in find_all_countries()
    ])


@country_blueprint.route('/countries/regions')
def countries_by_region_groups():
    search = request.args.get('search', type=str)
    grouped = group_countries_by_region(find_all_countries(), search)
    return jsonify({region: [c.to_dict() for c in countries] for region, countries in grouped.items()})


@country_blueprint.route('/countries/map')
def countries_map():
    region = request.args.get('region', type=str)
    countries = find_countries_by_region(region) if region else find_all_countries()
    buf = countries_map_service(countries)
    return Response(buf.getvalue(), mimetype='text/html')


@country_blueprint.route('/countries/region/<region>')
def countries_in_region(region):
    return jsonify([country.to_dict() for country in find_countries_by_region(region)])


@country_blueprint.route('/countries/code/<code>')
def country_by_code(code):
    logger.debug("Finding country with code %s", code)
    return jsonify(get_country_by_code(code).to_dict())


@country_blueprint.route('/countries/<int:country_id>')
def country_detail(country_id):
    return jsonify(require_country(country_id).to_dict())


@country_blueprint.route('/countries/<int:country_id>', methods=['PATCH'])
def update_country(country_id):
    country = patch_country(country_id, request.get_json(silent=True))
    return jsonify(country.to_dict())
