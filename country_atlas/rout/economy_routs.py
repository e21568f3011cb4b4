from flask import Blueprint, Response, jsonify, request
from country_atlas.db.psql.models import EconomicData
from country_atlas.errors import NotFoundError
from country_atlas.schema.economy import EconomicDataPayload
from country_atlas.service.chart_service import gdp_chart_service, trade_chart_service, trade_frame
from country_atlas.service.country_service import require_country
from country_atlas.service.gdp_service import gdp_series
from country_atlas.service.profile_service import create_profile, get_profile, merge_profile, upsert_profile

LABEL = "Economic data"

economy_blueprint = Blueprint('economy', __name__)


@economy_blueprint.route('/countries/<int:country_id>/economy')
def economic_data(country_id):
    return jsonify(get_profile(EconomicData, country_id, LABEL).to_dict())


@economy_blueprint.route('/countries/<int:country_id>/economy', methods=['POST'])
def add_economic_data(country_id):
    data = create_profile(EconomicData, EconomicDataPayload, country_id, request.get_json(silent=True), LABEL)
    return jsonify(data.to_dict()), 201


@economy_blueprint.route('/countries/<int:country_id>/economy', methods=['PUT'])
def upsert_economic_data(country_id):
    data, created = upsert_profile(EconomicData, EconomicDataPayload, EconomicDataPayload, country_id,
                                   request.get_json(silent=True), LABEL)
    return jsonify(data.to_dict()), 201 if created else 200


@economy_blueprint.route('/countries/<int:country_id>/economy/<int:economy_id>', methods=['PATCH'])
def update_economic_data(country_id, economy_id):
    data = merge_profile(EconomicData, EconomicDataPayload, country_id, request.get_json(silent=True), LABEL,
                         profile_id=economy_id)
    return jsonify(data.to_dict())


@economy_blueprint.route('/countries/<int:country_id>/economy/gdp-series')
def economic_gdp_series(country_id):
    return jsonify(gdp_series(get_profile(EconomicData, country_id, LABEL)))


@economy_blueprint.route('/countries/<int:country_id>/economy/gdp-chart')
def economic_gdp_chart(country_id):
    country = require_country(country_id)
    series = gdp_series(get_profile(EconomicData, country_id, LABEL))
    if all(point['gdp'] is None for point in series['points']):
        raise NotFoundError("GDP data not found")
    buf = gdp_chart_service(series, country.name)
    return Response(buf.getvalue(), mimetype='image/png')


@economy_blueprint.route('/countries/<int:country_id>/economy/trade-chart')
def economic_trade_chart(country_id):
    country = require_country(country_id)
    df = trade_frame(get_profile(EconomicData, country_id, LABEL).main_industries)
    if df.empty:
        raise NotFoundError("Trade data not found")
    buf = trade_chart_service(df, country.name)
    return Response(buf.getvalue(), mimetype='image/png')
