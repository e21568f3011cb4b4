from unittest import mock
import pytest
import requests
from country_atlas.service import bootstrap_service
from country_atlas.service.bootstrap_service import map_remote_country, COUNTRY_API_SOURCES

V3_COUNTRY = {
    "name": {"common": "Remoteland", "official": "Republic of Remoteland"},
    "cca2": "RL",
    "cca3": "RML",
    "capital": ["Remote City"],
    "region": "Europe",
    "subregion": "Northern Europe",
    "population": 5000,
    "area": 120.5,
    "flags": {"svg": "https://flags.example/rl.svg"},
    "coatOfArms": {"svg": "https://coa.example/rl.svg"},
    "maps": {"googleMaps": "https://maps.example/rl"},
    "independent": True,
    "unMember": False,
    "capitalInfo": {"latlng": [60.1, 24.9]},
    "flag": "🏳",
}

V2_COUNTRY = {
    "name": "Oldland",
    "alpha2Code": "OL",
    "alpha3Code": "OLD",
    "capital": "Old City",
    "region": "Asia",
    "population": 700,
    "flags": {"svg": "https://flags.example/ol.svg", "png": "https://flags.example/ol.png"},
    "flag": "https://flags.example/ol.svg",
    "languages": [{"name": "Oldish"}],
}


def json_response(data):
    response = mock.Mock()
    response.json.return_value = data
    response.raise_for_status.return_value = None
    return response


@pytest.fixture
def requests_get():
    with mock.patch('country_atlas.service.bootstrap_service.requests.get') as get:
        yield get


def test_map_v3_country():
    payload = map_remote_country(V3_COUNTRY)
    assert payload['name'] == "Remoteland"
    assert payload['alpha3Code'] == "RML"
    assert payload['capital'] == "Remote City"
    assert payload['flagUrl'] == "https://flags.example/rl.svg"
    assert payload['coatOfArmsUrl'] == "https://coa.example/rl.svg"
    assert payload['flag'] == "🏳"
    assert payload['countryInfo']['capital'] == "Remote City"


def test_map_v2_country():
    payload = map_remote_country(V2_COUNTRY)
    assert payload['name'] == "Oldland"
    assert payload['alpha2Code'] == "OL"
    assert payload['capital'] == "Old City"
    assert payload['flag'] is None
    assert payload['mapUrl'] is None
    assert payload['countryInfo']['population'] == 700


def test_initialize_imports_v3(client, requests_get):
    requests_get.return_value = json_response([V3_COUNTRY])
    body = client.get('/api/initialize').get_json()
    assert body['success'] is True
    assert body['added'] == 1
    assert body['samples'] == 0
    assert requests_get.call_args[0][0] == COUNTRY_API_SOURCES[0]

    country = client.get('/api/countries/code/rml').get_json()
    assert country['capitalInfo'] == {"latlng": [60.1, 24.9]}
    assert country['independent'] is True


def test_initialize_falls_back_to_v2(client, requests_get):
    requests_get.side_effect = [requests.ConnectionError("down"), json_response([V2_COUNTRY])]
    body = client.get('/api/initialize').get_json()
    assert body['added'] == 1
    assert [call[0][0] for call in requests_get.call_args_list] == list(COUNTRY_API_SOURCES)
    assert client.get('/api/countries/code/OL').get_json()['name'] == "Oldland"


def test_initialize_uses_samples_when_offline(client, requests_get):
    failing = mock.Mock()
    failing.raise_for_status.side_effect = requests.HTTPError("503")
    requests_get.return_value = failing

    body = client.get('/api/initialize').get_json()
    assert body == {"success": True, "message": "Countries data initialized successfully",
                    "existing": 0, "added": 0, "samples": 6}
    names = [c['name'] for c in client.get('/api/countries').get_json()]
    assert "Switzerland" in names and "Japan" in names

    # a second run finds six countries and leaves them alone
    body = client.get('/api/initialize').get_json()
    assert body['existing'] == 6
    assert body['samples'] == 0
    assert len(client.get('/api/countries').get_json()) == 6


def test_initialize_ignores_invalid_json(client, requests_get):
    response = mock.Mock()
    response.json.side_effect = ValueError("not json")
    requests_get.return_value = response
    body = client.get('/api/initialize').get_json()
    assert body['added'] == 0
    assert body['samples'] == 6


def test_existing_codes_are_skipped(client, make_country, requests_get):
    make_country(name="Remoteland", alpha3="RML")
    requests_get.return_value = json_response([V3_COUNTRY, V2_COUNTRY])
    body = client.get('/api/initialize').get_json()
    assert body['existing'] == 1
    assert body['added'] == 1
    assert len(client.get('/api/countries').get_json()) == 2


def test_bad_remote_record_does_not_stop_import(client, requests_get):
    broken = {**V3_COUNTRY, "cca3": "RM1", "cca2": "R1"}
    requests_get.return_value = json_response([broken, V2_COUNTRY])
    body = client.get('/api/initialize').get_json()
    assert body['added'] == 1
    assert client.get('/api/countries/code/OLD').status_code == 200


def test_complete_table_skips_fetch(client, requests_get):
    with mock.patch.object(bootstrap_service, 'count_countries', return_value=bootstrap_service.COMPLETE_THRESHOLD):
        body = client.get('/api/initialize').get_json()
    assert body['existing'] == 200
    assert body['added'] == 0
    requests_get.assert_not_called()


def test_database_failure_reports_500(client, requests_get):
    from sqlalchemy.exc import OperationalError
    error = OperationalError("SELECT", {}, Exception("database is locked"))
    with mock.patch.object(bootstrap_service, 'count_countries', side_effect=error):
        resp = client.get('/api/initialize')
    assert resp.status_code == 500
    assert resp.get_json()['success'] is False
