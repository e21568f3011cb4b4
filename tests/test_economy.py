import pytest
from country_atlas.service import profile_service


@pytest.fixture
def economy(client, country):
    resp = client.post(f"/api/countries/{country['id']}/economy", json={
        "gdp": 500,
        "gdpPerCapita": 25000,
        "gdpGrowth": "2.5%",
        "inflation": "1.1%",
        "gdpHistory": [{"year": "2021", "gdp": 480}, {"year": "2022", "gdp": 500}],
        "tradingPartners": [{"country": "Neighbourland", "tradeVolume": "40B USD"}],
    })
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()


def economy_url(country, economy=None):
    url = f"/api/countries/{country['id']}/economy"
    return f"{url}/{economy['id']}" if economy else url


def test_get_economy(client, country, economy):
    body = client.get(economy_url(country)).get_json()
    assert body['id'] == economy['id']
    assert body['countryId'] == country['id']
    assert body['gdpHistory'] == [{"year": "2021", "gdp": 480}, {"year": "2022", "gdp": 500}]


def test_missing_economy_is_not_found(client, country):
    resp = client.get(economy_url(country))
    assert resp.status_code == 404
    assert resp.get_json() == {"message": "Economic data not found"}


def test_create_for_unknown_country(client):
    resp = client.post('/api/countries/999/economy', json={"gdp": 1})
    assert resp.status_code == 404


def test_second_create_is_rejected(client, country, economy):
    resp = client.post(economy_url(country), json={"gdp": 1})
    assert resp.status_code == 400
    assert "already exists" in resp.get_json()['message']


def test_partial_update_keeps_omitted_fields(client, country, economy):
    resp = client.patch(economy_url(country, economy), json={"inflation": "3%"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body['inflation'] == "3%"
    assert body['gdp'] == 500
    assert body['gdpGrowth'] == "2.5%"
    assert body['gdpHistory'] == economy['gdpHistory']
    assert body['tradingPartners'] == economy['tradingPartners']


def test_gdp_history_is_replaced_wholesale(client, country, economy):
    resp = client.patch(economy_url(country, economy), json={"gdpHistory": [{"year": "2023", "gdp": 520}]})
    assert resp.get_json()['gdpHistory'] == [{"year": "2023", "gdp": 520}]
    stored = client.get(economy_url(country)).get_json()
    assert stored['gdpHistory'] == [{"year": "2023", "gdp": 520}]


def test_numeric_strings_are_coerced(client, country, economy):
    resp = client.patch(economy_url(country, economy), json={
        "gdp": "1234",
        "gdpPerCapita": "",
        "gdpHistory": [{"year": 2020, "gdp": "1234.5"}, {"year": "2021", "gdp": ""}],
    })
    assert resp.status_code == 200
    body = client.get(economy_url(country)).get_json()
    assert body['gdp'] == 1234
    assert body['gdpPerCapita'] is None
    assert body['gdpHistory'] == [{"year": "2020", "gdp": 1234.5}, {"year": "2021", "gdp": None}]


@pytest.mark.parametrize("payload", [
    {"gdp": "abc"},
    {"gdpHistory": [{"year": "2020", "gdp": "lots"}]},
    {"mainIndustries": {"imports": [{"product": "Oil", "percentage": 140}]}},
    {"tradingPartners": "[not json"},
    {"tradingPartners": [{"country": "Nowhere"}]},
])
def test_malformed_values_are_rejected(client, country, economy, payload):
    resp = client.patch(economy_url(country, economy), json=payload)
    assert resp.status_code == 400
    assert resp.get_json()['message']
    assert client.get(economy_url(country)).get_json()['gdp'] == 500


def test_nan_is_rejected(client, country, economy):
    resp = client.patch(economy_url(country, economy), data='{"gdp": NaN}', content_type='application/json')
    assert resp.status_code == 400


def test_json_encoded_arrays_are_decoded(client, country, economy):
    resp = client.patch(economy_url(country, economy), json={
        "tradingPartners": '[{"country": "Farland", "relationship": "Ally", "tradeVolume": 12}]',
        "industrySpecializations": '[{"name": "Mining", "contribution": "8%"}]',
    })
    body = resp.get_json()
    assert body['tradingPartners'] == [{"country": "Farland", "relationship": "Ally", "tradeVolume": "12"}]
    assert body['industrySpecializations'] == [{"name": "Mining", "description": None, "contribution": "8%"}]


def test_imports_and_exports(client, country, economy):
    trade = {
        "imports": [{"product": "Oil", "value": "20B", "percentage": "35"}],
        "exports": [{"product": "Cars", "value": "50B", "percentage": 60}],
    }
    body = client.patch(economy_url(country, economy), json={"mainIndustries": trade}).get_json()
    assert body['mainIndustries'] == {
        "imports": [{"product": "Oil", "value": "20B", "percentage": 35}],
        "exports": [{"product": "Cars", "value": "50B", "percentage": 60}],
        "industries": None,
    }

    resp = client.get(f"{economy_url(country)}/trade-chart")
    assert resp.status_code == 200
    assert resp.mimetype == 'image/png'


def test_patch_with_foreign_economy_id(client, country, make_country, economy):
    other = make_country(name="Otherland", alpha3="OTH")
    resp = client.patch(f"/api/countries/{other['id']}/economy/{economy['id']}", json={"gdp": 1})
    assert resp.status_code == 404
    assert resp.get_json() == {"message": "Economic data not found for this country"}


def test_put_creates_then_merges(client, country):
    resp = client.put(economy_url(country), json={"gdp": "900"})
    assert resp.status_code == 201
    created = resp.get_json()
    assert created['gdp'] == 900
    assert created['gdpHistory'] == []

    resp = client.put(economy_url(country), json={"inflation": "4%"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body['id'] == created['id']
    assert body['gdp'] == 900
    assert body['inflation'] == "4%"


def test_gdp_series_stored_is_sorted(client, country, economy):
    client.patch(economy_url(country, economy), json={
        "gdpHistory": [{"year": "2022", "gdp": 3}, {"year": "2020", "gdp": 1}, {"year": "2021", "gdp": None}]
    })
    body = client.get(f"{economy_url(country)}/gdp-series").get_json()
    assert body['source'] == 'stored'
    assert [p['year'] for p in body['points']] == ["2020", "2021", "2022"]
    assert body['points'][1]['gdp'] is None


def test_gdp_series_derived_from_single_figure(client, country):
    client.post(economy_url(country), json={"gdp": 1000, "gdpGrowth": "0%"})
    body = client.get(f"{economy_url(country)}/gdp-series").get_json()
    assert body['source'] == 'derived'
    assert len(body['points']) == 7
    assert all(point['gdp'] == 1000 for point in body['points'])


def test_gdp_chart(client, country, economy):
    resp = client.get(f"{economy_url(country)}/gdp-chart")
    assert resp.status_code == 200
    assert resp.mimetype == 'image/png'
    assert resp.data[:4] == b'\x89PNG'


def test_charts_without_data(client, country):
    client.post(economy_url(country), json={})
    assert client.get(f"{economy_url(country)}/gdp-chart").status_code == 404
    assert client.get(f"{economy_url(country)}/trade-chart").status_code == 404


def test_gdp_chart_without_any_figures(client, country):
    client.post(economy_url(country), json={"gdpHistory": [{"year": "2020", "gdp": ""}, {"year": "2021"}]})
    resp = client.get(f"{economy_url(country)}/gdp-chart")
    assert resp.status_code == 404
    assert resp.get_json() == {"message": "GDP data not found"}


def test_concurrent_create_is_rejected(client, country, economy, monkeypatch):
    # the existence check misses a row another request just inserted
    monkeypatch.setattr(profile_service, 'find_profile_by_country', lambda model, country_id: None)
    resp = client.post(economy_url(country), json={"gdp": 1})
    assert resp.status_code == 400
    assert "already exists" in resp.get_json()['message']
    monkeypatch.undo()
    assert client.get(economy_url(country)).get_json()['gdp'] == 500


def test_concurrent_upsert_merges(client, country, economy, monkeypatch):
    real_find = profile_service.find_profile_by_country
    calls = []

    def find_after_race(model, country_id):
        calls.append(country_id)
        return None if len(calls) == 1 else real_find(model, country_id)

    monkeypatch.setattr(profile_service, 'find_profile_by_country', find_after_race)
    resp = client.put(economy_url(country), json={"inflation": "9%"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body['id'] == economy['id']
    assert body['inflation'] == "9%"
    assert body['gdp'] == 500
