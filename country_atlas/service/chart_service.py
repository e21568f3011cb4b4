import io
from typing import List, Optional
import numpy as np
import pandas as pd
from matplotlib import pyplot as plt
import folium
import seaborn as sns
from toolz import curry, get_in


@curry
def validate_coordinates(lat, lon) -> bool:
    return (isinstance(lat, (int, float)) and
            isinstance(lon, (int, float)) and
            not (np.isnan(lat) or np.isnan(lon)) and
            -90 <= lat <= 90 and
            -180 <= lon <= 180)


def capital_coordinates(country) -> Optional[tuple]:
    latlng = get_in(['latlng'], country.capital_info or {})
    if not latlng or len(latlng) != 2:
        return None
    lat, lon = latlng
    return (lat, lon) if validate_coordinates(lat, lon) else None


def create_base_map(center: List[float] = None, zoom: int = 2) -> folium.Map:
    return folium.Map(
        location=center or [20, 0],
        zoom_start=zoom,
        tiles='CartoDB positron'
    )


@curry
def add_capital_marker(m: folium.Map, country) -> folium.Map:
    coordinates = capital_coordinates(country)
    if coordinates is None:
        return m
    folium.Marker(
        location=list(coordinates),
        popup=f"{country.name}<br>Capital: {country.capital or 'N/A'}<br>Region: {country.region or 'N/A'}",
        tooltip=country.name
    ).add_to(m)
    return m


def countries_map_service(countries) -> io.BytesIO:
    buf = io.BytesIO()
    m = create_base_map()
    for country in countries:
        m = add_capital_marker(m, country)
    m.save(buf, close_file=False)
    buf.seek(0)
    return buf


def gdp_chart_service(series: dict, country_name: str) -> io.BytesIO:
    points = [point for point in series['points'] if point['gdp'] is not None]
    df = pd.DataFrame(points, columns=['year', 'gdp'])
    plt.figure(figsize=(10, 6))
    plt.plot(df['year'], df['gdp'], marker='o')
    plt.title(f'GDP of {country_name}')
    plt.xlabel('Year')
    plt.ylabel('GDP (billion USD)')
    if series['source'] == 'derived':
        plt.figtext(0.99, 0.01, 'Estimated from current GDP and growth rate', ha='right', fontsize=8)
    plt.tight_layout()
    buf = io.BytesIO()
    plt.savefig(buf, format='png')
    buf.seek(0)
    plt.close()
    return buf


def trade_frame(main_industries) -> pd.DataFrame:
    """Flatten the imports/exports arrays into one row per product."""
    if not isinstance(main_industries, dict):
        return pd.DataFrame(columns=['product', 'percentage', 'flow'])
    rows = [
        {"product": item.get('product'), "percentage": item.get('percentage') or 0, "flow": flow}
        for flow in ('imports', 'exports')
        for item in main_industries.get(flow) or []
        if item.get('product')
    ]
    return pd.DataFrame(rows, columns=['product', 'percentage', 'flow'])


def trade_chart_service(df: pd.DataFrame, country_name: str) -> io.BytesIO:
    plt.figure(figsize=(10, 6))
    sns.barplot(data=df, x='percentage', y='product', hue='flow')
    plt.title(f'Main Imports and Exports of {country_name}')
    plt.xlabel('Share of trade (%)')
    plt.ylabel('Product')
    plt.tight_layout()
    buf = io.BytesIO()
    plt.savefig(buf, format='png')
    buf.seek(0)
    plt.close()
    return buf
