"""Hardcoded fallback countries and demo economic data."""


def _sample_country(name, alpha2, alpha3, capital, region, subregion, population, area, flag, map_url,
                    latlng, start_of_week, government_form):
    return {
        "name": name,
        "alpha2Code": alpha2,
        "alpha3Code": alpha3,
        "capital": capital,
        "region": region,
        "subregion": subregion,
        "population": population,
        "area": area,
        "flagUrl": f"https://flagcdn.com/{alpha2.lower()}.svg",
        "coatOfArmsUrl": None,
        "mapUrl": map_url,
        "independent": True,
        "unMember": True,
        "startOfWeek": start_of_week,
        "capitalInfo": {"latlng": latlng},
        "flag": flag,
        "countryInfo": {
            "capital": capital,
            "region": region,
            "subregion": subregion,
            "population": population,
            "governmentForm": government_form,
        },
    }


SAMPLE_COUNTRIES = [
    _sample_country("United States", "US", "USA", "Washington, D.C.", "Americas", "North America",
                    331002651, 9833517, "🇺🇸", "https://goo.gl/maps/e8M246zY4BSjkjAv6",
                    [38.89, -77.05], "sunday", "Federal Republic"),
    _sample_country("Germany", "DE", "DEU", "Berlin", "Europe", "Western Europe",
                    83240525, 357114, "🇩🇪", "https://goo.gl/maps/mD9FBMq1nvXUBrkv6",
                    [52.52, 13.4], "monday", "Federal Parliamentary Republic"),
    _sample_country("Japan", "JP", "JPN", "Tokyo", "Asia", "Eastern Asia",
                    125836021, 377930, "🇯🇵", "https://goo.gl/maps/NGTLSCSrA8bMrvnX9",
                    [35.68, 139.75], "monday", "Unitary Parliamentary Constitutional Monarchy"),
    _sample_country("South Africa", "ZA", "ZAF", "Pretoria", "Africa", "Southern Africa",
                    59308690, 1221037, "🇿🇦", "https://goo.gl/maps/CLCZ1R8Uz1KpYhRv6",
                    [-25.7, 28.22], "monday", "Parliamentary Republic"),
    _sample_country("Australia", "AU", "AUS", "Canberra", "Oceania", "Australia and New Zealand",
                    25687041, 7692024, "🇦🇺", "https://goo.gl/maps/DcjaDa7UbhnZTndH6",
                    [-35.27, 149.08], "monday", "Federal Parliamentary Constitutional Monarchy"),
    _sample_country("Switzerland", "CH", "CHE", "Bern", "Europe", "Western Europe",
                    8654622, 41284, "🇨🇭", "https://goo.gl/maps/uVuZcXaxSx5jLyv87",
                    [46.92, 7.47], "monday", "Federal Republic"),
]

# keyed by alpha-3 code; values are EconomicData payloads
DEMO_ECONOMIC_DATA = {
    "USA": {
        "gdp": 25000,
        "gdpPerCapita": 75000,
        "gdpGrowth": "3.1%",
        "inflation": "2.5%",
        "mainIndustries": [
            {"name": "Services", "percentage": 79.2},
            {"name": "Manufacturing", "percentage": 18.9},
            {"name": "Agriculture", "percentage": 0.9},
            {"name": "Technology", "percentage": 12.7},
            {"name": "Healthcare", "percentage": 15.3},
            {"name": "Financial", "percentage": 8.6},
        ],
        "tradingPartners": [
            {"country": "China", "tradeVolume": "690B USD"},
            {"country": "Canada", "tradeVolume": "665B USD"},
            {"country": "Mexico", "tradeVolume": "614B USD"},
            {"country": "Japan", "tradeVolume": "217B USD"},
            {"country": "Germany", "tradeVolume": "200B USD"},
        ],
        "challenges": [
            {"title": "Income Inequality", "description": "Growing gap between wealthy and poor",
             "icon": "fa-balance-scale"},
            {"title": "Infrastructure", "description": "Aging roads, bridges and utilities", "icon": "fa-road"},
        ],
        "reforms": [
            {"text": "Tax incentives for clean energy development", "icon": "fa-sun"},
            {"text": "Infrastructure spending package", "icon": "fa-building"},
        ],
        "outlook": "Projected stable growth with moderate inflation over next 5 years. "
                   "Technology and healthcare sectors expected to lead growth.",
    },
    "DEU": {
        "gdp": 4500,
        "gdpPerCapita": 54000,
        "gdpGrowth": "1.8%",
        "inflation": "1.7%",
        "mainIndustries": [
            {"name": "Manufacturing", "percentage": 28.6},
            {"name": "Services", "percentage": 68.9},
            {"name": "Automotive", "percentage": 14.2},
            {"name": "Engineering", "percentage": 10.4},
            {"name": "Energy", "percentage": 5.6},
            {"name": "Chemical", "percentage": 7.8},
        ],
        "tradingPartners": [
            {"country": "United States", "tradeVolume": "250B EUR"},
            {"country": "France", "tradeVolume": "185B EUR"},
            {"country": "China", "tradeVolume": "245B EUR"},
            {"country": "Netherlands", "tradeVolume": "200B EUR"},
            {"country": "Italy", "tradeVolume": "145B EUR"},
            {"country": "Poland", "tradeVolume": "150B EUR"},
        ],
        "challenges": [
            {"title": "Energy Transition", "description": "Shift from nuclear and coal to renewables",
             "icon": "fa-bolt"},
            {"title": "Aging Population", "description": "Demographic challenges affecting labor market",
             "icon": "fa-users"},
        ],
        "reforms": [
            {"text": "Digital infrastructure investment program", "icon": "fa-network-wired"},
            {"text": "Energy transition incentives", "icon": "fa-leaf"},
        ],
        "outlook": "Modest growth expected with focus on green technology and digital transformation. "
                   "Export-driven economy remains strong but faces headwinds from global trade tensions.",
    },
    "CHE": {
        "gdp": 800,
        "gdpPerCapita": 92000,
        "gdpGrowth": "1.5%",
        "inflation": "0.5%",
        "mainIndustries": [
            {"name": "Financial Services", "percentage": 25.5},
            {"name": "Pharmaceuticals", "percentage": 18.2},
            {"name": "Technology", "percentage": 9.4},
            {"name": "Watchmaking", "percentage": 7.8},
            {"name": "Tourism", "percentage": 6.3},
            {"name": "Agriculture", "percentage": 0.8},
        ],
        "tradingPartners": [
            {"country": "Germany", "tradeVolume": "95B CHF"},
            {"country": "United States", "tradeVolume": "80B CHF"},
            {"country": "Italy", "tradeVolume": "35B CHF"},
            {"country": "France", "tradeVolume": "30B CHF"},
            {"country": "China", "tradeVolume": "40B CHF"},
        ],
        "challenges": [
            {"title": "Strong Currency", "description": "High franc affects export competitiveness",
             "icon": "fa-money-bill-wave"},
            {"title": "Banking Regulation", "description": "International pressure on banking secrecy",
             "icon": "fa-university"},
        ],
        "reforms": [
            {"text": "Banking transparency regulations", "icon": "fa-landmark"},
            {"text": "Digital economy initiatives", "icon": "fa-microchip"},
        ],
        "outlook": "Continued stability with modest growth. Banking sector adapting to new global "
                   "transparency requirements while maintaining competitiveness.",
    },
    "FRA": {
        "gdp": 2900,
        "gdpPerCapita": 42000,
        "gdpGrowth": "1.3%",
        "inflation": "1.5%",
        "mainIndustries": [
            {"name": "Services", "percentage": 70.3},
            {"name": "Manufacturing", "percentage": 19.5},
            {"name": "Tourism", "percentage": 7.4},
            {"name": "Agriculture", "percentage": 1.6},
            {"name": "Luxury Goods", "percentage": 4.8},
            {"name": "Energy", "percentage": 2.6},
        ],
        "tradingPartners": [
            {"country": "Germany", "tradeVolume": "170B EUR"},
            {"country": "United States", "tradeVolume": "90B EUR"},
            {"country": "Italy", "tradeVolume": "85B EUR"},
            {"country": "Spain", "tradeVolume": "80B EUR"},
            {"country": "Belgium", "tradeVolume": "95B EUR"},
        ],
        "challenges": [
            {"title": "Labor Market Reform", "description": "Rigid employment regulations and high unemployment",
             "icon": "fa-user-tie"},
            {"title": "Public Debt", "description": "High government spending and social benefits",
             "icon": "fa-euro-sign"},
        ],
        "reforms": [
            {"text": "Labor code modernization", "icon": "fa-briefcase"},
            {"text": "Digital economy initiative", "icon": "fa-laptop-code"},
        ],
        "outlook": "Moderate growth with focus on innovation and maintaining social welfare system. "
                   "Tourism and luxury goods sectors continue to be key economic drivers.",
    },
}
