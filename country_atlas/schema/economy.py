from typing import List, Optional
from country_atlas.schema.base import AtlasModel, OptionalNumber, OptionalText
from country_atlas.schema.nested import Challenge, GdpPoint, IndustrySpecializations, MainIndustries, Reform, \
    TradingPartners


class EconomicDataPayload(AtlasModel):
    """Economic indicators for one country.

    Every field is optional, so the same shape validates both the initial
    create and later partial updates.
    """
    gdp: OptionalNumber = None
    gdp_per_capita: OptionalNumber = None
    gdp_growth: OptionalText = None
    inflation: OptionalText = None
    exchange_rate: OptionalNumber = None
    currency_code: Optional[str] = None
    outlook: Optional[str] = None
    gdp_history: List[GdpPoint] = []
    main_industries: Optional[MainIndustries] = None
    trading_partners: TradingPartners = []
    industry_specializations: IndustrySpecializations = []
    challenges: List[Challenge] = []
    reforms: List[Reform] = []
    initiatives: List[Reform] = []
