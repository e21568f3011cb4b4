"""Record shapes stored inside the JSON columns."""
from typing import Annotated, List, Literal, Optional, Union
from pydantic import BeforeValidator, Field
from country_atlas.schema.base import AtlasModel, NonBlank, OptionalNumber, OptionalPercentage, \
    OptionalText, Percentage, TextValue, blank_to_none, decode_json_string

CONFLICT_TYPES = ('Territorial', 'Ethnic', 'Religious', 'Political', 'Economic', 'Civil War', 'Diplomatic', 'Other')
CONFLICT_STATUSES = ('Active', 'Frozen', 'Dormant', 'Resolved', 'Escalating', 'Peace Process')


class GdpPoint(AtlasModel):
    year: TextValue
    gdp: OptionalNumber = None


class TradeItem(AtlasModel):
    product: NonBlank
    value: OptionalText = None
    percentage: Annotated[Percentage, BeforeValidator(lambda v: 0 if blank_to_none(v) is None else v)] = 0


class Industry(AtlasModel):
    name: NonBlank
    percentage: OptionalPercentage = None


class TradeBalance(AtlasModel):
    imports: List[TradeItem] = []
    exports: List[TradeItem] = []
    industries: Optional[List[Industry]] = None


class TradingPartner(AtlasModel):
    country: NonBlank
    relationship: Optional[str] = None
    trade_volume: TextValue


class IndustrySpecialization(AtlasModel):
    name: NonBlank
    description: Optional[str] = None
    contribution: TextValue


class Challenge(AtlasModel):
    title: NonBlank
    description: Optional[str] = None
    icon: Optional[str] = None


class Reform(AtlasModel):
    text: NonBlank
    icon: Optional[str] = None


class Conflict(AtlasModel):
    name: NonBlank
    type: Literal[CONFLICT_TYPES]
    status: Literal[CONFLICT_STATUSES]
    year: Annotated[Optional[Annotated[int, Field(gt=0)]], BeforeValidator(blank_to_none)] = None
    description: Optional[str] = None


class Organization(AtlasModel):
    name: NonBlank
    acronym: NonBlank
    join_date: Optional[str] = None
    role: Optional[str] = None
    website: Optional[str] = None


class GovernmentBranch(AtlasModel):
    name: NonBlank
    description: Optional[str] = None


class StatisticPoint(AtlasModel):
    label: TextValue
    value: OptionalNumber = None


MainIndustries = Union[List[Industry], TradeBalance]
TradingPartners = Annotated[List[TradingPartner], BeforeValidator(decode_json_string)]
IndustrySpecializations = Annotated[List[IndustrySpecialization], BeforeValidator(decode_json_string)]
