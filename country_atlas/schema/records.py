"""Payloads for the one-to-many children of a country.

Each resource has an ``Update`` shape where every field is optional and a
``Create`` shape that makes the identifying field required.
"""
from datetime import date
from typing import Annotated, List, Literal, Optional
from pydantic import BeforeValidator, Field
from country_atlas.schema.base import INT_MAX, AtlasModel, NonBlank, OptionalInt, OptionalNumber, OptionalText, \
    blank_to_none
from country_atlas.schema.nested import StatisticPoint

RELATION_STRENGTHS = ('Strong', 'Moderate', 'Weak', 'Tense', 'Hostile')

OptionalDate = Annotated[Optional[date], BeforeValidator(blank_to_none)]


class TimelineEventUpdate(AtlasModel):
    title: NonBlank = None
    date: OptionalText = None
    description: Optional[str] = None
    event_type: Optional[str] = None
    icon: Optional[str] = None
    image_url: Optional[str] = None


class TimelineEventCreate(TimelineEventUpdate):
    title: NonBlank


class PoliticalLeaderUpdate(AtlasModel):
    name: NonBlank = None
    title: Optional[str] = None
    party: Optional[str] = None
    start_date: OptionalDate = None
    end_date: OptionalDate = None
    ideologies: List[NonBlank] = []
    image_url: Optional[str] = None
    description: Optional[str] = None


class PoliticalLeaderCreate(PoliticalLeaderUpdate):
    name: NonBlank


class PoliticalPartyUpdate(AtlasModel):
    name: NonBlank = None
    abbreviation: Optional[str] = None
    ideology: Optional[str] = None
    leader: Optional[str] = None
    founded_year: OptionalInt = None
    seats: Annotated[Optional[Annotated[int, Field(ge=0, le=INT_MAX)]], BeforeValidator(blank_to_none)] = None
    color: Optional[str] = None
    logo_url: Optional[str] = None
    description: Optional[str] = None


class PoliticalPartyCreate(PoliticalPartyUpdate):
    name: NonBlank


class InternationalRelationUpdate(AtlasModel):
    partner_country: NonBlank = None
    iso_code: Optional[str] = None
    relation_type: NonBlank = None
    relation_strength: Annotated[Optional[Literal[RELATION_STRENGTHS]], BeforeValidator(blank_to_none)] = None
    start_date: OptionalDate = None
    details: Optional[str] = None


class InternationalRelationCreate(InternationalRelationUpdate):
    partner_country: NonBlank
    relation_type: NonBlank


class HistoricalLawUpdate(AtlasModel):
    title: NonBlank = None
    date: OptionalText = None
    description: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None


class HistoricalLawCreate(HistoricalLawUpdate):
    title: NonBlank


class StatisticUpdate(AtlasModel):
    title: NonBlank = None
    category: Optional[str] = None
    year: OptionalInt = None
    value: OptionalNumber = None
    unit: Optional[str] = None
    source: Optional[str] = None
    data: List[StatisticPoint] = []


class StatisticCreate(StatisticUpdate):
    title: NonBlank
