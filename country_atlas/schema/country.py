from typing import Annotated, Any, Dict, List, Optional, Union
from pydantic import BeforeValidator, Field, StringConstraints
from country_atlas.schema.base import BIGINT_MAX, AtlasModel, NonBlank, OptionalNumber, blank_to_none


def _upper(value):
    if isinstance(value, str):
        return value.strip().upper() or None
    return value


Alpha2 = Annotated[Optional[Annotated[str, StringConstraints(pattern=r'^[A-Z]{2}$')]], BeforeValidator(_upper)]
Alpha3 = Annotated[Optional[Annotated[str, StringConstraints(pattern=r'^[A-Z]{3}$')]], BeforeValidator(_upper)]
Count = Annotated[Optional[Annotated[int, Field(ge=0, le=BIGINT_MAX)]], BeforeValidator(blank_to_none)]


class CountryInfo(AtlasModel):
    capital: Optional[str] = None
    region: Optional[str] = None
    subregion: Optional[str] = None
    population: Count = None
    government_form: Optional[str] = None


class CountryUpdate(AtlasModel):
    name: NonBlank = None
    alpha2_code: Alpha2 = None
    alpha3_code: Alpha3 = None
    capital: Optional[str] = None
    region: Optional[str] = None
    subregion: Optional[str] = None
    population: Count = None
    area: OptionalNumber = None
    flag_url: Optional[str] = None
    coat_of_arms_url: Optional[str] = None
    map_url: Optional[str] = None
    independent: bool = False
    un_member: bool = False
    currencies: Optional[Union[Dict[str, Any], List[Any]]] = None
    languages: Optional[Union[Dict[str, Any], List[Any]]] = None
    borders: Optional[List[str]] = None
    timezones: Optional[List[str]] = None
    start_of_week: Optional[str] = None
    capital_info: Optional[Dict[str, Any]] = None
    postal_code: Optional[Dict[str, Any]] = None
    flag: Optional[str] = None
    country_info: Optional[CountryInfo] = None


class CountryCreate(CountryUpdate):
    name: NonBlank
