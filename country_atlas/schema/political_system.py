from typing import Annotated, Any, Dict, List, Optional, Union
from pydantic import BeforeValidator, Field
from country_atlas.schema.base import AtlasModel, NonBlank, blank_to_none
from country_atlas.schema.nested import Conflict, GovernmentBranch, Organization

DEFAULT_SYSTEM_TYPE = 'Republic'

LooseRecords = List[Union[NonBlank, Dict[str, Any]]]


class PoliticalSystemUpdate(AtlasModel):
    type: NonBlank = None
    freedom_index: Annotated[Optional[Annotated[int, Field(ge=0, le=100)]], BeforeValidator(blank_to_none)] = None
    description: Optional[str] = None
    has_unstable_political_situation: bool = False
    government_branches: List[GovernmentBranch] = []
    democratic_principles: LooseRecords = []
    international_relations: LooseRecords = []
    laws: LooseRecords = []
    organizations: List[Organization] = []
    ongoing_conflicts: List[Conflict] = []


class PoliticalSystemCreate(PoliticalSystemUpdate):
    type: NonBlank
