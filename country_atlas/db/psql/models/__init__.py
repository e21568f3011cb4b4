from datetime import date, datetime
from pydantic.alias_generators import to_camel
from sqlalchemy.orm import declarative_base


def _json_value(value):
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


class SerializableMixin:
    def to_dict(self):
        """Column values keyed by their camelCase wire names."""
        return {
            to_camel(column.key): _json_value(getattr(self, column.key))
            for column in self.__table__.columns
        }


Base = declarative_base(cls=SerializableMixin)

from .country import Country
from .economic_data import EconomicData
from .political_system import PoliticalSystem
from .timeline_event import TimelineEvent
from .political_leader import PoliticalLeader
from .political_party import PoliticalParty
from .international_relation import InternationalRelation
from .historical_law import HistoricalLaw
from .statistic import Statistic
