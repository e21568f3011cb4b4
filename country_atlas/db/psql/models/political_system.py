from sqlalchemy import Column, Integer, String, Boolean, Text, JSON, ForeignKey
from sqlalchemy.orm import relationship
from country_atlas.db.psql.models import Base

class PoliticalSystem(Base):
    __tablename__ = 'political_systems'

    id = Column(Integer, primary_key=True, autoincrement=True)
    country_id = Column(Integer, ForeignKey('countries.id'), nullable=False, unique=True)
    type = Column(String, nullable=False)
    freedom_index = Column(Integer, nullable=True)
    description = Column(Text, nullable=True)
    has_unstable_political_situation = Column(Boolean, default=False)
    government_branches = Column(JSON, default=list)
    democratic_principles = Column(JSON, default=list)
    international_relations = Column(JSON, default=list)
    laws = Column(JSON, default=list)
    organizations = Column(JSON, default=list)
    ongoing_conflicts = Column(JSON, default=list)

    # Relationships
    country = relationship("Country", back_populates="political_system")
