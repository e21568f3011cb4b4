from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from country_atlas.db.psql.models import Base

class PoliticalParty(Base):
    __tablename__ = 'political_parties'

    id = Column(Integer, primary_key=True, autoincrement=True)
    country_id = Column(Integer, ForeignKey('countries.id'), nullable=False)
    name = Column(String, nullable=False)
    abbreviation = Column(String, nullable=True)
    ideology = Column(String, nullable=True)
    leader = Column(String, nullable=True)
    founded_year = Column(Integer, nullable=True)
    seats = Column(Integer, nullable=True)
    color = Column(String, nullable=True)
    logo_url = Column(String, nullable=True)
    description = Column(Text, nullable=True)

    # Relationships
    country = relationship("Country", back_populates="political_parties")
