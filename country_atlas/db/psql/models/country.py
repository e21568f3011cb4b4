from sqlalchemy import Column, Integer, BigInteger, String, Float, Boolean, JSON
from sqlalchemy.orm import relationship
from country_atlas.db.psql.models import Base

class Country(Base):
    __tablename__ = 'countries'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    alpha2_code = Column(String(2), nullable=True)
    alpha3_code = Column(String(3), nullable=True, unique=True)
    capital = Column(String, nullable=True)
    region = Column(String, nullable=True)
    subregion = Column(String, nullable=True)
    population = Column(BigInteger, nullable=True)
    area = Column(Float, nullable=True)
    flag_url = Column(String, nullable=True)
    coat_of_arms_url = Column(String, nullable=True)
    map_url = Column(String, nullable=True)
    independent = Column(Boolean, default=False)
    un_member = Column(Boolean, default=False)
    currencies = Column(JSON, nullable=True)
    languages = Column(JSON, nullable=True)
    borders = Column(JSON, nullable=True)
    timezones = Column(JSON, nullable=True)
    start_of_week = Column(String, nullable=True)
    capital_info = Column(JSON, nullable=True)
    postal_code = Column(JSON, nullable=True)
    flag = Column(String, nullable=True)
    # denormalized copy of capital/region/subregion/population plus governmentForm
    country_info = Column(JSON, nullable=True)

    # Relationships
    economic_data = relationship("EconomicData", back_populates="country", uselist=False)
    political_system = relationship("PoliticalSystem", back_populates="country", uselist=False)
    timeline_events = relationship("TimelineEvent", back_populates="country")
    political_leaders = relationship("PoliticalLeader", back_populates="country")
    political_parties = relationship("PoliticalParty", back_populates="country")
    international_relations = relationship("InternationalRelation", back_populates="country")
    historical_laws = relationship("HistoricalLaw", back_populates="country")
    statistics = relationship("Statistic", back_populates="country")
