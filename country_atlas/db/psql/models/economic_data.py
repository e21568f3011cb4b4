from sqlalchemy import Column, Integer, String, Float, Text, JSON, ForeignKey
from sqlalchemy.orm import relationship
from country_atlas.db.psql.models import Base

class EconomicData(Base):
    __tablename__ = 'economic_data'

    id = Column(Integer, primary_key=True, autoincrement=True)
    country_id = Column(Integer, ForeignKey('countries.id'), nullable=False, unique=True)
    gdp = Column(Float, nullable=True)
    gdp_per_capita = Column(Float, nullable=True)
    gdp_growth = Column(String, nullable=True)
    inflation = Column(String, nullable=True)
    exchange_rate = Column(Float, nullable=True)
    currency_code = Column(String, nullable=True)
    outlook = Column(Text, nullable=True)
    gdp_history = Column(JSON, default=list)
    # list of industries, or {"imports": [...], "exports": [...]}
    main_industries = Column(JSON, nullable=True)
    trading_partners = Column(JSON, default=list)
    industry_specializations = Column(JSON, default=list)
    challenges = Column(JSON, default=list)
    reforms = Column(JSON, default=list)
    initiatives = Column(JSON, default=list)

    # Relationships
    country = relationship("Country", back_populates="economic_data")
