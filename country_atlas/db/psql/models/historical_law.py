from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from country_atlas.db.psql.models import Base

class HistoricalLaw(Base):
    __tablename__ = 'historical_laws'

    id = Column(Integer, primary_key=True, autoincrement=True)
    country_id = Column(Integer, ForeignKey('countries.id'), nullable=False)
    title = Column(String, nullable=False)
    date = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    category = Column(String, nullable=True)
    status = Column(String, nullable=True)

    # Relationships
    country = relationship("Country", back_populates="historical_laws")
