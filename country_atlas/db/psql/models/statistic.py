from sqlalchemy import Column, Integer, String, Float, JSON, ForeignKey
from sqlalchemy.orm import relationship
from country_atlas.db.psql.models import Base

class Statistic(Base):
    __tablename__ = 'statistics'

    id = Column(Integer, primary_key=True, autoincrement=True)
    country_id = Column(Integer, ForeignKey('countries.id'), nullable=False)
    title = Column(String, nullable=False)
    category = Column(String, nullable=True)
    year = Column(Integer, nullable=True)
    value = Column(Float, nullable=True)
    unit = Column(String, nullable=True)
    source = Column(String, nullable=True)
    # [{"label": ..., "value": ...}]
    data = Column(JSON, default=list)

    # Relationships
    country = relationship("Country", back_populates="statistics")
