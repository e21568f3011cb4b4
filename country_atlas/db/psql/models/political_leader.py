from sqlalchemy import Column, Integer, String, Date, Text, JSON, ForeignKey
from sqlalchemy.orm import relationship
from country_atlas.db.psql.models import Base

class PoliticalLeader(Base):
    __tablename__ = 'political_leaders'

    id = Column(Integer, primary_key=True, autoincrement=True)
    country_id = Column(Integer, ForeignKey('countries.id'), nullable=False)
    name = Column(String, nullable=False)
    title = Column(String, nullable=True)
    party = Column(String, nullable=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    ideologies = Column(JSON, default=list)
    image_url = Column(String, nullable=True)
    description = Column(Text, nullable=True)

    # Relationships
    country = relationship("Country", back_populates="political_leaders")
