from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from country_atlas.db.psql.models import Base

class TimelineEvent(Base):
    __tablename__ = 'timeline_events'

    id = Column(Integer, primary_key=True, autoincrement=True)
    country_id = Column(Integer, ForeignKey('countries.id'), nullable=False)
    title = Column(String, nullable=False)
    # kept as entered, e.g. "1776" or "1989-11-09"
    date = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    event_type = Column(String, nullable=True)
    icon = Column(String, nullable=True)
    image_url = Column(String, nullable=True)

    # Relationships
    country = relationship("Country", back_populates="timeline_events")
