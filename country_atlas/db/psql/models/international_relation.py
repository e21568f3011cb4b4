from sqlalchemy import Column, Integer, String, Date, Text, ForeignKey
from sqlalchemy.orm import relationship
from country_atlas.db.psql.models import Base

class InternationalRelation(Base):
    __tablename__ = 'international_relations'

    id = Column(Integer, primary_key=True, autoincrement=True)
    country_id = Column(Integer, ForeignKey('countries.id'), nullable=False)
    partner_country = Column(String, nullable=False)
    iso_code = Column(String(3), nullable=True)
    relation_type = Column(String, nullable=False)
    relation_strength = Column(String, nullable=True)
    start_date = Column(Date, nullable=True)
    details = Column(Text, nullable=True)

    # Relationships
    country = relationship("Country", back_populates="international_relations")
