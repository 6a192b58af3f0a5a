from sqlalchemy import Column, Integer, String
from database.models import Base

class NumberSequence(Base):
    __tablename__ = "number_sequences"

    id             = Column(Integer, primary_key=True)
    sequence_type  = Column(String, nullable=False, unique=True)
    current_number = Column(Integer, nullable=False, default=0)
    prefix         = Column(String)
