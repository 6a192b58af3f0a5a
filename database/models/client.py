from sqlalchemy import Column, Integer, String, Text, DateTime, func
from sqlalchemy.orm import relationship
from database.models import Base

class Client(Base):
    __tablename__ = "clients"

    id         = Column(Integer, primary_key=True)
    name       = Column(String, nullable=False)
    email      = Column(String, unique=True)
    phone      = Column(String)
    address    = Column(String)
    city       = Column(String)
    state      = Column(String)
    zip_code   = Column(String)
    notes      = Column(Text)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    estimates = relationship("Estimate", back_populates="client")
    invoices  = relationship("Invoice", back_populates="client")
