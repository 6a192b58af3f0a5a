from sqlalchemy import Column, Integer, String, Text, DateTime, func
from database.models import Base

class CompanySettings(Base):
    __tablename__ = "company_settings"

    id              = Column(Integer, primary_key=True)
    company_name    = Column(String, nullable=False)
    company_address = Column(String, nullable=False)
    company_phone   = Column(String, nullable=False)
    company_email   = Column(String, nullable=False)
    logo_url        = Column(Text)
    created_at      = Column(DateTime, server_default=func.now())
    updated_at      = Column(DateTime, server_default=func.now(), onupdate=func.now())
