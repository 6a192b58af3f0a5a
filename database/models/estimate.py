from sqlalchemy import Column, Integer, String, Float, Date, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from database.models import Base

class Estimate(Base):
    __tablename__ = "estimates"

    id                = Column(Integer, primary_key=True)
    estimate_number   = Column(String, nullable=False, unique=True)
    client_id         = Column(Integer, ForeignKey("clients.id"), nullable=False)
    title             = Column(String, nullable=False)
    description       = Column(Text)
    status            = Column(String, nullable=False, default="draft")
    labor_cost        = Column(Float, nullable=False, default=0)
    material_cost     = Column(Float, nullable=False, default=0)
    markup_percentage = Column(Float, nullable=False, default=15)
    total_amount      = Column(Float, nullable=False, default=0)
    valid_until       = Column(Date)
    terms_and_notes   = Column(Text)
    created_at        = Column(DateTime, server_default=func.now())
    updated_at        = Column(DateTime, server_default=func.now(), onupdate=func.now())

    client        = relationship("Client", back_populates="estimates")
    project_areas = relationship(
        "ProjectArea",
        back_populates="estimate",
        cascade="all, delete-orphan",
        order_by="ProjectArea.position"
    )
    invoices      = relationship("Invoice", back_populates="estimate")

    @property
    def client_name(self):
        return self.client.name if self.client else None
