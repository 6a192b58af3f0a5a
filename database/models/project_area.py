from sqlalchemy import Column, Integer, String, Float, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from database.models import Base

class ProjectArea(Base):
    __tablename__ = "project_areas"

    id                = Column(Integer, primary_key=True)
    estimate_id       = Column(
                          Integer,
                          ForeignKey("estimates.id", ondelete="CASCADE")
                       )
    invoice_id        = Column(
                          Integer,
                          ForeignKey("invoices.id", ondelete="CASCADE")
                       )
    position          = Column(Integer, nullable=False, default=0)
    area_name         = Column(String, nullable=False)
    area_type         = Column(String, nullable=False, default="indoor")
    surface_type      = Column(String, default="drywall")
    square_footage    = Column(Float, default=0)
    ceiling_height    = Column(Float, default=8)
    prep_requirements = Column(Text)
    paint_type        = Column(String)
    paint_brand       = Column(String)
    paint_color       = Column(String)
    finish_type       = Column(String)
    number_of_coats   = Column(Integer, nullable=False, default=2)
    labor_cost        = Column(Float, nullable=False, default=0)
    material_cost     = Column(Float, nullable=False, default=0)
    notes             = Column(Text)
    created_at        = Column(DateTime, server_default=func.now())

    estimate = relationship("Estimate", back_populates="project_areas")
    invoice  = relationship("Invoice", back_populates="project_areas")
