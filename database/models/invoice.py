from sqlalchemy import Column, Integer, String, Float, Date, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from database.models import Base

class Invoice(Base):
    __tablename__ = "invoices"

    id              = Column(Integer, primary_key=True)
    invoice_number  = Column(String, nullable=False, unique=True)
    estimate_id     = Column(Integer, ForeignKey("estimates.id"))
    client_id       = Column(Integer, ForeignKey("clients.id"))
    title           = Column(String, nullable=False)
    description     = Column(Text)
    status          = Column(String, nullable=False, default="draft")
    total_amount    = Column(Float, nullable=False, default=0)
    paid_amount     = Column(Float, nullable=False, default=0)
    due_date        = Column(Date)
    payment_terms   = Column(String, nullable=False, default="Net 30")
    terms_and_notes = Column(Text)
    created_at      = Column(DateTime, server_default=func.now())
    updated_at      = Column(DateTime, server_default=func.now(), onupdate=func.now())

    client        = relationship("Client", back_populates="invoices")
    estimate      = relationship("Estimate", back_populates="invoices")
    project_areas = relationship(
        "ProjectArea",
        back_populates="invoice",
        cascade="all, delete-orphan",
        order_by="ProjectArea.position"
    )
    payments      = relationship(
        "Payment",
        back_populates="invoice",
        cascade="all, delete-orphan",
        order_by="Payment.payment_date.desc()"
    )

    @property
    def outstanding_amount(self):
        return (self.total_amount or 0) - (self.paid_amount or 0)

    @property
    def client_name(self):
        return self.client.name if self.client else None

    @property
    def estimate_number(self):
        return self.estimate.estimate_number if self.estimate else None


class Payment(Base):
    __tablename__ = "payments"

    id               = Column(Integer, primary_key=True)
    invoice_id       = Column(
                         Integer,
                         ForeignKey("invoices.id", ondelete="CASCADE"),
                         nullable=False
                      )
    amount           = Column(Float, nullable=False)
    payment_method   = Column(String, default="Cash")
    payment_date     = Column(Date, nullable=False)
    reference_number = Column(String)
    notes            = Column(Text)
    created_at       = Column(DateTime, server_default=func.now())

    invoice = relationship("Invoice", back_populates="payments")
