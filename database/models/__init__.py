from sqlalchemy.orm import declarative_base
Base = declarative_base()

from database.models.client import Client
from database.models.estimate import Estimate
from database.models.invoice import Invoice, Payment
from database.models.project_area import ProjectArea
from database.models.company_settings import CompanySettings
from database.models.number_sequence import NumberSequence
