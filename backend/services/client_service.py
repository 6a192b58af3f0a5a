from typing import List
from sqlalchemy.orm import Session
from loguru import logger

from backend.errors import AppError
from backend.schemas import ClientCreate, EMAIL_PATTERN
from database.models.client import Client


def list_clients(db: Session) -> List[Client]:
    return db.query(Client).order_by(Client.name.asc()).all()


def create_client(db: Session, client_data: ClientCreate) -> Client:
    name = (client_data.name or "").strip()
    if not name:
        raise AppError("Client name is required", 400)

    email = (client_data.email or "").strip() or None
    if email and not EMAIL_PATTERN.match(email):
        raise AppError("Invalid email format", 400)

    if email and db.query(Client).filter(Client.email == email).first():
        raise AppError("Client with this email already exists", 409)

    fields = client_data.model_dump()
    fields.update(name=name, email=email)
    # empty strings from the form are stored as NULL
    client = Client(**{key: (value or None) for key, value in fields.items()})

    db.add(client)
    db.commit()
    db.refresh(client)
    logger.info(f"Created client {client.id} ({client.name})")
    return client
