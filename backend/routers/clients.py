from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.responses import ok, paginated
from backend.schemas import ClientCreate, ClientRead
from backend.services import client_service
from database.setup_db import get_db

router = APIRouter()

@router.get("/clients")
async def list_clients(db: Session = Depends(get_db)):
    clients = client_service.list_clients(db)
    items = [ClientRead.model_validate(c).model_dump(mode="json") for c in clients]
    return ok(paginated(items, len(items), 1, max(len(items), 100)))

@router.post("/clients", status_code=201)
async def create_client(client: ClientCreate, db: Session = Depends(get_db)):
    created = client_service.create_client(db, client)
    return ok(ClientRead.model_validate(created).model_dump(mode="json"), "Client created successfully")
