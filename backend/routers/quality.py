from fastapi import APIRouter

router = APIRouter()

# Quality checkpoints are not tracked yet; both verbs answer with an empty list
@router.get("/quality")
async def list_checkpoints():
    return {"success": True, "data": [], "message": "Quality control routes coming soon"}

@router.post("/quality")
async def create_checkpoint():
    return {"success": True, "data": [], "message": "Quality control routes coming soon"}
