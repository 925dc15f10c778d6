from typing import Any, Dict

from fastapi import APIRouter

from practice_scheduler.dependencies import OptionalDB

router = APIRouter()


@router.get("/health")
async def health(database: OptionalDB) -> Dict[str, Any]:
    db_status = "disconnected"
    if database is not None:
        db_status = "healthy" if await database.ping() else "unhealthy"

    return {"status": "ok", "database": db_status}
