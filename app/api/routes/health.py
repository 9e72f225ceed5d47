from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.db.database import get_db

router = APIRouter()


@router.get("/")
async def root():
    return {"message": "🚀 Portfolio Backend is running", "docs": "/docs"}


@router.get("/health")
async def health(db: AsyncSession = Depends(get_db)):
    db_error = None
    try:
        await db.execute(text("SELECT 1"))
        db_status = "connected"
    except Exception as exc:
        db_status = "error"
        db_error = str(exc)

    return {
        "status": "healthy" if db_status == "connected" else "degraded",
        "database": db_status,
        "database_error": db_error,
    }
