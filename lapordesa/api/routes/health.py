"""
Health check endpoint.
"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lapordesa.api.deps import get_context, get_db
from lapordesa.core.context import AppContext
from lapordesa.core.logging import get_logger
from lapordesa.schemas import HealthResponse

logger = get_logger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
def health_check(
    db: Session = Depends(get_db),
    context: AppContext = Depends(get_context),
):
    """Report database reachability and the orphaned media count."""
    try:
        db.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        logger.error(f"Health check database probe failed: {e}")
        database = "unavailable"

    return HealthResponse(
        status="ok" if database == "ok" else "degraded",
        version=context.settings.API_VERSION,
        database=database,
        orphaned_media=context.attachment_cleaner.orphaned_total,
    )
