from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from solobiz.core.dependencies import get_db
from solobiz.schemas.stats import DashboardStats
from solobiz.services.analytics_service import get_dashboard_stats

router = APIRouter(prefix="/api/stats", tags=["Analytics"])


@router.get("", response_model=DashboardStats)
def get_stats(db: Session = Depends(get_db)):
    return get_dashboard_stats(db)
