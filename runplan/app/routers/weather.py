import logging

from fastapi import APIRouter, Depends, HTTPException

from runplan.app.dependencies import planning_service
from runplan.errors import InvalidInput, WeatherUnavailable
from runplan.models import ForecastDay
from runplan.plan.service import PlanningService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/weather", tags=["weather"])


@router.get("/forecast", response_model=list[ForecastDay])
def get_forecast(
    location: str | None = None,
    days: int = 7,
    service: PlanningService = Depends(planning_service),
) -> list[ForecastDay]:
    """Get the daily forecast, served from the cache when it is fresh."""
    try:
        return service.get_forecast(location=location, days=days)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    except WeatherUnavailable as e:
        logger.warning(f"Forecast unavailable: {e}")
        raise HTTPException(status_code=503, detail=str(e))
