import logging

from fastapi import APIRouter, Depends, HTTPException

from runplan.app.dependencies import planning_service
from runplan.errors import InvalidInput, WeatherUnavailable
from runplan.models import CurrentWeek, RunSuggestion
from runplan.plan.service import PlanningService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/planning", tags=["planning"])


@router.get("/suggestions", response_model=list[RunSuggestion])
def get_suggestions(
    location: str | None = None,
    days: int = 7,
    service: PlanningService = Depends(planning_service),
) -> list[RunSuggestion]:
    """Suggest runs for the coming days based on the forecast and this week's target."""
    try:
        return service.generate_suggestions(location=location, days=days)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    except WeatherUnavailable as e:
        logger.warning(f"Suggestions unavailable: {e}")
        raise HTTPException(status_code=503, detail=str(e))


@router.get("/current-week", response_model=CurrentWeek | None)
def get_current_week(
    service: PlanningService = Depends(planning_service),
) -> CurrentWeek | None:
    return service.get_current_week()
