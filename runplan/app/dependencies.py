from datetime import date

from runplan.db.runs import get_all_runs
from runplan.models import ScheduledRun
from runplan.plan.service import PlanningService
from runplan.utils.timezone import local_today


def all_runs() -> list[ScheduledRun]:
    """Get all scheduled runs from the database."""
    return get_all_runs()


def today() -> date:
    """Today's date in the training timezone."""
    return local_today()


def planning_service() -> PlanningService:
    return PlanningService()
