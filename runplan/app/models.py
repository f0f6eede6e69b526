from pydantic import BaseModel

from .env_loader import EnvironmentName


class HealthResponse(BaseModel):
    status: str
    environment: EnvironmentName
