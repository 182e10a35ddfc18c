"""Liveness route, served outside the /api prefix."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from board import __version__
from board.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthStatus(BaseModel):
    """Service status. Does not touch the database."""

    status: str
    timestamp: datetime
    version: str
    environment: str


@router.get("/health", response_model=HealthStatus)
async def health(settings: FromDishka[Settings]) -> HealthStatus:
    return HealthStatus(
        status="healthy",
        timestamp=datetime.now(),
        version=__version__,
        environment=settings.environment,
    )
