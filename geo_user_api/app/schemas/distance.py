"""
Pydantic models for the distance query.
"""

from pydantic import BaseModel, Field


class DistanceQuery(BaseModel):
    """Destination coordinates, in degrees."""

    destination_latitude: float = Field(..., ge=-90, le=90, examples=[48.8566])
    destination_longitude: float = Field(..., ge=-180, le=180, examples=[2.3522])
