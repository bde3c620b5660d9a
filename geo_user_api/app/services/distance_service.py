"""
Distance from the caller's stored location to a destination.
"""

import logging
from typing import Optional

from ..core.errors import Unauthorized
from ..schemas.distance import DistanceQuery
from ..schemas.user import UserRecord
from .geo import distance_km, format_distance


logger = logging.getLogger(__name__)


class DistanceQueryService:

    @classmethod
    async def distance_for(cls, identity: Optional[UserRecord], query: DistanceQuery) -> str:
        """Return the formatted distance from ``identity``'s location to ``query``.

        The identity is resolved by the auth dependency before this is
        called; ``None`` is still rejected with ``Unauthorized`` and no
        distance is computed.
        """
        if identity is None:
            raise Unauthorized()
        km = distance_km(
            identity.latitude,
            identity.longitude,
            query.destination_latitude,
            query.destination_longitude,
        )
        logger.debug("Distance for user %s: %s km", identity.id, km)
        return format_distance(km)
