"""
User endpoints.

Registration and login are public.  Status toggling, distance
queries and the weekly report require a bearer token; the caller's
identity is resolved by ``get_current_user`` and passed explicitly to
the services that need it.
"""

from fastapi import APIRouter, Depends

from geo_user_api.app.core.security import get_current_user
from geo_user_api.app.schemas.distance import DistanceQuery
from geo_user_api.app.schemas.report import WeeklyReportQuery
from geo_user_api.app.schemas.response import (
    DistanceResponse,
    ErrorResponse,
    MessageResponse,
    RegisterResponse,
    TokenResponse,
    WeeklyReportResponse,
)
from geo_user_api.app.schemas.user import UserLogin, UserRecord, UserRegister
from geo_user_api.app.services.distance_service import DistanceQueryService
from geo_user_api.app.services.registration_service import RegistrationService
from geo_user_api.app.services.report_service import WeeklyReportService
from geo_user_api.app.services.status_service import StatusToggleService


router = APIRouter(
    responses={
        401: {"model": MessageResponse},
        422: {"model": ErrorResponse},
    },
)


@router.post("/register", response_model=RegisterResponse)
async def register_user(user: UserRegister) -> RegisterResponse:
    """Register a new user and return an access token.

    ``status`` defaults to ``active``.  A duplicate email is rejected
    with 422 and nothing is written.
    """
    registered = await RegistrationService.register(user)
    return RegisterResponse(message="User registered successfully", data=registered)


@router.post("/login", response_model=TokenResponse)
async def login_user(credentials: UserLogin) -> TokenResponse:
    """Exchange email and password for a new access token."""
    token = await RegistrationService.authenticate(str(credentials.email), credentials.password)
    return TokenResponse(message="Login successful", token=token)


@router.post("/toggle-statuses", response_model=MessageResponse)
async def toggle_statuses(current_user: UserRecord = Depends(get_current_user)) -> MessageResponse:
    """Flip every user's status between ``active`` and ``inactive``."""
    await StatusToggleService.toggle_all()
    return MessageResponse(message="All user statuses toggled successfully")


@router.post("/get-distance", response_model=DistanceResponse)
async def get_distance(
    query: DistanceQuery,
    current_user: UserRecord = Depends(get_current_user),
) -> DistanceResponse:
    """Distance from the caller's registered location to the destination."""
    distance = await DistanceQueryService.distance_for(current_user, query)
    return DistanceResponse(message="Distance calculated successfully", distance=distance)


@router.post("/list-users", response_model=WeeklyReportResponse)
async def list_users_by_days(
    query: WeeklyReportQuery,
    current_user: UserRecord = Depends(get_current_user),
) -> WeeklyReportResponse:
    """List users grouped by the weekday they registered on (0 = Sunday)."""
    report = await WeeklyReportService.users_by_days(query.week_number)
    return WeeklyReportResponse(message="Users listed successfully", data=report)
