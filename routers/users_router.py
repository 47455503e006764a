"""
Users Router - registration, lookup and pro plan upgrade
"""
from fastapi import APIRouter, Depends

from auth import get_user_from_path, get_user_service
from models.user import CreateUserRequest, User
from services.user_service import UserService
from utils.responses import log_endpoint_event

# Create users router
users_router = APIRouter(prefix="/users", tags=["users"])


@users_router.post("", status_code=201, response_model=User)
async def register_user(
    request: CreateUserRequest,
    user_service: UserService = Depends(get_user_service),
):
    """Register a new free-plan user. Usernames are unique and case-sensitive."""
    user = await user_service.register_user(request.name, request.username)
    log_endpoint_event("POST /users", user.username, "success", {"user_id": user.id})
    return user


@users_router.get("/{id}", response_model=User)
async def get_user(user: User = Depends(get_user_from_path)):
    return user


@users_router.patch("/{id}/pro", response_model=User)
async def upgrade_to_pro(
    user: User = Depends(get_user_from_path),
    user_service: UserService = Depends(get_user_service),
):
    """Activate the pro plan, lifting the free plan todo cap."""
    user = await user_service.upgrade_to_pro(user)
    log_endpoint_event("PATCH /users/{id}/pro", user.username, "success", {"user_id": user.id})
    return user
