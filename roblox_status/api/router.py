from fastapi import APIRouter

from roblox_status.api import status

api_router = APIRouter()
api_router.include_router(status.router)
