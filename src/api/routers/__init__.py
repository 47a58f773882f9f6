"""API sub-routers assembled into a single api_router."""

from fastapi import APIRouter

from src.api.routers.verification import router as verification_router

api_router = APIRouter()

api_router.include_router(verification_router, tags=["verification"])
