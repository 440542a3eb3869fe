from fastapi import APIRouter
from .polydivisible import router as polydivisible_router

# Main API router
api_router = APIRouter()

api_router.include_router(polydivisible_router, prefix="/polydivisible", tags=["polydivisible"])
