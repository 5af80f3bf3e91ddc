from fastapi import APIRouter

from clipper.api.v1 import yuque

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(yuque.router)
