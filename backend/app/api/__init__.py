from fastapi import APIRouter
from app.api.routes import root_router, users_router

api_router = APIRouter()
api_router.include_router(root_router)
api_router.include_router(users_router)
