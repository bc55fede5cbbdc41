from fastapi import APIRouter

from .routes import resources, views, workflows

api_router = APIRouter()
api_router.include_router(views.router)
api_router.include_router(workflows.router)
api_router.include_router(resources.router)
