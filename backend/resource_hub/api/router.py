from fastapi import APIRouter
from resource_hub.api.routers import auth, admin, categories, resources, blocks, themes

api_router = APIRouter()
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(resources.router, prefix="/resources", tags=["resources"])
api_router.include_router(blocks.router, prefix="/blocks", tags=["blocks"])
api_router.include_router(themes.router, prefix="/theme-settings", tags=["theme-settings"])
