from fastapi import APIRouter
from api.routes.system import router as system_router
from api.routes.checklist import router as checklist_router

api_router = APIRouter()

api_router.include_router(system_router)
api_router.include_router(checklist_router)
