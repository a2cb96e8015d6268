# py
from fastapi import APIRouter
from app.api.routes import bmi

api_router = APIRouter()
api_router.include_router(bmi.router, prefix="", tags=["bmi"])
