# py
from pydantic import BaseModel, Field
from typing import Any

from app.utils.bmi import BMIBand


class BMIEvaluateRequest(BaseModel):
    # Any: the evaluator does its own strict numeric check
    weight: Any = Field(..., description="Weight in kilograms")
    height: Any = Field(..., description="Height in meters")


class BMIEvaluateResponse(BaseModel):
    bmi: float
    rounded_bmi: int
    band: BMIBand
    message: str


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
