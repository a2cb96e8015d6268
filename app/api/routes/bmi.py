# py
from fastapi import APIRouter, Depends
from loguru import logger
from app.api.deps import rate_limit
from app.schemas import BMIEvaluateRequest, BMIEvaluateResponse
from app.utils.bmi import assess

router = APIRouter()


@router.post("/bmi/evaluate", response_model=BMIEvaluateResponse)
async def evaluate_bmi(body: BMIEvaluateRequest, client=Depends(rate_limit)):
    report = assess(body.weight, body.height).unwrap()
    logger.info("BMI evaluated for {}: {}", client, report.band.value)
    return BMIEvaluateResponse(**report.model_dump())
