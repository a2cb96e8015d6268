# py
"""BMI evaluation: validate, compute, round, classify and describe."""
import math
import numbers
from decimal import Decimal, ROUND_HALF_UP, localcontext
from enum import Enum

from loguru import logger
from pydantic import BaseModel

from app.utils.result import Err, Ok, Result

UNDERWEIGHT_BELOW = 18.5
NORMAL_UP_TO = 24.9


class InvalidInputError(ValueError):
    """Weight or height is not a real number, or the BMI is not finite."""


class BMIBand(str, Enum):
    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"

    @property
    def phrase(self) -> str:
        return _PHRASES[self]


_PHRASES = {
    BMIBand.UNDERWEIGHT: "you are underweight",
    BMIBand.NORMAL: "you have a normal weight",
    BMIBand.OVERWEIGHT: "you are overweight",
}


class BMIReport(BaseModel):
    bmi: float
    rounded_bmi: int
    band: BMIBand
    message: str


def _is_real(value) -> bool:
    # bool is an int subclass but never a valid measurement
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def compute_bmi(weight: float, height: float) -> float:
    return weight / (height * height)


def round_bmi(bmi: float) -> int:
    """Round to the nearest integer, ties away from zero (22.5 -> 23, -22.5 -> -23)."""
    value = Decimal(bmi)
    with localcontext() as ctx:
        # enough digits to hold the whole integer part of any finite float
        ctx.prec = max(28, value.adjusted() + 2)
        return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def classify_bmi(bmi: float) -> BMIBand:
    if bmi < UNDERWEIGHT_BELOW:
        return BMIBand.UNDERWEIGHT
    if bmi <= NORMAL_UP_TO:
        return BMIBand.NORMAL
    return BMIBand.OVERWEIGHT


def format_message(rounded_bmi: int, band: BMIBand) -> str:
    return f"Your BMI is {rounded_bmi}, so {band.phrase}."


def assess(weight, height) -> Result[BMIReport, InvalidInputError]:
    """Run the full pipeline and return a structured report.

    Non-real inputs and non-finite results (zero height, inf or nan inputs)
    come back as ``Err(InvalidInputError)``; nothing is raised.
    """
    if not _is_real(weight) or not _is_real(height):
        logger.warning("Rejected BMI input: weight={!r} height={!r}", weight, height)
        return Err(InvalidInputError("Invalid input: weight and height must be numbers."))

    try:
        bmi = float(compute_bmi(weight, height))
    except ZeroDivisionError:
        bmi = math.nan
    except OverflowError:
        bmi = math.inf
    if not math.isfinite(bmi):
        logger.warning("Non-finite BMI for weight={} height={}", weight, height)
        return Err(InvalidInputError(f"Invalid input: BMI is not finite for weight={weight} and height={height}."))

    rounded = round_bmi(bmi)
    band = classify_bmi(bmi)
    logger.debug("BMI {} classified as {}", bmi, band.value)
    return Ok(BMIReport(bmi=bmi, rounded_bmi=rounded, band=band, message=format_message(rounded, band)))


def evaluate(weight, height) -> Result[str, InvalidInputError]:
    result = assess(weight, height)
    if result.is_err():
        return result
    return Ok(result.value.message)


def evaluate_or_raise(weight, height) -> str:
    return evaluate(weight, height).unwrap()
