from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class DietaryInfo(BaseModel):
    vegan: bool
    vegetarian: bool
    glutenFree: bool
    dairyFree: bool


class FoodIdentification(BaseModel):
    mainItem: str
    ingredients: List[str]
    toppings: Optional[List[str]] = None
    garnishes: Optional[List[str]] = None
    cuisineType: Optional[str] = None
    confidence: Literal["high", "medium", "low"]
    estimatedCalories: Optional[float] = Field(default=None, ge=0)
    allergensWarning: Optional[List[str]] = None
    dietaryInfo: Optional[DietaryInfo] = None


class AnalysisRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    imageBase64: str = Field(..., description="Raw base64 image payload, without data URI prefix")
    includeNutrition: bool = True
    includeDietaryInfo: bool = True


class AnalysisResponse(BaseModel):
    """Success/error envelope. Built only through ``ok`` and ``fail``."""

    success: bool
    data: Optional[Any] = None
    error: Optional[str] = None
    processingTimeMs: Optional[float] = Field(default=None, ge=0)

    @classmethod
    def ok(cls, data: Any, processing_time_ms: float) -> "AnalysisResponse":
        return cls(success=True, data=data, processingTimeMs=processing_time_ms)

    @classmethod
    def fail(cls, error: str, processing_time_ms: float | None = None) -> "AnalysisResponse":
        return cls(success=False, error=error, processingTimeMs=processing_time_ms)
