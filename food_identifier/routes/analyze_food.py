from fastapi import APIRouter, Depends, Form, Request

from ..models.food_schema import AnalysisRequest, AnalysisResponse
from ..services.food_analyzer import FoodAnalyzerService

router = APIRouter(prefix="/api", tags=["food"])


def get_food_analyzer(request: Request) -> FoodAnalyzerService:
    return request.app.state.food_analyzer


def _form_flag(value: str) -> bool:
    return value == "true"


def _strip_data_uri(value: str) -> str:
    if value.startswith("data:") and "," in value:
        return value.split(",", 1)[1]
    return value


@router.post("/analyze", response_model=AnalysisResponse, response_model_exclude_none=True)
async def analyze_food(
    imageBase64: str = Form(""),
    includeNutrition: str = Form("false"),
    includeDietaryInfo: str = Form("false"),
    analyzer: FoodAnalyzerService = Depends(get_food_analyzer),
) -> AnalysisResponse:
    image = _strip_data_uri(imageBase64.strip())
    if not image:
        return AnalysisResponse.fail("No image provided")

    payload = AnalysisRequest(
        imageBase64=image,
        includeNutrition=_form_flag(includeNutrition),
        includeDietaryInfo=_form_flag(includeDietaryInfo),
    )
    return await analyzer.analyze(payload)
