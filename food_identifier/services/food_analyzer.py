import json
import logging
import time
from typing import Any

from pydantic import ValidationError

from ..models.food_schema import AnalysisRequest, AnalysisResponse, FoodIdentification
from ..settings import Settings
from .prompt_builder import build_messages
from .response_extractor import parse_model_json
from .vision_client import VisionClient

logger = logging.getLogger(__name__)


class FoodAnalysisError(Exception):
    pass


class MissingCredentialError(FoodAnalysisError):
    pass


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


def _describe(exc: Exception) -> str:
    if isinstance(exc, json.JSONDecodeError):
        return f"Model response did not contain valid JSON: {exc}"
    if isinstance(exc, ValidationError):
        return f"Model response did not match the expected format: {exc.error_count()} error(s)"
    return str(exc) or exc.__class__.__name__


class FoodAnalyzerService:
    """Runs one food image analysis against the vision API.

    The client is built once per process and passed in; this service holds no
    per-request state, so one instance serves every request.
    """

    def __init__(self, settings: Settings, client: VisionClient | None) -> None:
        self.settings = settings
        self.client = client

    def _require_client(self) -> VisionClient:
        if not self.settings.api_key or self.client is None:
            raise MissingCredentialError(f"{self.settings.api_key_name} is not configured")
        return self.client

    def _to_result(self, parsed: Any) -> Any:
        if not self.settings.strict_validation:
            return parsed
        return FoodIdentification.model_validate(parsed).model_dump(exclude_none=True)

    async def analyze(self, request: AnalysisRequest) -> AnalysisResponse:
        start = time.perf_counter()
        logger.info(
            "analyze_food.start provider=%s model=%s image_chars=%d nutrition=%s dietary=%s",
            self.settings.vision_provider,
            self.settings.model_name,
            len(request.imageBase64),
            request.includeNutrition,
            request.includeDietaryInfo,
        )

        try:
            client = self._require_client()
            content = await client.complete(build_messages(request), self.settings.max_tokens)
            parsed = parse_model_json(content)
            if parsed is None:
                raise FoodAnalysisError("Model response did not contain a JSON object")
            data = self._to_result(parsed)
        except MissingCredentialError as exc:
            elapsed = _elapsed_ms(start)
            logger.warning("analyze_food.failed reason=config elapsed_ms=%.2f: %s", elapsed, exc)
            return AnalysisResponse.fail(_describe(exc), elapsed)
        except Exception as exc:
            elapsed = _elapsed_ms(start)
            logger.exception("analyze_food.failed elapsed_ms=%.2f: %s", elapsed, exc)
            return AnalysisResponse.fail(_describe(exc), elapsed)

        elapsed = _elapsed_ms(start)
        logger.info("analyze_food.done elapsed_ms=%.2f main_item=%s", elapsed, _main_item(data))
        return AnalysisResponse.ok(data, elapsed)


def _main_item(data: Any) -> Any:
    if isinstance(data, dict):
        return data.get("mainItem")
    return None
