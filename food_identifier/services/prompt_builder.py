from typing import Any

from ..models.food_schema import AnalysisRequest

BASE_INSTRUCTIONS = """
Analyze this food image and provide detailed identification in JSON format. Include:
- mainItem: The primary food item shown
- ingredients: Array of ingredients you can identify
- toppings: Array of visible toppings (if applicable)
- garnishes: Array of garnishes (if applicable)
- cuisineType: The type of cuisine (if identifiable)
- confidence: Your confidence level (high, medium, or low)
""".strip()

CALORIES_CLAUSE = "- estimatedCalories: Approximate calories"

DIETARY_CLAUSE = """
- dietaryInfo: {
  vegan: boolean,
  vegetarian: boolean,
  glutenFree: boolean,
  dairyFree: boolean
}
""".strip()

ALLERGENS_CLAUSE = "- allergensWarning: Array of potential allergens"

CLOSING = "Respond with ONLY valid JSON matching the FoodIdentification type."


def build_instructions(include_nutrition: bool, include_dietary_info: bool) -> str:
    lines = [BASE_INSTRUCTIONS]
    if include_nutrition:
        lines.append(CALORIES_CLAUSE)
    if include_dietary_info:
        lines.append(DIETARY_CLAUSE)
        lines.append(ALLERGENS_CLAUSE)
    lines.append("")
    lines.append(CLOSING)
    return "\n".join(lines)


def to_data_uri(image_base64: str) -> str:
    # Media type is not sniffed; every upload is sent as JPEG.
    return f"data:image/jpeg;base64,{image_base64}"


def build_messages(request: AnalysisRequest) -> list[dict[str, Any]]:
    instructions = build_instructions(request.includeNutrition, request.includeDietaryInfo)
    return [
        {
            "role": "user",
            "content": [
                {"type": "text", "text": instructions},
                {"type": "image_url", "image_url": {"url": to_data_uri(request.imageBase64)}},
            ],
        }
    ]
