import os
from typing import Literal

from pydantic import BaseModel, Field
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseModel):
    vision_provider: Literal["openai", "gemini"] = Field(default="openai", alias="VISION_PROVIDER")
    openai_api_key: str | None = Field(default=None, alias="OPENAI_API_KEY")
    openai_model: str = Field(default="gpt-4o", alias="OPENAI_MODEL")
    gemini_api_key: str | None = Field(default=None, alias="GEMINI_API_KEY")
    gemini_vision_model: str = Field(default="gemini-2.5-flash", alias="GEMINI_VISION_MODEL")
    max_tokens: int = Field(default=1000, gt=0, alias="VISION_MAX_TOKENS")
    strict_validation: bool = Field(default=False, alias="STRICT_VALIDATION")
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"], alias="CORS_ALLOW_ORIGINS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = {"populate_by_name": True}

    @property
    def api_key(self) -> str | None:
        if self.vision_provider == "gemini":
            return self.gemini_api_key
        return self.openai_api_key

    @property
    def api_key_name(self) -> str:
        return "GEMINI_API_KEY" if self.vision_provider == "gemini" else "OPENAI_API_KEY"

    @property
    def model_name(self) -> str:
        if self.vision_provider == "gemini":
            return self.gemini_vision_model
        return self.openai_model

    @classmethod
    def from_env(cls):
        origins = os.getenv("CORS_ALLOW_ORIGINS", "*")
        data = {
            "VISION_PROVIDER": os.getenv("VISION_PROVIDER", "openai").strip().lower(),
            "OPENAI_API_KEY": os.getenv("OPENAI_API_KEY") or None,
            "OPENAI_MODEL": os.getenv("OPENAI_MODEL", "gpt-4o"),
            "GEMINI_API_KEY": os.getenv("GEMINI_API_KEY") or None,
            "GEMINI_VISION_MODEL": os.getenv("GEMINI_VISION_MODEL", "gemini-2.5-flash"),
            "VISION_MAX_TOKENS": os.getenv("VISION_MAX_TOKENS", "1000"),
            "STRICT_VALIDATION": os.getenv("STRICT_VALIDATION", "false"),
            "CORS_ALLOW_ORIGINS": [o.strip() for o in origins.split(",") if o.strip()],
            "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO").upper(),
        }
        return cls.model_validate(data)


settings = Settings.from_env()
