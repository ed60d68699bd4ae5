from food_identifier.settings import Settings


def test_from_env_reads_overrides(monkeypatch) -> None:
    monkeypatch.setenv("VISION_PROVIDER", "Gemini")
    monkeypatch.setenv("GEMINI_API_KEY", "g-key")
    monkeypatch.setenv("VISION_MAX_TOKENS", "500")
    monkeypatch.setenv("STRICT_VALIDATION", "true")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://localhost:3000, https://example.com")

    settings = Settings.from_env()

    assert settings.vision_provider == "gemini"
    assert settings.api_key == "g-key"
    assert settings.api_key_name == "GEMINI_API_KEY"
    assert settings.max_tokens == 500
    assert settings.strict_validation is True
    assert settings.cors_allow_origins == ["http://localhost:3000", "https://example.com"]


def test_defaults(monkeypatch) -> None:
    for name in (
        "VISION_PROVIDER",
        "OPENAI_API_KEY",
        "OPENAI_MODEL",
        "VISION_MAX_TOKENS",
        "STRICT_VALIDATION",
        "CORS_ALLOW_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings.vision_provider == "openai"
    assert settings.api_key is None
    assert settings.model_name == "gpt-4o"
    assert settings.max_tokens == 1000
    assert settings.strict_validation is False
    assert settings.cors_allow_origins == ["*"]


def test_empty_key_counts_as_missing(monkeypatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "")
    monkeypatch.delenv("VISION_PROVIDER", raising=False)

    assert Settings.from_env().api_key is None
