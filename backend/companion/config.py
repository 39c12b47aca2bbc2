from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    openai_api_key: str = ""
    openai_model: str = "gpt-3.5-turbo"
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-3-haiku-20240307"
    provider_timeout_seconds: float = 30.0

    chat_max_tokens: int = 200
    chat_temperature: float = 0.8
    analytics_max_tokens: int = 300
    analytics_temperature: float = 0.7

    tts_enabled: bool = True
    tts_model: str = "tts-1"
    tts_voice: str = "echo"
    tts_speed: float = 1.0

    message_cooldown_ms: int = 5000
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"
    contract_address: str = "0x445d4785ff7d39e95de51c3b06878e0b2bf04444"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
