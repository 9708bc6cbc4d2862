from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LNG_",
    )

    # App
    APP_NAME: str = "LNG Trading Platform"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Simulated SMS verification: every login/register/reset accepts this code
    MOCK_VERIFY_CODE: str = "123456"

    # bcrypt cost factor; tests lower it to 4 (the bcrypt minimum)
    BCRYPT_ROUNDS: int = 12

    # Load/unload weight tolerance in tonnes for new orders
    WEIGH_DIFF_THRESHOLD: float = 0.5

    # First value handed out by the process-wide id/number sequence
    SEQUENCE_START: int = 10


settings = Settings()
