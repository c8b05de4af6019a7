from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    BUSINESS_NAME: str = "Drop Dead Gorgeous"
    BUSINESS_TIMEZONE: str = "America/Los_Angeles"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    BOOKING_HORIZON_DAYS: int = 14

    # Hosted data store (PostgREST-style reads)
    DATA_API_BASE_URL: str = ""
    DATA_API_KEY: str | None = None
    DATA_API_TIMEOUT_SECONDS: float = 10.0

    # Booking write, served as a function on the same platform
    BOOKING_API_BASE_URL: str = ""
    BOOKING_API_KEY: str | None = None
    BOOKING_FUNCTION_NAME: str = "create-phorest-booking"


settings = Settings()
