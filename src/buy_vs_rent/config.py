"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from BUY_VS_RENT_* environment variables or a .env file"""

    model_config = SettingsConfigDict(
        env_prefix="BUY_VS_RENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service
    service_name: str = "buy-vs-rent"
    log_level: str = "INFO"
    log_json: bool = True

    # Command-line defaults for the scenario
    default_down_payment_percent: float = 30.0
    default_loan_term_years: int = 20
    default_interest_rate_percent: float = 8.5
    default_appreciation_percent: float = 5.0
    default_rent_inflation_percent: float = 5.0
    default_investment_return_percent: float = 10.0
    default_analysis_years: int = 20


settings = Settings()
