from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./data/ptfms.sqlite3"
    cors_origins: list[str] = ["http://localhost:8000"]
    log_level: str = "INFO"

    maintenance_strategy: str = "time"  # time | usage | predictive
    alert_email_recipients: list[str] = ["manager@ptfms.com"]
    alert_sms_recipients: list[str] = ["+1234567890"]

    fuel_consumption_tolerance: float = 0.15  # 15% above the rated consumption
    component_warning_ratio: float = 0.8
    gps_retention_days: int = 90
    command_history_size: int = 100

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
