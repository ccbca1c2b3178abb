from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "tasksvc"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Pre-populate the store with the sample tasks
    seed: bool = True

    model_config = SettingsConfigDict(
        env_prefix="TASKSVC_",
        env_file=None,
        extra="ignore",
    )
