from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "AIMS"
    DATA_DIR: str = "data"
    # Pools that represent our own organization (mp/sp/cp "= Me")
    MY_POOL_IDS: list[str] = ["pool-main", "pool-assets", "pool-supplies", "pool-repair"]
    RECEIVING_POOL_ID: str = "pool-receiving"
    RECEIVING_AREA_ID: str = "area-1"
    SEED_DEFAULT_RBAC: bool = False
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()


def get_settings() -> Settings:
    return settings
