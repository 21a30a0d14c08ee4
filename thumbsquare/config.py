from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "thumbsquare"
    log_level: str = "INFO"

    thumbnails_dir: str = "assets"
    thumbnail_prefix: str = "thumbnail_"
    output_prefix: str = "resized_"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()
