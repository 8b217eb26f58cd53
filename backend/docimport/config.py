from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="DOCIMPORT_")

    api_base: str = "http://localhost:1717"
    upload_timeout: Optional[float] = None

    default_extensions: List[str] = [".md", ".txt", ".docx", ".pdf"]

settings = Settings()
