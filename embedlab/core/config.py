# embedlab/core/config.py
from __future__ import annotations
from typing import List, Union
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="EMBEDLAB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_env: str = "dev"
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    # Can be "*" OR a comma-separated string OR a JSON-like list in env
    cors_origins: Union[str, List[str]] = "*"

    # Embedding system defaults
    embedding_dim: int = 128
    default_top_k: int = 5
    default_num_clusters: int = 3
    random_seed: int | None = None

    # Observability
    log_level: str = "INFO"
    events_log: str | None = None  # JSONL path; unset disables the event sink

    def parsed_cors(self) -> List[str]:
        v = self.cors_origins
        if v is None or v == "*" or (isinstance(v, list) and v == ["*"]):
            return ["*"]
        if isinstance(v, (list, tuple, set)):
            return [str(o) for o in v]
        # string case: "http://a.com, http://b.com"
        return [o.strip() for o in str(v).split(",") if o.strip()]

settings = Settings()
