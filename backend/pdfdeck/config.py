import os
from dataclasses import dataclass


@dataclass
class Settings:
    service_url: str = os.getenv("PDFDECK_SERVICE_URL", "http://localhost:8000")
    generate_path: str = os.getenv("PDFDECK_GENERATE_PATH", "/api/generate-presentation")
    connect_timeout: float = float(os.getenv("PDFDECK_CONNECT_TIMEOUT", "10"))
    read_timeout: float = float(os.getenv("PDFDECK_READ_TIMEOUT", "180"))
    retries: int = int(os.getenv("PDFDECK_RETRIES", "0"))
    default_session_id: str = os.getenv("PDFDECK_SESSION_ID", "default")
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")
    log_level: str = os.getenv("PDFDECK_LOG_LEVEL", "INFO")
    default_title: str = "Generated Presentation"
    theme: str = "professional"
    min_slides: int = 3
    max_slides: int = 15
    default_slide_count: int = 8
    notice_duration_ms: int = 4000
    fallback_notice_duration_ms: int = 6000
    max_workspaces: int = int(os.getenv("PDFDECK_MAX_WORKSPACES", "256"))

    @property
    def generate_url(self) -> str:
        return self.service_url.rstrip("/") + "/" + self.generate_path.lstrip("/")


settings = Settings()
