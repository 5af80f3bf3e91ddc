from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Yuque - public host is also used to build document URLs
    yuque_host: str = "https://www.yuque.com"
    yuque_api_prefix: str = "/api/v2/"
    # Listing endpoints return at most this many repositories per offset
    yuque_page_size: int = 20
    # "all", "self" or "group"
    default_repository_scope: str = "all"

    # HTTP client
    http_timeout: float = 30.0
    http_connect_timeout: float = 5.0

    # Per-token document services kept by the API layer
    service_registry_maxsize: int = 256
    service_registry_ttl: int = 3600  # seconds

    @property
    def yuque_base_url(self) -> str:
        """Base URL for the v2 REST API."""
        return f"{self.yuque_host.rstrip('/')}/{self.yuque_api_prefix.strip('/')}/"

    @property
    def yuque_outline_url_template(self) -> str:
        """Absolute URL of a repository's outline, formatted with book_id."""
        return f"{self.yuque_host.rstrip('/')}/api/books/{{book_id}}/toc"


settings = Settings()
