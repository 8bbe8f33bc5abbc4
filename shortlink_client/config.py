from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Client settings loaded from environment variables.
    
    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """
    
    # Environment
    environment: str = "development"
    debug: bool = True
    
    # Application
    app_name: str = "Shortlink Client"
    app_version: str = "1.0.0"
    
    # Remote API
    api_base_url: str = "http://localhost:3000"
    request_timeout: float = 10.0  # Seconds
    
    # Session storage
    session_backend: str = "file"  # Options: "file", "memory", "redis"
    session_file_path: str = "~/.shortlink/session.json"
    redis_url: str = "redis://localhost:6379/0"
    token_key: str = "auth_token"
    user_key: str = "user_data"
    
    # Auth entry points (401 redirect target and pages that suppress it)
    login_path: str = "/login"
    register_path: str = "/register"
    dashboard_path: str = "/dashboard"  # Where a successful sign-in lands
    
    # Dashboard
    search_debounce_seconds: float = 0.3
    banner_timeout_seconds: float = 3.0
    
    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
