from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Output
    PRINT_WARNINGS: bool = False  # Overridden by --print-warnings
    JSON_INDENT: int = 2

    # Logging (always written to stderr)
    LOG_LEVEL: str = "WARNING"

    # Suite name used by Swift Testing lines before any "Test Suite" banner
    SWIFT_TESTING_SUITE: str = "Swift Testing"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="XCBUILD_PARSER_",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
