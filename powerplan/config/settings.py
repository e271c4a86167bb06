from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PLATE_INCREMENT_KG = 2.5
VALID_TRAINING_MAX_PERCENTAGES = {90, 95, 100}


class Settings(BaseSettings):
    plate_increment_kg: float = Field(
        default=DEFAULT_PLATE_INCREMENT_KG,
        validation_alias="PLATE_INCREMENT_KG",
        description="Smallest loadable jump on the bar (kg)",
    )
    default_training_max_percentage: int = Field(
        default=100,
        validation_alias="DEFAULT_TRAINING_MAX_PERCENTAGE",
        description="Share of the true 1RM used as percentage basis when the caller passes none",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="LOG_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(valid_levels)}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("plate_increment_kg")
    @classmethod
    def validate_plate_increment(cls, value: float) -> float:
        """Validate that the plate increment is a usable positive jump."""
        if value <= 0:
            logger.warning(
                f"Invalid PLATE_INCREMENT_KG '{value}'. Must be positive. Defaulting to {DEFAULT_PLATE_INCREMENT_KG}."
            )
            return DEFAULT_PLATE_INCREMENT_KG
        return value

    @field_validator("default_training_max_percentage")
    @classmethod
    def validate_training_max_percentage(cls, value: int) -> int:
        """Validate that the training max percentage is one of the supported levels."""
        if value not in VALID_TRAINING_MAX_PERCENTAGES:
            logger.warning(
                f"Invalid DEFAULT_TRAINING_MAX_PERCENTAGE '{value}'. "
                f"Valid values are: {sorted(VALID_TRAINING_MAX_PERCENTAGES)}. Defaulting to 100."
            )
            return 100
        return value


settings = Settings()
