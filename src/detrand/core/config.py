"""
detrand Configuration

Loads configuration from environment variables and an optional .env file.

    DETRAND_SEED=42 DETRAND_GENERATOR=lfsr detrand ints 5
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from detrand.constants import ENTROPY_FALLBACK_ROUNDS_DEFAULT, ENTROPY_FALLBACK_ROUNDS_MAX
from detrand.core.models import GeneratorKind, RandomConfig


class Settings(BaseSettings):
    """detrand settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DETRAND_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Seed used when none is passed explicitly (unset = system entropy)
    seed: int | None = None

    # Bit generator algorithm
    generator: str = GeneratorKind.XORSHIFT128_PLUS.value

    # Rounds harvested when the platform entropy source is unavailable
    entropy_fallback_rounds: int = Field(
        default=ENTROPY_FALLBACK_ROUNDS_DEFAULT,
        ge=1,
        le=ENTROPY_FALLBACK_ROUNDS_MAX,
    )

    def to_random_config(self) -> RandomConfig:
        """Convert settings to RandomConfig."""
        return RandomConfig(
            seed=self.seed,
            generator=self.generator,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def get_config() -> RandomConfig:
    """Get the Random configuration from the environment."""
    return get_settings().to_random_config()
