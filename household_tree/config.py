"""Configuration management for Household Tree.

Loads settings from environment variables and provides validated configuration.
"""

from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# Load .env file if it exists
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Batch processing
    batch_max_workers: int = 4

    # Marker appended to the name of a synthesized ancestor
    virtual_marker: str = "पितृपुरुष"

    # Output paths
    output_dir: Path = Path("./tree_output")

    class Config:
        """Pydantic configuration."""

        env_prefix = "HOUSEHOLD_TREE_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    def resolve_workers(self, requested: int | None = None) -> int:
        """Get the worker pool size for batch runs.

        Args:
            requested: Explicit pool size, overrides the configured value

        Returns:
            A positive worker count

        Raises:
            ValueError: If the resulting worker count is not positive
        """
        workers = requested if requested is not None else self.batch_max_workers
        if workers < 1:
            raise ValueError(
                f"Worker count must be at least 1, got {workers}. "
                "Check HOUSEHOLD_TREE_BATCH_MAX_WORKERS in your .env file."
            )
        return workers


# Global settings instance
settings = Settings()
