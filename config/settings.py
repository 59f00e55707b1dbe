"""
Configuration settings for the careers acceptance suite.
Loads values from .env file and provides typed access.
"""

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

# Determine project root
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
env_path = os.path.join(project_root, ".env")
load_dotenv(env_path)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # Target site
    base_url: str = field(
        default_factory=lambda: os.getenv("BASE_URL", "https://www.labcorp.com")
    )

    # Browser Configuration
    browser: str = field(
        default_factory=lambda: os.getenv("BROWSER", "chromium")
    )
    headless: bool = field(
        default_factory=lambda: os.getenv("HEADLESS", "false").lower() == "true"
    )
    viewport_width: int = field(
        default_factory=lambda: int(os.getenv("VIEWPORT_WIDTH", "1920"))
    )
    viewport_height: int = field(
        default_factory=lambda: int(os.getenv("VIEWPORT_HEIGHT", "1080"))
    )

    # Waits (seconds)
    wait_timeout: float = field(
        default_factory=lambda: float(os.getenv("WAIT_TIMEOUT", "10"))
    )
    structured_data_timeout: float = field(
        default_factory=lambda: float(os.getenv("STRUCTURED_DATA_TIMEOUT", "10"))
    )
    poll_interval: float = field(
        default_factory=lambda: float(os.getenv("POLL_INTERVAL", "0.5"))
    )
    request_timeout: int = field(
        default_factory=lambda: int(os.getenv("REQUEST_TIMEOUT", "10"))
    )

    # Paths
    output_dir: str = field(
        default_factory=lambda: os.getenv("OUTPUT_DIR", "output")
    )
    log_dir: str = field(
        default_factory=lambda: os.getenv("LOG_DIR", os.path.join("output", "logs"))
    )
    profiles_path: str = field(
        default_factory=lambda: os.getenv(
            "PROFILES_PATH", os.path.join(project_root, "config", "profiles.yaml")
        )
    )

    # Named run profile from profiles.yaml (empty = none)
    profile: str = field(
        default_factory=lambda: os.getenv("PROFILE", "")
    )


# Singleton instance
settings = Settings()
