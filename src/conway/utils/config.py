"""Configuration constants for Conway application."""
from dataclasses import dataclass


@dataclass
class Config:
    """Application configuration."""

    # Window settings
    WINDOW_WIDTH: int = 275
    WINDOW_HEIGHT: int = 275
    WINDOW_TITLE: str = "Conway App!"
    APP_STYLE: str = "Fusion"

    # Grid settings (fixed, never resized at runtime)
    GRID_WIDTH: int = 16
    GRID_HEIGHT: int = 16
    RANDOM_DENSITY: float = 0.5

    # Display
    ALIVE_CHAR: str = "X"
    DEAD_CHAR: str = " "

    # Persistence
    SETTINGS_ORGANIZATION: str = "ConwayApp"
    SETTINGS_APPLICATION: str = "Conway"
    APP_KEY: str = "app"
