"""Persist the application grid in QSettings."""
import logging

from PySide6.QtCore import QSettings

from ..core import Grid, GridDecodeError, dumps, loads
from ..utils.config import Config

# Global logger
LOG = logging.getLogger(__name__)
LOG.setLevel(logging.DEBUG)
handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
LOG.addHandler(handler)


def open_settings() -> QSettings:
    """Settings store used by the application."""
    return QSettings(Config.SETTINGS_ORGANIZATION, Config.SETTINGS_APPLICATION)


def load_grid(settings: QSettings, width: int = Config.GRID_WIDTH,
              height: int = Config.GRID_HEIGHT) -> Grid:
    """Restore the saved grid, or an empty one if nothing usable is stored.

    Args:
        settings: Settings store to read from
        width: Expected grid width
        height: Expected grid height

    Returns:
        Saved grid, or `Grid.empty` when the key is missing or undecodable
    """
    text = settings.value(Config.APP_KEY)
    if text is None:
        return Grid.empty(width, height)
    try:
        return loads(text, width, height)
    except GridDecodeError as e:
        LOG.warning(f"Discarding saved grid: {e}")
        return Grid.empty(width, height)


def save_grid(settings: QSettings, grid: Grid) -> None:
    """Store the grid under the application key."""
    settings.setValue(Config.APP_KEY, dumps(grid))
