import pytest
from PySide6.QtCore import QSettings

from conway.core import Grid
from conway.gui.storage import load_grid, save_grid
from conway.utils.config import Config


@pytest.fixture
def settings(tmp_path):
    return QSettings(str(tmp_path / "conway.ini"), QSettings.IniFormat)


def test_missing_state_gives_empty_grid(settings):
    assert load_grid(settings) == Grid.empty()


def test_saved_grid_is_restored(tmp_path, settings, rng):
    grid = Grid.random(rng=rng)
    save_grid(settings, grid)
    settings.sync()

    reopened = QSettings(str(tmp_path / "conway.ini"), QSettings.IniFormat)
    assert load_grid(reopened) == grid


def test_corrupt_state_falls_back_to_empty(settings):
    settings.setValue(Config.APP_KEY, "[true,false]")
    assert load_grid(settings) == Grid.empty()

    settings.setValue(Config.APP_KEY, "garbage")
    assert load_grid(settings) == Grid.empty()


def test_state_of_other_size_falls_back_to_empty(settings, rng):
    save_grid(settings, Grid.random(4, 4, rng=rng))
    assert load_grid(settings) == Grid.empty()
    assert load_grid(settings, 4, 4).shape == (4, 4)


def test_fallback_is_logged_in_app_format(settings, caplog):
    from conway.gui import storage

    settings.setValue(Config.APP_KEY, "[true]")
    with caplog.at_level("WARNING", logger=storage.LOG.name):
        assert load_grid(settings) == Grid.empty()
    assert "Discarding saved grid" in caplog.text

    formats = [h.formatter._fmt for h in storage.LOG.handlers if h.formatter]
    assert '%(levelname)s: %(message)s' in formats
