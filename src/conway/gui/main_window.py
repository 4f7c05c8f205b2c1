"""Main application window for Conway App."""
from typing import Optional

from PySide6.QtWidgets import (QMainWindow, QWidget, QVBoxLayout, QPushButton,
                               QLabel, QDockWidget, QStatusBar)
from PySide6.QtCore import Qt, QSettings
from PySide6.QtGui import QAction, QKeySequence, QFontDatabase
import logging

# Set up global logger
LOG = logging.getLogger(__name__)
LOG.setLevel(logging.DEBUG)
handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
LOG.addHandler(handler)

from .storage import open_settings, load_grid, save_grid
from ..core import Grid
from ..utils.config import Config


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, settings: Optional[QSettings] = None):
        """Initialize the main window.

        Args:
            settings: Store for the saved grid; the application default if None
        """
        super().__init__()

        # Initialize settings first
        self.settings = settings if settings is not None else open_settings()

        self.setWindowTitle(Config.WINDOW_TITLE)

        # Restore window geometry
        geometry = self.settings.value('window_geometry')
        if geometry:
            self.restoreGeometry(geometry)
        size = (Config.WINDOW_WIDTH, Config.WINDOW_HEIGHT)
        self.setMinimumSize(*size)
        self.setMaximumSize(*size)

        # State - initialize first before creating UI
        self.grid = load_grid(self.settings)
        self.generation = 0
        LOG.info(f"Restored grid, population={self.grid.population}")

        # Central grid display
        self.grid_label = QLabel()
        self.grid_label.setFont(QFontDatabase.systemFont(QFontDatabase.FixedFont))
        self.grid_label.setWordWrap(False)
        self.grid_label.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        self.grid_label.setTextInteractionFlags(Qt.NoTextInteraction)
        self.setCentralWidget(self.grid_label)

        # Create UI elements
        self.create_dock_widget()
        self.create_status_bar()
        self.setup_keyboard_shortcuts()

        self.update_grid_display()

    def create_dock_widget(self):
        """Create side panel with simulation controls."""
        dock = QDockWidget("Controls", self)
        dock.setAllowedAreas(Qt.LeftDockWidgetArea)
        dock.setFeatures(QDockWidget.NoDockWidgetFeatures)

        widget = QWidget()
        layout = QVBoxLayout(widget)

        heading = QLabel("Controls")
        font = heading.font()
        font.setBold(True)
        font.setPointSize(font.pointSize() + 2)
        heading.setFont(font)
        layout.addWidget(heading)

        self.randomize_button = QPushButton("Randomize")
        self.randomize_button.clicked.connect(self.randomize_grid)
        layout.addWidget(self.randomize_button)

        self.next_button = QPushButton("Next")
        self.next_button.clicked.connect(self.step_grid)
        layout.addWidget(self.next_button)

        layout.addStretch()
        dock.setWidget(widget)
        dock.setTitleBarWidget(QWidget())
        self.addDockWidget(Qt.LeftDockWidgetArea, dock)

    def create_status_bar(self):
        """Create status bar with generation and population counters."""
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

        self.generation_label = QLabel("Gen: 0")
        self.status_bar.addWidget(self.generation_label)

        self.population_label = QLabel("Alive: 0")
        self.status_bar.addPermanentWidget(self.population_label)

    def setup_keyboard_shortcuts(self):
        """Set up keyboard shortcuts."""
        # R for randomize
        randomize_action = QAction(self)
        randomize_action.setShortcut(QKeySequence(Qt.Key_R))
        randomize_action.triggered.connect(self.randomize_grid)
        self.addAction(randomize_action)

        # N and Arrow Right for next generation
        for key in (Qt.Key_N, Qt.Key_Right):
            step_action = QAction(self)
            step_action.setShortcut(QKeySequence(key))
            step_action.triggered.connect(self.step_grid)
            self.addAction(step_action)

        # C for clear
        clear_action = QAction(self)
        clear_action.setShortcut(QKeySequence(Qt.Key_C))
        clear_action.triggered.connect(self.clear_grid)
        self.addAction(clear_action)

        # ESC key to exit application
        exit_action = QAction(self)
        exit_action.setShortcut(QKeySequence(Qt.Key_Escape))
        exit_action.triggered.connect(self.close)
        self.addAction(exit_action)

    def set_grid(self, grid: Grid, generation: int = 0):
        """Replace the held grid and refresh the display."""
        self.grid = grid
        self.generation = generation
        self.update_grid_display()

    def randomize_grid(self):
        """Replace the grid with a random one."""
        self.set_grid(Grid.random(self.grid.width, self.grid.height))
        LOG.info(f"Randomized grid, population={self.grid.population}")

    def step_grid(self):
        """Advance the grid by one generation."""
        alive_before = self.grid.population
        self.set_grid(self.grid.step(), self.generation + 1)
        LOG.info(f"STEP {self.generation}: Alive cells before: {alive_before}, "
                 f"after: {self.grid.population}")

    def clear_grid(self):
        """Replace the grid with an empty one."""
        self.set_grid(Grid.empty(self.grid.width, self.grid.height))
        LOG.info("Cleared grid")

    def update_grid_display(self):
        """Render the grid and counters."""
        self.grid_label.setText(self.grid.to_display_string())
        self.generation_label.setText(f"Gen: {self.generation}")
        self.population_label.setText(f"Alive: {self.grid.population}")

    def closeEvent(self, event):
        """Save grid and geometry when closing."""
        self.settings.setValue('window_geometry', self.saveGeometry())
        save_grid(self.settings, self.grid)
        self.settings.sync()
        LOG.info("Saved grid state")

        super().closeEvent(event)
