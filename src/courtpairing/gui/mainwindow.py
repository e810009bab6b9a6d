"""Main GUI window for Court Pairing."""

# Court Pairing
# Copyright (C) 2025  Court Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.


import logging
import sys
from typing import Optional

from PyQt6 import QtWidgets
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import QMessageBox

from courtpairing import APP_NAME, APP_VERSION
from courtpairing.controllers import MatchesController
from courtpairing.gui.views.matches.matches_view import MatchesView
from courtpairing.gui.views.setup.player_setup_view import PlayerSetupView
from courtpairing.utils import configure_logging, setup_logger

logger = setup_logger(__name__)


# --- Main Application Window ---
class CourtPairingMainWindow(QtWidgets.QMainWindow):
    """Main application window for Court Pairing."""

    def __init__(self) -> None:
        super().__init__()
        self.controller: Optional[MatchesController] = None
        self._setup_ui()

    def _setup_ui(self):
        self.setWindowTitle(APP_NAME)
        self.setGeometry(100, 100, 1000, 700)
        self.central_widget = QtWidgets.QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QtWidgets.QVBoxLayout(self.central_widget)
        self._setup_main_panel()
        self.statusBar().showMessage("Ready - Add players to start a session.")
        logger.info(f"{APP_NAME} v{APP_VERSION} started.")

    def _setup_main_panel(self):
        self.stacked_widget = QtWidgets.QStackedWidget()
        self.main_layout.addWidget(self.stacked_widget)

        self.setup_view = PlayerSetupView(self)
        self.setup_view.session_generated.connect(self._on_session_generated)
        self.setup_view.status_message.connect(self.statusBar().showMessage)
        self.stacked_widget.addWidget(self.setup_view)

        self.matches_view = MatchesView(self)
        self.matches_view.status_message.connect(self.statusBar().showMessage)
        self.matches_view.new_session_requested.connect(self.prompt_new_session)
        self.stacked_widget.addWidget(self.matches_view)

    def _on_session_generated(self, controller: MatchesController):
        self.controller = controller
        self.matches_view.set_controller(controller)
        self.stacked_widget.setCurrentWidget(self.matches_view)

    def _session_in_progress(self) -> bool:
        return self.controller is not None and any(
            s.completed for s in self.controller.match_states
        )

    def prompt_new_session(self):
        if self._session_in_progress() and not self.get_confirmation(
            "New Session", "Discard the current session and return to player setup?"
        ):
            return
        self.controller = None
        self.matches_view.set_controller(None)
        self.stacked_widget.setCurrentWidget(self.setup_view)
        self.statusBar().showMessage("Session closed. Roster kept for the next one.")

    def get_confirmation(self, title: str, message: str) -> bool:
        reply = QMessageBox.question(
            self,
            title,
            message,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        return reply == QMessageBox.StandardButton.Yes

    def closeEvent(self, event: QCloseEvent):
        if self._session_in_progress() and not self.get_confirmation(
            "Quit", "A session is in progress. Quit anyway?"
        ):
            event.ignore()
            return
        event.accept()


def main() -> int:
    """Launch the Court Pairing window."""
    configure_logging(logging.INFO)
    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    window = CourtPairingMainWindow()
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
