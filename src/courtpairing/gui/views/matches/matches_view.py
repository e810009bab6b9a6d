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

"""Matches screen: rounds, completion, undo and player stats."""

from typing import Optional

from PyQt6 import QtWidgets
from PyQt6.QtCore import pyqtSignal

from courtpairing.controllers import MatchesController
from courtpairing.exceptions import CourtPairingException
from courtpairing.gui.views.matches.components.matches_table import MatchesTable
from courtpairing.gui.views.matches.components.player_stats_panel import (
    PlayerStatsPanel,
)
from courtpairing.gui.views.matches.components.round_controls import (
    RoundControlsWidget,
)
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


class MatchesView(QtWidgets.QWidget):
    """Shows the running session and forwards user actions to the controller."""

    status_message = pyqtSignal(str)
    new_session_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.controller: Optional[MatchesController] = None

        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(12)

        left = QtWidgets.QVBoxLayout()
        self.matches_table = MatchesTable(self)
        self.matches_table.complete_requested.connect(self._on_complete_requested)
        left.addWidget(self.matches_table, 1)

        self.round_controls = RoundControlsWidget(self)
        self.round_controls.undo_requested.connect(self._on_undo_requested)
        self.round_controls.next_round_requested.connect(self._on_next_round_requested)
        self.round_controls.new_session_requested.connect(
            self.new_session_requested.emit
        )
        left.addWidget(self.round_controls)
        layout.addLayout(left, 3)

        self.stats_panel = PlayerStatsPanel(self)
        layout.addWidget(self.stats_panel, 1)

    def set_controller(self, controller: Optional[MatchesController]):
        self.controller = controller
        self.refresh()

    def refresh(self):
        if self.controller is None:
            self.matches_table.display_matches({}, 0)
            self.stats_panel.update_stats([])
            self.round_controls.update_state(0, False, False)
            return

        controller = self.controller
        self.matches_table.display_matches(
            controller.matches_by_round(), controller.current_round_number
        )
        self.stats_panel.update_stats(controller.player_stats())
        self.round_controls.update_state(
            controller.current_round_number,
            controller.can_start_next_round(),
            controller.last_completed is not None,
        )

    def _on_complete_requested(self, match_id: str):
        if self.controller is None:
            return
        try:
            if self.controller.complete_match(match_id):
                state = self.controller.get_state(match_id)
                self.status_message.emit(f"Completed: {state.match}")
        except CourtPairingException as e:
            logger.exception("Error completing match %s:", match_id)
            self.status_message.emit(str(e))
        self.refresh()

    def _on_undo_requested(self):
        if self.controller is None:
            return
        try:
            state = self.controller.undo_last_completed()
        except CourtPairingException as e:
            logger.exception("Error undoing match:")
            self.status_message.emit(str(e))
            state = None
        if state is not None:
            self.status_message.emit(f"Undid: {state.match}")
        self.refresh()

    def _on_next_round_requested(self):
        if self.controller is None:
            return
        try:
            new_matches = self.controller.start_next_round()
        except CourtPairingException as e:
            logger.exception("Error starting next round:")
            QtWidgets.QMessageBox.warning(self, "Next Round", str(e))
            return

        if new_matches:
            self.status_message.emit(
                f"Round {self.controller.current_round_number} ready: "
                f"{len(new_matches)} match(es)"
            )
        else:
            self.status_message.emit("Not enough players to fill a court this round.")
        self.refresh()
