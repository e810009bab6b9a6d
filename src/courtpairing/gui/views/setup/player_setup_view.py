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

"""
Player setup screen: roster entry, court count and scheduling system.
"""

from PyQt6 import QtCore, QtWidgets
from PyQt6.QtCore import Qt

from courtpairing.constants import (
    DEFAULT_NUMBER_OF_COURTS,
    DEFAULT_SCHEDULING_SYSTEM,
    ERROR_DISPLAY_SECONDS,
    SCHEDULING_SYSTEM_NAMES,
)
from courtpairing.controllers import MatchesController, Roster
from courtpairing.exceptions import (
    CourtPairingException,
    PlayerException,
    ValidationException,
)
from courtpairing.models import SessionConfig
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


class PlayerSetupView(QtWidgets.QWidget):
    """
    Collects the players for a session and starts it.

    Emits ``session_generated`` with the new :class:`MatchesController`.
    """

    session_generated = QtCore.pyqtSignal(object)
    status_message = QtCore.pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.roster = Roster()

        self._error_timer = QtCore.QTimer(self)
        self._error_timer.setSingleShot(True)
        self._error_timer.timeout.connect(self.clear_error)

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(12)

        title = QtWidgets.QLabel("Players")
        title.setProperty("class", "SectionTitle")
        layout.addWidget(title)

        # Name entry
        entry_row = QtWidgets.QHBoxLayout()
        self.name_input = QtWidgets.QLineEdit()
        self.name_input.setPlaceholderText("Player name")
        self.name_input.returnPressed.connect(self._on_add_clicked)
        entry_row.addWidget(self.name_input, 1)
        self.btn_add = QtWidgets.QPushButton("Add")
        self.btn_add.clicked.connect(self._on_add_clicked)
        entry_row.addWidget(self.btn_add)
        layout.addLayout(entry_row)

        self.error_label = QtWidgets.QLabel("")
        self.error_label.setStyleSheet("color: #c62828;")
        self.error_label.setVisible(False)
        layout.addWidget(self.error_label)

        # Quick add
        self.quick_add_box = QtWidgets.QGroupBox("Quick Add")
        self.quick_add_layout = QtWidgets.QHBoxLayout(self.quick_add_box)
        layout.addWidget(self.quick_add_box)

        self.player_list = QtWidgets.QListWidget()
        layout.addWidget(self.player_list, 1)

        self.btn_remove = QtWidgets.QPushButton("Remove Selected")
        self.btn_remove.clicked.connect(self._on_remove_clicked)
        layout.addWidget(self.btn_remove, alignment=Qt.AlignmentFlag.AlignLeft)

        # Session options
        options = QtWidgets.QFormLayout()
        self.courts_spin = QtWidgets.QSpinBox()
        self.courts_spin.setRange(1, 20)
        self.courts_spin.setValue(DEFAULT_NUMBER_OF_COURTS)
        options.addRow("Number of courts:", self.courts_spin)

        self.system_combo = QtWidgets.QComboBox()
        for key, label in SCHEDULING_SYSTEM_NAMES.items():
            self.system_combo.addItem(label, key)
        self.system_combo.setCurrentIndex(
            self.system_combo.findData(DEFAULT_SCHEDULING_SYSTEM)
        )
        options.addRow("Scheduling:", self.system_combo)
        layout.addLayout(options)

        self.btn_generate = QtWidgets.QPushButton("Generate Matches")
        self.btn_generate.clicked.connect(self._on_generate_clicked)
        layout.addWidget(self.btn_generate)

        self.refresh()

    def refresh(self):
        self.player_list.clear()
        for player in self.roster:
            item = QtWidgets.QListWidgetItem(player.name)
            item.setData(Qt.ItemDataRole.UserRole, player.id)
            self.player_list.addItem(item)
        self._rebuild_quick_add()
        self.btn_remove.setEnabled(len(self.roster) > 0)

    def _rebuild_quick_add(self):
        while self.quick_add_layout.count():
            item = self.quick_add_layout.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()
        names = self.roster.common_players_available()
        for name in names:
            button = QtWidgets.QPushButton(name)
            button.clicked.connect(
                lambda _checked=False, n=name: self._add_player(n)
            )
            self.quick_add_layout.addWidget(button)
        self.quick_add_layout.addStretch()
        self.quick_add_box.setVisible(bool(names))

    def show_error(self, message: str):
        self.error_label.setText(message)
        self.error_label.setVisible(True)
        self._error_timer.start(ERROR_DISPLAY_SECONDS * 1000)

    def clear_error(self):
        self.error_label.clear()
        self.error_label.setVisible(False)

    def _add_player(self, name: str) -> bool:
        try:
            self.roster.add_player(name)
        except (PlayerException, ValidationException) as e:
            self.show_error(str(e))
            return False
        self.clear_error()
        self.refresh()
        return True

    def _on_add_clicked(self):
        if self._add_player(self.name_input.text()):
            self.name_input.clear()
        self.name_input.setFocus()

    def _on_remove_clicked(self):
        item = self.player_list.currentItem()
        if item is None:
            return
        try:
            self.roster.remove_player(item.data(Qt.ItemDataRole.UserRole))
        except PlayerException as e:
            logger.exception("Error removing player:")
            self.show_error(str(e))
        self.refresh()

    def _on_generate_clicked(self):
        try:
            config = SessionConfig(
                number_of_courts=self.courts_spin.value(),
                scheduling_system=self.system_combo.currentData(),
            )
            controller = MatchesController.start_session(self.roster.players, config)
        except CourtPairingException as e:
            logger.warning("Could not start session: %s", e)
            self.show_error(str(e))
            return

        self.clear_error()
        self.status_message.emit(
            f"Session started with {len(self.roster)} players "
            f"on {config.number_of_courts} court(s)"
        )
        self.session_generated.emit(controller)
