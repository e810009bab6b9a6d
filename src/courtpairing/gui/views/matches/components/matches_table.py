from typing import Dict, List

from PyQt6 import QtGui, QtWidgets
from PyQt6.QtCore import Qt, pyqtSignal

from courtpairing.controllers import MatchState
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)

COLUMNS = ["Round", "Court", "Side", "Team A", "Team B", "Status"]


class MatchesTable(QtWidgets.QWidget):
    """
    Widget listing every match of the session, grouped by round, with a
    completion button for each pending match of the current round.
    """

    complete_requested = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setProperty("class", "MatchesTableContainer")

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.table = QtWidgets.QTableWidget(0, len(COLUMNS))
        self.table.setHorizontalHeaderLabels(COLUMNS)
        self.table.setProperty("class", "MatchesTable")
        self.table.verticalHeader().setVisible(False)
        self.table.setAlternatingRowColors(True)
        self.table.setSelectionBehavior(
            QtWidgets.QAbstractItemView.SelectionBehavior.SelectRows
        )
        self.table.verticalHeader().setDefaultSectionSize(48)

        header = self.table.horizontalHeader()
        for column in (0, 1, 2):
            header.setSectionResizeMode(
                column, QtWidgets.QHeaderView.ResizeMode.ResizeToContents
            )
        header.setSectionResizeMode(3, QtWidgets.QHeaderView.ResizeMode.Stretch)
        header.setSectionResizeMode(4, QtWidgets.QHeaderView.ResizeMode.Stretch)
        header.setSectionResizeMode(
            5, QtWidgets.QHeaderView.ResizeMode.ResizeToContents
        )

        layout.addWidget(self.table, 1)

    def display_matches(
        self, matches_by_round: Dict[int, List[MatchState]], current_round: int
    ):
        self.table.clearContents()
        rows = [state for states in matches_by_round.values() for state in states]
        self.table.setRowCount(len(rows))

        for row, state in enumerate(rows):
            match = state.match
            values = [
                str(state.round_number),
                str(match.court),
                "Left Side" if match.side == "left" else "Right Side",
                " & ".join(p.name for p in match.team_a),
                " & ".join(p.name for p in match.team_b),
            ]
            for column, value in enumerate(values):
                item = QtWidgets.QTableWidgetItem(value)
                item.setFlags(item.flags() & ~Qt.ItemFlag.ItemIsEditable)
                if column < 3:
                    item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
                if state.completed:
                    item.setForeground(QtGui.QBrush(QtGui.QColor("#808080")))
                self.table.setItem(row, column, item)

            if state.completed:
                done = QtWidgets.QTableWidgetItem(
                    f"Completed {state.completed_at:%H:%M}"
                    if state.completed_at
                    else "Completed"
                )
                done.setFlags(done.flags() & ~Qt.ItemFlag.ItemIsEditable)
                self.table.setItem(row, 5, done)
            elif state.round_number == current_round:
                button = QtWidgets.QPushButton("Complete Match")
                button.clicked.connect(
                    lambda _checked=False, mid=match.id: self.complete_requested.emit(mid)
                )
                self.table.setCellWidget(row, 5, button)
            else:
                pending = QtWidgets.QTableWidgetItem("Not played")
                pending.setFlags(pending.flags() & ~Qt.ItemFlag.ItemIsEditable)
                self.table.setItem(row, 5, pending)

        if rows:
            self.table.scrollToBottom()
        logger.debug("Displayed %s matches", len(rows))
