from typing import List

from PyQt6 import QtWidgets
from PyQt6.QtCore import Qt

from courtpairing.controllers import PlayerStats


class PlayerStatsPanel(QtWidgets.QGroupBox):
    """Side panel with each player's completed doubles and singles."""

    def __init__(self, parent=None):
        super().__init__("Player Stats", parent)
        layout = QtWidgets.QVBoxLayout(self)

        self.table = QtWidgets.QTableWidget(0, 3)
        self.table.setHorizontalHeaderLabels(["Player", "Doubles", "Singles"])
        self.table.verticalHeader().setVisible(False)
        self.table.setEditTriggers(QtWidgets.QAbstractItemView.EditTrigger.NoEditTriggers)
        header = self.table.horizontalHeader()
        header.setSectionResizeMode(0, QtWidgets.QHeaderView.ResizeMode.Stretch)
        header.setSectionResizeMode(
            1, QtWidgets.QHeaderView.ResizeMode.ResizeToContents
        )
        header.setSectionResizeMode(
            2, QtWidgets.QHeaderView.ResizeMode.ResizeToContents
        )
        layout.addWidget(self.table)

    def update_stats(self, stats: List[PlayerStats]):
        self.table.setRowCount(len(stats))
        for row, stat in enumerate(stats):
            self.table.setItem(row, 0, QtWidgets.QTableWidgetItem(stat.player.name))
            for column, value in ((1, stat.doubles_played), (2, stat.singles_played)):
                item = QtWidgets.QTableWidgetItem(f"{value} matches")
                item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
                self.table.setItem(row, column, item)
