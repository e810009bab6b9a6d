from PyQt6 import QtWidgets
from PyQt6.QtCore import pyqtSignal


class RoundControlsWidget(QtWidgets.QWidget):
    """
    Widget containing the session controls (Undo, Start Next Round, New Session).
    """

    undo_requested = pyqtSignal()
    next_round_requested = pyqtSignal()
    new_session_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setProperty("class", "ActionFooter")

        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        # Left side: Secondary actions
        left_actions = QtWidgets.QHBoxLayout()
        left_actions.setSpacing(8)

        self.btn_undo = QtWidgets.QPushButton("Undo Last Match")
        self.btn_undo.setToolTip("Mark the most recently completed match as not played")
        self.btn_undo.clicked.connect(self.undo_requested.emit)
        left_actions.addWidget(self.btn_undo)

        self.btn_new_session = QtWidgets.QPushButton("New Session")
        self.btn_new_session.setToolTip("Go back to player setup")
        self.btn_new_session.clicked.connect(self.new_session_requested.emit)
        left_actions.addWidget(self.btn_new_session)

        layout.addLayout(left_actions)
        layout.addStretch()

        # Right side: Primary action
        self.lbl_round = QtWidgets.QLabel("Round 1")
        self.lbl_round.setProperty("class", "RoundLabel")
        layout.addWidget(self.lbl_round)

        self.btn_next_round = QtWidgets.QPushButton("Start Next Round")
        self.btn_next_round.setToolTip(
            "Available once every match of the current round is completed"
        )
        self.btn_next_round.clicked.connect(self.next_round_requested.emit)
        layout.addWidget(self.btn_next_round)

    def update_state(self, round_number: int, can_advance: bool, can_undo: bool):
        """
        Update the controls for the current round.

        Args:
            round_number: Round being played
            can_advance: Whether every match of the round is completed
            can_undo: Whether a completion can be reverted
        """
        self.lbl_round.setText(f"Round {round_number}")
        self.btn_next_round.setEnabled(can_advance)
        self.btn_undo.setEnabled(can_undo)
