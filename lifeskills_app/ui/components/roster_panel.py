"""Component listing the teacher's class and each student's evaluation status."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QAbstractItemView,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from lifeskills_app.constants.ui_constants import (
    ROSTER_EVALUATE_BUTTON,
    ROSTER_EXPORT_BUTTON,
    ROSTER_HEADERS,
    ROSTER_LOGOUT_BUTTON,
    ROSTER_NO_SELECTION_MESSAGE,
    ROSTER_PROGRESS_TEMPLATE,
    ROSTER_STATUS_DONE,
    ROSTER_STATUS_PENDING,
    ROSTER_TEACHER_TEMPLATE,
)
from lifeskills_app.core import score_aggregator
from lifeskills_app.core.evaluation_session import EvaluationSession
from lifeskills_app.core.models import Student
from lifeskills_app.ui.dialog_helpers import show_warning
from lifeskills_app.styling.styles import Styles


class RosterPanel(QWidget):
    """UI component for picking a student and exporting the class report."""

    def __init__(
        self,
        session: EvaluationSession,
        on_select_student: callable,
        on_export: callable,
        on_logout: callable,
        parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self.session = session
        self.on_select_student = on_select_student
        self.on_export = on_export
        self.on_logout = on_logout
        self._students: list[Student] = []

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.teacher_label = QLabel("", self)
        self.teacher_label.setStyleSheet(Styles.get_header_style())
        self.teacher_label.setWordWrap(True)
        layout.addWidget(self.teacher_label)

        self.progress_label = QLabel("", self)
        self.progress_label.setStyleSheet(Styles.get_summary_style())
        layout.addWidget(self.progress_label)

        self.student_table = QTableWidget(0, len(ROSTER_HEADERS), self)
        self.student_table.setHorizontalHeaderLabels(list(ROSTER_HEADERS))
        self.student_table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.student_table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.student_table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.student_table.setAlternatingRowColors(True)
        self.student_table.verticalHeader().setVisible(False)
        self.student_table.horizontalHeader().setSectionResizeMode(1, QHeaderView.Stretch)
        self.student_table.cellDoubleClicked.connect(lambda row, _column: self._open_row(row))
        layout.addWidget(self.student_table, stretch=1)

        button_row = QHBoxLayout()
        self.evaluate_button = QPushButton(ROSTER_EVALUATE_BUTTON, self)
        self.evaluate_button.setProperty("primary", True)
        self.evaluate_button.clicked.connect(self._handle_evaluate_click)
        button_row.addWidget(self.evaluate_button)

        self.export_button = QPushButton(ROSTER_EXPORT_BUTTON, self)
        self.export_button.clicked.connect(lambda: self.on_export())
        button_row.addWidget(self.export_button)

        button_row.addStretch()

        self.logout_button = QPushButton(ROSTER_LOGOUT_BUTTON, self)
        self.logout_button.clicked.connect(lambda: self.on_logout())
        button_row.addWidget(self.logout_button)

        layout.addLayout(button_row)

    def refresh(self) -> None:
        teacher = self.session.require_teacher()
        self.teacher_label.setText(
            ROSTER_TEACHER_TEMPLATE.format(
                name=teacher.name, class_level=teacher.class_level, room=teacher.room
            )
        )

        self._students = self.session.roster()
        evaluations = self.session.class_evaluations()
        done, roster_size = self.session.progress()
        self.progress_label.setText(ROSTER_PROGRESS_TEMPLATE.format(done=done, total=roster_size))

        self.student_table.setRowCount(len(self._students))
        for row, student in enumerate(self._students):
            record = evaluations.get(student.id)
            if record is None:
                status, quality = ROSTER_STATUS_PENDING, "-"
            else:
                summary = score_aggregator.summarize(record.scores)
                status = ROSTER_STATUS_DONE
                quality = f"{summary.quality.label} ({summary.percentage_text}%)"

            id_item = QTableWidgetItem(str(student.id))
            id_item.setTextAlignment(Qt.AlignCenter)
            self.student_table.setItem(row, 0, id_item)
            self.student_table.setItem(row, 1, QTableWidgetItem(student.name))
            self.student_table.setItem(row, 2, QTableWidgetItem(status))
            self.student_table.setItem(row, 3, QTableWidgetItem(quality))

    def _handle_evaluate_click(self) -> None:
        selected = self.student_table.selectionModel().selectedRows()
        if not selected:
            show_warning(self, ROSTER_EVALUATE_BUTTON, ROSTER_NO_SELECTION_MESSAGE)
            return
        self._open_row(selected[0].row())

    def _open_row(self, row: int) -> None:
        if 0 <= row < len(self._students):
            self.on_select_student(self._students[row])
