"""Component for filling in one student's 30-item rubric."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QButtonGroup,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPlainTextEdit,
    QPushButton,
    QRadioButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from lifeskills_app.constants.rubric_constants import (
    FORM_SUBTITLE,
    FORM_TITLE,
    MAX_TOTAL_SCORE,
    QUESTION_COUNT,
    SCHOOL_NAME,
    SCORE_CHOICES,
    SCORE_LEGEND,
)
from lifeskills_app.constants.ui_constants import (
    FORM_ANSWERED_TEMPLATE,
    FORM_BACK_BUTTON,
    FORM_CANCEL_BUTTON,
    FORM_IMPROVEMENTS_LABEL,
    FORM_IMPROVEMENTS_PLACEHOLDER,
    FORM_INSTRUCTIONS,
    FORM_INSTRUCTIONS_TITLE,
    FORM_PERCENT_TEMPLATE,
    FORM_QUALITY_TEMPLATE,
    FORM_SAVE_BUTTON,
    FORM_SIGNATURE_TEMPLATE,
    FORM_STRENGTHS_LABEL,
    FORM_STRENGTHS_PLACEHOLDER,
    FORM_STUDENT_TEMPLATE,
    FORM_TOTAL_TEMPLATE,
    INCOMPLETE_TEMPLATE,
    INCOMPLETE_TITLE,
    SAVING_MESSAGE,
)
from lifeskills_app.core import score_aggregator
from lifeskills_app.core.models import EvaluationRecord, QualityLevel, Student, Teacher
from lifeskills_app.core.rubric_catalog import INDICATORS
from lifeskills_app.ui.dialog_helpers import (
    confirm_discard_form,
    confirm_save_evaluation,
    show_warning,
)
from lifeskills_app.styling.styles import Styles


class EvaluationPanel(QWidget):
    """UI component rendering the rubric form and its live score summary."""

    def __init__(
        self,
        on_save: callable,
        on_back: callable,
        parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self.on_save = on_save
        self.on_back = on_back
        self._student: Student | None = None
        self._scores: dict[int, int] = {}
        self._has_unsaved_changes: bool = False
        self._button_groups: dict[int, QButtonGroup] = {}

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        nav_row = QHBoxLayout()
        self.back_button = QPushButton(f"← {FORM_BACK_BUTTON}", self)
        self.back_button.clicked.connect(self._handle_back)
        nav_row.addWidget(self.back_button)
        nav_row.addStretch()
        layout.addLayout(nav_row)

        scroll = QScrollArea(self)
        scroll.setWidgetResizable(True)
        document = QWidget(scroll)
        document_layout = QVBoxLayout()
        document.setLayout(document_layout)
        scroll.setWidget(document)
        layout.addWidget(scroll, stretch=1)

        title = QLabel(f"{FORM_TITLE}\n{FORM_SUBTITLE}\n{SCHOOL_NAME}", document)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(Styles.get_header_style())
        document_layout.addWidget(title)

        self.student_label = QLabel("", document)
        self.student_label.setWordWrap(True)
        document_layout.addWidget(self.student_label)

        document_layout.addWidget(self._build_instructions(document))
        document_layout.addWidget(self._build_rubric(document))
        document_layout.addWidget(self._build_summary(document))

        action_row = QHBoxLayout()
        self.answered_label = QLabel("", self)
        action_row.addWidget(self.answered_label)
        action_row.addStretch()

        self.cancel_button = QPushButton(FORM_CANCEL_BUTTON, self)
        self.cancel_button.clicked.connect(self._handle_back)
        action_row.addWidget(self.cancel_button)

        self.save_button = QPushButton(FORM_SAVE_BUTTON, self)
        self.save_button.setProperty("primary", True)
        self.save_button.clicked.connect(self._handle_save)
        action_row.addWidget(self.save_button)
        layout.addLayout(action_row)

    def _build_instructions(self, parent: QWidget) -> QGroupBox:
        box = QGroupBox(FORM_INSTRUCTIONS_TITLE, parent)
        box_layout = QVBoxLayout()
        box.setLayout(box_layout)
        box_layout.addWidget(QLabel(FORM_INSTRUCTIONS, box))
        for score in SCORE_CHOICES:
            label = QLabel(f"ระดับ {score}  หมายถึง {SCORE_LEGEND[score]}", box)
            label.setStyleSheet(Styles.get_score_label_style(score))
            box_layout.addWidget(label)
        return box

    def _build_rubric(self, parent: QWidget) -> QGroupBox:
        box = QGroupBox("รายการประเมินความสามารถในการใช้ทักษะชีวิต", parent)
        grid = QGridLayout()
        box.setLayout(grid)

        grid.addWidget(QLabel("ข้อที่", box), 0, 0)
        grid.addWidget(QLabel("รายการประเมิน", box), 0, 1)
        for column, score in enumerate(SCORE_CHOICES, start=2):
            header = QLabel(str(score), box)
            header.setAlignment(Qt.AlignCenter)
            header.setStyleSheet(Styles.get_score_label_style(score))
            grid.addWidget(header, 0, column)

        row = 1
        for indicator in INDICATORS:
            indicator_label = QLabel(indicator.title, box)
            indicator_label.setWordWrap(True)
            indicator_label.setStyleSheet(Styles.get_indicator_row_style())
            grid.addWidget(indicator_label, row, 0, 1, 2 + len(SCORE_CHOICES))
            row += 1

            for question in indicator.questions:
                grid.addWidget(QLabel(str(question.id), box), row, 0, Qt.AlignTop | Qt.AlignHCenter)
                prompt = QLabel(question.text, box)
                prompt.setWordWrap(True)
                grid.addWidget(prompt, row, 1)

                group = QButtonGroup(self)
                for column, score in enumerate(SCORE_CHOICES, start=2):
                    radio = QRadioButton(box)
                    group.addButton(radio, score)
                    grid.addWidget(radio, row, column, Qt.AlignCenter)
                group.idClicked.connect(
                    lambda score, question_id=question.id: self._handle_score_change(question_id, score)
                )
                self._button_groups[question.id] = group
                row += 1

        grid.setColumnStretch(1, 1)
        return box

    def _build_summary(self, parent: QWidget) -> QGroupBox:
        box = QGroupBox("สรุปผลการประเมินความสามารถในการใช้ทักษะชีวิต", parent)
        box_layout = QVBoxLayout()
        box.setLayout(box_layout)

        self.total_label = QLabel("", box)
        self.percent_label = QLabel("", box)
        self.quality_label = QLabel("", box)
        for label in (self.total_label, self.percent_label, self.quality_label):
            label.setStyleSheet(Styles.get_summary_style())
            box_layout.addWidget(label)

        self.band_label = QLabel(
            "    ".join(f"{level.label} ({level.range_label})" for level in QualityLevel),
            box,
        )
        box_layout.addWidget(self.band_label)

        box_layout.addWidget(QLabel(FORM_STRENGTHS_LABEL, box))
        self.strengths_input = QPlainTextEdit(box)
        self.strengths_input.setPlaceholderText(FORM_STRENGTHS_PLACEHOLDER)
        self.strengths_input.setFixedHeight(80)
        self.strengths_input.textChanged.connect(self._mark_dirty)
        box_layout.addWidget(self.strengths_input)

        box_layout.addWidget(QLabel(FORM_IMPROVEMENTS_LABEL, box))
        self.improvements_input = QPlainTextEdit(box)
        self.improvements_input.setPlaceholderText(FORM_IMPROVEMENTS_PLACEHOLDER)
        self.improvements_input.setFixedHeight(80)
        self.improvements_input.textChanged.connect(self._mark_dirty)
        box_layout.addWidget(self.improvements_input)

        self.signature_label = QLabel("", box)
        self.signature_label.setAlignment(Qt.AlignRight)
        box_layout.addWidget(self.signature_label)
        return box

    def open_form(self, student: Student, teacher: Teacher, initial: EvaluationRecord | None) -> None:
        """Load a student into the form, pre-filled from the cached record if any."""
        self._student = student
        self.student_label.setText(
            FORM_STUDENT_TEMPLATE.format(
                name=student.name,
                class_level=student.class_level,
                room=student.room,
                student_id=student.id,
            )
        )
        self.signature_label.setText(FORM_SIGNATURE_TEMPLATE.format(name=teacher.name))

        self._scores = dict(initial.scores) if initial else {}
        for question_id, group in self._button_groups.items():
            self._apply_group_selection(group, self._scores.get(question_id))

        self.strengths_input.setPlainText(initial.strengths if initial else "")
        self.improvements_input.setPlainText(initial.improvements if initial else "")
        self._has_unsaved_changes = False
        self.set_busy(False)
        self._refresh_summary()

    @staticmethod
    def _apply_group_selection(group: QButtonGroup, score: int | None) -> None:
        # An exclusive group refuses to uncheck its last checked button
        group.setExclusive(False)
        for button in group.buttons():
            button.setChecked(group.id(button) == score)
        group.setExclusive(True)

    def _handle_score_change(self, question_id: int, score: int) -> None:
        self._scores[question_id] = score
        self._mark_dirty()
        self._refresh_summary()

    def _mark_dirty(self) -> None:
        self._has_unsaved_changes = True

    def _refresh_summary(self) -> None:
        summary = score_aggregator.summarize(self._scores)
        self.total_label.setText(FORM_TOTAL_TEMPLATE.format(total=summary.total, max_total=MAX_TOTAL_SCORE))
        self.percent_label.setText(FORM_PERCENT_TEMPLATE.format(percentage=summary.percentage_text))
        self.quality_label.setText(FORM_QUALITY_TEMPLATE.format(quality=summary.quality.label))
        self.answered_label.setText(
            FORM_ANSWERED_TEMPLATE.format(answered=summary.answered, count=QUESTION_COUNT)
        )

    def _handle_save(self) -> None:
        if self._student is None:
            return

        if not score_aggregator.is_complete(self._scores):
            answered = score_aggregator.answered_count(self._scores)
            show_warning(
                self,
                INCOMPLETE_TITLE,
                INCOMPLETE_TEMPLATE.format(answered=answered, count=QUESTION_COUNT),
            )
            return

        if not confirm_save_evaluation(self, self._student.name):
            return

        self.set_busy(True)
        self.on_save(
            self._student,
            dict(self._scores),
            self.strengths_input.toPlainText(),
            self.improvements_input.toPlainText(),
        )

    def _handle_back(self) -> None:
        if self._has_unsaved_changes and not confirm_discard_form(self):
            return
        self.on_back()

    def mark_saved(self) -> None:
        self._has_unsaved_changes = False

    def set_busy(self, busy: bool) -> None:
        self.save_button.setEnabled(not busy)
        self.cancel_button.setEnabled(not busy)
        self.back_button.setEnabled(not busy)
        if busy:
            self.answered_label.setText(SAVING_MESSAGE)
        elif self._student is not None:
            self._refresh_summary()
