"""Qt main window switching between login, class roster and rubric form."""

from __future__ import annotations

from enum import Enum, auto
from pathlib import Path

from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from lifeskills_app.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from lifeskills_app.constants.ui_constants import (
    EXPORT_DIALOG_TITLE,
    EXPORT_DONE_TEMPLATE,
    EXPORT_DONE_TITLE,
    EXPORT_FILE_FILTER,
    LOGIN_FAILED_MESSAGE,
    SAVE_LOCAL_FAILED_MESSAGE,
    SAVE_LOCAL_FAILED_TITLE,
    SAVE_REMOTE_FAILED_MESSAGE,
    SAVE_REMOTE_FAILED_TITLE,
    SAVE_SUCCESS_MESSAGE,
    SAVE_SUCCESS_TITLE,
    WINDOW_TITLE,
)
from lifeskills_app.core.evaluation_session import EvaluationSession, LoginResult, SaveOutcome
from lifeskills_app.core.models import Student
from lifeskills_app.ui.components.evaluation_panel import EvaluationPanel
from lifeskills_app.ui.components.login_panel import LoginPanel
from lifeskills_app.ui.components.roster_panel import RosterPanel
from lifeskills_app.ui.dialog_helpers import show_error, show_info, show_warning
from lifeskills_app.ui.workers import LoginWorker, SaveWorker
from lifeskills_app.styling.styles import Styles


class TeacherMode(Enum):
    """High-level UI mode for the teacher console."""

    LOGIN = auto()
    ROSTER = auto()
    EVALUATION = auto()


class TeacherMainWindow(QMainWindow):
    """Main Qt window orchestrating login, roster and evaluation form."""

    def __init__(self, session: EvaluationSession, export_dir: Path | None = None) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(1000, 760)

        self.session = session
        self._export_dir = export_dir or Path.cwd()
        self._mode = TeacherMode.LOGIN
        self._login_worker: LoginWorker | None = None
        self._save_worker: SaveWorker | None = None

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style())

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.about_button = QPushButton("About", self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)
        self.help_button = QPushButton("Help", self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)
        root_layout.addLayout(button_row)

        self.mode_stack = QStackedWidget(self)

        self.login_panel = LoginPanel(on_submit=self._start_login, parent=self)
        self.roster_panel = RosterPanel(
            self.session,
            on_select_student=self._open_evaluation,
            on_export=self._handle_export,
            on_logout=self._handle_logout,
            parent=self
        )
        self.evaluation_panel = EvaluationPanel(
            on_save=self._start_save,
            on_back=self._show_roster,
            parent=self
        )

        self.mode_stack.addWidget(self.login_panel)
        self.mode_stack.addWidget(self.roster_panel)
        self.mode_stack.addWidget(self.evaluation_panel)
        root_layout.addWidget(self.mode_stack)

        self._set_mode(TeacherMode.LOGIN)

    def _set_mode(self, mode: TeacherMode) -> None:
        self._mode = mode
        index_map = {
            TeacherMode.LOGIN: 0,
            TeacherMode.ROSTER: 1,
            TeacherMode.EVALUATION: 2,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])

    # --- Login ---

    def _start_login(self, username: str, password: str) -> None:
        if self._login_worker is not None:
            return
        self._login_worker = LoginWorker(self.session, username, password)
        self._login_worker.login_succeeded.connect(self._handle_login_succeeded)
        self._login_worker.login_failed.connect(self._handle_login_failed)
        self._login_worker.finished.connect(lambda: setattr(self, "_login_worker", None))
        self._login_worker.start()

    def _handle_login_succeeded(self, result: LoginResult) -> None:
        self.login_panel.reset_state()
        self._show_roster()

    def _handle_login_failed(self, _detail: str) -> None:
        self.login_panel.show_error(LOGIN_FAILED_MESSAGE)

    def _handle_logout(self) -> None:
        self.session.logout()
        self.login_panel.reset_state()
        self._set_mode(TeacherMode.LOGIN)

    # --- Roster & form ---

    def _show_roster(self) -> None:
        self.roster_panel.refresh()
        self._set_mode(TeacherMode.ROSTER)

    def _open_evaluation(self, student: Student) -> None:
        teacher = self.session.require_teacher()
        self.evaluation_panel.open_form(student, teacher, self.session.evaluation_for(student))
        self._set_mode(TeacherMode.EVALUATION)

    def _start_save(
        self,
        student: Student,
        scores: dict[int, int],
        strengths: str,
        improvements: str,
    ) -> None:
        if self._save_worker is not None:
            return
        self._save_worker = SaveWorker(self.session, student, scores, strengths, improvements)
        self._save_worker.save_finished.connect(self._handle_save_finished)
        self._save_worker.save_rejected.connect(self._handle_save_rejected)
        self._save_worker.finished.connect(lambda: setattr(self, "_save_worker", None))
        self._save_worker.start()

    def _handle_save_finished(self, outcome: SaveOutcome) -> None:
        self.evaluation_panel.set_busy(False)
        if not outcome.local_written:
            show_error(
                self,
                SAVE_LOCAL_FAILED_TITLE,
                SAVE_LOCAL_FAILED_MESSAGE.format(detail=outcome.local_error),
            )
            return

        self.evaluation_panel.mark_saved()
        if outcome.remote_synced:
            show_info(self, SAVE_SUCCESS_TITLE, SAVE_SUCCESS_MESSAGE)
            self._show_roster()
        else:
            # The local copy stands; the teacher stays on the form and may retry.
            show_warning(self, SAVE_REMOTE_FAILED_TITLE, SAVE_REMOTE_FAILED_MESSAGE)

    def _handle_save_rejected(self, title: str, message: str) -> None:
        self.evaluation_panel.set_busy(False)
        show_warning(self, title, message)

    # --- Export ---

    def _handle_export(self) -> None:
        default_path = self.session.default_export_path(self._export_dir)
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            EXPORT_DIALOG_TITLE,
            str(default_path),
            EXPORT_FILE_FILTER,
        )
        if not file_path:
            return

        try:
            written = self.session.export_report(Path(file_path))
        except OSError as exc:
            show_error(self, EXPORT_DIALOG_TITLE, str(exc))
            return

        self._export_dir = written.parent
        show_info(self, EXPORT_DONE_TITLE, EXPORT_DONE_TEMPLATE.format(path=written))

    # --- Help ---

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)
