"""Background threads for the network-bound session calls."""

from __future__ import annotations

from PySide6.QtCore import QThread, Signal

from lifeskills_app.constants.ui_constants import (
    INCOMPLETE_TEMPLATE,
    INCOMPLETE_TITLE,
    INVALID_SCORES_TITLE,
)
from lifeskills_app.core.evaluation_session import (
    EvaluationSession,
    IncompleteEvaluationError,
    InvalidScoresError,
    LoginError,
)
from lifeskills_app.core.models import Student


class LoginWorker(QThread):
    """Runs login plus the sheet pull off the UI thread."""

    login_succeeded = Signal(object)  # LoginResult
    login_failed = Signal(str)

    def __init__(self, session: EvaluationSession, username: str, password: str) -> None:
        super().__init__()
        self.session = session
        self.username = username
        self.password = password

    def run(self) -> None:
        try:
            result = self.session.login(self.username, self.password)
        except LoginError as exc:
            self.login_failed.emit(str(exc))
            return
        self.login_succeeded.emit(result)


class SaveWorker(QThread):
    """Runs the local write and the sheet push off the UI thread."""

    save_finished = Signal(object)  # SaveOutcome
    save_rejected = Signal(str, str)  # dialog title, message

    def __init__(
        self,
        session: EvaluationSession,
        student: Student,
        scores: dict[int, int],
        strengths: str,
        improvements: str,
    ) -> None:
        super().__init__()
        self.session = session
        self.student = student
        self.scores = scores
        self.strengths = strengths
        self.improvements = improvements

    def run(self) -> None:
        try:
            outcome = self.session.save_evaluation(
                self.student, self.scores, self.strengths, self.improvements
            )
        except IncompleteEvaluationError as exc:
            self.save_rejected.emit(
                INCOMPLETE_TITLE,
                INCOMPLETE_TEMPLATE.format(answered=exc.answered, count=exc.required),
            )
            return
        except InvalidScoresError as exc:
            self.save_rejected.emit(INVALID_SCORES_TITLE, str(exc))
            return
        self.save_finished.emit(outcome)
