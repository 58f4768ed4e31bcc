"""Component for the teacher login screen."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFormLayout,
    QGroupBox,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from lifeskills_app.constants.rubric_constants import FORM_TITLE, SCHOOL_LOCATION, SCHOOL_NAME
from lifeskills_app.constants.ui_constants import (
    LOGIN_BUTTON,
    LOGIN_FAILED_MESSAGE,
    LOGIN_LOADING_MESSAGE,
    LOGIN_PASSWORD_LABEL,
    LOGIN_PASSWORD_PLACEHOLDER,
    LOGIN_USERNAME_LABEL,
    LOGIN_USERNAME_PLACEHOLDER,
)
from lifeskills_app.styling.styles import Styles


class LoginPanel(QWidget):
    """UI component collecting the teacher's credentials."""

    def __init__(self, on_submit: callable, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_submit = on_submit
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.addStretch()
        self.setLayout(layout)

        header = QLabel(f"{FORM_TITLE}\n{SCHOOL_NAME} {SCHOOL_LOCATION}", self)
        header.setAlignment(Qt.AlignCenter)
        header.setWordWrap(True)
        header.setStyleSheet(Styles.get_header_style())
        layout.addWidget(header)

        form_box = QGroupBox(self)
        form = QFormLayout()
        form_box.setLayout(form)

        self.username_input = QLineEdit(self)
        self.username_input.setPlaceholderText(LOGIN_USERNAME_PLACEHOLDER)
        form.addRow(LOGIN_USERNAME_LABEL, self.username_input)

        self.password_input = QLineEdit(self)
        self.password_input.setEchoMode(QLineEdit.Password)
        self.password_input.setPlaceholderText(LOGIN_PASSWORD_PLACEHOLDER)
        self.password_input.returnPressed.connect(self._handle_submit)
        form.addRow(LOGIN_PASSWORD_LABEL, self.password_input)

        self.error_label = QLabel("", self)
        self.error_label.setStyleSheet(Styles.get_error_label_style())
        self.error_label.setVisible(False)
        form.addRow(self.error_label)

        self.login_button = QPushButton(LOGIN_BUTTON, self)
        self.login_button.setProperty("primary", True)
        self.login_button.clicked.connect(self._handle_submit)
        form.addRow(self.login_button)

        layout.addWidget(form_box)
        layout.addStretch()

    def _handle_submit(self) -> None:
        username = self.username_input.text().strip()
        password = self.password_input.text()
        if not username or not password:
            self.show_error(LOGIN_FAILED_MESSAGE)
            return
        self.set_busy(True)
        self.on_submit(username, password)

    def set_busy(self, busy: bool) -> None:
        self.login_button.setEnabled(not busy)
        self.username_input.setEnabled(not busy)
        self.password_input.setEnabled(not busy)
        if busy:
            self.error_label.setStyleSheet("")
            self.error_label.setText(LOGIN_LOADING_MESSAGE)
            self.error_label.setVisible(True)

    def show_error(self, message: str) -> None:
        self.set_busy(False)
        self.error_label.setStyleSheet(Styles.get_error_label_style())
        self.error_label.setText(f"⚠️ {message}")
        self.error_label.setVisible(True)

    def reset_state(self) -> None:
        self.set_busy(False)
        self.password_input.clear()
        self.error_label.clear()
        self.error_label.setVisible(False)
        self.username_input.setFocus()
