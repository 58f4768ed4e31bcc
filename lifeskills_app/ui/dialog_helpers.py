"""Helper functions for common dialog patterns in the teacher UI."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget

from lifeskills_app.constants.ui_constants import CONFIRM_SAVE_TEMPLATE, CONFIRM_SAVE_TITLE


def confirm_save_evaluation(parent: QWidget, student_name: str) -> bool:
    """Show confirmation dialog before saving an evaluation.

    Args:
        parent: Parent widget for the dialog
        student_name: Name of the student being evaluated

    Returns:
        True if user confirmed, False otherwise
    """
    reply = QMessageBox.question(
        parent,
        CONFIRM_SAVE_TITLE,
        CONFIRM_SAVE_TEMPLATE.format(name=student_name),
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No
    )
    return reply == QMessageBox.Yes


def confirm_discard_form(parent: QWidget) -> bool:
    """Ask before leaving a form that has unsaved answers."""
    reply = QMessageBox.question(
        parent,
        "ยกเลิกการประเมิน",
        "คะแนนที่ยังไม่ได้บันทึกจะหายไป ต้องการกลับหน้ารายชื่อหรือไม่?",
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No
    )
    return reply == QMessageBox.Yes


def show_error(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.critical(parent, title, message)


def show_info(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.information(parent, title, message)


def show_warning(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.warning(parent, title, message)
