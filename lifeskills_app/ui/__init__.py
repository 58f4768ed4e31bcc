"""Qt UI components for the teacher application."""

from .dialog_helpers import (
    confirm_discard_form,
    confirm_save_evaluation,
    show_error,
    show_info,
    show_warning,
)
from .teacher_main_window import TeacherMainWindow

__all__ = [
    "TeacherMainWindow",
    "confirm_discard_form",
    "confirm_save_evaluation",
    "show_error",
    "show_info",
    "show_warning",
]
