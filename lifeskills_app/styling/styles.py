"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Sarabun', 'Leelawadee UI', 'Tahoma', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton[primary="true"] {{
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: 1px solid {ColorPalette.ACCENT_PRIMARY.get(theme)};
                font-weight: bold;
            }}
            QLineEdit, QPlainTextEdit {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
            QTableWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
            }}
            QGroupBox {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                margin-top: 10px;
                padding-top: 14px;
                font-weight: bold;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 3px 0 3px;
            }}
        """

    @staticmethod
    def get_header_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};"
            f" color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};"
            " font-size: 16pt; font-weight: bold; padding: 12px;"
        )

    @staticmethod
    def get_indicator_row_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"background-color: {ColorPalette.BACKGROUND_GROUP.get(theme)};"
            f" color: {ColorPalette.ACCENT_DARK.get(theme)}; font-weight: bold; padding: 6px;"
        )

    @staticmethod
    def get_score_label_style(score: int, theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.SCORE_COLORS[score].get(theme)}; font-weight: bold;"

    @staticmethod
    def get_error_label_style(theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.ERROR.get(theme)};"

    @staticmethod
    def get_summary_style(theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.ACCENT_PRIMARY.get(theme)}; font-size: 13pt; font-weight: bold;"
