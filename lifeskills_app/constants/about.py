"""Static metadata describing the evaluation console."""

APP_NAME = "LifeSkills Evaluation"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "A teacher console for the life-skills competency rubric (M.4-6). "
    "Evaluations are kept on this computer and copied to the class Google Sheet."
)

HELP_TEXT = (
    "Log in with your teacher account, pick a student from the class list and "
    "score every one of the 30 items from 0 to 3:\n\n"
    "3 = does this regularly\n"
    "2 = does this often\n"
    "1 = does this sometimes\n"
    "0 = never, or not clearly\n\n"
    "All 30 items must be answered before the evaluation can be saved. "
    "Use Export to write the whole class to an Excel file."
)
