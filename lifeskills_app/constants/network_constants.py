"""Network configuration constants for the evaluation console."""

DEFAULT_SHEET_SERVER_HOST: str = "127.0.0.1"
DEFAULT_SHEET_SERVER_PORT: int = 8765
SHEET_RESULT_SUCCESS: str = "success"
SHEET_RESULT_ERROR: str = "error"
SHEET_POST_CONTENT_TYPE: str = "text/plain;charset=utf-8"
