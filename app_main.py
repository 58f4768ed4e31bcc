"""Application entry point for the life-skills evaluation console."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from lifeskills_app.core.evaluation_session import EvaluationSession
from lifeskills_app.core.services.evaluation_store import EvaluationStore
from lifeskills_app.core.services.roster import Roster
from lifeskills_app.core.services.sheet_sync import SheetSyncClient
from lifeskills_app.server.sheet_server import start_sheet_server
from lifeskills_app.ui.teacher_main_window import TeacherMainWindow
from lifeskills_app.utils.logging_config import configure_logging
from lifeskills_app.utils.settings import load_settings


def main() -> None:
    """Initialize logging and services, then launch the Qt UI."""
    logger = configure_logging()
    settings = load_settings()
    logger.info("Starting life-skills evaluation console…")

    sheet_url = settings.sheet_url
    if settings.use_local_sheet_server:
        start_sheet_server(
            host=settings.local_sheet_server_host,
            port=settings.local_sheet_server_port,
        )
        sheet_url = settings.local_sheet_server_url
        logger.info("Using local sheet stand-in at %s", sheet_url)
    elif not sheet_url:
        logger.warning("LIFESKILLS_SHEET_URL is not set; evaluations will only be saved locally")

    store = EvaluationStore(settings.cache_path)
    cached = store.load()
    logger.info("Loaded %d cached evaluation(s) from %s", len(cached), settings.cache_path)

    session = EvaluationSession(
        store=store,
        sync_client=SheetSyncClient(sheet_url, timeout=settings.request_timeout_seconds),
        roster=Roster.from_constants(),
    )

    app = QApplication(sys.argv)
    window = TeacherMainWindow(session=session, export_dir=settings.export_dir)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
