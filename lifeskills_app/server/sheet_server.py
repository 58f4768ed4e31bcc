"""FastAPI stand-in for the Google Sheets web app.

Speaks the same protocol as the Apps Script deployment (``GET ?sheetName=``
and a text/plain JSON ``POST``) but keeps the sheets in memory, so the console
can be run and tested without network access.
"""

from __future__ import annotations

import json
import logging
from threading import Lock, Thread
from typing import Any

import uvicorn
from fastapi import Depends, FastAPI, Request
from pydantic import BaseModel, Field, ValidationError

from lifeskills_app.constants.network_constants import (
    DEFAULT_SHEET_SERVER_HOST,
    DEFAULT_SHEET_SERVER_PORT,
    SHEET_RESULT_ERROR,
    SHEET_RESULT_SUCCESS,
)
from lifeskills_app.core.record_schema import EvaluationRecordPayload

logger = logging.getLogger(__name__)


class SheetRow(EvaluationRecordPayload):
    """Stored row: the record plus the columns the web app appends."""

    student_name: str | None = Field(default=None, alias="studentName")
    class_level: str | None = Field(default=None, alias="classLevel")
    room: str | None = None


class SavePayload(BaseModel):
    """Body of a save request."""

    sheetName: str
    payload: dict[str, Any]


class InMemorySheets:
    """Thread-safe mapping of sheet name -> student id -> stored row."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._sheets: dict[str, dict[int, SheetRow]] = {}

    def save_row(self, sheet_name: str, row: SheetRow) -> None:
        with self._lock:
            self._sheets.setdefault(sheet_name, {})[row.student_id] = row

    def read_sheet(self, sheet_name: str) -> dict[str, dict[str, Any]]:
        with self._lock:
            rows = dict(self._sheets.get(sheet_name, {}))
        return {
            str(student_id): row.model_dump(mode="json", by_alias=True, exclude_none=True)
            for student_id, row in rows.items()
        }


def _error(message: str) -> dict[str, object]:
    return {"result": SHEET_RESULT_ERROR, "message": message}


def _get_sheets_dependency(sheets: InMemorySheets):
    def dependency() -> InMemorySheets:
        return sheets

    return dependency


def create_sheet_app(sheets: InMemorySheets | None = None) -> FastAPI:
    """Create a FastAPI application wired to the provided sheet storage."""
    app = FastAPI(title="LifeSkills Sheet Stand-in", version="0.1.0")
    sheets_dep = _get_sheets_dependency(sheets or InMemorySheets())

    @app.get("/")
    def read_sheet(
        sheetName: str | None = None,
        store: InMemorySheets = Depends(sheets_dep),
    ) -> dict[str, object]:
        if not sheetName:
            return _error("sheetName is required")
        return {"result": SHEET_RESULT_SUCCESS, "data": store.read_sheet(sheetName)}

    @app.post("/")
    async def save_row(
        request: Request,
        store: InMemorySheets = Depends(sheets_dep),
    ) -> dict[str, object]:
        raw_body = await request.body()
        try:
            body = SavePayload.model_validate(json.loads(raw_body.decode("utf-8")))
            row = SheetRow.model_validate(body.payload)
        except (UnicodeDecodeError, ValueError, ValidationError) as exc:
            logger.warning("Rejected sheet save: %s", exc)
            return _error(str(exc))

        store.save_row(body.sheetName, row)
        logger.info("Stored student %s in sheet %s", row.student_id, body.sheetName)
        return {"result": SHEET_RESULT_SUCCESS}

    return app


def start_sheet_server(
    sheets: InMemorySheets | None = None,
    host: str = DEFAULT_SHEET_SERVER_HOST,
    port: int = DEFAULT_SHEET_SERVER_PORT,
) -> Thread:
    """Start the stand-in server in a background daemon thread."""
    app = create_sheet_app(sheets)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="SheetStandInServer", daemon=True)
    thread.start()
    return thread
