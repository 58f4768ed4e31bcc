"""Export of a class's evaluations to an Excel workbook."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font
from openpyxl.utils import get_column_letter

from lifeskills_app.constants.rubric_constants import MAX_TOTAL_SCORE, SCHOOL_NAME
from lifeskills_app.core import score_aggregator
from lifeskills_app.core.models import EvaluationRecord, Student, Teacher
from lifeskills_app.core.rubric_catalog import QUESTION_IDS

MISSING_VALUE = "-"
SHEET_TITLE = "ผลการประเมิน"

_LEADING_HEADERS = ["เลขที่", "ชื่อ-นามสกุล", "ระดับชั้น", "ห้อง", "ผู้ประเมิน", "วันที่ประเมิน"]
_TRAILING_HEADERS = [
    f"คะแนนรวม ({MAX_TOTAL_SCORE})",
    "ร้อยละ (%)",
    "ระดับคุณภาพ",
    "จุดเด่น",
    "จุดที่ควรพัฒนา",
]
# Fixed header block above the table: school, title, teacher, blank.
_TITLE_ROWS = 4


def default_export_filename(teacher: Teacher) -> str:
    return f"LifeSkills_Evaluation_{teacher.class_level}{teacher.room}.xlsx"


def report_headers() -> list[str]:
    return [*_LEADING_HEADERS, *(f"ข้อ {qid}" for qid in QUESTION_IDS), *_TRAILING_HEADERS]


def format_thai_date(iso_timestamp: str) -> str:
    """Render an ISO-8601 timestamp as a local ``d/m/yyyy`` Buddhist-era date."""
    if not iso_timestamp:
        return MISSING_VALUE
    try:
        moment = datetime.fromisoformat(iso_timestamp.replace("Z", "+00:00"))
    except ValueError:
        return iso_timestamp
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return f"{moment.day}/{moment.month}/{moment.year + 543}"


def build_report_rows(
    students: Sequence[Student],
    evaluations: Mapping[int, EvaluationRecord],
) -> list[list[object]]:
    """One row per student, in roster order."""
    rows: list[list[object]] = []
    trailing_count = len(_TRAILING_HEADERS)
    for student in students:
        identity: list[object] = [student.id, student.name, student.class_level, student.room]
        record = evaluations.get(student.id)
        if record is None:
            rows.append(identity + [MISSING_VALUE] * (2 + len(QUESTION_IDS) + trailing_count))
            continue

        # An exported record is complete; 0 only fills gaps in legacy data.
        question_scores = [record.scores.get(qid, 0) for qid in QUESTION_IDS]
        summary = score_aggregator.summarize(dict(zip(QUESTION_IDS, question_scores)))
        rows.append(
            identity
            + [record.evaluator_name, format_thai_date(record.date)]
            + question_scores
            + [
                summary.total,
                summary.percentage_text,
                summary.quality.label,
                record.strengths or MISSING_VALUE,
                record.improvements or MISSING_VALUE,
            ]
        )
    return rows


def export_to_excel(
    file_path: Path,
    teacher: Teacher,
    students: Sequence[Student],
    evaluations: Mapping[int, EvaluationRecord],
) -> Path:
    """Write the class report and return the resolved path."""
    headers = report_headers()
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = SHEET_TITLE

    title_lines = [
        SCHOOL_NAME,
        f"รายงานผลการประเมินทักษะชีวิต ชั้น {teacher.class_level} ห้อง {teacher.room}",
        f"ครูประจำชั้น: {teacher.name}",
    ]
    last_column = get_column_letter(len(headers))
    for row_index, line in enumerate(title_lines, start=1):
        sheet.cell(row=row_index, column=1, value=line).font = Font(bold=row_index == 1)
        sheet.merge_cells(f"A{row_index}:{last_column}{row_index}")
        sheet.cell(row=row_index, column=1).alignment = Alignment(horizontal="center")

    header_row = _TITLE_ROWS + 1
    for column, title in enumerate(headers, start=1):
        sheet.cell(row=header_row, column=column, value=title).font = Font(bold=True)

    for offset, row in enumerate(build_report_rows(students, evaluations), start=1):
        for column, value in enumerate(row, start=1):
            sheet.cell(row=header_row + offset, column=column, value=value)

    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(file_path)
    return file_path
