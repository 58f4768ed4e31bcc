"""Question catalog built from the rubric constants."""

from __future__ import annotations

from lifeskills_app.constants.rubric_constants import INDICATOR_CATALOG, QUESTION_COUNT
from lifeskills_app.core.models import Indicator, Question


def build_indicators() -> tuple[Indicator, ...]:
    indicators: list[Indicator] = []
    next_question_id = 1
    for indicator_id, (title, prompts) in enumerate(INDICATOR_CATALOG, start=1):
        questions = []
        for prompt in prompts:
            questions.append(Question(id=next_question_id, text=prompt))
            next_question_id += 1
        indicators.append(Indicator(id=indicator_id, title=title, questions=tuple(questions)))

    if next_question_id - 1 != QUESTION_COUNT:
        raise ValueError(
            f"Rubric catalog defines {next_question_id - 1} questions, expected {QUESTION_COUNT}."
        )
    return tuple(indicators)


INDICATORS: tuple[Indicator, ...] = build_indicators()
QUESTION_IDS: tuple[int, ...] = tuple(
    question.id for indicator in INDICATORS for question in indicator.questions
)
