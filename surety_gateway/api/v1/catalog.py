"""GET /v1/catalog/* - form vocabularies for the input collaborator"""

from typing import List

from fastapi import APIRouter

from surety_gateway.api.v1.schemas import (
    AnswerOptionSchema,
    LineItemGroupSchema,
    QuestionSchema,
    SectionQuestionsSchema,
)
from surety_gateway.domain.catalog import QUESTIONS, STATEMENT_GROUPS

router = APIRouter()


@router.get("/catalog/questions", response_model=List[SectionQuestionsSchema])
def get_questions():
    """
    Questionnaire per section with titles and answer options.

    Weights stay server-side.
    """
    return [
        SectionQuestionsSchema(
            section=section.value,
            questions=[
                QuestionSchema(
                    key=q.key,
                    title=q.title,
                    options=[AnswerOptionSchema(letter=o.letter, label=o.label) for o in q.options],
                )
                for q in questions
            ],
        )
        for section, questions in QUESTIONS.items()
    ]


@router.get("/catalog/line-items", response_model=List[LineItemGroupSchema])
def get_line_items():
    """Financial statement line items in form order, grouped"""
    return [
        LineItemGroupSchema(title=title, items=[item.value for item in items])
        for title, items in STATEMENT_GROUPS
    ]
