import os

import pytest
from fastapi.testclient import TestClient

os.environ["ENV"] = "test"

from ministry_fit.core.question_bank import LIKERT, MULTIPLE_CHOICE, QUESTION_BANK, YES_NO  # noqa: E402
from ministry_fit.main import app  # noqa: E402


def _full_answer(question):
    """Best possible answer for a question: correct option, yes, or a 5."""
    if question.kind == LIKERT:
        return 5
    if question.kind == YES_NO:
        return "yes"
    if question.kind == MULTIPLE_CHOICE:
        if question.literacy_correct_answer is not None:
            return question.literacy_correct_answer
        if question.id == "sex":
            return "female"
        return "a"
    raise AssertionError(f"unexpected kind {question.kind}")


@pytest.fixture
def full_answers():
    """Raw answers with every question answered as strongly as possible."""
    return {q.id: _full_answer(q) for q in QUESTION_BANK}


@pytest.fixture
def client():
    return TestClient(app)
