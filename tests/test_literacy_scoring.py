from ministry_fit.core.literacy import LITERACY_BUCKETS
from ministry_fit.core.question_bank import MULTIPLE_CHOICE, QuestionDefinition, Section
from ministry_fit.services.answers import Choice, ingest_answers
from ministry_fit.services.literacy_scoring import score_literacy


def _graded_bank(n, bucket="bible-basics"):
    return [
        QuestionDefinition(id=f"q{i}", section=Section.BIBLICAL_LITERACY, kind=MULTIPLE_CHOICE,
                           text="?", literacy_bucket=bucket, literacy_points=1,
                           literacy_correct_answer="a")
        for i in range(n)
    ]


def _correct(k):
    return {f"q{i}": Choice("a") for i in range(k)}


def test_empty_answers_score_zero_with_all_buckets():
    result = score_literacy({})
    assert result.level == "low"
    assert result.percentage == 0
    assert result.score == 0
    assert result.max_score == 20
    assert result.total_questions == 20
    assert result.correct_answers == 0
    assert [b.bucket for b in result.bucket_scores] == list(LITERACY_BUCKETS)
    assert all(b.max_score == 5 and b.percentage == 0 for b in result.bucket_scores)


def test_perfect_answers_are_strong(full_answers):
    result = score_literacy(ingest_answers(full_answers))
    assert result.level == "strong"
    assert result.percentage == 100
    assert result.score == 20
    assert result.correct_answers == 17
    assert result.level_name == "Spiritually Mature"


def test_likert_earns_fraction_of_points():
    result = score_literacy(ingest_answers({"bl16": 3}))
    assert result.score == 0.6
    assert result.percentage == 3
    how_to_read = result.bucket_scores[-1]
    assert how_to_read.bucket == "how-to-read"
    assert how_to_read.score == 0.6
    assert how_to_read.percentage == 12


def test_wrong_and_unknown_choices_earn_nothing():
    result = score_literacy(ingest_answers({"bl1": "a", "bl2": "idk"}))
    assert result.score == 0
    assert result.correct_answers == 0
    assert result.max_score == 20


def test_level_boundaries():
    bank = _graded_bank(10)
    assert score_literacy(_correct(3), bank).level == "low"
    assert score_literacy(_correct(4), bank).level == "developing"
    assert score_literacy(_correct(6), bank).level == "developing"
    assert score_literacy(_correct(7), bank).level == "strong"


def test_level_uses_unrounded_percentage():
    # 79 of 200 points is 39.5%, reported as 40 but still low
    bank = _graded_bank(200)
    result = score_literacy(_correct(79), bank)
    assert result.percentage == 40
    assert result.level == "low"


def test_question_without_bucket_counts_as_bible_basics():
    bank = [
        QuestionDefinition(id="q0", section=Section.BIBLICAL_LITERACY, kind=MULTIPLE_CHOICE,
                           text="?", literacy_points=2, literacy_correct_answer="a"),
    ]
    result = score_literacy({"q0": Choice("a")}, bank)
    basics = result.bucket_scores[0]
    assert basics.bucket == "bible-basics"
    assert basics.max_score == 2
    assert basics.percentage == 100
    assert result.total_questions == 1
