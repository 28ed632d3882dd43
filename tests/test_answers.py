from ministry_fit.services.answers import (
    Binary,
    Choice,
    Likert,
    ingest_answers,
    parse_answers,
    respondent_attributes,
    validate_answers,
)


def test_likert_answers_become_likert_values():
    answers = ingest_answers({"sg1": 3, "disc5": 5})
    assert answers == {"sg1": Likert(3), "disc5": Likert(5)}


def test_bool_is_not_a_likert_value():
    answers, warnings = parse_answers({"sg1": True})
    assert answers == {}
    assert any("sg1" in w for w in warnings)


def test_dont_know_is_dropped_silently():
    answers, warnings = parse_answers({"st6": 0})
    assert answers == {}
    assert warnings == []


def test_likert_out_of_range_is_dropped_with_warning():
    answers, warnings = parse_answers({"sg1": 6, "sg2": -1})
    assert answers == {}
    assert len(warnings) == 2
    assert all("outside" in w for w in warnings)


def test_yes_no_accepts_strings_case_insensitively_and_bools():
    answers = ingest_answers({"ms9": "YES", "ms10": "no", "ms11": True, "st8": False})
    assert answers["ms9"] == Binary(True)
    assert answers["ms10"] == Binary(False)
    assert answers["ms11"] == Binary(True)
    assert answers["st8"] == Binary(False)


def test_yes_no_rejects_other_values():
    answers, warnings = parse_answers({"ms9": "maybe", "ms10": 1})
    assert answers == {}
    assert len(warnings) == 2


def test_multiple_choice_keeps_option_value():
    answers, warnings = parse_answers({"bl1": "c", "bl2": 3})
    assert answers == {"bl1": Choice("c")}
    assert any("bl2" in w for w in warnings)


def test_unknown_ids_are_reported_once():
    answers, warnings = parse_answers({"zz9": 3, "aa1": "x", "sg1": 4})
    assert answers == {"sg1": Likert(4)}
    assert warnings == ["Unknown question ids: aa1, zz9"]


def test_none_values_are_treated_as_unanswered():
    answers, warnings = parse_answers({"sg1": None})
    assert answers == {}
    assert warnings == []


def test_validate_answers_clean_submission(full_answers):
    assert validate_answers(full_answers) == []


def test_validate_answers_never_raises_on_garbage():
    warnings = validate_answers({"sg1": {"nested": 1}, "bl1": None, "ms9": [1]})
    assert len(warnings) == 2


def test_respondent_attributes_from_answer_map():
    assert respondent_attributes({"sex": "Male"}).sex == "male"
    assert respondent_attributes({"sex": "female"}).sex == "female"
    assert respondent_attributes({}).sex is None
    assert respondent_attributes({"sex": "prefer-not"}).sex is None
