from ministry_fit.core.question_bank import QUESTION_BANK


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "healthy"
    assert body["environment"] == "test"
    assert {"timestamp", "version"} <= set(body)


def test_detailed_health_reports_table_sizes(client):
    body = client.get("/health/detailed").json()
    assert body["tables"]["questions"] == len(QUESTION_BANK)
    assert body["tables"]["ministries"] == 27


def test_list_questions(client):
    resp = client.get("/assessments/ministry-fit/questions")
    assert resp.status_code == 200
    assert len(resp.json()) == len(QUESTION_BANK)
    disc = client.get("/assessments/ministry-fit/questions", params={"section": 3}).json()
    assert len(disc) == 16
    assert all(q["kind"] == "likert" for q in disc)


def test_list_questions_unknown_section(client):
    resp = client.get("/assessments/ministry-fit/questions", params={"section": 42})
    assert resp.status_code == 400


def test_score_submission(client):
    resp = client.post("/assessments/ministry-fit/score", json={"answers": {"sg27": 5, "ms9": "no"}})
    assert resp.status_code == 200
    body = resp.json()
    assert body["gifts"][0]["gift"] == "hospitality"
    assert body["style"]["primary"] == "D"
    assert body["ministries"][0]["ministry_id"] == "greeters"
    assert body["warnings"] == []


def test_score_submission_with_sex_field(client):
    resp = client.post("/assessments/ministry-fit/score", json={"answers": {}, "sex": "male"})
    assert resp.status_code == 200
    body = resp.json()
    assert [e["ministry_id"] for e in body["excluded_ministries"]] == ["nursery"]
    assert "nursery" not in {m["ministry_id"] for m in body["ministries"]}


def test_score_submission_reports_bad_values(client):
    resp = client.post("/assessments/ministry-fit/score", json={"answers": {"sg1": 9}})
    assert resp.status_code == 200
    assert len(resp.json()["warnings"]) == 1


def test_score_rejects_non_mapping_answers(client):
    resp = client.post("/assessments/ministry-fit/score", json={"answers": [1, 2, 3]})
    assert resp.status_code == 422


def test_report(client, full_answers):
    resp = client.post(
        "/assessments/ministry-fit/report",
        json={"answers": full_answers, "respondent_name": "Jordan"},
    )
    assert resp.status_code == 200
    report = resp.json()["report"]
    assert "Participant: Jordan" in report
    assert "Top Matches:" in report


def test_score_submission_with_nested_value_warns(client):
    resp = client.post(
        "/assessments/ministry-fit/score",
        json={"answers": {"sg27": 5, "sg1": {"nested": 1}}},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["gifts"][0]["gift"] == "hospitality"
    assert len(body["warnings"]) == 1
    assert body["warnings"][0].startswith("sg1:")


def test_score_submission_with_list_value_warns(client):
    resp = client.post("/assessments/ministry-fit/score", json={"answers": {"av2": ["9am", "11am"]}})
    assert resp.status_code == 200
    assert len(resp.json()["warnings"]) == 1


def test_report_pdf(client, full_answers):
    resp = client.post(
        "/assessments/ministry-fit/report/pdf",
        json={"answers": full_answers, "respondent_name": "Jordan Lee"},
    )
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/pdf"
    assert "ministry_assessment_jordan_lee.pdf" in resp.headers["content-disposition"]
    assert resp.content.startswith(b"%PDF")
