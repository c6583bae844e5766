import io
import json

import pytest

from skinplan.cli import main


SURVEY = {
    "skinTypes": ["Dry", "Sensitive"],
    "concerns": ["Lack of Hydration", "Rosacea"],
    "allergens": ["Lanolin"],
    "preferences": ["Fragrance-free", "Cruelty-Free"],
    "lifestyle": {
        "sleepHours": "Less than 6",
        "stressLevel": "Moderate",
        "exercise": "3-4x/week",
        "skinCareTime": "10-20 min",
    },
}


@pytest.fixture
def survey_file(tmp_path):
    path = tmp_path / "survey.json"
    path.write_text(json.dumps(SURVEY), encoding="utf-8")
    return path


def test_prints_plan(survey_file, capsys):
    assert main([str(survey_file)]) == 0
    plan = json.loads(capsys.readouterr().out)
    assert plan["routineType"] == "Gentle Barrier-Repair Routine"
    assert plan["priorityConcerns"] == ["Lack of Hydration", "Rosacea"]
    assert plan["avoidIngredients"] == ["Lanolin", "Fragrance", "Essential Oils"]
    assert plan["recommendedProducts"][-1]["category"] == "SPF"


def test_prints_profile(survey_file, capsys):
    assert main([str(survey_file), "--profile"]) == 0
    profile = json.loads(capsys.readouterr().out)
    assert profile["skinType"] == "Dry"
    assert profile["preferences"] == {"crueltyFree": True, "vegan": False}
    assert "crueltyFree" not in profile


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(SURVEY)))
    assert main([]) == 0
    assert json.loads(capsys.readouterr().out)["routineType"]


def test_invalid_survey_exit_code(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"skinTypes": []}), encoding="utf-8")
    assert main([str(path)]) == 2
    assert capsys.readouterr().out == ""


def test_unreadable_file(tmp_path):
    assert main([str(tmp_path / "missing.json")]) == 1


def test_non_utf8_file(tmp_path, capsys):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"skinTypes": ["Oily\xff"]}')
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == ""
