"""
Testy solver/loader.py i validator/.
"""

import json

import pytest

from logic import ErrorCode
from solver import PremiseSet, load_premises, load_premises_json, load_premises_text
from validator import MAX_ERRORS, PremiseValidator


class TestLoadJson:

    def test_full_file(self, tmp_path):
        path = tmp_path / "case.json"
        path.write_text(json.dumps({
            "case_id": "sylogizm-01",
            "premises": ["f → ¬t", "f"],
            "conclusion": "t",
        }, ensure_ascii=False), encoding="utf-8")

        result = load_premises_json(path)

        assert result == PremiseSet("sylogizm-01", ["f → ¬t", "f"], "t")

    def test_defaults(self, tmp_path):
        path = tmp_path / "bez_wniosku.json"
        path.write_text('{"premises": ["p"]}', encoding="utf-8")

        result = load_premises(path)

        assert result.case_id == "bez_wniosku"
        assert result.conclusion is None

    @pytest.mark.parametrize("content", [
        "[1, 2]",
        '{"premises": "p"}',
        '{"premises": ["p", 3]}',
        '{"premises": ["p"], "conclusion": 1}',
        "{nie json",
    ])
    def test_malformed(self, tmp_path, content):
        path = tmp_path / "zly.json"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(ValueError):
            load_premises_json(path)


class TestLoadText:

    def test_comments_blank_lines_and_conclusion(self, tmp_path):
        path = tmp_path / "sylogizm.txt"
        path.write_text(
            "# sylogizm\n"
            "(m ∧ ¬b) → j\n"
            "\n"
            "  f  \n"
            "∴ j\n",
            encoding="utf-8",
        )

        result = load_premises(path)

        assert result.case_id == "sylogizm"
        assert result.premises == ["(m ∧ ¬b) → j", "f"]
        assert result.conclusion == "j"

    def test_ascii_conclusion_prefix(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_text("p\n:. p\n", encoding="utf-8")
        assert load_premises_text(path).conclusion == "p"

    def test_two_conclusions(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_text("p\n∴ p\n∴ q\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_premises_text(path)


class TestPremiseValidator:

    def test_valid(self):
        report = PremiseValidator().validate(["f > !t", "f"], conclusion="t")
        assert report.is_valid
        assert report.errors == []
        assert [str(p) for p in report.parsed] == ["f → ¬t", "f"]
        assert report.sources == ["f > !t", "f"]

    def test_errors_carry_path_and_position(self):
        report = PremiseValidator().validate(["p", "p → Q", "(a"])

        assert not report.is_valid
        assert [e.path for e in report.errors] == ["/premises/1", "/premises/2"]
        assert report.errors[0].code == ErrorCode.INVALID_CHARACTER
        assert report.errors[0].details == {"formula": "p → Q", "position": 4, "character": "Q"}
        assert report.errors[1].code == ErrorCode.UNBALANCED_OPEN
        assert report.errors[0].expected_fix
        assert [str(p) for p in report.parsed] == ["p"]

    def test_invalid_conclusion(self):
        report = PremiseValidator().validate(["p"], conclusion="p ∧")
        assert not report.is_valid
        assert report.errors[0].path == "/conclusion"
        assert report.errors[0].code == ErrorCode.MISSING_OPERAND

    def test_duplicate_warning(self):
        report = PremiseValidator().validate(["a & b", "a ∧ b"])
        assert report.is_valid
        assert len(report.warnings) == 1
        assert "Powtórzona" in report.warnings[0]

    def test_conclusion_coverage_warning(self):
        report = PremiseValidator().validate(["a"], conclusion="a ∧ z")
        assert report.is_valid
        assert any("z" in w for w in report.warnings)

    def test_error_limit_keeps_parsing_valid_premises(self):
        premises = ["q"] + ["A"] * (MAX_ERRORS + 5) + ["f", "f > !t"]
        report = PremiseValidator().validate(premises, conclusion="t")

        assert len(report.errors) == MAX_ERRORS
        assert report.errors[-1].path == f"/premises/{MAX_ERRORS}"
        assert [str(p) for p in report.parsed] == ["q", "f", "f → ¬t"]
        assert report.sources == ["q", "f", "f > !t"]
        assert any("nie wypisano 5" in w for w in report.warnings)
