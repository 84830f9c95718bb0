"""
Testy CLI ddk (solve / parse / check) oraz konfiguracji.
"""

import json

import pytest

from ddk import _config
from ddk.cli import build_parser, main


@pytest.fixture
def syllogism_file(tmp_path):
    path = tmp_path / "sylogizm.txt"
    path.write_text(
        "(m ∧ ¬b) → j\n(f ∨ s) → m\nb → t\nf → ¬t\nf\n∴ j\n",
        encoding="utf-8",
    )
    return path


class TestSolve:

    def test_trace_and_verdict(self, syllogism_file, capsys):
        main(["solve", str(syllogism_file)])
        out = capsys.readouterr().out

        assert "∴ j" in out
        assert "=> runda 1" in out
        assert "[SUBSTITUTE]" in out
        assert "[EVALUATE]" in out
        assert "f = TRUE" in out
        assert "t = FALSE" in out
        assert "UDOWODNIONO" in out

    def test_no_trace(self, syllogism_file, capsys):
        main(["solve", str(syllogism_file), "--no-trace"])
        out = capsys.readouterr().out
        assert "=> runda" not in out
        assert "UDOWODNIONO" in out

    def test_inline_premises(self, capsys):
        main(["solve", "-p", "f > !t", "-p", "f", "-c", "t"])
        out = capsys.readouterr().out
        assert "FAŁSZ" in out

    def test_undetermined(self, capsys):
        main(["solve", "-p", "(f | s) > m", "-c", "m"])
        assert "NIEROZSTRZYGNIĘTE" in capsys.readouterr().out

    def test_contradiction_exit_code(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["solve", "-p", "p", "-p", "!p"])
        assert exc.value.code == 2
        assert "sprzeczne" in capsys.readouterr().out

    def test_syntax_error_aborts(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["solve", "-p", "p", "-p", "P > q"])
        assert exc.value.code == 1
        assert "E_INVALID_CHARACTER" in capsys.readouterr().out

    def test_skip_invalid(self, capsys):
        main(["solve", "-p", "p", "-p", "P > q", "-p", "p > r", "-c", "r", "--skip-invalid"])
        out = capsys.readouterr().out
        assert "Pominięto 1" in out
        assert "UDOWODNIONO" in out

    def test_skip_from_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("DDK_ON_SYNTAX_ERROR", "skip")
        main(["solve", "-p", "p", "-p", "(q", "-c", "p"])
        assert "UDOWODNIONO" in capsys.readouterr().out

    def test_missing_file(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["solve", str(tmp_path / "brak.txt")])
        assert exc.value.code == 1

    def test_no_premises(self):
        with pytest.raises(SystemExit) as exc:
            main(["solve"])
        assert exc.value.code == 1

    def test_skip_invalid_past_error_limit(self, capsys):
        argv = ["solve", "-p", "q"]
        for _ in range(25):
            argv += ["-p", "A"]
        argv += ["-p", "f", "-p", "f > !t", "-c", "t", "--skip-invalid", "--no-trace"]

        main(argv)

        out = capsys.readouterr().out
        assert "Pominięto 25" in out
        assert "Przesłanki: 3" in out
        assert "nie wypisano 5" in out
        assert "Wniosek: t  FAŁSZ" in out

    def test_setup_fold_shown_in_trace(self, capsys):
        main(["solve", "-p", "!!a", "-c", "a"])
        out = capsys.readouterr().out
        assert "=> przygotowanie" in out
        assert "rundy: 1" in out
        assert "UDOWODNIONO" in out


class TestParseCommand:

    def test_canonical(self, capsys):
        main(["parse", "(m & b) > j"])
        assert "(m ∧ b) → j" in capsys.readouterr().out

    def test_tree(self, capsys):
        main(["parse", "a ∧ b ∨ (c → d)", "--tree"])
        out = capsys.readouterr().out
        assert "5 węzłów" in out
        assert "Subexpression" in out
        assert "IMPLIES" in out

    def test_error(self, capsys):
        with pytest.raises(SystemExit):
            main(["parse", "a ∧ 1"])
        out = capsys.readouterr().out
        assert "E_INVALID_CHARACTER" in out
        assert "^" in out


class TestCheckCommand:

    def test_valid(self, syllogism_file, capsys):
        main(["check", str(syllogism_file)])
        assert "OK" in capsys.readouterr().out

    def test_invalid_json_output(self, tmp_path, capsys):
        path = tmp_path / "zly.json"
        path.write_text(json.dumps({"premises": ["p", "p >"]}), encoding="utf-8")

        with pytest.raises(SystemExit) as exc:
            main(["check", str(path), "--json-output"])

        assert exc.value.code == 1
        out = capsys.readouterr().out
        payload = json.loads(out[out.index("{\n"):])
        assert payload["is_valid"] is False
        assert payload["errors"][0]["code"] == "E_MISSING_OPERAND"
        assert payload["errors"][0]["path"] == "/premises/1"


class TestConfig:

    def test_defaults(self, monkeypatch):
        for name in ("DDK_CONSOLE_WIDTH", "DDK_LOG_LEVEL", "DDK_ON_SYNTAX_ERROR"):
            monkeypatch.delenv(name, raising=False)
        settings = _config.get_settings()
        assert settings.console_width == 200
        assert settings.log_level == "WARNING"
        assert settings.on_syntax_error == "abort"

    def test_invalid_on_syntax_error(self, monkeypatch):
        monkeypatch.setenv("DDK_ON_SYNTAX_ERROR", "ignore")
        with pytest.raises(ValueError):
            _config.get_settings()

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            build_parser().parse_args(["--version"])
        assert exc.value.code == 0
        assert "ddk 0.1.0" in capsys.readouterr().out

    @pytest.mark.parametrize("name,value", [
        ("DDK_CONSOLE_WIDTH", "abc"),
        ("DDK_CONSOLE_WIDTH", "0"),
        ("DDK_LOG_LEVEL", "głośno"),
    ])
    def test_malformed_variable_exits_cleanly(self, monkeypatch, capsys, name, value):
        monkeypatch.setenv(name, value)
        with pytest.raises(ValueError):
            _config.get_settings()

        with pytest.raises(SystemExit) as exc:
            main(["parse", "p"])

        assert exc.value.code == 1
        out = capsys.readouterr().out
        assert "Błąd konfiguracji" in out
        assert name in out

    def test_console_survives_bad_width(self, monkeypatch):
        monkeypatch.setenv("DDK_CONSOLE_WIDTH", "szeroko")
        assert _config.get_console().width == _config.DEFAULT_CONSOLE_WIDTH
