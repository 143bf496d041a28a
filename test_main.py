"""
Tests for the command-line entry point.
"""

import pytest

import main


@pytest.fixture
def inputs(tmp_path):
    lattice = tmp_path / "lattice.txt"
    lattice.write_text("2\nA\nBCDEFG\n")
    words = tmp_path / "words.txt"
    words.write_text("BC\nAB\nBD\nAB\nGA\n")
    return str(lattice), str(words)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(main.VERBOSE_ENV, raising=False)
    monkeypatch.delenv(main.DEDUPLICATE_ENV, raising=False)


class TestMain:
    """Test output, configuration and exit status."""

    def test_prints_sorted_words(self, inputs, capsys):
        assert main.main(list(inputs)) == 0
        captured = capsys.readouterr()
        assert captured.out.splitlines() == ["AB", "AB", "BC", "GA"]
        assert captured.err == ""

    def test_deduplicate_from_env(self, inputs, capsys, monkeypatch):
        monkeypatch.setenv(main.DEDUPLICATE_ENV, "true")
        assert main.main(list(inputs)) == 0
        assert capsys.readouterr().out.splitlines() == ["AB", "BC", "GA"]

    def test_verbose_goes_to_stderr(self, inputs, capsys, monkeypatch):
        monkeypatch.setenv(main.VERBOSE_ENV, "1")
        assert main.main(list(inputs)) == 0
        captured = capsys.readouterr()
        assert captured.out.splitlines() == ["AB", "AB", "BC", "GA"]
        assert "Dictionary loaded: 5 words" in captured.err
        assert "Rings: 2" in captured.err

    def test_empty_dictionary(self, inputs, capsys, tmp_path):
        empty = tmp_path / "empty.txt"
        empty.write_text("")
        assert main.main([inputs[0], str(empty)]) == 0
        assert capsys.readouterr().out == ""

    def test_empty_lattice_file(self, inputs, capsys, tmp_path):
        empty = tmp_path / "empty.txt"
        empty.write_text("")
        assert main.main([str(empty), inputs[1]]) == 0
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_verbose_edge_count(self, inputs, capsys, monkeypatch):
        monkeypatch.setenv(main.VERBOSE_ENV, "1")
        main.main(list(inputs))
        assert "Edges: 12" in capsys.readouterr().err

    def test_missing_lattice_file(self, inputs, capsys, tmp_path):
        missing = str(tmp_path / "nope.txt")
        assert main.main([missing, inputs[1]]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert f"Lattice file not found: {missing}" in captured.err

    def test_missing_dictionary_file(self, inputs, capsys, tmp_path):
        missing = str(tmp_path / "nope.txt")
        assert main.main([inputs[0], missing]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert f"Dictionary file not found: {missing}" in captured.err

    def test_malformed_lattice(self, inputs, capsys, tmp_path):
        bad = tmp_path / "bad.txt"
        bad.write_text("2\nA\nBCDE\n")
        assert main.main([str(bad), inputs[1]]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Ring 1 must have 6 symbols, got 4" in captured.err

    def test_requires_two_paths(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main.main(["only-one.txt"])
        assert exc.value.code == 2


class TestEnvFlag:
    """Test boolean environment parsing."""

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_truthy(self, monkeypatch, value):
        monkeypatch.setenv(main.VERBOSE_ENV, value)
        assert main.env_flag(main.VERBOSE_ENV)

    @pytest.mark.parametrize("value", ["", "0", "false", "no"])
    def test_falsy(self, monkeypatch, value):
        monkeypatch.setenv(main.VERBOSE_ENV, value)
        assert not main.env_flag(main.VERBOSE_ENV)

    def test_unset(self):
        assert not main.env_flag(main.VERBOSE_ENV)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
