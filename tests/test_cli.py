"""Tests for the psfontmap command line interface."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from psfontmap.__main__ import main, parse_request
from psfontmap.core.font_map import FontRequest
from psfontmap.exceptions import InvalidRequest


@pytest.fixture(autouse=True)
def verbatim_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PSFONTMAP_NORMALIZER", "verbatim")
    monkeypatch.delenv("PSFONTMAP_SUFFIX_TABLE", raising=False)
    monkeypatch.delenv("PSFONTMAP_REFERENCE_SIZE", raising=False)


class TestParseRequest:
    """Tests for FAMILY:PITCHES parsing."""

    def test_single_pitch(self) -> None:
        assert parse_request("FreeMono:10") == FontRequest("FreeMono", (10,))

    def test_pitch_list(self) -> None:
        assert parse_request("DejaVu Sans:12,14") == FontRequest("DejaVu Sans", (12, 14))

    @pytest.mark.parametrize("value", ["FreeMono", "FreeMono:", "FreeMono:a,b", ":10"])
    def test_invalid(self, value: str) -> None:
        with pytest.raises(InvalidRequest):
            parse_request(value)


class TestNamesCommand:
    """Tests for the names command."""

    def test_names(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["names", "NotoMono", "Times"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "NotoMono-Regular - - -",
            "Times Times-Italic Times-Bold Times-BoldItalic",
        ]

    def test_names_with_suffix_table(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        json_file = tmp_path / "suffixes.json"
        json_file.write_text(json.dumps({"Times": ["-Roman", None, None, None]}))

        assert main(["--suffix-table", str(json_file), "names", "Times"]) == 0
        assert capsys.readouterr().out.strip() == "Times-Roman - - -"


class TestMapCommand:
    """Tests for the map command."""

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that a one-word family is listed under both spellings."""
        assert main(["map", "NotoMono:10,12"]) == 0
        records = json.loads(capsys.readouterr().out)
        assert records == [
            {
                "family": family,
                "pitch": pitch,
                "styles": [],
                "name": "NotoMono-Regular",
                "size": pitch,
            }
            for pitch in (10, 12)
            for family in ("Notomono", "NotoMono")
        ]

    def test_json_output_coinciding_spellings(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["map", "Noto Mono:10"]) == 0
        records = json.loads(capsys.readouterr().out)
        assert records == [
            {
                "family": "NotoMono",
                "pitch": 10,
                "styles": [],
                "name": "NotoMono-Regular",
                "size": 10,
            }
        ]

    def test_invalid_reference_size(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--reference-size", "0", "map", "Times:10"]) == 1
        assert "Reference size must be a positive integer" in capsys.readouterr().err

    def test_tcl_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["map", "Times:10", "--format", "tcl", "--varname", "fm"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "array set fm {",
            "  {Times 10 {}} {Times 10}",
            "  {Times 10 italic} {Times-Italic 10}",
            "  {Times 10 bold} {Times-Bold 10}",
            "  {Times 10 {bold italic}} {Times-BoldItalic 10}",
            "}",
        ]

    def test_default_requests(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["map"]) == 0
        records = json.loads(capsys.readouterr().out)
        assert len(records) == 72
        assert {record["family"] for record in records} == {
            "Times",
            "Courier",
            "Helvetica",
        }

    def test_invalid_request(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["map", "Times:0"]) == 1
        assert "psfontmap: error:" in capsys.readouterr().err

    def test_normalizer_option(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that the option overrides the environment."""
        monkeypatch.setenv("PSFONTMAP_NORMALIZER", "pango")
        assert main(["map", "Times:10"]) == 1
        assert "Unknown normalizer 'pango'" in capsys.readouterr().err

        assert main(["--normalizer", "verbatim", "map", "Times:10"]) == 0
        assert len(json.loads(capsys.readouterr().out)) == 4

    def test_reference_size_option(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("psfontmap.core.spelling.VerbatimNormalizer.normalize") as normalize:
            normalize.return_value = ["Times"]
            assert main(["--reference-size", "14", "map", "Times:10"]) == 0
        normalize.assert_called_once_with("Times", 14)
