from __future__ import annotations

import json

import pytest

import cli


def test_cli_build_writes_site(write_adopter, make_adopter, tmp_path, capsys):
    write_adopter("acme.yaml", make_adopter())
    out = tmp_path / "out"
    cli.main(["--adopters-dir", str(write_adopter.dir), "build", "--output-dir", str(out)])
    assert (out / "index.html").exists()
    assert (out / "adopters.json").exists()
    printed = capsys.readouterr().out
    assert "ADOPTION TRACKER - SUMMARY" in printed
    assert "Adopters: 1" in printed


def test_cli_build_no_json(write_adopter, make_adopter, tmp_path):
    write_adopter("acme.yaml", make_adopter())
    out = tmp_path / "out"
    cli.main(["--adopters-dir", str(write_adopter.dir), "build", "--output-dir", str(out), "--no-json"])
    assert (out / "index.html").exists()
    assert not (out / "adopters.json").exists()


def test_cli_validate_ok(write_adopter, make_adopter, capsys):
    write_adopter("acme.yaml", make_adopter())
    cli.main(["--adopters-dir", str(write_adopter.dir), "validate"])
    assert "OK: 1 adopter entries" in capsys.readouterr().out


def test_cli_summary_json(write_adopter, make_adopter, capsys):
    write_adopter("acme.yaml", make_adopter(adoptionStatus="planned"))
    cli.main(["--adopters-dir", str(write_adopter.dir), "summary", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["summary"]["planned"] == 1
    assert len(payload["adopters"]) == 1


def test_cli_summary_text(write_adopter, make_adopter, capsys):
    write_adopter("acme.yaml", make_adopter(adoptionStatus="Not Planned"))
    cli.main(["--adopters-dir", str(write_adopter.dir), "summary"])
    out = capsys.readouterr().out
    assert "Not planned: 1" in out
    assert "Total: 1" in out


def test_cli_reports_errors_and_exits_nonzero(write_adopter, make_adopter, tmp_path, capsys):
    write_adopter("acme.yaml", make_adopter(adoptionStatus="eventually"))
    out = tmp_path / "out"
    with pytest.raises(SystemExit) as exc:
        cli.main(["--adopters-dir", str(write_adopter.dir), "build", "--output-dir", str(out)])
    assert exc.value.code == 1
    err = capsys.readouterr().err
    assert "ERROR: Invalid adoptionStatus" in err
    assert "acme.yaml" in err
    assert not out.exists()
