import argparse
import json

import pytest

from sitemeta.cli import build_parser, handle_check, handle_export, handle_regions, handle_resolve, main


def test_resolve_prints_location_json(capsys):
    handle_resolve(argparse.Namespace(page="standort", path="/standort/hamburg"))
    payload = json.loads(capsys.readouterr().out)
    assert payload["canonical"] == "https://www.zoe-solar.de/standort/hamburg"
    assert payload["og"]["url"] == payload["canonical"]
    assert payload["geo"]["placename"] == "Hamburg"


def test_resolve_defaults_path_from_page(capsys):
    handle_resolve(argparse.Namespace(page="preise", path=None))
    payload = json.loads(capsys.readouterr().out)
    assert payload["canonical"] == "https://www.zoe-solar.de/preise"


def test_resolve_rejects_unknown_page_and_missing_location_path():
    with pytest.raises(SystemExit, match="Unknown page"):
        handle_resolve(argparse.Namespace(page="nope", path=None))
    with pytest.raises(SystemExit, match="--path is required"):
        handle_resolve(argparse.Namespace(page="standort", path=None))


def test_resolve_honours_base_url_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("SITE_BASE_URL", "https://staging.zoe-solar.de")
    handle_resolve(argparse.Namespace(page="kontakt", path="/kontakt"))
    payload = json.loads(capsys.readouterr().out)
    assert payload["canonical"] == "https://staging.zoe-solar.de/kontakt"


def test_regions_lists_every_slug(capsys):
    handle_regions(argparse.Namespace())
    output = capsys.readouterr().out
    assert "muenchen" in output
    assert "frankfurt " in output
    assert "CH" in output


def test_check_passes_for_bundled_data():
    handle_check(argparse.Namespace())


def test_check_exits_with_error_on_violations(monkeypatch):
    monkeypatch.setattr("sitemeta.cli.audit_resolved", lambda resolved: ["broken"])
    with pytest.raises(SystemExit) as excinfo:
        handle_check(argparse.Namespace())
    assert excinfo.value.code == 1


def test_export_writes_one_file_per_region(tmp_path):
    handle_export(argparse.Namespace(output=tmp_path / "seo"))
    files = sorted((tmp_path / "seo" / "standort").glob("*.json"))
    assert len(files) == 22
    berlin = json.loads((tmp_path / "seo" / "standort" / "berlin.json").read_text(encoding="utf-8"))
    assert berlin["canonical"] == "https://www.zoe-solar.de/standort/berlin"


def test_export_rejects_file_as_output(tmp_path):
    target = tmp_path / "not-a-dir"
    target.write_text("x", encoding="utf-8")
    with pytest.raises(SystemExit, match="must be a directory"):
        handle_export(argparse.Namespace(output=target))


def test_parser_requires_a_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_main_dispatches_to_subcommand(capsys):
    main(["resolve", "home"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["canonical"] == "https://www.zoe-solar.de/"
