import json

from click.testing import CliRunner

from arboleda.cli import cli


def _write_csv(path, rows):
    path.write_text("\n".join(",".join(r) for r in rows) + "\n", encoding="utf-8")


def test_resolve_date_command():
    runner = CliRunner()
    r = runner.invoke(cli, ["resolve-date", "29/02/2024"])
    assert r.exit_code == 0
    assert "2024-02-29" in r.output
    r = runner.invoke(cli, ["resolve-date", "31/04/2024"])
    assert r.exit_code == 1
    assert "no date" in r.output
    r = runner.invoke(cli, ["resolve-date", "14/3", "--year", "2030"])
    assert "2030-03-14" in r.output


def test_format_range_command():
    r = CliRunner().invoke(cli, ["format-range", "2026-03-28", "2026-04-02"])
    assert r.exit_code == 0
    assert "Fechas: 28 de marzo al 2 de abril" in r.output


def test_summary_from_workbook(tmp_path):
    data = tmp_path / "planilla"
    data.mkdir()
    _write_csv(data / "rt.csv", [["Lugar", "Feb", "Mar"], ["Casa", "2026-02-10", "2026-03-05"]])
    _write_csv(data / "crt-cv.csv", [["Actividad", "Termina"], ["CRT", "2026-01-05"], ["CV", "2026-04-02"]])
    out = tmp_path / "summary.json"
    r = CliRunner().invoke(
        cli,
        ["summary", "--workbook", str(data), "--today", "2026-02-28", "--json-out", str(out)],
    )
    assert r.exit_code == 0, r.output
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert payload["retirosProximos"] == [{"fecha": "2026-03-05", "lugar": "Casa"}]
    assert payload["mesRetirosLabel"] == "Marzo 2026"
    assert [row["actividad"] for row in payload["crtCv"]] == ["CV"]
    assert payload["ces"] == [] and payload["cumpleanosProximos"] == []


def test_summary_text_format(tmp_path):
    data = tmp_path / "planilla"
    data.mkdir()
    _write_csv(data / "rt.csv", [["Lugar", "Mar"], ["Casa", "2026-03-05"]])
    r = CliRunner().invoke(
        cli, ["summary", "--workbook", str(data), "--today", "2026-03-01", "--format", "text"]
    )
    assert r.exit_code == 0, r.output
    assert "Retiros mensuales (Marzo 2026)" in r.output
    assert "Casa · jueves, 5 de marzo de 2026" in r.output


def test_summary_rejects_bad_today(tmp_path):
    r = CliRunner().invoke(cli, ["summary", "--workbook", str(tmp_path), "--today", "05/03/2026"])
    assert r.exit_code != 0


def test_summary_rejects_out_of_range_birthday_window(tmp_path):
    for value in ("-1", "1000000000"):
        r = CliRunner().invoke(
            cli,
            ["summary", "--workbook", str(tmp_path), "--birthday-window-days", value],
        )
        assert r.exit_code == 2
        assert "--birthday-window-days" in r.output
