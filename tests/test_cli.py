import json

import pytest

from org_chart import cli

CSV = """id,name,position,manager_id,organization
1,Alice,CEO,,X
2,Bob,,1,X
3,Carol,CFO,1,Y
4,Dan,,99,Y
"""


@pytest.fixture
def staff_csv(tmp_path):
    path = tmp_path / "staff.csv"
    path.write_text(CSV, encoding="utf-8")
    return path


class TestCli:
    def test_prints_tree(self, staff_csv, capsys):
        assert cli.main([str(staff_csv)]) == 0
        out = capsys.readouterr().out
        assert out.splitlines() == ["Alice (CEO)", "    Bob", "    Carol (CFO)", "Dan"]

    def test_prints_groups(self, staff_csv, capsys):
        assert cli.main([str(staff_csv), "--group-by", "organization"]) == 0
        out = capsys.readouterr().out
        assert "== X ==" in out
        assert "== Y ==" in out

    def test_json_output(self, staff_csv, tmp_path):
        out_path = tmp_path / "org.json"
        assert cli.main([str(staff_csv), "--json", str(out_path)]) == 0

        data = json.loads(out_path.read_text(encoding="utf-8"))
        assert [node["name"] for node in data] == ["Alice", "Dan"]
        assert data[0]["children"][1]["attributes"]["position"] == "CFO"

    def test_grouped_json_output(self, staff_csv, tmp_path):
        out_path = tmp_path / "org.json"
        assert cli.main([str(staff_csv), "--group-by", "organization", "--json", str(out_path)]) == 0

        data = json.loads(out_path.read_text(encoding="utf-8"))
        assert list(data) == ["X", "Y"]

    def test_split_graphs(self, staff_csv, tmp_path, monkeypatch, capsys):
        rendered = []

        def fake_render(dot, filename, fmt=None):
            rendered.append(filename)
            return f"{filename}.png"

        monkeypatch.setattr(cli, "render_digraph", fake_render)
        prefix = str(tmp_path / "chart")
        assert cli.main([str(staff_csv), "--group-by", "organization", "--graph", prefix,
                         "--split"]) == 0

        assert rendered == [f"{prefix}_X", f"{prefix}_Y"]
        assert "Org chart generated" in capsys.readouterr().out

    def test_split_graphs_with_colliding_labels(self, tmp_path, monkeypatch):
        path = tmp_path / "labs.csv"
        path.write_text("id,name,organization\n1,Ann,R&D\n2,Ben,R D\n", encoding="utf-8")
        rendered = []

        def fake_render(dot, filename, fmt=None):
            rendered.append(filename)
            return f"{filename}.png"

        monkeypatch.setattr(cli, "render_digraph", fake_render)
        prefix = str(tmp_path / "chart")
        assert cli.main([str(path), "--group-by", "organization", "--graph", prefix, "--split"]) == 0

        assert rendered == [f"{prefix}_R_D", f"{prefix}_R_D_2"]

    def test_duplicate_ids_fail(self, tmp_path, capsys):
        path = tmp_path / "dups.csv"
        path.write_text("id,name\n1,A\n1,B\n", encoding="utf-8")

        assert cli.main([str(path)]) == 1
        assert "Duplicate employee id" in capsys.readouterr().err

    def test_allow_duplicate_ids(self, tmp_path, capsys):
        path = tmp_path / "dups.csv"
        path.write_text("id,name\n1,A\n1,B\n", encoding="utf-8")

        assert cli.main([str(path), "--allow-duplicate-ids"]) == 0
        assert capsys.readouterr().out.strip() == "B"

    def test_no_usable_rows(self, tmp_path, capsys):
        path = tmp_path / "empty.csv"
        path.write_text("id,name\n", encoding="utf-8")

        assert cli.main([str(path)]) == 1
        assert "No employee data found" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert cli.main([str(tmp_path / "nope.csv")]) == 1
        assert "file not found" in capsys.readouterr().err
