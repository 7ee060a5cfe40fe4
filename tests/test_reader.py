import pandas as pd
import pytest

from org_chart.errors import SourceReadFailure
from org_chart.reader import read_rows, rows_from_frame


class TestReadRows:
    def test_csv(self, tmp_path):
        path = tmp_path / "staff.csv"
        path.write_text("ID,Name,Manager ID,Title\n1,Alice,,CEO\n2,Bob,1,Engineer\n", encoding="utf-8")

        rows = read_rows(path)

        assert rows == [
            {"ID": "1", "Name": "Alice", "Manager ID": "", "Title": "CEO"},
            {"ID": "2", "Name": "Bob", "Manager ID": "1", "Title": "Engineer"},
        ]

    def test_ids_stay_strings(self, tmp_path):
        path = tmp_path / "staff.csv"
        path.write_text("id,name\n007,Bond\n", encoding="utf-8")
        assert read_rows(path)[0]["id"] == "007"

    def test_tsv(self, tmp_path):
        path = tmp_path / "staff.tsv"
        path.write_text("id\tname\n1\tAlice\n", encoding="utf-8")
        assert read_rows(path) == [{"id": "1", "name": "Alice"}]

    def test_excel(self, tmp_path):
        path = tmp_path / "staff.xlsx"
        pd.DataFrame({"Unique Identifier": ["1", "2"], "Name": ["Alice", "Bob"],
                      "Reports To": [None, "1"]}).to_excel(path, index=False)

        rows = read_rows(path)

        assert rows[0]["Reports To"] == ""
        assert rows[1]["Reports To"] == "1"

    def test_missing_file(self, tmp_path):
        with pytest.raises(SourceReadFailure) as info:
            read_rows(tmp_path / "nope.csv")
        assert info.value.__cause__ is not None

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "staff.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(SourceReadFailure):
            read_rows(path)


class TestRowsFromFrame:
    def test_blank_cells_become_empty_strings(self):
        df = pd.DataFrame({"id": ["1", "2"], "manager_id": [None, "1"]})
        assert rows_from_frame(df) == [
            {"id": "1", "manager_id": ""},
            {"id": "2", "manager_id": "1"},
        ]

    def test_does_not_modify_input(self):
        df = pd.DataFrame({"id": [1, 2]})
        rows_from_frame(df)
        assert df["id"].tolist() == [1, 2]
