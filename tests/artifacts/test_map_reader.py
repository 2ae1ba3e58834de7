import json

import pytest

from uidmap.domain.uid_map import UniqueIdMapping
from uidmap.domain.unique_id import UniqueId
from uidmap.errors import AppError
from uidmap.infra.artifacts.map_reader import readMapFile
from uidmap.infra.artifacts.report_writer import writeReportJson


def test_read_yaml_map_with_validity(tmp_path):
    path = tmp_path / "map.yml"
    path.write_text(
        "\n".join([
            "validity:",
            "  source: 5",
            "  destination: 7",
            "source: [1, 2, 3]",
            "destination: [101, 102]",
        ]),
        encoding="utf-8",
    )

    uid_map = readMapFile(str(path))

    assert list(uid_map) == [
        UniqueIdMapping(UniqueId(1, 5), UniqueId(101, 7)),
        UniqueIdMapping(UniqueId(2, 5), UniqueId(102, 7)),
    ]
    assert uid_map.try_get_value(UniqueId(3, 5)) == (False, UniqueId.INVALID)


def test_read_json_map(tmp_path):
    path = tmp_path / "map.json"
    path.write_text(json.dumps({"source": [4], "destination": [40]}), encoding="utf-8")

    uid_map = readMapFile(str(path))

    assert uid_map[UniqueId(4)] == UniqueId(40)


def test_missing_file_raises_app_error(tmp_path):
    with pytest.raises(AppError) as excinfo:
        readMapFile(str(tmp_path / "absent.yml"))

    assert excinfo.value.code == "MAP_FILE_NOT_FOUND"
    assert excinfo.value.category == "input"


@pytest.mark.parametrize(
    "content,code",
    [
        ("- 1\n- 2\n", "MAP_FILE_INVALID"),
        ("source: [1]\n", "MAP_FIELD_MISSING"),
        ("source: 1\ndestination: [2]\n", "MAP_FILE_INVALID"),
        ("source: [1, x]\ndestination: [2, 3]\n", "MAP_VALUE_INVALID"),
        ("source: [-1]\ndestination: [2]\n", "MAP_VALUE_INVALID"),
        ("source: [true]\ndestination: [2]\n", "MAP_VALUE_INVALID"),
        ("validity: {source: abc}\nsource: [1]\ndestination: [2]\n", "MAP_VALUE_INVALID"),
        ("source: [1\n", "MAP_FILE_INVALID"),
        ("validity: 0\nsource: [1]\ndestination: [2]\n", "MAP_FILE_INVALID"),
        ("validity: []\nsource: [1]\ndestination: [2]\n", "MAP_FILE_INVALID"),
        ("validity: ''\nsource: [1]\ndestination: [2]\n", "MAP_FILE_INVALID"),
        ("validity: 5\nsource: [1]\ndestination: [2]\n", "MAP_FILE_INVALID"),
    ],
)
def test_invalid_map_raises_app_error(tmp_path, content, code):
    path = tmp_path / "map.yml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(AppError) as excinfo:
        readMapFile(str(path))

    assert excinfo.value.code == code
    assert excinfo.value.to_dict()["category"] == "input"


def test_write_report_json(tmp_path):
    report_path = writeReportJson({"missing": [], "note": "готово"}, str(tmp_path / "reports"), "report_x")

    with open(report_path, encoding="utf-8") as f:
        assert json.load(f) == {"missing": [], "note": "готово"}


def test_null_validity_defaults_to_zero(tmp_path):
    path = tmp_path / "map.yml"
    path.write_text("validity:\nsource: [1, 2]\ndestination: [10, 20]\n", encoding="utf-8")

    uid_map = readMapFile(str(path))

    assert {uid.validity for uid in uid_map.source} == {0}
    assert uid_map[UniqueId(2)] == UniqueId(20)


def test_all_source_uids_share_validity(tmp_path):
    path = tmp_path / "map.yml"
    path.write_text("validity: {source: 9}\nsource: [1, 2, 3]\ndestination: [10]\n", encoding="utf-8")

    uid_map = readMapFile(str(path))

    assert {uid.validity for uid in uid_map.source} == {9}
