"""Shared test fixtures for compares."""

from __future__ import annotations

from pathlib import Path

import pytest

from compares import JsonComparer, YamlComparer


@pytest.fixture
def json_comparer() -> JsonComparer:
    return JsonComparer()


@pytest.fixture
def yaml_comparer() -> YamlComparer:
    return YamlComparer()


@pytest.fixture(params=["json", "yaml"])
def comparer(request):
    """Each comparer in turn, for behavior both encodings share."""
    return JsonComparer() if request.param == "json" else YamlComparer()


@pytest.fixture
def doc_dir(tmp_path: Path) -> Path:
    """Create a directory of small JSON and YAML documents.

    before.json/after.json differ by one new, one deleted and one changed key.
    same.json is a byte copy of before.json.
    """
    (tmp_path / "before.json").write_bytes(b'{"name": "web01", "port": 22, "os": "linux"}')
    (tmp_path / "same.json").write_bytes(b'{"name": "web01", "port": 22, "os": "linux"}')
    (tmp_path / "after.json").write_bytes(b'{"name": "web01", "port": 2222, "owner": "ops"}')
    (tmp_path / "broken.json").write_bytes(b'{"name": ')

    (tmp_path / "before.yaml").write_bytes(b"name: web01\nport: 22\nos: linux\n")
    (tmp_path / "after.yml").write_bytes(b"name: web01\nport: 2222\nowner: ops\n")
    (tmp_path / "notes.txt").write_bytes(b"name: web01\n")
    return tmp_path
