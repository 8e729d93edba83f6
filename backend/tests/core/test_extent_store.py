"""
Tests for core.persistence.extent_store - flat dump/load with recovery
"""
import json
import logging

import pytest
from pydantic import BaseModel, Field

from core.engine.extent import ExtentMember
from core.ontology.base import BaseEntity
from core.persistence import ExtentStore


class CrateRecord(BaseModel):
    code: int = Field(..., gt=0)
    label: str


class Crate(ExtentMember, BaseEntity):
    __id_attribute__ = "code"
    __extent_unique__ = "code"
    __record_schema__ = CrateRecord

    def __init__(self, code, label, registry=None):
        self.code = code
        self.label = label
        self._register(registry)

    def to_record(self):
        return CrateRecord(code=self.code, label=self.label)

    @classmethod
    def from_record(cls, record, registry=None):
        crate = cls.__new__(cls)
        crate.code = record.code
        crate.label = record.label
        crate._bind(registry)
        return crate


class Unpersisted(ExtentMember, BaseEntity):
    pass


@pytest.fixture
def store(registry):
    return ExtentStore(registry)


@pytest.fixture
def crates(registry):
    return [Crate(1, "apples", registry=registry), Crate(2, "pears", registry=registry)]


class TestSave:
    def test_writes_every_record(self, store, crates, tmp_path):
        path = tmp_path / "crates.json"
        assert store.save(Crate, path) == 2
        data = json.loads(path.read_text())
        assert data == [{"code": 1, "label": "apples"}, {"code": 2, "label": "pears"}]

    def test_creates_parent_directories(self, store, crates, tmp_path):
        path = tmp_path / "nested" / "dir" / "crates.json"
        store.save(Crate, path)
        assert path.exists()

    def test_empty_extent(self, store, tmp_path):
        path = tmp_path / "crates.json"
        assert store.save(Crate, path) == 0
        assert json.loads(path.read_text()) == []

    def test_class_without_schema_rejected(self, store, tmp_path):
        with pytest.raises(TypeError):
            store.save(Unpersisted, tmp_path / "x.json")


class TestLoad:
    def test_round_trip(self, store, registry, crates, tmp_path):
        path = tmp_path / "crates.json"
        store.save(Crate, path)
        registry.clear(Crate)

        assert store.load(Crate, path) == 2
        loaded = registry.extent(Crate)
        assert [c.code for c in loaded] == [1, 2]
        assert [c.label for c in loaded] == ["apples", "pears"]
        assert all(c not in crates for c in loaded)

    def test_load_replaces_current_extent(self, store, registry, crates, tmp_path):
        path = tmp_path / "crates.json"
        store.save(Crate, path)
        Crate(3, "plums", registry=registry)

        store.load(Crate, path)
        assert [c.code for c in registry.extent(Crate)] == [1, 2]

    def test_missing_file_leaves_extent(self, store, registry, crates, tmp_path):
        assert store.load(Crate, tmp_path / "absent.json") == 2
        assert registry.extent(Crate) == tuple(crates)

    def test_corrupt_json_clears_extent(self, store, registry, crates, tmp_path, caplog):
        path = tmp_path / "crates.json"
        path.write_text("{not json")

        with caplog.at_level(logging.WARNING):
            assert store.load(Crate, path) == 0

        assert registry.extent(Crate) == ()
        assert "clearing extent" in caplog.text

    def test_invalid_record_clears_extent(self, store, registry, crates, tmp_path):
        path = tmp_path / "crates.json"
        path.write_text(json.dumps([{"code": -4, "label": "bad"}]))

        assert store.load(Crate, path) == 0
        assert registry.extent(Crate) == ()

    def test_wrong_shape_clears_extent(self, store, registry, crates, tmp_path):
        path = tmp_path / "crates.json"
        path.write_text(json.dumps({"code": 1, "label": "not a list"}))

        assert store.load(Crate, path) == 0
        assert registry.extent(Crate) == ()

    def test_duplicate_unique_key_clears_extent(self, store, registry, crates, tmp_path):
        path = tmp_path / "crates.json"
        path.write_text(json.dumps([
            {"code": 1, "label": "a"},
            {"code": 1, "label": "b"},
        ]))

        assert store.load(Crate, path) == 0
        assert registry.extent(Crate) == ()
