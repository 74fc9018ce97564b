"""Unit tests for naming strategies."""

import re

import pytest

from uploadkit.config import MappingConfig
from uploadkit.core.mapping import PropertyMapping
from uploadkit.core.naming import (
    DatePathNamer,
    DirectoryPrefixNamer,
    NamerNotFoundError,
    OrignameNamer,
    PropertyDirectoryNamer,
    UniqidNamer,
    load_directory_namer,
    load_namer,
)
from tests.dummy import DummyEntity


@pytest.fixture
def mapping():
    return PropertyMapping(
        name="dummy_file",
        file_property="file",
        file_name_property="file_name",
        config=MappingConfig(upload_destination="/var/uploads"),
    )


@pytest.fixture
def owner(make_uploaded_file):
    return DummyEntity(file=make_uploaded_file("holiday photo.jpeg"), owner_id=7)


class TestNamers:
    def test_uniqid_namer_keeps_extension(self, owner, mapping):
        name = UniqidNamer().name(owner, mapping)

        assert re.fullmatch(r"[0-9a-f]{32}\.jpeg", name)

    def test_uniqid_namer_is_unique(self, owner, mapping):
        namer = UniqidNamer()

        assert namer.name(owner, mapping) != namer.name(owner, mapping)

    def test_origname_namer(self, owner, mapping):
        name = OrignameNamer().name(owner, mapping)

        assert re.fullmatch(r"[0-9a-f]{32}_holiday photo\.jpeg", name)

    def test_date_path_namer_has_sub_directories(self, owner, mapping):
        name = DatePathNamer().name(owner, mapping)

        assert re.fullmatch(r"\d{4}/\d{2}/\d{2}/[0-9a-f]{32}\.jpeg", name)

    def test_namer_requires_pending_upload(self, mapping):
        with pytest.raises(ValueError):
            UniqidNamer().name(DummyEntity(), mapping)

    def test_property_directory_namer(self, owner, mapping):
        assert PropertyDirectoryNamer("owner_id").directory_name(owner, mapping) == "7"
        assert PropertyDirectoryNamer("missing").directory_name(owner, mapping) == ""

    def test_property_directory_namer_requires_property(self):
        with pytest.raises(ValueError):
            PropertyDirectoryNamer("")

    def test_directory_prefix_with_original_name(self, owner, mapping):
        namer = DirectoryPrefixNamer(PropertyDirectoryNamer("owner_id"))

        assert namer.name(owner, mapping) == "7/holiday photo.jpeg"

    def test_directory_prefix_with_namer(self, owner, mapping):
        namer = DirectoryPrefixNamer(PropertyDirectoryNamer("owner_id"), UniqidNamer())

        assert re.fullmatch(r"7/[0-9a-f]{32}\.jpeg", namer.name(owner, mapping))

    def test_directory_prefix_skips_empty_directory(self, owner, mapping):
        namer = DirectoryPrefixNamer(PropertyDirectoryNamer("missing"))

        assert namer.name(owner, mapping) == "holiday photo.jpeg"


class TestNamerLookup:
    @pytest.mark.parametrize(
        "ref,expected",
        [
            ("uniqid", UniqidNamer),
            ("origname", OrignameNamer),
            ("date_path", DatePathNamer),
            ("uploadkit.core.naming.namers:UniqidNamer", UniqidNamer),
        ],
    )
    def test_load_namer(self, ref, expected):
        assert isinstance(load_namer(ref), expected)

    @pytest.mark.parametrize(
        "ref",
        [
            "unknown",
            "uploadkit.core.naming.namers:Missing",
            "not_a_module_at_all:Namer",
            "uploadkit.config:MappingConfig",
        ],
    )
    def test_load_namer_errors(self, ref):
        with pytest.raises(NamerNotFoundError):
            load_namer(ref)

    def test_load_directory_namer(self):
        namer = load_directory_namer("property:owner_id")

        assert isinstance(namer, PropertyDirectoryNamer)
        assert namer.property_name == "owner_id"

    def test_load_directory_namer_rejects_file_namer(self):
        with pytest.raises(NamerNotFoundError):
            load_directory_namer("uploadkit.core.naming.namers:UniqidNamer")
