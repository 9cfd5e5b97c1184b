"""
Tests for the version manifest models.
"""

import json

import pytest

from loomdeps.loomdeps_exceptions import FetchFailure, MalformedManifest, UnresolvableEntry
from loomdeps.version_manifest_models import (
    LibraryEntry,
    RuleAction,
    VersionDescriptor,
    load,
    parse,
    serialize,
)


class TestParse:
    """Tests for parse()."""

    def test_parse_fixture_manifest(self, manifest_bytes):
        descriptor = parse(manifest_bytes)

        assert descriptor.main_artifact_id == "1.12.2"
        assert len(descriptor.libraries) == 8
        assert descriptor.libraries[0].name == "com.mojang:patchy:1.1"

    def test_library_order_is_preserved(self, manifest_bytes):
        descriptor = parse(manifest_bytes)
        names = [library.name for library in descriptor.libraries]

        assert names.index("com.google.guava:guava:21.0") < names.index(
            "org.lwjgl.lwjgl:lwjgl:2.9.4-nightly-20150209"
        )

    def test_rules_are_parsed(self, manifest_bytes):
        descriptor = parse(manifest_bytes)
        lwjgl = descriptor.libraries[5]

        assert [rule.action for rule in lwjgl.rules] == [
            RuleAction.ALLOW,
            RuleAction.DISALLOW,
        ]
        assert lwjgl.rules[0].os is None
        assert lwjgl.rules[1].os.name == "osx"

    def test_accepts_str(self, manifest_bytes):
        assert parse(manifest_bytes.decode("utf-8")) == parse(manifest_bytes)

    def test_unknown_fields_are_ignored(self):
        descriptor = parse(
            json.dumps(
                {
                    "id": "1.13",
                    "somethingNew": {"a": 1},
                    "libraries": [
                        {"name": "a:b:1", "futureField": True, "rules": [{"action": "allow", "features": {}}]}
                    ],
                }
            )
        )

        assert descriptor.main_artifact_id == "1.13"
        assert descriptor.libraries[0].name == "a:b:1"

    def test_null_rules_means_no_rules(self):
        descriptor = parse('{"id": "x", "libraries": [{"name": "a:b:1", "rules": null}]}')
        assert descriptor.libraries[0].rules == ()

    @pytest.mark.parametrize(
        "document",
        [
            b"not json",
            b"[]",
            b'{"libraries": []}',
            b'{"id": "1.12.2"}',
            b'{"id": 12, "libraries": []}',
            b'{"id": "1.12.2", "libraries": {"name": "a:b:1"}}',
            b'{"id": "1.12.2", "libraries": [{"rules": []}]}',
            b'{"id": "1.12.2", "libraries": [{"name": "guava"}]}',
            b'{"id": "1.12.2", "libraries": [{"name": "a::1"}]}',
            b'{"id": "1.12.2", "libraries": [{"name": "a:b:1", "rules": [{"action": "maybe"}]}]}',
        ],
    )
    def test_malformed_documents(self, document):
        with pytest.raises(MalformedManifest):
            parse(document)

    def test_descriptor_is_immutable(self, manifest_bytes):
        descriptor = parse(manifest_bytes)
        with pytest.raises(Exception):
            descriptor.main_artifact_id = "other"
        assert isinstance(descriptor.libraries, tuple)

    def test_nested_mappings_are_read_only(self, manifest_bytes):
        platform = parse(manifest_bytes).libraries[6]

        with pytest.raises(TypeError):
            platform.natives["linux"] = "natives-other"
        with pytest.raises(TypeError):
            platform.downloads.classifiers["natives-osx"] = platform.downloads.classifiers["natives-linux"]
        assert platform.natives["linux"] == "natives-linux"


class TestSerialize:
    """Tests for serialize()."""

    def test_fixture_round_trip(self, manifest_bytes):
        descriptor = parse(manifest_bytes)
        assert parse(serialize(descriptor)) == descriptor

    def test_built_descriptor_round_trip(self):
        descriptor = VersionDescriptor(
            id="18w50a",
            libraries=[
                LibraryEntry(name="org.lwjgl:lwjgl:3.1.6"),
                LibraryEntry(
                    name="org.lwjgl:lwjgl-glfw:3.1.6",
                    rules=[{"action": "disallow", "os": {"name": "osx"}}],
                    natives={"linux": "natives-linux"},
                ),
            ],
        )
        assert parse(serialize(descriptor)) == descriptor

    def test_uses_manifest_field_names(self, manifest_bytes):
        data = json.loads(serialize(parse(manifest_bytes)))
        assert data["id"] == "1.12.2"
        assert "main_artifact_id" not in data


class TestLibraryEntry:
    """Tests for LibraryEntry helpers."""

    def test_coordinate_parts(self):
        entry = LibraryEntry(name="org.lwjgl:lwjgl:3.2.2:natives-linux")

        assert entry.group == "org.lwjgl"
        assert entry.artifact == "lwjgl"
        assert entry.version == "3.2.2"
        assert entry.classifier == "natives-linux"

    def test_artifact_path_from_downloads(self, manifest_bytes):
        guava = parse(manifest_bytes).libraries[3]
        assert guava.artifact_path() == "com/google/guava/guava/21.0/guava-21.0.jar"

    def test_artifact_path_derived_without_downloads(self):
        entry = LibraryEntry(name="com.google.code.gson:gson:2.8.0")
        assert entry.artifact_path() == "com/google/code/gson/gson/2.8.0/gson-2.8.0.jar"

    def test_natives_only_entry_has_no_main_artifact(self, manifest_bytes):
        platform = parse(manifest_bytes).libraries[6]

        assert platform.is_natives_only()
        assert platform.artifact_path() is None
        assert platform.natives_path("natives-linux") == (
            "org/lwjgl/lwjgl/lwjgl-platform/2.9.4-nightly-20150209/"
            "lwjgl-platform-2.9.4-nightly-20150209-natives-linux.jar"
        )
        assert platform.natives_path("natives-osx") is None

    def test_natives_path_derived_without_downloads(self):
        entry = LibraryEntry(name="net.java.jinput:jinput-platform:2.0.5", natives={"linux": "natives-linux"})

        assert not entry.is_natives_only()
        assert entry.natives_path("natives-linux") == (
            "net/java/jinput/jinput-platform/2.0.5/jinput-platform-2.0.5-natives-linux.jar"
        )

    def test_empty_downloads_is_unresolvable(self, manifest_bytes):
        text2speech = parse(manifest_bytes).libraries[7]

        assert text2speech.artifact_path() is None
        with pytest.raises(UnresolvableEntry):
            text2speech.require_artifact_path()

    def test_natives_classifier(self, manifest_bytes):
        twitch = parse(manifest_bytes).libraries[4]

        assert twitch.natives_classifier("windows", "64") == "natives-windows-64"
        assert twitch.natives_classifier("windows", "32") == "natives-windows-32"
        assert twitch.natives_classifier("osx") == "natives-osx"
        assert twitch.natives_classifier("linux") is None

    def test_no_natives(self):
        assert LibraryEntry(name="a:b:1").natives_classifier("linux") is None


class TestLoad:
    """Tests for load()."""

    def test_load_file(self, manifest_path):
        assert load(str(manifest_path)).main_artifact_id == "1.12.2"

    def test_missing_file_is_fetch_failure(self, tmp_path):
        with pytest.raises(FetchFailure):
            load(str(tmp_path / "missing.json"))
