#!filepath: tests/instance/test_mod_folder.py
import json
import zipfile

from speedrun_packager.instance.mod_folder import FabricModFolder, ModDescriptor


def test_reads_fabric_mod_json(tmp_path, write_mod_jar):
    mods = tmp_path / "mods"
    write_mod_jar(mods, "seedqueue", "1.2.1+1.16.1")
    write_mod_jar(mods, "speedrunigt", "14.2+1.16.1")

    infos = FabricModFolder(mods).get_infos()

    assert {(m.id, m.version) for m in infos} == {
        ("seedqueue", "1.2.1+1.16.1"),
        ("speedrunigt", "14.2+1.16.1"),
    }


def test_missing_mods_dir(tmp_path):
    assert FabricModFolder(tmp_path / "mods").get_infos() == []


def test_non_jar_files_ignored(tmp_path, write_mod_jar):
    mods = tmp_path / "mods"
    write_mod_jar(mods, "atum", "2.0")
    (mods / "readme.txt").write_text("hi")
    (mods / "atum.jar.disabled").write_bytes(b"x")

    assert [m.id for m in FabricModFolder(mods).get_infos()] == ["atum"]


def test_broken_jars_are_skipped(tmp_path, write_mod_jar):
    mods = tmp_path / "mods"
    mods.mkdir()
    (mods / "not-a-zip.jar").write_bytes(b"garbage")

    with zipfile.ZipFile(mods / "forge-mod.jar", "w") as zf:
        zf.writestr("META-INF/mods.toml", "modId='x'")

    with zipfile.ZipFile(mods / "bad-json.jar", "w") as zf:
        zf.writestr("fabric.mod.json", "{oops")

    with zipfile.ZipFile(mods / "no-version.jar", "w") as zf:
        zf.writestr("fabric.mod.json", json.dumps({"id": "noversion"}))

    write_mod_jar(mods, "speedrunigt", "14.0")

    assert [m.id for m in FabricModFolder(mods).get_infos()] == ["speedrunigt"]


def test_lenient_json_with_raw_newlines(tmp_path):
    mods = tmp_path / "mods"
    mods.mkdir()
    with zipfile.ZipFile(mods / "multiline.jar", "w") as zf:
        zf.writestr(
            "fabric.mod.json",
            '{"id": "multi", "version": "1.0", "description": "line one\nline two"}',
        )

    assert FabricModFolder(mods).get_infos() == [ModDescriptor(id="multi", version="1.0")]


def test_numeric_version_is_coerced():
    assert ModDescriptor.model_validate({"id": "x", "version": 3}).version == "3"


def test_infos_are_cached(tmp_path, write_mod_jar):
    mods = tmp_path / "mods"
    write_mod_jar(mods, "a", "1")
    folder = FabricModFolder(mods)

    first = folder.get_infos()
    write_mod_jar(mods, "b", "1")

    assert folder.get_infos() is first
