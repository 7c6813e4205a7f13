from pathlib import Path

from pyrobase.data import paths


def test_get_definitions_path_base_path(tmp_path: Path) -> None:
    assert paths.get_definitions_path(tmp_path) == tmp_path


def test_get_definitions_path_ships_with_package() -> None:
    definitions_path = paths.get_definitions_path()
    assert definitions_path.name == "definitions"
    assert (definitions_path / "resources.json").exists()
    assert (definitions_path / "commands.json").exists()
