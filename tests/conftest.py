import argparse
import sys
import xml.etree.ElementTree as ET
from collections.abc import Callable
from pathlib import Path

import pytest

GENERATOR_DIR = Path(__file__).resolve().parent.parent
if str(GENERATOR_DIR) not in sys.path:
    sys.path.insert(0, str(GENERATOR_DIR))

import cmdgen  # noqa: E402

STD97_GUID = "5efc7975-14bc-11cf-9b2b-00aa00573819"
STD2K_GUID = "1496a755-94de-11d0-8c3f-00c04fc2aae2"


@pytest.fixture
def existing_paths(tmp_path: Path) -> dict[str, Path]:
    ids_xml = tmp_path / "ids.xml"
    ids_xml.write_text('<identifiers><container name="VSConstants"/></identifiers>\n', encoding="utf-8")

    commands_xml = tmp_path / "commands.xml"
    commands_xml.write_text("<commands />\n", encoding="utf-8")

    return {
        "ids_xml": ids_xml,
        "commands_xml": commands_xml,
        "output": tmp_path / "out" / "KnownCommands.cs",
    }


@pytest.fixture
def make_args(existing_paths: dict[str, Path]) -> Callable[..., argparse.Namespace]:
    def _make_args(**overrides: object) -> argparse.Namespace:
        base_args: dict[str, object] = {
            "ids_xml": existing_paths["ids_xml"],
            "commands_xml": existing_paths["commands_xml"],
            "output": existing_paths["output"],
            "namespace": cmdgen.DEFAULT_NAMESPACE,
            "class_name": cmdgen.DEFAULT_CLASS_NAME,
            "container": cmdgen.DEFAULT_CONTAINER,
            "suffix": cmdgen.DEFAULT_SUFFIX,
            "list_owners": False,
            "info": None,
            "filter": None,
        }
        base_args.update(overrides)
        return argparse.Namespace(**base_args)

    return _make_args


@pytest.fixture
def make_ids_root() -> Callable[[str], ET.Element]:
    def _make_ids_root(inner_xml: str, container: str = "VSConstants") -> ET.Element:
        return ET.fromstring(
            f'<identifiers><container name="{container}">{inner_xml}</container></identifiers>'
        )

    return _make_ids_root


@pytest.fixture
def make_commands_root() -> Callable[[str], ET.Element]:
    def _make_commands_root(inner_xml: str) -> ET.Element:
        return ET.fromstring(f"<commands>{inner_xml}</commands>")

    return _make_commands_root


@pytest.fixture
def make_enum_type() -> Callable[..., cmdgen.EnumTypeDef]:
    def _make_enum_type(
        name: str,
        guid: str,
        values: dict[str, int],
        *,
        kind: str = "enum",
    ) -> cmdgen.EnumTypeDef:
        return cmdgen.EnumTypeDef(
            name=name, kind=kind, guid=guid, values=tuple(values.items())
        )

    return _make_enum_type
