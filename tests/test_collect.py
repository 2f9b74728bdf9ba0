from __future__ import annotations

import uuid
import xml.etree.ElementTree as ET
from collections.abc import Callable

import pytest

import cmdgen
from conftest import STD2K_GUID, STD97_GUID


def test_load_container_types_reads_nested_types(
    make_ids_root: Callable[..., ET.Element],
) -> None:
    root = make_ids_root(
        f'<type name="VSStd97CmdID" kind="enum" guid="{{{STD97_GUID}}}">'
        '<value name="Open" value="222"/><value name="Exit" value="0xE5"/>'
        "</type>"
        '<type name="VsImages" kind="class"/>'
    )

    types = cmdgen.load_container_types(root, "VSConstants")

    assert [t.name for t in types] == ["VSStd97CmdID", "VsImages"]
    assert types[0].kind == "enum"
    assert types[0].values == (("Open", 222), ("Exit", 229))
    assert types[1].kind == "class"
    assert types[1].values == ()


def test_load_container_types_only_reads_named_container() -> None:
    root = ET.fromstring(
        "<identifiers>"
        '<container name="Other"><type name="OtherCmdID" kind="enum" guid="x"/></container>'
        '<container name="VSConstants"><type name="AppCmdID" kind="enum" guid="y"/></container>'
        "</identifiers>"
    )

    types = cmdgen.load_container_types(root, "VSConstants")

    assert [t.name for t in types] == ["AppCmdID"]


def test_missing_container_is_precondition_failure(
    make_ids_root: Callable[..., ET.Element],
) -> None:
    root = make_ids_root("", container="SomethingElse")

    with pytest.raises(cmdgen.PreconditionError, match="VSConstants"):
        cmdgen.load_container_types(root, "VSConstants")


def test_non_integer_value_raises_value_error(
    make_ids_root: Callable[..., ET.Element],
) -> None:
    root = make_ids_root(
        '<type name="FooCmdID" kind="enum" guid="g"><value name="Bad" value="abc"/></type>'
    )

    with pytest.raises(ValueError, match="FooCmdID.Bad"):
        cmdgen.load_container_types(root, "VSConstants")


def test_collect_keeps_only_enums_with_suffix(
    make_enum_type: Callable[..., cmdgen.EnumTypeDef],
) -> None:
    types = [
        make_enum_type("VSStd97CmdID", STD97_GUID, {"Open": 222}),
        make_enum_type("VSStd97CmdIDOld", STD2K_GUID, {"Gone": 1}),
        make_enum_type("PaneCmdID", "", {"X": 1}, kind="class"),
    ]

    records = cmdgen.collect_command_records(types, "CmdID")

    owner = uuid.UUID(STD97_GUID)
    assert list(records) == [cmdgen.CompositeKey(owner, 222)]
    record = records[cmdgen.CompositeKey(owner, 222)]
    assert record.owner_name == "VSStd97CmdID"
    assert record.value == 222
    assert record.name == ""


def test_collect_respects_custom_suffix(
    make_enum_type: Callable[..., cmdgen.EnumTypeDef],
) -> None:
    types = [
        make_enum_type("EditorCmdSet", STD97_GUID, {"A": 1}),
        make_enum_type("EditorCmdID", STD2K_GUID, {"B": 2}),
    ]

    records = cmdgen.collect_command_records(types, "CmdSet")

    assert [r.owner_name for r in records.values()] == ["EditorCmdSet"]


def test_collect_aliases_share_one_record(
    make_enum_type: Callable[..., cmdgen.EnumTypeDef],
) -> None:
    types = [make_enum_type("VSStd97CmdID", STD97_GUID, {"Open": 222, "OpenFile": 222})]

    records = cmdgen.collect_command_records(types)

    assert len(records) == 1


def test_same_value_in_different_owners_are_distinct_keys(
    make_enum_type: Callable[..., cmdgen.EnumTypeDef],
) -> None:
    types = [
        make_enum_type("VSStd97CmdID", STD97_GUID, {"Undo": 43}),
        make_enum_type("VSStd2KCmdID", STD2K_GUID, {"UNDO": 43}),
    ]

    records = cmdgen.collect_command_records(types)

    assert len(records) == 2
    assert {r.owner_name for r in records.values()} == {"VSStd97CmdID", "VSStd2KCmdID"}


def test_collect_malformed_owner_guid_raises(
    make_enum_type: Callable[..., cmdgen.EnumTypeDef],
) -> None:
    types = [make_enum_type("BrokenCmdID", "not-a-guid", {"A": 1})]

    with pytest.raises(cmdgen.OwnerIdError):
        cmdgen.collect_command_records(types)


def test_record_key_matches_composite_key() -> None:
    owner = uuid.UUID(STD97_GUID)
    record = cmdgen.CommandRecord(owner, "VSStd97CmdID", 5)

    assert record.key == cmdgen.CompositeKey(owner, 5)


def test_enums_sharing_a_guid_use_first_name_regardless_of_order(
    make_enum_type: Callable[..., cmdgen.EnumTypeDef],
) -> None:
    alpha = make_enum_type("AlphaCmdID", STD97_GUID, {"Open": 1})
    beta = make_enum_type("BetaCmdID", STD97_GUID, {"Open": 1, "Close": 2})

    forward = cmdgen.collect_command_records([alpha, beta])
    backward = cmdgen.collect_command_records([beta, alpha])

    assert forward == backward
    assert {r.owner_name for r in forward.values()} == {"AlphaCmdID"}
    assert sorted(r.value for r in forward.values()) == [1, 2]
