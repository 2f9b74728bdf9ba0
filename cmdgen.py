"""Known command identifier generator.

Cross-references the host's command identifier enumerations against its live
command list and emits a C# class of typed CommandID accessors.

Usage:
    python cmdgen.py --ids-xml host_ids.xml --commands-xml host_commands.xml
"""

import os
import argparse
import re
import stat
import sys
import tempfile
import uuid
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from xml.sax.saxutils import escape
from pathlib import Path
from typing import NamedTuple

DEFAULT_OUTPUT = Path("KnownCommands.cs")
DEFAULT_NAMESPACE = "Microsoft.VisualStudio"
DEFAULT_CLASS_NAME = "KnownCommands"
DEFAULT_CONTAINER = "VSConstants"
DEFAULT_SUFFIX = "CmdID"


# ===--- CLI config contracts ---=== #


@dataclass(frozen=True)
class GenerateConfig:
    ids_xml: Path
    commands_xml: Path
    output: Path
    namespace: str
    class_name: str
    container: str
    suffix: str


@dataclass(frozen=True)
class DiscoveryConfig:
    command: str
    filter_text: str | None
    info_owner: str | None
    ids_xml: Path
    commands_xml: Path | None
    container: str
    suffix: str


VALID_ERROR_CODES = {
    "PATH_NOT_FOUND",
    "MISSING_INPUT",
    "INVALID_IDENTIFIER",
    "INVALID_SUFFIX",
    "CONFLICT_GENERATE_DISCOVERY",
    "FILTER_WITHOUT_LIST",
}
_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class ConfigError(Exception):
    def __init__(self, code: str, message: str, suggestion: str | None = None):
        if code not in VALID_ERROR_CODES:
            raise ValueError(f"Unknown config error code: {code}")
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion


class PreconditionError(RuntimeError):
    """The identifier definitions do not describe the expected host container."""


class OwnerIdError(ValueError):
    """An owner guid could not be parsed."""


def validate_identifier(name: str, flag: str, dotted: bool = False) -> str:
    parts = name.split(".") if dotted else [name]
    if all(_IDENTIFIER_RE.match(part) for part in parts):
        return name
    shape = "dotted C# identifier (e.g. My.Company.Commands)" if dotted else "C# identifier"
    raise ConfigError(
        "INVALID_IDENTIFIER",
        f"Invalid value for {flag}: {name!r}",
        f"{flag} must be a {shape}.",
    )


def validate_suffix(suffix: str) -> str:
    if suffix:
        return suffix
    raise ConfigError(
        "INVALID_SUFFIX",
        "--suffix must not be empty.",
        f"Omit --suffix to use the default ({DEFAULT_SUFFIX}).",
    )


def validate_path_exists(
    path: Path | None, flag: str, suggestion: str | None = None
) -> Path:
    if path is None:
        raise ConfigError(
            "MISSING_INPUT",
            f"{flag} is required: no path provided.",
            suggestion or f"Pass the path explicitly: {flag} /path/to/file.xml",
        )
    if path.exists():
        return path
    raise ConfigError(
        "PATH_NOT_FOUND",
        f"Path for {flag} does not exist: {path}",
        suggestion or "Provide an existing path for this flag.",
    )


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate typed CommandID constants for known host commands"
    )

    parser.add_argument("--ids-xml", type=Path, default=None)
    parser.add_argument("--commands-xml", type=Path, default=None)
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT)
    parser.add_argument("--namespace", type=str, default=DEFAULT_NAMESPACE)
    parser.add_argument("--class-name", type=str, default=DEFAULT_CLASS_NAME)
    parser.add_argument("--container", type=str, default=DEFAULT_CONTAINER)
    parser.add_argument("--suffix", type=str, default=DEFAULT_SUFFIX)

    discovery_group = parser.add_mutually_exclusive_group()
    discovery_group.add_argument("--list-owners", action="store_true", default=False)
    discovery_group.add_argument("--info", type=str, default=None)

    parser.add_argument("--filter", type=str, default=None)

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_argument_parser()
    return parser.parse_args(argv)


def validate_config(args: argparse.Namespace) -> GenerateConfig | DiscoveryConfig:
    has_discovery_command = bool(args.list_owners or args.info is not None)
    suffix = validate_suffix(args.suffix)

    if args.filter and not args.list_owners:
        raise ConfigError(
            "FILTER_WITHOUT_LIST",
            "--filter requires --list-owners.",
            "Add --list-owners or remove --filter.",
        )

    if has_discovery_command:
        if args.output != DEFAULT_OUTPUT:
            raise ConfigError(
                "CONFLICT_GENERATE_DISCOVERY",
                "--output cannot be combined with discovery flags.",
                "Choose either generate mode or one discovery command.",
            )
        ids_xml = validate_path_exists(args.ids_xml, "--ids-xml")
        commands_xml = (
            validate_path_exists(args.commands_xml, "--commands-xml")
            if args.commands_xml is not None
            else None
        )
        return DiscoveryConfig(
            command="list-owners" if args.list_owners else "info",
            filter_text=args.filter,
            info_owner=args.info,
            ids_xml=ids_xml,
            commands_xml=commands_xml,
            container=args.container,
            suffix=suffix,
        )

    ids_xml = validate_path_exists(
        args.ids_xml,
        "--ids-xml",
        "Export the host's identifier definitions and pass: --ids-xml host_ids.xml",
    )
    commands_xml = validate_path_exists(
        args.commands_xml,
        "--commands-xml",
        "Dump the host's live command list and pass: --commands-xml host_commands.xml",
    )

    return GenerateConfig(
        ids_xml=ids_xml,
        commands_xml=commands_xml,
        output=args.output,
        namespace=validate_identifier(args.namespace, "--namespace", dotted=True),
        class_name=validate_identifier(args.class_name, "--class-name"),
        container=args.container,
        suffix=suffix,
    )


def build_config(argv: list[str] | None = None) -> GenerateConfig | DiscoveryConfig:
    return validate_config(parse_args(argv))


# ===--- Data model ---=== #


class CompositeKey(NamedTuple):
    owner_id: uuid.UUID
    value: int


@dataclass
class CommandRecord:
    """One candidate command identifier.

    Created by the collector with an empty name; the resolver fills in name
    at most once per live command. Records whose name stays empty are never
    emitted.
    """

    owner_id: uuid.UUID
    owner_name: str
    value: int
    name: str = ""

    @property
    def key(self) -> CompositeKey:
        return CompositeKey(self.owner_id, self.value)


@dataclass(frozen=True)
class EnumTypeDef:
    """A nested type of the host container, as exported from its metadata.

    Attributes:
        name: Type name, e.g. "VSStd97CmdID".
        kind: "enum" for enumerations; anything else is skipped by the
            collector.
        guid: Owner guid text exactly as exported. Parsed lazily so that
            non-command types without a guid do not fail the run.
        values: (member_name, integer_value) pairs in declaration order.
    """

    name: str
    kind: str
    guid: str
    values: tuple[tuple[str, int], ...]


class LiveCommand(NamedTuple):
    name: str
    owner_guid: str
    command_id: int


# ===--- Input loading ---=== #


def _parse_int(text: str | None, context: str) -> int:
    if text is None:
        raise ValueError(f"{context}: missing integer value")
    s = text.strip().rstrip("UuLl")
    try:
        if s.lower().startswith(("0x", "-0x")):
            return int(s, 16)
        return int(s)
    except ValueError as err:
        raise ValueError(f"{context}: invalid integer {text!r}") from err


def load_container_types(root: ET.Element, container: str) -> list[EnumTypeDef]:
    """Return every nested type declared under the named container.

    Raises:
        PreconditionError: If no <container> with that name exists. This is
            the equivalent of the host integration being unavailable.
        ValueError: If a <value> element carries a non-integer value.
    """
    for node in root.iter("container"):
        if node.get("name") == container:
            break
    else:
        raise PreconditionError(
            f"Container type '{container}' not found in identifier definitions"
        )

    types: list[EnumTypeDef] = []
    for type_node in node.findall("type"):
        type_name = type_node.get("name", "")
        values: list[tuple[str, int]] = []
        for value_node in type_node.findall("value"):
            member = value_node.get("name", "")
            values.append(
                (member, _parse_int(value_node.get("value"), f"{type_name}.{member}"))
            )
        types.append(
            EnumTypeDef(
                name=type_name,
                kind=type_node.get("kind", ""),
                guid=type_node.get("guid", ""),
                values=tuple(values),
            )
        )
    return types


def load_live_commands(root: ET.Element) -> list[LiveCommand]:
    commands: list[LiveCommand] = []
    for node in root.iter("command"):
        name = node.get("name", "")
        commands.append(
            LiveCommand(
                name=name,
                owner_guid=node.get("guid", ""),
                command_id=_parse_int(node.get("id"), f"command {name!r}"),
            )
        )
    return commands


# ===--- Enumeration collector ---=== #


def parse_owner_id(text: str) -> uuid.UUID:
    """Parse owner guid text, tolerating case, braces and missing hyphens."""
    try:
        return uuid.UUID(text.strip())
    except (ValueError, AttributeError) as err:
        raise OwnerIdError(f"Malformed owner guid: {text!r}") from err


def collect_command_records(
    types: list[EnumTypeDef], suffix: str = DEFAULT_SUFFIX
) -> dict[CompositeKey, CommandRecord]:
    records: dict[CompositeKey, CommandRecord] = {}
    owner_names: dict[uuid.UUID, str] = {}
    # Enumerations sharing a guid collapse onto the alphabetically first name.
    for type_def in sorted(types, key=lambda t: t.name):
        if type_def.kind != "enum" or not type_def.name.endswith(suffix):
            continue
        owner_id = parse_owner_id(type_def.guid)
        owner_name = owner_names.setdefault(owner_id, type_def.name)
        for _member, value in type_def.values:
            key = CompositeKey(owner_id, value)
            # Aliased members share a value; the first declaration owns the key.
            if key not in records:
                records[key] = CommandRecord(owner_id, owner_name, value)
    return records


# ===--- Name resolver ---=== #


@dataclass(frozen=True)
class ResolveStats:
    """Counts from one resolution pass over the live command list.

    Attributes:
        resolved: Live commands whose key matched a record.
        unnamed: Live commands skipped for having an empty name.
        unmatched: Named live commands with no known enumeration value.
        overwritten: Matches that replaced a name set earlier in the pass.
    """

    resolved: int
    unnamed: int
    unmatched: int
    overwritten: int


def resolve_command_names(
    records: dict[CompositeKey, CommandRecord],
    commands: list[LiveCommand],
) -> ResolveStats:
    resolved = unnamed = unmatched = overwritten = 0
    for command in commands:
        if not command.name:
            unnamed += 1
            continue
        key = CompositeKey(parse_owner_id(command.owner_guid), command.command_id)
        record = records.get(key)
        if record is None:
            unmatched += 1
            continue
        if record.name:
            overwritten += 1
        record.name = command.name
        resolved += 1
    return ResolveStats(
        resolved=resolved,
        unnamed=unnamed,
        unmatched=unmatched,
        overwritten=overwritten,
    )


# ===--- Code emitter ---=== #


@dataclass(frozen=True)
class OwnerConstant:
    owner_id: uuid.UUID
    owner_name: str
    identifier: str

    @property
    def guid_text(self) -> str:
        return "{" + str(self.owner_id) + "}"


@dataclass(frozen=True)
class Accessor:
    identifier: str
    doc: str
    owner_identifier: str
    value: int


@dataclass(frozen=True)
class AccessorPlan:
    """Accessors to emit plus the records dropped as duplicates.

    Attributes:
        accessors: One entry per distinct sanitized name, in emission order.
        dropped: Named records that lost to an earlier record with the same
            sanitized name. Reported, never emitted.
    """

    accessors: tuple[Accessor, ...]
    dropped: tuple[CommandRecord, ...]


def sanitize_name(name: str) -> str:
    # Only "." is rewritten; other non-identifier characters pass through.
    return name.replace(".", "_")


def owner_identifier(owner_name: str) -> str:
    return f"guid{owner_name}"


def _named(records: dict[CompositeKey, CommandRecord]) -> list[CommandRecord]:
    return [r for r in records.values() if r.name]


def build_owner_table(
    records: dict[CompositeKey, CommandRecord],
) -> tuple[OwnerConstant, ...]:
    owners: dict[uuid.UUID, str] = {}
    for record in _named(records):
        owners.setdefault(record.owner_id, record.owner_name)
    ordered = sorted(owners.items(), key=lambda item: (item[1], str(item[0])))
    return tuple(
        OwnerConstant(owner_id=oid, owner_name=name, identifier=owner_identifier(name))
        for oid, name in ordered
    )


def plan_accessors(records: dict[CompositeKey, CommandRecord]) -> AccessorPlan:
    ordered = sorted(
        _named(records),
        key=lambda r: (r.name, r.value, r.owner_name, str(r.owner_id)),
    )
    used_names: set[str] = set()
    accessors: list[Accessor] = []
    dropped: list[CommandRecord] = []
    for record in ordered:
        identifier = sanitize_name(record.name)
        if identifier in used_names:
            dropped.append(record)
            continue
        used_names.add(identifier)
        accessors.append(
            Accessor(
                identifier=identifier,
                doc=record.name,
                owner_identifier=owner_identifier(record.owner_name),
                value=record.value,
            )
        )
    return AccessorPlan(accessors=tuple(accessors), dropped=tuple(dropped))


_BANNER: tuple[str, ...] = (
    "//------------------------------------------------------------------------------",
    "// <auto-generated>",
    "//     This code was generated by known-commands-gen.",
    "//",
    "//     Changes to this file may cause incorrect behavior and will be lost if",
    "//     the code is regenerated.",
    "// </auto-generated>",
    "//------------------------------------------------------------------------------",
)

_USINGS: tuple[str, ...] = (
    "using System;",
    "using System.ComponentModel.Design;",
)


def format_source(
    namespace: str,
    class_name: str,
    owners: tuple[OwnerConstant, ...],
    accessors: tuple[Accessor, ...],
) -> str:
    """Render the generated C# source file.

    Output format:
        <banner>

        using System;
        using System.ComponentModel.Design;

        namespace {namespace}
        {
            public static class {class_name}
            {
                private static readonly Guid guidFooCmdID = new Guid("{...}");

                /// <summary>File.Open</summary>
                public static CommandID File_Open { get { return new CommandID(guidFooCmdID, 1); } }
            }
        }

    The owner block and the accessor block are each omitted when empty.
    Lines are joined with LF and the result ends with exactly one newline, so
    identical inputs always yield identical bytes.

    Args:
        namespace: Dotted namespace for the generated class.
        class_name: Name of the static class.
        owners: Owner guid constants in declaration order.
        accessors: Command accessors in declaration order.

    Returns:
        Complete C# source string including trailing newline.
    """
    lines: list[str] = [*_BANNER, "", *_USINGS, ""]
    lines.append(f"namespace {namespace}")
    lines.append("{")
    lines.append(f"    public static class {class_name}")
    lines.append("    {")

    for owner in owners:
        lines.append(
            f"        private static readonly Guid {owner.identifier} = "
            f'new Guid("{owner.guid_text}");'
        )

    if owners and accessors:
        lines.append("")

    for index, accessor in enumerate(accessors):
        if index:
            lines.append("")
        lines.append(f"        /// <summary>{escape(accessor.doc)}</summary>")
        lines.append(
            f"        public static CommandID {accessor.identifier} "
            f"{{ get {{ return new CommandID({accessor.owner_identifier}, "
            f"{accessor.value}); }} }}"
        )

    lines.append("    }")
    lines.append("}")
    return "\n".join(lines) + "\n"


# ===--- Writer ---=== #


@dataclass(frozen=True)
class FileWriteResult:
    """Result of writing the generated file.

    Attributes:
        path: Absolute path of the written file.
        line_count: Number of newline characters in the written content.
        byte_count: Number of bytes written (UTF-8 encoded).
    """

    path: Path
    line_count: int
    byte_count: int


def _target_mode(path: Path) -> int:
    """Mode the written file should end up with.

    An existing target keeps its permission bits; a new one gets the usual
    0o666 masked by the process umask, as a plain open() would give it.
    """
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_source(path: Path, content: str) -> FileWriteResult:
    """Write content to path atomically.

    The content goes to a temporary file beside the target, which is then
    renamed over it. A failure at any point removes the temporary file and
    leaves any previous output untouched.

    Args:
        path: Destination file. Parent directories are created if absent.
        content: Complete source text.

    Returns:
        FileWriteResult for the written file.

    Raises:
        OSError: Propagated directly if the filesystem write or rename fails.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = content.encode("utf-8")
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
    )
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
    return FileWriteResult(
        path=path.resolve(),
        line_count=content.count("\n"),
        byte_count=len(data),
    )


# ===--- Discovery ---=== #


@dataclass(frozen=True)
class OwnerSummary:
    name: str
    guid_text: str
    value_count: int
    named_count: int


def gather_owner_summaries(
    records: dict[CompositeKey, CommandRecord],
) -> list[OwnerSummary]:
    by_owner: dict[uuid.UUID, list[CommandRecord]] = {}
    for record in records.values():
        by_owner.setdefault(record.owner_id, []).append(record)
    summaries = [
        OwnerSummary(
            name=group[0].owner_name,
            guid_text="{" + str(oid) + "}",
            value_count=len(group),
            named_count=sum(1 for r in group if r.name),
        )
        for oid, group in by_owner.items()
    ]
    return sorted(summaries, key=lambda s: (s.name, s.guid_text))


def filter_owners_by_text(
    summaries: list[OwnerSummary], filter_text: str
) -> list[OwnerSummary]:
    needle = filter_text.lower()
    return [s for s in summaries if needle in s.name.lower()]


def format_owners_table(summaries: list[OwnerSummary], resolved: bool) -> str:
    """Return the complete --list-owners output.

    Output format:

        2 command owners:

          VSStd2KCmdID   {1496a755-...}   412 values   388 named
          VSStd97CmdID   {5efc7975-...}   911 values   640 named

    The named column is omitted when no command registry was loaded.
    """
    lines = [f"{len(summaries)} command owners:", ""]
    name_width = max((len(s.name) for s in summaries), default=0)
    for s in summaries:
        row = f"  {s.name.ljust(name_width)}  {s.guid_text}  {s.value_count:>5} values"
        if resolved:
            row += f"  {s.named_count:>5} named"
        lines.append(row)
    lines.append("")
    return "\n".join(lines)


def format_owner_detail(
    owner: OwnerSummary, records: list[CommandRecord], resolved: bool
) -> str:
    lines = [f"{owner.name} {owner.guid_text}", ""]
    lines.append(f"  Values ({owner.value_count}):")
    for record in sorted(records, key=lambda r: r.value):
        if resolved:
            lines.append(f"    {record.value:>6}  {record.name or '-'}")
        else:
            lines.append(f"    {record.value:>6}")
    lines.append("")
    return "\n".join(lines)


def run_discovery(config: DiscoveryConfig) -> None:
    """Execute the discovery command specified in config.

    dispatch table:
      "list-owners" -> gather_owner_summaries -> [filter] -> format_owners_table
      "info"        -> gather_owner_summaries -> [None check] -> format_owner_detail

    Raises:
        SystemExit(1): When config.command == "info" and the owner is unknown.
    """
    root = ET.parse(config.ids_xml).getroot()
    records = collect_command_records(
        load_container_types(root, config.container), config.suffix
    )
    resolved = config.commands_xml is not None
    if config.commands_xml is not None:
        commands_root = ET.parse(config.commands_xml).getroot()
        resolve_command_names(records, load_live_commands(commands_root))

    summaries = gather_owner_summaries(records)

    if config.command == "list-owners":
        if config.filter_text is not None:
            summaries = filter_owners_by_text(summaries, config.filter_text)
        print(format_owners_table(summaries, resolved), end="")

    elif config.command == "info":
        assert config.info_owner is not None
        owner = next((s for s in summaries if s.name == config.info_owner), None)
        if owner is None:
            print(
                f"Error: owner '{config.info_owner}' not found in container "
                f"'{config.container}'",
                file=sys.stderr,
            )
            raise SystemExit(1)
        owned = [r for r in records.values() if r.owner_name == owner.name]
        print(format_owner_detail(owner, owned, resolved), end="")


# ===--- Pipeline ---=== #


@dataclass(frozen=True)
class GenerationResult:
    write: FileWriteResult
    owners: tuple[OwnerConstant, ...]
    plan: AccessorPlan
    stats: ResolveStats
    record_count: int


def run_generate(config: GenerateConfig) -> GenerationResult:
    """Execute the complete generation pipeline for a GenerateConfig.

    Raises:
        OSError: Input not readable or filesystem write failure.
        ET.ParseError: Malformed input XML.
        PreconditionError: Container missing from the identifier definitions.
        OwnerIdError: Malformed owner guid in either input.
        ValueError: Non-integer command value in either input.
    """
    print(f"Parsing: {config.ids_xml}")
    ids_root = ET.parse(config.ids_xml).getroot()
    types = load_container_types(ids_root, config.container)
    records = collect_command_records(types, config.suffix)
    owner_count = len({r.owner_id for r in records.values()})
    print(f"  Collected: {len(records)} values from {owner_count} owners")

    print(f"Parsing: {config.commands_xml}")
    commands_root = ET.parse(config.commands_xml).getroot()
    commands = load_live_commands(commands_root)
    stats = resolve_command_names(records, commands)
    print(f"  Resolved: {stats.resolved} of {len(commands)} live commands")

    owners = build_owner_table(records)
    plan = plan_accessors(records)
    content = format_source(config.namespace, config.class_name, owners, plan.accessors)
    write = write_source(config.output, content)
    print(f"  Written: {write.line_count} lines to {write.path}")

    result = GenerationResult(
        write=write,
        owners=owners,
        plan=plan,
        stats=stats,
        record_count=len(records),
    )
    print_generation_summary(build_generation_summary(config, result))
    return result


# ===--- Summary report ---=== #


@dataclass(frozen=True)
class GenerationSummary:
    """Immutable data for the post-generation console report.

    Attributes:
        target_label: "{namespace}.{class_name}".
        source_labels: Input file names, identifier definitions first.
        output: Written file path as string.
        owner_count: Owner constants emitted.
        accessor_count: Accessors emitted.
        record_count: Enumeration values collected.
        stats: Resolution counts.
        dropped: (name, owner_name, value) for each duplicate dropped.
    """

    target_label: str
    source_labels: tuple[str, ...]
    output: str
    owner_count: int
    accessor_count: int
    record_count: int
    stats: ResolveStats
    dropped: tuple[tuple[str, str, int], ...]


def build_generation_summary(
    config: GenerateConfig, result: GenerationResult
) -> GenerationSummary:
    return GenerationSummary(
        target_label=f"{config.namespace}.{config.class_name}",
        source_labels=(config.ids_xml.name, config.commands_xml.name),
        output=str(result.write.path),
        owner_count=len(result.owners),
        accessor_count=len(result.plan.accessors),
        record_count=result.record_count,
        stats=result.stats,
        dropped=tuple((r.name, r.owner_name, r.value) for r in result.plan.dropped),
    )


def format_generation_summary(summary: GenerationSummary) -> str:
    """Render a GenerationSummary to the multi-section console string.

    The duplicate section appears only when something was dropped. Returns a
    string with exactly one trailing newline.
    """
    lines: list[str] = []
    lines.append(f"{summary.target_label} generated:")
    lines.append("")
    lines.append(f"  Sources:    {', '.join(summary.source_labels)}")
    lines.append(f"  Output:     {summary.output}")
    lines.append("")
    lines.append(f"    {'Owners:':<13}{summary.owner_count:>6}")
    lines.append(f"    {'Accessors:':<13}{summary.accessor_count:>6}")
    lines.append(f"    {'Values:':<13}{summary.record_count:>6}")
    lines.append(f"    {'Unnamed:':<13}{summary.stats.unnamed:>6}")
    lines.append(f"    {'Unmatched:':<13}{summary.stats.unmatched:>6}")
    lines.append(f"    {'Overwritten:':<13}{summary.stats.overwritten:>6}")

    if summary.dropped:
        lines.append("")
        lines.append(f"  Duplicate names dropped ({len(summary.dropped)}):")
        for name, owner_name, value in summary.dropped:
            lines.append(f"    {name}  ({owner_name}, {value})")

    lines.append("")
    return "\n".join(lines)


def print_generation_summary(summary: GenerationSummary) -> None:
    print(format_generation_summary(summary), end="")


# ===--- Main generation ---=== #


def main():
    try:
        config = build_config()
    except ConfigError as err:
        print(f"Config error [{err.code}]: {err.message}")
        if err.suggestion:
            print(f"Hint: {err.suggestion}")
        raise SystemExit(1) from err

    try:
        if isinstance(config, DiscoveryConfig):
            run_discovery(config)
        else:
            run_generate(config)
    except (OSError, ET.ParseError) as err:
        print(f"Error: {err}")
        raise SystemExit(1) from err
    except PreconditionError as err:
        print(f"Precondition failed: {err}")
        raise SystemExit(1) from err
    except (RuntimeError, ValueError) as err:
        print(f"Internal error: {err}")
        raise SystemExit(1) from err


if __name__ == "__main__":
    main()
