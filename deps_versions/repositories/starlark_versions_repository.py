import os
import re
from typing import Iterable

from deps_versions.models import DependencyRecord

STRUCT_PATTERN = re.compile(
    r"^(?P<var>[A-Za-z_]\w*)\s*=\s*struct\(\s*$(?P<body>.*?)^\)\s*$",
    re.MULTILINE | re.DOTALL,
)
ENTRY_PATTERN = re.compile(r'^(?P<key>[A-Za-z_]\w*)\s*=\s*"(?P<value>[^"\\]*)"\s*,?\s*(#.*)?$')
KEY_SUFFIXES = {"_VERSION": "version", "_SHA256": "integrity_hash"}
NAME_PATTERN = re.compile(r"^[a-z][a-z0-9_]*$")
UNQUOTABLE = frozenset('"\\\n\r')


class StarlarkVersionsRepository:
    """Reads and writes the `versions = struct(...)` table loaded by Bazel.

    Each dependency is spelled as a `<NAME>_VERSION` key and an optional
    `<NAME>_SHA256` key; the lower-cased prefix becomes the record name.
    """

    def __init__(self, file_path: str, struct_name: str = "versions"):
        self.file_path: str = file_path
        self.struct_name: str = struct_name

    def find_all(self) -> list[DependencyRecord]:
        if not os.path.isfile(self.file_path):
            return []
        with open(self.file_path, "r") as f:
            content = f.read()
        try:
            return self.parse(content)
        except Exception as e:
            raise ValueError(f"Invalid deps_versions.bzl: {e}") from e

    def parse(self, content: str) -> list[DependencyRecord]:
        match = next(
            (m for m in STRUCT_PATTERN.finditer(content) if m.group("var") == self.struct_name),
            None,
        )
        if match is None:
            raise ValueError(f"no '{self.struct_name} = struct(...)' block found")

        fields: dict[str, dict[str, str]] = {}
        for line in match.group("body").splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            entry = ENTRY_PATTERN.match(line)
            if entry is None:
                raise ValueError(f"unparseable line '{line}'")
            prefix, field = self._split_key(entry.group("key"))
            values = fields.setdefault(prefix.lower(), {})
            if field in values:
                raise ValueError(f"duplicate key {entry.group('key')}")
            values[field] = entry.group("value")

        return [
            DependencyRecord(
                name=name,
                version=values.get("version", ""),
                integrity_hash=values.get("integrity_hash"),
            )
            for name, values in fields.items()
        ]

    def render(self, records: Iterable[DependencyRecord]) -> str:
        blocks = []
        for record in records:
            if not NAME_PATTERN.match(record.name):
                raise ValueError(f"Dependency name {record.name!r} cannot be used as a Starlark key")
            key = record.name.upper()
            block = [f"    # {record.name}", f'    {key}_VERSION = {self._quote(record, record.version)},']
            if record.integrity_hash is not None:
                block.append(f'    {key}_SHA256 = {self._quote(record, self._sha256_hex(record))},')
            blocks.append("\n".join(block))
        body = "\n\n".join(blocks)
        if body:
            body += "\n"
        return f"{self.struct_name} = struct(\n{body})\n"

    def save(self, records: Iterable[DependencyRecord]) -> bool:
        content = self.render(records)
        try:
            with open(self.file_path, "w") as f:
                f.write(content)
            return True
        except Exception as e:
            raise Exception(f"Error writing {self.file_path}: {e}") from e

    @staticmethod
    def _split_key(key: str) -> tuple[str, str]:
        for suffix, field in KEY_SUFFIXES.items():
            if key.endswith(suffix) and len(key) > len(suffix):
                return key[: -len(suffix)], field
        raise ValueError(f"unsupported key {key}")

    @staticmethod
    def _sha256_hex(record: DependencyRecord) -> str:
        algorithm, sep, digest = record.integrity_hash.partition(":")
        if not sep:
            return record.integrity_hash
        if algorithm != "sha256":
            raise ValueError(f"Dependency {record.name} uses unsupported hash algorithm {algorithm}")
        if not digest:
            raise ValueError(f"Dependency {record.name} has an empty sha256 digest")
        return digest

    @staticmethod
    def _quote(record: DependencyRecord, value: str) -> str:
        # values are written as plain string literals, no escapes
        if any(c in UNQUOTABLE for c in value):
            raise ValueError(f"Dependency {record.name} value {value!r} cannot be written as a Starlark string")
        return f'"{value}"'
