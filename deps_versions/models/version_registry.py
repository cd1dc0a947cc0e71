from collections import Counter
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from deps_versions.errors import NotFoundError, ValidationError
from deps_versions.models.dependency_record import DependencyRecord
from deps_versions.models.validation_policy import ValidationPolicy
from deps_versions.models.violation import Violation


class VersionRegistry:
    """Read-only table of dependency records for one build configuration.

    Records are kept exactly as supplied, duplicates included, so that
    validate() can report them. Lookups by name resolve to the first record
    supplied under that name.
    """

    def __init__(self, records: Iterable[DependencyRecord], policy: ValidationPolicy | None = None):
        self._records: tuple[DependencyRecord, ...] = tuple(records)
        self._policy: ValidationPolicy = policy or ValidationPolicy()
        index: dict[str, DependencyRecord] = {}
        for record in self._records:
            index.setdefault(record.name, record)
        self._index: Mapping[str, DependencyRecord] = MappingProxyType(index)

    @property
    def policy(self) -> ValidationPolicy:
        return self._policy

    def get(self, name: str) -> DependencyRecord:
        try:
            return self._index[name]
        except KeyError:
            raise NotFoundError(name) from None

    def all(self) -> Iterator[DependencyRecord]:
        yield from self._records

    def names(self) -> list[str]:
        return list(self._index)

    def validate(self) -> None:
        violations: list[Violation] = []

        counts = Counter(r.name for r in self._records)
        for name, count in counts.items():
            if count > 1:
                violations.append(Violation(name, f"duplicate name ({count} records)"))

        for record in self._records:
            violations.extend(self._check_record(record))

        if violations:
            raise ValidationError(violations)

    def _check_record(self, record: DependencyRecord) -> list[Violation]:
        found: list[Violation] = []
        if not record.name.strip():
            found.append(Violation(record.name, "empty name"))

        if not record.version.strip():
            found.append(Violation(record.name, "empty version"))
        elif any(c.isspace() for c in record.version):
            found.append(Violation(record.name, f"malformed version {record.version!r}"))

        digest = record.integrity_hash
        if digest is not None:
            if not digest.strip() or any(c.isspace() for c in digest):
                found.append(Violation(record.name, f"malformed integrity hash {digest!r}"))
        elif self._policy.requires_integrity(record.name):
            found.append(Violation(record.name, "missing integrity hash"))
        return found

    def __iter__(self) -> Iterator[DependencyRecord]:
        return self.all()

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __repr__(self) -> str:
        return f"VersionRegistry({len(self._records)} records)"
