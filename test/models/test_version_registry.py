import threading

import pytest
from deps_versions.errors import NotFoundError, RegistryError, ValidationError
from deps_versions.models import DependencyRecord, ValidationPolicy, VersionRegistry, Violation


@pytest.fixture
def records():
    return [
        DependencyRecord(name="toolA", version="1.2.3", integrity_hash="sha256:abc"),
        DependencyRecord(name="toolB", version="9.9.9"),
    ]


@pytest.fixture
def registry(records):
    return VersionRegistry(records)


def test_get_returns_supplied_record(registry, records):
    assert registry.get("toolA") is records[0]
    assert registry.get("toolB") is records[1]
    assert registry.get("toolB").integrity_hash is None


def test_get_unknown_name(registry):
    with pytest.raises(NotFoundError, match="toolC") as exc_info:
        registry.get("toolC")
    assert exc_info.value.name == "toolC"
    assert isinstance(exc_info.value, LookupError)
    assert isinstance(exc_info.value, RegistryError)


def test_all_yields_every_record(registry, records):
    assert list(registry.all()) == records


def test_all_is_restartable(registry, records):
    first = registry.all()
    assert next(first) == records[0]
    assert list(registry.all()) == records
    assert list(first) == [records[1]]
    assert list(registry) == records


def test_all_is_lazy(registry):
    iterator = registry.all()
    assert iter(iterator) is iterator


def test_validate_succeeds(registry):
    registry.validate()


def test_registry_is_read_only_after_construction(records):
    source = list(records)
    registry = VersionRegistry(source)
    source.append(DependencyRecord(name="toolC", version="1.0.0"))

    assert len(registry) == 2
    assert "toolC" not in registry
    with pytest.raises(Exception):
        registry.get("toolA").version = "2.0.0"


def test_container_helpers(registry):
    assert len(registry) == 2
    assert "toolA" in registry
    assert "toolC" not in registry
    assert registry.names() == ["toolA", "toolB"]
    assert registry.policy == ValidationPolicy()


def test_empty_registry():
    registry = VersionRegistry([])
    assert list(registry.all()) == []
    registry.validate()
    with pytest.raises(NotFoundError):
        registry.get("anything")


def test_duplicate_names_fail_validation():
    registry = VersionRegistry([
        DependencyRecord(name="toolA", version="1.2.3"),
        DependencyRecord(name="toolA", version="2.0.0"),
    ])

    with pytest.raises(ValidationError, match="toolA") as exc_info:
        registry.validate()

    assert exc_info.value.violations == [Violation("toolA", "duplicate name (2 records)")]
    assert exc_info.value.names == ["toolA"]


def test_duplicates_are_kept_and_first_record_wins():
    first = DependencyRecord(name="toolA", version="1.2.3")
    second = DependencyRecord(name="toolA", version="2.0.0")
    registry = VersionRegistry([first, second])

    assert registry.get("toolA") is first
    assert list(registry.all()) == [first, second]
    assert len(registry) == 2


def test_validate_reports_every_violation():
    registry = VersionRegistry([
        DependencyRecord(name="toolA", version="1.0.0"),
        DependencyRecord(name="toolA", version="1.0.1"),
        DependencyRecord(name="toolB", version=""),
        DependencyRecord(name="toolC", version="1.0 beta"),
        DependencyRecord(name="", version="1.0.0"),
        DependencyRecord(name="toolD", version="1.0.0", integrity_hash=" "),
    ])

    with pytest.raises(ValidationError) as exc_info:
        registry.validate()

    assert exc_info.value.violations == [
        Violation("toolA", "duplicate name (2 records)"),
        Violation("toolB", "empty version"),
        Violation("toolC", "malformed version '1.0 beta'"),
        Violation("", "empty name"),
        Violation("toolD", "malformed integrity hash ' '"),
    ]
    assert "5 invalid dependency record(s)" in str(exc_info.value)
    assert isinstance(exc_info.value, ValueError)


def test_whitespace_only_version_is_empty():
    registry = VersionRegistry([DependencyRecord(name="toolA", version="   ")])
    with pytest.raises(ValidationError) as exc_info:
        registry.validate()
    assert exc_info.value.violations == [Violation("toolA", "empty version")]


def test_policy_requires_integrity_hash():
    policy = ValidationPolicy(require_integrity=True, integrity_exempt=("go",))
    registry = VersionRegistry([
        DependencyRecord(name="rules_go", version="0.41.0", integrity_hash="278b7ff5"),
        DependencyRecord(name="go", version="1.21.0"),
        DependencyRecord(name="rules_rust", version="0.36.2"),
    ], policy)

    with pytest.raises(ValidationError) as exc_info:
        registry.validate()

    assert exc_info.value.violations == [Violation("rules_rust", "missing integrity hash")]


def test_missing_hash_allowed_without_policy():
    registry = VersionRegistry([DependencyRecord(name="go", version="1.21.0")])
    registry.validate()


def test_concurrent_readers(registry, records):
    results = []

    def read():
        results.append((registry.get("toolA"), list(registry.all())))

    threads = [threading.Thread(target=read) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 8
    assert all(r == (records[0], records) for r in results)


def test_integrity_hash_with_inner_whitespace_is_malformed():
    registry = VersionRegistry([
        DependencyRecord(name="toolA", version="1.0.0", integrity_hash="abc def"),
        DependencyRecord(name="toolB", version="1.0.0", integrity_hash="sha256:abc\n"),
    ])

    with pytest.raises(ValidationError) as exc_info:
        registry.validate()

    assert exc_info.value.violations == [
        Violation("toolA", "malformed integrity hash 'abc def'"),
        Violation("toolB", "malformed integrity hash 'sha256:abc\\n'"),
    ]
