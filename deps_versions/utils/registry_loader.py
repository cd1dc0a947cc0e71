from pathlib import Path

from deps_versions.models import VersionRegistry
from deps_versions.repositories import DependencyRepository, StarlarkVersionsRepository

YAML_SUFFIXES = (".yaml", ".yml")
STARLARK_SUFFIXES = (".bzl",)


def load_registry(file_path: str) -> VersionRegistry:
    suffix = Path(file_path).suffix.lower()
    if suffix in YAML_SUFFIXES:
        repo = DependencyRepository(file_path)
        return VersionRegistry(repo.find_all(), repo.find_policy())
    if suffix in STARLARK_SUFFIXES:
        return VersionRegistry(StarlarkVersionsRepository(file_path).find_all())
    raise ValueError(f"Unsupported versions file format: {file_path}")
