import logging
from pathlib import Path
from typing import override

from deps_versions.models import DependenciesFile, VersionRegistry
from deps_versions.repositories import DependencyRepository, StarlarkVersionsRepository
from deps_versions.services.service import Service
from deps_versions.utils.logging import setup_logger
from deps_versions.utils.registry_loader import STARLARK_SUFFIXES, YAML_SUFFIXES, load_registry
from deps_versions.utils.yaml_loader import dump_to_string


class VersionsExportService(Service):
    def __init__(self, source_path: str, target_path: str, dry_run: bool = False):
        self.source_path: str = source_path
        self.target_path: str = target_path
        self.dry_run: bool = dry_run
        self.logger: logging.Logger = setup_logger("VersionsExportService")

    @override
    def run(self) -> None:
        registry = load_registry(self.source_path)
        registry.validate()

        suffix = Path(self.target_path).suffix.lower()
        if suffix in STARLARK_SUFFIXES:
            self.export_starlark(registry)
        elif suffix in YAML_SUFFIXES:
            self.export_yaml(registry)
        else:
            raise Exception(f"Unsupported export target: {self.target_path}")

    def export_starlark(self, registry: VersionRegistry) -> None:
        repo = StarlarkVersionsRepository(self.target_path)
        if self.dry_run:
            print(repo.render(registry.all()), end="")
            return
        self._check_saved(repo.save(registry.all()), registry)

    def export_yaml(self, registry: VersionRegistry) -> None:
        dependencies_file = DependenciesFile(dependencies=list(registry.all()), policy=registry.policy)
        if self.dry_run:
            print(dump_to_string(DependencyRepository.to_document(dependencies_file)), end="")
            return
        repo = DependencyRepository(self.target_path)
        self._check_saved(repo.save(dependencies_file), registry)

    def _check_saved(self, saved: bool, registry: VersionRegistry) -> None:
        if saved:
            self.logger.info(f"Exported {len(registry)} dependency records to {self.target_path}")
        else:
            error_msg = f"Failed to export dependency records to {self.target_path}"
            self.logger.error(error_msg)
            raise Exception(error_msg)
