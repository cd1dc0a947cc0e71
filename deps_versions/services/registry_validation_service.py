import logging
from typing import override

from deps_versions.errors import ValidationError
from deps_versions.models import VersionRegistry
from deps_versions.services.service import Service
from deps_versions.utils.logging import setup_logger
from deps_versions.utils.registry_loader import load_registry


class RegistryValidationService(Service):
    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.logger: logging.Logger = setup_logger("RegistryValidationService")

    @override
    def run(self) -> None:
        registry = self.load()
        try:
            registry.validate()
        except ValidationError as e:
            for violation in e.violations:
                self.logger.error(f"Invalid dependency record {violation}")
            raise

        for record in registry.all():
            self.logger.debug(f"{record.name} {record.version} ({record.integrity_hash or 'no integrity hash'})")
        self.logger.info(f"{len(registry)} dependency records in {self.file_path} are valid")

    def load(self) -> VersionRegistry:
        registry = load_registry(self.file_path)
        if not len(registry):
            self.logger.warning(f"No dependency records found in {self.file_path}")
        return registry
