from dataclasses import field

from pydantic.dataclasses import dataclass

from deps_versions.models.dependency_record import DependencyRecord
from deps_versions.models.validation_policy import ValidationPolicy

@dataclass(frozen=True)
class DependenciesFile:
    dependencies: list[DependencyRecord]
    policy: ValidationPolicy = field(default_factory=ValidationPolicy)
