from .dependency_record import DependencyRecord
from .validation_policy import ValidationPolicy
from .violation import Violation
from .version_registry import VersionRegistry
from .wrappers import DependenciesFile

__all__ = [
    "DependencyRecord",
    "ValidationPolicy",
    "Violation",
    "VersionRegistry",
    "DependenciesFile",
]
