from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from deps_versions.models.violation import Violation


class RegistryError(Exception):
    pass


class NotFoundError(RegistryError, LookupError):
    def __init__(self, name: str):
        self.name: str = name
        super().__init__(f"Dependency {name!r} is not registered")


class ValidationError(RegistryError, ValueError):
    def __init__(self, violations: "list[Violation]"):
        self.violations: "list[Violation]" = list(violations)
        details = "; ".join(str(v) for v in self.violations)
        super().__init__(f"{len(self.violations)} invalid dependency record(s): {details}")

    @property
    def names(self) -> list[str]:
        return [v.name for v in self.violations]
