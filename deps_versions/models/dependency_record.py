from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class DependencyRecord:
    name: str
    version: str
    integrity_hash: str | None = None
