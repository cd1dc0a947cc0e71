from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class ValidationPolicy:
    require_integrity: bool = False
    integrity_exempt: tuple[str, ...] = ()

    def requires_integrity(self, name: str) -> bool:
        return self.require_integrity and name not in self.integrity_exempt
