from dataclasses import dataclass

@dataclass(frozen=True)
class Violation:
    name: str
    reason: str

    def __str__(self) -> str:
        return f"{self.name or '<unnamed>'}: {self.reason}"
