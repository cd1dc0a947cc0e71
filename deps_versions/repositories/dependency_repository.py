from dataclasses import asdict
import os
from typing import Any

from ruamel.yaml import YAML
from deps_versions.models import DependenciesFile, DependencyRecord, ValidationPolicy
from deps_versions.utils.yaml_loader import get_yaml_instance


class DependencyRepository:
    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.yaml: YAML = get_yaml_instance()

    def load(self) -> DependenciesFile:
        if not os.path.isfile(self.file_path):
            return DependenciesFile(dependencies=[])
        with open(self.file_path, "r") as f:
            data = self.yaml.load(f)
            try:
                return DependenciesFile(**data)
            except Exception as e:
                raise ValueError(f"Invalid versions.yaml structure: {e}") from e

    def find_all(self) -> list[DependencyRecord]:
        return self.load().dependencies

    def find_policy(self) -> ValidationPolicy:
        return self.load().policy

    def save(self, dependencies_file: DependenciesFile) -> bool:
        try:
            with open(self.file_path, "w") as f:
                self.yaml.dump(self.to_document(dependencies_file), f)
            return True
        except Exception as e:
            raise Exception(f"Error writing dependencies: {e}") from e

    @staticmethod
    def to_document(dependencies_file: DependenciesFile) -> dict[str, Any]:
        policy = asdict(dependencies_file.policy)
        policy["integrity_exempt"] = list(policy["integrity_exempt"])
        # records without a hash are written without the key
        records = [
            {k: v for k, v in asdict(d).items() if v is not None}
            for d in dependencies_file.dependencies
        ]
        return {"policy": policy, "dependencies": records}
