from .dependency_repository import DependencyRepository
from .starlark_versions_repository import StarlarkVersionsRepository

__all__ = [
    'DependencyRepository',
    'StarlarkVersionsRepository'
]
