"""
In-memory configuration container.

Mirrors the subset of a build tool's configuration registry that the
dependency pass needs: named configurations holding ordered dependency
coordinates, with inheritance between configurations.
"""

from typing import Dict, List, Optional, Protocol

from loomdeps.loomdeps_exceptions import LoomException


class ConfigurationRegistry(Protocol):
    """The registry operations used by DependencyRegistrar."""

    def maybe_create(self, name: str) -> "Configuration":
        ...

    def get_by_name(self, name: str) -> "Configuration":
        ...

    def add_dependency(self, name: str, coordinate: str) -> None:
        ...


class Configuration:
    """
    A named dependency configuration.
    """

    def __init__(self, name: str):
        self.name = name
        self.dependencies: List[str] = []
        self.extends: List["Configuration"] = []

    def extends_from(self, *others: "Configuration") -> None:
        for other in others:
            if other is self or self in other.hierarchy():
                raise LoomException(
                    f"Configuration {self.name} cannot extend from {other.name}: cycle"
                )
            if other not in self.extends:
                self.extends.append(other)

    def hierarchy(self) -> List["Configuration"]:
        """This configuration followed by everything it extends from, depth first."""
        seen: List["Configuration"] = [self]
        for parent in self.extends:
            for conf in parent.hierarchy():
                if conf not in seen:
                    seen.append(conf)
        return seen

    def all_dependencies(self) -> List[str]:
        """
        Get own and inherited coordinates, own first, without duplicates.
        """
        out: List[str] = []
        for conf in self.hierarchy():
            for coordinate in conf.dependencies:
                if coordinate not in out:
                    out.append(coordinate)
        return out

    def __repr__(self) -> str:
        return f"Configuration(name={self.name}, dependencies={len(self.dependencies)})"


class ConfigurationContainer:
    """
    Holds the configurations of one project.

    Adding a coordinate that is already declared on a configuration is a no-op.
    """

    def __init__(self):
        self._configurations: Dict[str, Configuration] = {}

    def maybe_create(self, name: str) -> Configuration:
        """
        Get the configuration with this name, creating it if needed.
        """
        if name not in self._configurations:
            self._configurations[name] = Configuration(name)
        return self._configurations[name]

    def find_by_name(self, name: str) -> Optional[Configuration]:
        return self._configurations.get(name)

    def get_by_name(self, name: str) -> Configuration:
        configuration = self.find_by_name(name)
        if configuration is None:
            raise LoomException(f"Configuration with name '{name}' not found")
        return configuration

    def add_dependency(self, name: str, coordinate: str) -> None:
        configuration = self.get_by_name(name)
        if coordinate not in configuration.dependencies:
            configuration.dependencies.append(coordinate)

    def names(self) -> List[str]:
        return list(self._configurations.keys())
