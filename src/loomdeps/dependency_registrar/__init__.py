"""
Dependency registration.

This package handles:
1. Holding named dependency configurations and their inheritance
2. Applying registration plans onto those configurations
3. Registering the derived client jar and fabric-base coordinates
"""

from .configurations import Configuration, ConfigurationContainer, ConfigurationRegistry
from .registrar import DependencyRegistrar

__all__ = [
    "Configuration",
    "ConfigurationContainer",
    "ConfigurationRegistry",
    "DependencyRegistrar",
]
