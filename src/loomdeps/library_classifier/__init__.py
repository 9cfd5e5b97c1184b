"""
Library classification.

This package decides which manifest libraries apply to the current platform
and which dependency configuration each one belongs to.
"""

from .classifier import (
    ClassificationResult,
    DependencyBucket,
    LibraryClassifier,
    PlannedDependency,
    RegistrationPlan,
)

__all__ = [
    "ClassificationResult",
    "DependencyBucket",
    "LibraryClassifier",
    "PlannedDependency",
    "RegistrationPlan",
]
