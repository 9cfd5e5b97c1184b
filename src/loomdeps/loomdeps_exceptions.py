"""
This file contains various exceptions raised by loomdeps.
"""


class LoomException(Exception):
    """
    Exceptions raised by loomdeps.
    """

    def __init__(self, message: str):
        super().__init__(message)


class FetchFailure(LoomException):
    """
    The version manifest could not be acquired (network or filesystem failure).
    """


class MalformedManifest(LoomException):
    """
    The version manifest does not match the expected schema.
    """


class UnresolvableEntry(LoomException):
    """
    A library entry has no usable artifact reference.
    """

    def __init__(self, library_name: str):
        super().__init__(f"Library {library_name} has no resolvable artifact")
        self.library_name = library_name
