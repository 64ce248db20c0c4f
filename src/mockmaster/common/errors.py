"""
MockMaster Error Types

Exceptions raised at the boundaries of MockMaster (file loading,
OpenAPI parsing, configuration). The matching and replay engine itself
never raises for a missing match; it returns None.
"""


class MockMasterError(Exception):
    """Base class for all MockMaster errors."""


class ScenarioFormatError(MockMasterError, ValueError):
    """Persisted scenario or recording data is not valid JSON or has the wrong shape."""


class OpenAPIParseError(MockMasterError, ValueError):
    """An OpenAPI document could not be parsed."""


class ConfigError(MockMasterError):
    """A configuration file could not be read or has an invalid structure."""


class UnknownTraitError(MockMasterError, KeyError):
    """A factory was asked to build with a trait it does not define."""

    def __init__(self, factory_name: str, trait: str):
        self.factory_name = factory_name
        self.trait = trait
        super().__init__(f"Unknown trait '{trait}' for factory '{factory_name}'")

    def __str__(self) -> str:
        return self.args[0]
