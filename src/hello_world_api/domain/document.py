"""The configuration document persisted by :meth:`GreetingStore.store_data`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

DOCUMENT_TITLE: Final[str] = "HelloWorldAPI Configuration File"
ROOT_KEY: Final[str] = "hello_world_api"
SECTION_KEY: Final[str] = "configuration"

EXAMPLE_ONE: Final[str] = "Hello World!"
EXAMPLE_TWO: Final[str] = "Second example config entry!"


@dataclass(frozen=True, slots=True)
class ConfigurationDocument:
    """Root container holding two illustrative fields and the caller's data."""

    data: str
    example1: str = EXAMPLE_ONE
    example2: str = EXAMPLE_TWO
    title: str = DOCUMENT_TITLE

    def to_mapping(self) -> dict[str, dict[str, dict[str, str]]]:
        """Return the nested mapping that serializers write out.

        Example:
            >>> ConfigurationDocument("abc").to_mapping()["hello_world_api"]["configuration"]["data"]
            'abc'
        """
        return {
            ROOT_KEY: {
                SECTION_KEY: {
                    "example1": self.example1,
                    "example2": self.example2,
                    "data": self.data,
                }
            }
        }


def build_configuration_document(data: str) -> ConfigurationDocument:
    """Create a fresh document embedding ``data``."""
    return ConfigurationDocument(data=data)


__all__ = [
    "DOCUMENT_TITLE",
    "EXAMPLE_ONE",
    "EXAMPLE_TWO",
    "ROOT_KEY",
    "SECTION_KEY",
    "ConfigurationDocument",
    "build_configuration_document",
]
