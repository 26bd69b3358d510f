"""The walkthrough behind the ``demo`` command.

Prints a banner, three greetings (default, custom, encrypted) and stores data
into each target once. The store records its own failures; the caller reads
them from ``store.errors`` afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from ..domain.enums import MessageStyle, StorageTarget
from ..domain.results import OperationResult
from .greeting_store import GreetingStore
from .ports import StyledOutput

BANNER_RULE: Final[str] = "=" * 32

DEMO_GREETINGS: Final[tuple[tuple[str | None, bool], ...]] = (
    (None, False),
    ("Hola! Mi nombre es Jason.", False),
    ("Este es muy importante!", True),
)

DEMO_STORES: Final[tuple[tuple[str, StorageTarget], ...]] = (
    ("Test data to store...", StorageTarget.FILE),
    ("Some more test data...", StorageTarget.CONTAINER),
    ("This is even more data to be stored...", StorageTarget.DATABASE),
)


@dataclass(frozen=True, slots=True)
class DemoBanner:
    """Heading lines printed before the demo runs."""

    title: str
    version: str
    author: str

    def lines(self) -> list[tuple[str, MessageStyle]]:
        """
        >>> DemoBanner("HelloWorldAPI", "0.0.1", "Jason Tanner").lines()[1]
        ('Welcome to HelloWorldAPI v0.0.1!', <MessageStyle.NOTICE: 'notice'>)
        """
        return [
            (BANNER_RULE, MessageStyle.GENERAL),
            (f"Welcome to {self.title} v{self.version}!", MessageStyle.NOTICE),
            (f"Written By: {self.author}", MessageStyle.NOTICE),
            (BANNER_RULE, MessageStyle.GENERAL),
        ]


def run_demo(store: GreetingStore, writer: StyledOutput, banner: DemoBanner) -> list[OperationResult]:
    """Run the demo sequence and return one result per store operation.

    Banner lines are plain output, not operations; a failing stream while
    printing them propagates to the caller.
    """
    for text, style in banner.lines():
        writer.print(text, False, False, True, style)

    results: list[OperationResult] = []
    for message, encrypt in DEMO_GREETINGS:
        if message is None:
            results.append(store.print_greeting())
        else:
            results.append(store.print_greeting(message, encrypt))
    for data, target in DEMO_STORES:
        results.append(store.store_data(data, target))
    return results


__all__ = ["BANNER_RULE", "DEMO_GREETINGS", "DEMO_STORES", "DemoBanner", "run_demo"]
