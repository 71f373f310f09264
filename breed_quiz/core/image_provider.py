"""Contract for the service that supplies dog photos and the breed catalog."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class FetchError(Exception):
    """Raised or reported when an image or catalog request fails."""


ImageCallback = Callable[[str], None]
CatalogCallback = Callable[[set[str]], None]
FailureCallback = Callable[[FetchError], None]


class ImageProvider(Protocol):
    """Asynchronous source of dog photos.

    Implementations must invoke exactly one of the callbacks per request, on
    the thread that owns the quiz session.
    """

    def fetch_random_image(self, on_success: ImageCallback, on_failure: FailureCallback) -> None:
        ...

    def fetch_category_catalog(self, on_success: CatalogCallback, on_failure: FailureCallback) -> None:
        ...
