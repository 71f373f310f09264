"""Qt network client for the Dog CEO API."""

from __future__ import annotations

from collections.abc import Callable
import logging

from pydantic import BaseModel, ValidationError
from PySide6.QtCore import QObject, QUrl
from PySide6.QtNetwork import QNetworkAccessManager, QNetworkReply, QNetworkRequest

from breed_quiz.constants.network_constants import (
    BREED_LIST_URL,
    RANDOM_IMAGE_URL,
    TRANSFER_TIMEOUT_MS,
)
from breed_quiz.core.breed_extractor import format_breed_label
from breed_quiz.core.image_provider import (
    CatalogCallback,
    FailureCallback,
    FetchError,
    ImageCallback,
)

logger = logging.getLogger(__name__)

_SUCCESS_STATUS = "success"


class RandomImagePayload(BaseModel):
    message: str
    status: str


class BreedListPayload(BaseModel):
    message: dict[str, list[str]]
    status: str


def parse_random_image(raw: bytes) -> str:
    """Extract the image URL from a ``/breeds/image/random`` response body."""
    try:
        payload = RandomImagePayload.model_validate_json(raw)
    except ValidationError as exc:
        raise FetchError(f"Malformed image response: {exc.error_count()} validation error(s)") from exc
    if payload.status != _SUCCESS_STATUS:
        raise FetchError(f"Image request returned status {payload.status!r}")
    if not payload.message.strip():
        raise FetchError("Image response contained no URL")
    return payload.message


def parse_breed_catalog(raw: bytes) -> set[str]:
    """Flatten a ``/breeds/list/all`` response into display labels.

    Sub-breeds are joined as ``breed-sub`` first so the labels match the
    slugs found in image URLs.
    """
    try:
        payload = BreedListPayload.model_validate_json(raw)
    except ValidationError as exc:
        raise FetchError(f"Malformed breed list: {exc.error_count()} validation error(s)") from exc
    if payload.status != _SUCCESS_STATUS:
        raise FetchError(f"Breed list request returned status {payload.status!r}")

    labels: set[str] = set()
    for breed, sub_breeds in payload.message.items():
        slugs = [f"{breed}-{sub}" for sub in sub_breeds] if sub_breeds else [breed]
        labels.update(format_breed_label(slug) for slug in slugs)
    labels.discard("")
    return labels


class DogApiClient(QObject):
    """Image provider backed by ``QNetworkAccessManager``.

    Replies are delivered on the thread owning the client, which keeps the
    quiz session single-threaded.
    """

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._manager = QNetworkAccessManager(self)

    def fetch_random_image(self, on_success: ImageCallback, on_failure: FailureCallback) -> None:
        self._get(RANDOM_IMAGE_URL, parse_random_image, on_success, on_failure)

    def fetch_category_catalog(self, on_success: CatalogCallback, on_failure: FailureCallback) -> None:
        self._get(BREED_LIST_URL, parse_breed_catalog, on_success, on_failure)

    def fetch_image_bytes(
        self,
        url: str,
        on_success: Callable[[bytes], None],
        on_failure: FailureCallback,
    ) -> None:
        """Download the photo itself for display."""
        self._get(url, bytes, on_success, on_failure)

    def _get(self, url: str, parse: Callable, on_success: Callable, on_failure: FailureCallback) -> None:
        request = QNetworkRequest(QUrl(url))
        request.setTransferTimeout(TRANSFER_TIMEOUT_MS)
        logger.debug("GET %s", url)
        reply = self._manager.get(request)
        reply.finished.connect(lambda: self._handle_reply(reply, url, parse, on_success, on_failure))

    def _handle_reply(
        self,
        reply: QNetworkReply,
        url: str,
        parse: Callable,
        on_success: Callable,
        on_failure: FailureCallback,
    ) -> None:
        try:
            if reply.error() != QNetworkReply.NetworkError.NoError:
                raise FetchError(f"Request to {url} failed: {reply.errorString()}")
            result = parse(reply.readAll().data())
        except FetchError as exc:
            logger.warning("%s", exc)
            on_failure(exc)
            return
        finally:
            reply.deleteLater()
        on_success(result)
