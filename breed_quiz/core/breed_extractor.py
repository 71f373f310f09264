"""Derive the breed label from a Dog CEO image reference."""

from __future__ import annotations

from breed_quiz.constants.quiz_constants import BREED_PATH_MARKER


def format_breed_label(slug: str) -> str:
    """Turn a path slug such as ``hound-afghan`` into ``Hound Afghan``."""
    return " ".join(slug.replace("-", " ").split()).title()


def extract_breed(image_ref: str) -> str | None:
    """Return the breed named by the segment after the ``breeds`` marker.

    Args:
        image_ref: URL or path of the dog photo, e.g.
            ``https://images.dog.ceo/breeds/husky/n02110185_1469.jpg``

    Returns:
        The title-cased breed label, or None when the reference carries no
        breed segment.
    """
    segments = [segment for segment in image_ref.split("/") if segment]
    try:
        marker_index = segments.index(BREED_PATH_MARKER)
    except ValueError:
        return None

    breed_index = marker_index + 1
    if breed_index >= len(segments):
        return None
    return format_breed_label(segments[breed_index]) or None
