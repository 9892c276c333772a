"""Supported upload formats and MIME-type lookups.

``image/svg+xml`` is listed as both an image and a vector; lookups that
return a single category resolve it as an image.
"""

from __future__ import annotations

from typing import Literal

from viu_shared.domain.limits import ART_MAX_FILE_SIZE

FileCategory = Literal["IMAGEM", "VIDEO", "DOCUMENTO", "VETOR", "AUDIO"]

IMAGE_TYPES: tuple[str, ...] = (
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/gif",
    "image/webp",
    "image/svg+xml",
)

VIDEO_TYPES: tuple[str, ...] = (
    "video/mp4",
    "video/mpeg",
    "video/quicktime",
    "video/x-msvideo",
    "video/x-ms-wmv",
)

DOCUMENT_TYPES: tuple[str, ...] = (
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/vnd.ms-powerpoint",
    "application/vnd.openxmlformats-officedocument.presentationml.presentation",
)

VECTOR_TYPES: tuple[str, ...] = (
    "image/svg+xml",
    "application/postscript",
    "application/illustrator",
)

AUDIO_TYPES: tuple[str, ...] = (
    "audio/mpeg",
    "audio/wav",
    "audio/ogg",
    "audio/mp4",
    "audio/webm",
)

SUPPORTED_TYPES: dict[FileCategory, tuple[str, ...]] = {
    "IMAGEM": IMAGE_TYPES,
    "VIDEO": VIDEO_TYPES,
    "DOCUMENTO": DOCUMENT_TYPES,
    "VETOR": VECTOR_TYPES,
    "AUDIO": AUDIO_TYPES,
}

ALL_SUPPORTED_TYPES: frozenset[str] = frozenset(t for group in SUPPORTED_TYPES.values() for t in group)

FILE_EXTENSIONS: dict[FileCategory, tuple[str, ...]] = {
    "IMAGEM": (".jpg", ".jpeg", ".png", ".gif", ".webp", ".svg"),
    "VIDEO": (".mp4", ".mpeg", ".mov", ".avi", ".wmv"),
    "DOCUMENTO": (".pdf", ".doc", ".docx", ".ppt", ".pptx"),
    "VETOR": (".svg", ".ai", ".eps"),
    "AUDIO": (".mp3", ".wav", ".ogg", ".m4a", ".webm"),
}

MIME_TO_EXTENSION: dict[str, str] = {
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
    "image/svg+xml": ".svg",
    "video/mp4": ".mp4",
    "video/mpeg": ".mpeg",
    "video/quicktime": ".mov",
    "video/x-msvideo": ".avi",
    "video/x-ms-wmv": ".wmv",
    "application/pdf": ".pdf",
    "application/msword": ".doc",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": ".docx",
    "application/vnd.ms-powerpoint": ".ppt",
    "application/vnd.openxmlformats-officedocument.presentationml.presentation": ".pptx",
    "application/postscript": ".eps",
    "application/illustrator": ".ai",
    "audio/mpeg": ".mp3",
    "audio/wav": ".wav",
    "audio/ogg": ".ogg",
    "audio/mp4": ".m4a",
    "audio/webm": ".webm",
}


def is_supported_file(mime_type: str) -> bool:
    return mime_type in ALL_SUPPORTED_TYPES


def get_file_type(mime_type: str) -> FileCategory | None:
    """Return the upload category for *mime_type*, or None if unsupported."""
    for category, types in SUPPORTED_TYPES.items():
        if mime_type in types:
            return category
    return None


def get_file_extension(mime_type: str) -> str:
    """Return the canonical extension (with dot) for *mime_type*, or ``""``."""
    return MIME_TO_EXTENSION.get(mime_type, "")


def is_valid_file_extension(filename: str, allowed_extensions: tuple[str, ...] | list[str]) -> bool:
    """Check the lower-cased suffix of *filename* against *allowed_extensions*.

    Examples:
        >>> is_valid_file_extension("Logo.PNG", [".png"])
        True
        >>> is_valid_file_extension("README", [".png"])
        False
    """
    if "." not in filename:
        return False
    extension = filename.lower().rsplit(".", 1)[1]
    if not extension:
        return False
    return f".{extension}" in allowed_extensions


def is_valid_file_size(size_bytes: int, max_size_bytes: int = ART_MAX_FILE_SIZE) -> bool:
    return 0 <= size_bytes <= max_size_bytes
