"""Pydantic configuration models with code-baked protocol defaults.

Sparse TOML contract: defaults baked here, ``pubky-specs.toml`` only
contains overrides. Every section is frozen so a config value can be shared
freely between validators and threads.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

MIB = 1 << 20

# 2024-10-01T00:00:00Z in microseconds since the UNIX epoch.
PROTOCOL_EPOCH_MICROS = 1_727_740_800_000_000

DEFAULT_MIME_TYPES: tuple[str, ...] = (
    "application/javascript",
    "application/json",
    "application/octet-stream",
    "application/pdf",
    "application/x-www-form-urlencoded",
    "application/xml",
    "application/zip",
    "audio/mpeg",
    "audio/wav",
    "image/gif",
    "image/jpeg",
    "image/png",
    "image/svg+xml",
    "image/webp",
    "multipart/form-data",
    "text/css",
    "text/html",
    "text/plain",
    "text/xml",
    "video/mp4",
    "video/mpeg",
)


class IdsConfig(BaseModel):
    """[ids] section: time-derived identifier bounds."""

    model_config = {"frozen": True}

    epoch_micros: int = PROTOCOL_EPOCH_MICROS
    max_future_micros: int = 2 * 60 * 60 * 1_000_000


class PathsConfig(BaseModel):
    """[paths] section: URI scheme and fixed path roots."""

    model_config = {"frozen": True}

    scheme: str = "pubky"
    public_root: str = "/pub/"
    app_root: str = "pubky.app/"

    @property
    def protocol(self) -> str:
        """Scheme with separator, e.g. ``pubky://``."""
        return f"{self.scheme}://"

    @property
    def prefix(self) -> str:
        """Public root joined with the app root, e.g. ``/pub/pubky.app/``."""
        return f"{self.public_root}{self.app_root}"


class ProfileConfig(BaseModel):
    """[profile] section."""

    model_config = {"frozen": True}

    min_name_length: int = 3
    max_name_length: int = 50
    max_bio_length: int = 160
    max_image_length: int = 300
    max_links: int = 5
    max_link_title_length: int = 100
    max_link_url_length: int = 300
    max_status_length: int = 50
    default_name: str = "anonymous"


class PostConfig(BaseModel):
    """[post] section."""

    model_config = {"frozen": True}

    max_short_content_length: int = 2000
    max_long_content_length: int = 50000
    max_attachments: int = 3
    attachment_schemes: tuple[str, ...] = ("pubky", "http", "https")


class TagsConfig(BaseModel):
    """[tags] section."""

    model_config = {"frozen": True}

    min_label_length: int = 1
    max_label_length: int = 20
    invalid_label_chars: tuple[str, ...] = (",", ":")


class FilesConfig(BaseModel):
    """[files] section."""

    model_config = {"frozen": True}

    min_name_length: int = 1
    max_name_length: int = 255
    max_src_length: int = 1024
    max_size: int = 10 * MIB
    mime_types: tuple[str, ...] = DEFAULT_MIME_TYPES


class BlobsConfig(BaseModel):
    """[blobs] section."""

    model_config = {"frozen": True}

    max_size: int = 100 * MIB


class SpecsConfig(BaseModel):
    """Root configuration composing all sections.

    Injected into every sanitize, validate, path and URI operation so tests
    and deployments can override limits without touching code.
    """

    model_config = {"frozen": True}

    ids: IdsConfig = Field(default_factory=IdsConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    profile: ProfileConfig = Field(default_factory=ProfileConfig)
    post: PostConfig = Field(default_factory=PostConfig)
    tags: TagsConfig = Field(default_factory=TagsConfig)
    files: FilesConfig = Field(default_factory=FilesConfig)
    blobs: BlobsConfig = Field(default_factory=BlobsConfig)


DEFAULT_CONFIG = SpecsConfig()
