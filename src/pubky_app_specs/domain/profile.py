"""Profile: the owner's ``profile.json`` singleton and its links."""

from __future__ import annotations

from typing import ClassVar, Self

from pydantic import BaseModel

from pubky_app_specs.config.models import DEFAULT_CONFIG, SpecsConfig
from pubky_app_specs.domain.base import DELETED_KEYWORD, AppObject, crop
from pubky_app_specs.domain.errors import FieldValidationError
from pubky_app_specs.domain.types import ResourceKind
from pubky_app_specs.domain.urls import is_url, normalize_url


class UserLink(BaseModel):
    """A titled link shown on a profile."""

    model_config = {"frozen": True}

    title: str
    url: str

    def sanitize(self, *, config: SpecsConfig = DEFAULT_CONFIG) -> Self:
        """Crop the title and normalize the URL.

        An invalid or over-long URL becomes the empty string, which marks the
        link for removal by :meth:`UserProfile.sanitize`.
        """
        limits = config.profile
        url = normalize_url(self.url.strip()) or ""
        if len(url) > limits.max_link_url_length:
            url = ""
        return self.model_copy(
            update={"title": crop(self.title, limits.max_link_title_length), "url": url}
        )

    def verify(self, *, config: SpecsConfig = DEFAULT_CONFIG) -> None:
        limits = config.profile
        if len(self.title) > limits.max_link_title_length:
            raise FieldValidationError(
                "links.title", "Validation Error: Link title exceeds maximum length"
            )
        if len(self.url) > limits.max_link_url_length:
            raise FieldValidationError(
                "links.url", "Validation Error: Link URL exceeds maximum length"
            )
        if not is_url(self.url):
            raise FieldValidationError("links.url", "Validation Error: Invalid URL format")


class UserProfile(AppObject):
    """User profile.

    URI: ``/pub/pubky.app/profile.json``
    """

    resource_kind: ClassVar[ResourceKind] = ResourceKind.PROFILE

    name: str
    bio: str | None = None
    image: str | None = None
    links: list[UserLink] | None = None
    status: str | None = None

    @classmethod
    def create(
        cls,
        name: str,
        *,
        bio: str | None = None,
        image: str | None = None,
        links: list[UserLink] | None = None,
        status: str | None = None,
        config: SpecsConfig = DEFAULT_CONFIG,
    ) -> Self:
        """Build a sanitized profile from field values."""
        return cls(name=name, bio=bio, image=image, links=links, status=status).sanitize(
            config=config
        )

    def sanitize(self, *, config: SpecsConfig = DEFAULT_CONFIG) -> Self:
        limits = config.profile

        name = crop(self.name, limits.max_name_length)
        if name == DELETED_KEYWORD:
            name = limits.default_name

        image = None
        if self.image is not None:
            cropped = crop(self.image, limits.max_image_length)
            image = cropped if is_url(cropped) else None

        links = None
        if self.links is not None:
            links = [link.sanitize(config=config) for link in self.links[: limits.max_links]]
            links = [link for link in links if link.url]

        return self.model_copy(
            update={
                "name": name,
                "bio": None if self.bio is None else crop(self.bio, limits.max_bio_length),
                "image": image,
                "links": links,
                "status": (
                    None if self.status is None else crop(self.status, limits.max_status_length)
                ),
            }
        )

    def _check(self, config: SpecsConfig) -> None:
        limits = config.profile

        if not limits.min_name_length <= len(self.name) <= limits.max_name_length:
            raise FieldValidationError("name", "Validation Error: Invalid name length")
        if self.name == DELETED_KEYWORD:
            raise FieldValidationError(
                "name", f"Validation Error: Name cannot be the reserved keyword {DELETED_KEYWORD}"
            )
        if self.bio is not None and len(self.bio) > limits.max_bio_length:
            raise FieldValidationError("bio", "Validation Error: Bio exceeds maximum length")
        if self.image is not None and len(self.image) > limits.max_image_length:
            raise FieldValidationError(
                "image", "Validation Error: Image URI exceeds maximum length"
            )
        if self.links is not None:
            if len(self.links) > limits.max_links:
                raise FieldValidationError("links", "Validation Error: Too many links")
            for link in self.links:
                link.verify(config=config)
        if self.status is not None and len(self.status) > limits.max_status_length:
            raise FieldValidationError("status", "Validation Error: Status exceeds maximum length")
