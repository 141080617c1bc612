"""The ``latest.json`` updater manifest."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlparse

from latest_json.common.errors import ManifestFormatError


@dataclass(frozen=True)
class PlatformEntry:
    """Download location and signature for one platform key."""

    url: str
    signature: str

    def to_dict(self) -> dict[str, str]:
        return {"url": self.url, "signature": self.signature}

    @classmethod
    def from_dict(cls, key: str, data: Any) -> PlatformEntry:
        """Validate and build an entry read from an existing manifest.

        Raises
        ------
        ManifestFormatError
            If ``data`` is not ``{"url": <absolute URL>, "signature": <str>}``
        """
        if not isinstance(data, dict):
            msg = f"platforms.{key} must be an object"
            raise ManifestFormatError(msg)

        url = data.get("url")
        signature = data.get("signature")
        if not isinstance(url, str) or not _is_absolute_url(url):
            msg = f"platforms.{key}.url must be an absolute URL, got {url!r}"
            raise ManifestFormatError(msg)
        if not isinstance(signature, str):
            msg = f"platforms.{key}.signature must be a string"
            raise ManifestFormatError(msg)
        return cls(url=url, signature=signature)


def _is_absolute_url(value: str) -> bool:
    parsed = urlparse(value)
    return bool(parsed.scheme) and bool(parsed.netloc)


@dataclass
class Manifest:
    """In-memory form of ``latest.json``.

    Attributes
    ----------
    version : str
        Release version
    pub_date : str | None
        ISO-8601 publication timestamp
    platforms : dict[str, PlatformEntry]
        Entries keyed by ``os-arch`` or ``os-arch-bundle``
    notes : str | None
        Release notes, omitted from the JSON when unset
    """

    version: str
    pub_date: str | None = None
    platforms: dict[str, PlatformEntry] = field(default_factory=dict)
    notes: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize in ``version, pub_date, notes, platforms`` order."""
        data: dict[str, Any] = {"version": self.version}
        if self.pub_date is not None:
            data["pub_date"] = self.pub_date
        if self.notes is not None:
            data["notes"] = self.notes
        data["platforms"] = {
            key: entry.to_dict() for key, entry in self.platforms.items()
        }
        return data

    @classmethod
    def from_dict(cls, data: Any) -> Manifest:
        """Validate and build a manifest from parsed JSON.

        Raises
        ------
        ManifestFormatError
            If required fields are missing or have the wrong type
        """
        if not isinstance(data, dict):
            msg = "manifest must be a JSON object"
            raise ManifestFormatError(msg)

        version = data.get("version")
        if not isinstance(version, str):
            msg = "manifest.version must be a string"
            raise ManifestFormatError(msg)

        for optional in ("notes", "pub_date"):
            if optional in data and not isinstance(data[optional], str):
                msg = f"manifest.{optional} must be a string"
                raise ManifestFormatError(msg)

        raw_platforms = data.get("platforms")
        if not isinstance(raw_platforms, dict):
            msg = "manifest.platforms must be an object"
            raise ManifestFormatError(msg)

        platforms = {
            str(key): PlatformEntry.from_dict(str(key), value)
            for key, value in raw_platforms.items()
        }
        return cls(
            version=version,
            pub_date=data.get("pub_date"),
            platforms=platforms,
            notes=data.get("notes"),
        )
