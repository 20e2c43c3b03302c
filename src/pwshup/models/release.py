"""GitHub release data models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Asset:
    """Represents a GitHub release asset."""

    name: str
    download_url: str
    size: int

    @classmethod
    def from_api_response(cls, data: dict) -> "Asset":
        """Create Asset from GitHub API response."""
        return cls(
            name=data["name"],
            download_url=data["browser_download_url"],
            size=data.get("size", 0),
        )


@dataclass(frozen=True)
class Release:
    """Represents a GitHub release."""

    tag_name: str
    prerelease: bool
    draft: bool
    assets: tuple[Asset, ...] = field(default_factory=tuple)
    published_at: str = ""

    @classmethod
    def from_api_response(cls, data: dict) -> "Release":
        """Create Release from GitHub API response."""
        assets = tuple(Asset.from_api_response(a) for a in data.get("assets", []))
        return cls(
            tag_name=data["tag_name"],
            prerelease=data.get("prerelease", False),
            draft=data.get("draft", False),
            assets=assets,
            published_at=data.get("published_at") or "",
        )

    @property
    def version(self) -> str:
        """Get version string (tag without 'v' prefix if present)."""
        tag = self.tag_name
        if tag.startswith("v"):
            return tag[1:]
        return tag
