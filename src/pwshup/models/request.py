"""Version request data model."""

from dataclasses import dataclass
from enum import Enum


class Track(str, Enum):
    """Release track a version request resolves against."""

    LATEST = "latest"
    STABLE = "stable"
    PREVIEW = "preview"
    EXPLICIT = "explicit"


# Keywords recognised after lowercasing; anything else is an explicit version.
TRACK_KEYWORDS = {
    "latest": Track.LATEST,
    "stable": Track.STABLE,
    "lts": Track.STABLE,
    "preview": Track.PREVIEW,
}


@dataclass(frozen=True)
class VersionRequest:
    """A requested version: a release track or a pinned version string."""

    track: Track
    version: str | None = None

    @classmethod
    def parse(cls, raw: str) -> "VersionRequest":
        """Create a VersionRequest from user input."""
        text = raw.strip()
        if not text:
            # Workflow inputs arrive as empty strings when unset
            return cls(track=Track.STABLE)
        track = TRACK_KEYWORDS.get(text.lower())
        if track is not None:
            return cls(track=track)
        return cls(track=Track.EXPLICIT, version=text)

    @classmethod
    def explicit(cls, version: str) -> "VersionRequest":
        return cls(track=Track.EXPLICIT, version=version)

    def __str__(self) -> str:
        if self.track is Track.EXPLICIT:
            return self.version or ""
        return self.track.value
