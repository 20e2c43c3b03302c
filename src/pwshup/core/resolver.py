"""Resolve a version request to a single release."""

from pwshup.core.errors import NoReleaseFoundError, ReleaseNotFoundError
from pwshup.models.release import Release
from pwshup.models.request import Track, VersionRequest


# Tag prefix of the current LTS line. Must be bumped when a new LTS ships;
# the release API carries no lifecycle metadata to derive it from.
DEFAULT_LTS_PREFIX = "v7.4."


def normalize_tag(version: str) -> str:
    """Return the 'v'-prefixed tag form of a version string."""
    return version if version.startswith("v") else f"v{version}"


def _first(releases: list[Release], predicate) -> Release | None:
    # Catalog order is newest first; the first match wins.
    for release in releases:
        if predicate(release):
            return release
    return None


def resolve_release(
    request: VersionRequest,
    releases: list[Release],
    lts_prefix: str = DEFAULT_LTS_PREFIX,
) -> Release:
    """Pick the release a request refers to.

    Raises:
        NoReleaseFoundError: a release track has no qualifying release
        ReleaseNotFoundError: an explicit version has no matching tag
    """
    if request.track is Track.LATEST:
        release = _first(releases, lambda r: not r.prerelease)
        if release is None:
            raise NoReleaseFoundError("No stable release found")

    elif request.track is Track.STABLE:
        release = _first(
            releases,
            lambda r: not r.prerelease and r.tag_name.startswith(lts_prefix),
        )
        if release is None:
            raise NoReleaseFoundError(
                f"No LTS release found matching '{lts_prefix}*'",
                {"lts_prefix": lts_prefix},
            )

    elif request.track is Track.PREVIEW:
        release = _first(releases, lambda r: r.prerelease)
        if release is None:
            raise NoReleaseFoundError("No preview release found")

    else:
        wanted = request.version or ""
        release = None
        for tag in (normalize_tag(wanted), wanted):
            release = _first(releases, lambda r: r.tag_name == tag)
            if release is not None:
                break
        if release is None:
            raise ReleaseNotFoundError(wanted)

    return release
