"""Selection and ordering of release tags."""

import re

RELEASE_TAG_RE = re.compile(r"^v(\d+)\.(\d+)\.(\d+)(-.+)?$")
PRE_RELEASE_RE = re.compile(r"-dev|-beta|-alpha|-rc")


def strip_version_prefix(version: str) -> str:
    """Drop the leading ``v`` of a version string, if any."""
    return version[1:] if version.startswith("v") else version


def _version_key(tag: str) -> tuple[int, int, int]:
    m = RELEASE_TAG_RE.match(tag)
    if m is None:
        msg = f"Not a release tag: {tag}"
        raise ValueError(msg)
    return int(m.group(1)), int(m.group(2)), int(m.group(3))


def organize_tags(tags: list[str], current_version: str) -> list[str]:
    """Keep published release tags other than the current one, newest first.

    Pre-releases (``-dev``, ``-beta``, ``-alpha``, ``-rc``) and tags that are
    not ``vMAJOR.MINOR.PATCH[-suffix]`` are dropped.
    """
    current = strip_version_prefix(current_version)
    kept = [
        tag
        for tag in tags
        if strip_version_prefix(tag) != current
        and not PRE_RELEASE_RE.search(tag)
        and RELEASE_TAG_RE.match(tag)
    ]
    return sorted(kept, key=_version_key, reverse=True)
