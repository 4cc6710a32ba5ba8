# topmark:header:start
#
#   project      : DocPreview
#   file         : version.py
#   file_relpath : src/docpreview/utils/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Version utilities for DocPreview."""

from __future__ import annotations

import re
from typing import Final

# The PEP 440 shapes our releases use: X.Y.Z[{a|b|rc}N][.postN][.devN][+local]
_PEP440_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    ^
    (?P<release>(?:0|[1-9]\d*)\.(?:0|[1-9]\d*)\.(?:0|[1-9]\d*))
    (?:(?P<pre_label>a|b|rc)(?P<pre_num>\d+))?
    (?:\.post(?P<post>\d+))?
    (?:\.dev(?P<dev>\d+))?
    (?:\+(?P<local>[0-9A-Za-z]+(?:\.[0-9A-Za-z]+)*))?
    $
    """,
    re.VERBOSE,
)

_PRE_LABELS: Final[dict[str, str]] = {"a": "alpha", "b": "beta", "rc": "rc"}


def pep440_to_semver(pep440_version: str) -> str:
    """Convert a PEP 440 release string to SemVer.

    ``1.2.0rc1`` becomes ``1.2.0-rc.1``, ``1.2.0a3.dev4`` becomes
    ``1.2.0-alpha.3.dev.4``, ``1.2.0.dev4`` becomes ``1.2.0-dev.4``. A local
    segment (``+abc``) is kept as build metadata.

    Args:
        pep440_version (str): The version in PEP 440 format.

    Returns:
        str: The version in SemVer format.

    Raises:
        ValueError: If the version is not recognized or is a post-release.
    """
    m = _PEP440_RE.match(pep440_version)
    if m is None:
        raise ValueError(f"Not a recognized PEP 440 version: {pep440_version!r}")
    if m.group("post") is not None:
        raise ValueError(f"Post-releases have no SemVer equivalent: {pep440_version!r}")

    prerelease: list[str] = []
    if m.group("pre_label"):
        prerelease += [_PRE_LABELS[m.group("pre_label")], m.group("pre_num")]
    if m.group("dev") is not None:
        prerelease += ["dev", m.group("dev")]

    semver = m.group("release")
    if prerelease:
        semver += "-" + ".".join(prerelease)
    if m.group("local"):
        semver += "+" + m.group("local")
    return semver
