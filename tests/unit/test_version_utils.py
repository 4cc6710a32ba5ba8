# topmark:header:start
#
#   project      : DocPreview
#   file         : test_version_utils.py
#   file_relpath : tests/unit/test_version_utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for PEP 440 to SemVer conversion."""

from __future__ import annotations

import pytest

from docpreview.utils.version import pep440_to_semver


@pytest.mark.parametrize(
    ("pep440", "expected"),
    [
        ("0.1.0", "0.1.0"),
        ("1.2.0a3", "1.2.0-alpha.3"),
        ("1.2.0b1", "1.2.0-beta.1"),
        ("1.2.0rc1", "1.2.0-rc.1"),
        ("1.2.0.dev4", "1.2.0-dev.4"),
        ("1.2.0rc2.dev5", "1.2.0-rc.2.dev.5"),
        ("1.2.0+g1a2b3c", "1.2.0+g1a2b3c"),
        ("1.2.0.dev4+g1a2b3c.dirty", "1.2.0-dev.4+g1a2b3c.dirty"),
    ],
)
def test_pep440_to_semver(pep440: str, expected: str) -> None:
    """Pre-release, dev and local segments map onto SemVer."""
    assert pep440_to_semver(pep440) == expected


@pytest.mark.parametrize("pep440", ["1.2.0.post1", "1.2", "v1.2.0", "1!1.2.0", "not-a-version"])
def test_pep440_to_semver_rejects(pep440: str) -> None:
    """Post-releases and unsupported shapes raise `ValueError`."""
    with pytest.raises(ValueError):
        pep440_to_semver(pep440)
