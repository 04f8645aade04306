"""
Versioning for qtnion. We use a hard-coded version number, because it's
simple and always works.
"""

# This is the reference version number, to be bumped before each release.
__version__ = "0.1.0"


def _parse_version_info(version):
    """Get a tuple of ints from the leading numeric parts of a version string."""
    parts = []
    for part in version.split("."):
        if not part.isnumeric():
            break
        parts.append(int(part))
    return tuple(parts)


version_info = _parse_version_info(__version__)
