"""
analysisproject.paths - Path normalization helpers

Default path normalizer used when reading include directories, check paths
and excluded paths back out of a project model.
"""


def from_native_separators(path: str) -> str:
    """Convert native (backslash) separators to forward slashes"""
    return path.replace("\\", "/")
