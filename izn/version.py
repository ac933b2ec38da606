"""Version of izn."""

import importlib.metadata

FALLBACK_VERSION = "0.1.0"


def version() -> str:
    try:
        return importlib.metadata.version("izn")
    except importlib.metadata.PackageNotFoundError:
        return FALLBACK_VERSION
