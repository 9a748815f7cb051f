"""Top-level package for pseudoloc.

Deterministic pseudo-translation of ICU-style message trees.

Provides subpackages:
- pseudoloc.core – message tree models, JSON serialization, ICU rendering
- pseudoloc.transform – the seeded pseudo-translation algorithm
- pseudoloc.catalog – file-level catalog builds
- pseudoloc.cli – command-line entry point
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    # In dev mode, read directly from pyproject.toml
    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"

    if pyproject.exists():
        content = pyproject.read_text(encoding="utf-8")
        for line in content.splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    # Fallback to importlib.metadata for installed package
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("pseudoloc")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()

from .core.models import Literal, Message  # noqa: E402
from .transform import literal_seed, pseudo_translate  # noqa: E402

__all__: list[str] = [
    "__version__",
    "Literal",
    "Message",
    "literal_seed",
    "pseudo_translate",
]
