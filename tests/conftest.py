import json
import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import pseudoloc
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from pseudoloc.core.models import (  # noqa: E402
    Argument,
    Branch,
    FormatKind,
    Formatted,
    Literal,
    Location,
    Message,
    Plural,
    Pound,
    Select,
)


# Common test fixtures
@pytest.fixture
def plural_message() -> Message:
    """'You have {count, plural, one {# file} other {# files}} in {folder}.'"""
    return Message((
        Literal("You have ", Location(1, 0)),
        Plural(
            name="count",
            branches=(
                Branch("one", Message((Pound(), Literal(" file")))),
                Branch("other", Message((Pound(), Literal(" files")))),
            ),
        ),
        Literal(" in "),
        Argument("folder"),
        Literal("."),
    ))


@pytest.fixture
def mixed_message() -> Message:
    """Message using every placeholder kind."""
    return Message((
        Literal("Hello "),
        Argument("name"),
        Literal(", "),
        Select("gender", (
            Branch("female", Message((Literal("she"),))),
            Branch("other", Message((Literal("they"),))),
        )),
        Literal(" paid "),
        Formatted("amount", FormatKind.NUMBER, "currency"),
        Literal(" on "),
        Formatted("day", FormatKind.DATE),
    ))


@pytest.fixture
def catalog_data() -> dict:
    """Raw JSON catalog with two messages."""
    return {
        "greeting": [
            {"type": "literal", "text": "Hi "},
            {"type": "argument", "name": "name"},
            {"type": "literal", "text": "!"},
        ],
        "files": [
            {"type": "literal", "text": "You have ", "location": {"line": 1, "column": 0}},
            {
                "type": "plural",
                "name": "count",
                "branches": [
                    {"key": "one", "message": [{"type": "pound"}, {"type": "literal", "text": " file"}]},
                    {"key": "other", "message": [{"type": "pound"}, {"type": "literal", "text": " files"}]},
                ],
            },
        ],
    }


@pytest.fixture
def catalog_file(tmp_path: Path, catalog_data: dict) -> Path:
    """Catalog JSON written to a temporary file."""
    path = tmp_path / "en.json"
    path.write_text(json.dumps(catalog_data), encoding="utf-8")
    return path
