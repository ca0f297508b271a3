"""PostScript style suffix tables.

Most font families derive PostScript names for their styles by appending
"-Italic", "-Bold" or "-BoldItalic" to the family name, and use the bare
family name for the regular style. Some families use a different convention:
"Oblique" instead of "Italic", no hyphen between family and suffix, or a
"-Regular" suffix for the regular style. Some ship only a regular face.

Families known to use an irregular convention are listed in a suffix table.
The built-in table is stored as a JSON resource file in the data directory:
- irregular_suffixes.json: family name -> [regular, slanted, bold, slanted_bold]

A ``null`` slot marks a style the family does not provide. The built-in table
is lazy-loaded on first access.
"""

import functools
import json
import logging
from collections.abc import Iterator, Mapping
from importlib.resources import files
from pathlib import Path
from types import MappingProxyType
from typing import Any, NamedTuple

from psfontmap.core.styles import FontStyle

logger = logging.getLogger(__name__)


class StyleSuffixList(NamedTuple):
    """Suffixes for the four styles of a family.

    An empty string means no suffix, ``None`` means the style is unavailable.
    """

    regular: str | None
    slanted: str | None
    bold: str | None
    slanted_bold: str | None

    def suffix_for(self, style: FontStyle) -> str | None:
        """Get the suffix for the given style."""
        return self[style]

    def is_available(self, style: FontStyle) -> bool:
        """Whether the family provides the given style."""
        return self[style] is not None


DEFAULT_SUFFIXES = StyleSuffixList("", "-Italic", "-Bold", "-BoldItalic")


class SuffixTable(Mapping[str, StyleSuffixList]):
    """Read-only table of irregular style suffixes keyed by family name.

    Keys are family names in PostScript (output) spelling. Lookup is exact;
    families not in the table get ``DEFAULT_SUFFIXES``.

    Example:
        >>> table = SuffixTable.builtin()
        >>> table.suffixes_for("NotoMono")
        StyleSuffixList(regular='-Regular', slanted=None, bold=None, slanted_bold=None)
        >>> table.suffixes_for("Times")
        StyleSuffixList(regular='', slanted='-Italic', bold='-Bold', slanted_bold='-BoldItalic')
    """

    def __init__(self, entries: Mapping[str, StyleSuffixList] | None = None) -> None:
        self._entries = MappingProxyType(dict(entries or {}))

    def __getitem__(self, family: str) -> StyleSuffixList:
        return self._entries[family]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} families)"

    def suffixes_for(self, family: str) -> StyleSuffixList:
        """Get the suffix list for a family, falling back to the defaults."""
        suffixes = self._entries.get(family)
        if suffixes is None:
            return DEFAULT_SUFFIXES
        logger.debug(f"Found irregular suffixes for '{family}'")
        return suffixes

    def layered(self, custom: Mapping[str, StyleSuffixList]) -> "SuffixTable":
        """Return a new table where entries in ``custom`` take priority."""
        combined = dict(self._entries)
        combined.update(custom)
        return SuffixTable(combined)

    @classmethod
    def builtin(cls) -> "SuffixTable":
        """Get the built-in table (loaded once per process)."""
        return _load_builtin_table()

    @classmethod
    def from_json(cls, file_path: str | Path) -> "SuffixTable":
        """Load a suffix table from a JSON file.

        Args:
            file_path: Path to JSON file containing suffix lists.

        Returns:
            SuffixTable with the entries of the file.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            json.JSONDecodeError: If the file is not valid JSON.
            ValueError: If the JSON structure is invalid.

        Example JSON format:
            {
                "FreeSans": ["", "Oblique", "Bold", "BoldOblique"],
                "NotoMono": ["-Regular", null, null, null]
            }
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Suffix table file not found: {file_path}")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise json.JSONDecodeError(
                f"Invalid JSON in suffix table file '{file_path}': {e.msg}",
                e.doc,
                e.pos,
            ) from e

        table = cls(_parse_table(data))
        logger.info(f"Loaded {len(table)} suffix lists from '{file_path}'")
        return table


def _parse_table(data: Any) -> dict[str, StyleSuffixList]:
    """Validate decoded JSON and convert it to suffix lists.

    Raises:
        ValueError: If the structure is not a family -> 4-slot list mapping.
    """
    if not isinstance(data, dict):
        raise ValueError(
            f"Suffix table must be a dictionary, got {type(data).__name__}"
        )

    entries = {}
    for family, suffixes in data.items():
        if not isinstance(family, str) or not family:
            raise ValueError(f"Family name must be a non-empty string, got {family!r}")
        if not isinstance(suffixes, list) or len(suffixes) != len(FontStyle):
            raise ValueError(
                f"Suffixes for '{family}' must be a list of {len(FontStyle)} entries"
            )
        for style, suffix in zip(FontStyle, suffixes):
            if suffix is not None and not isinstance(suffix, str):
                raise ValueError(
                    f"Suffix for '{family}' {style.name.lower()} must be a string "
                    f"or null, got {type(suffix).__name__}"
                )
        entries[family] = StyleSuffixList(*suffixes)
    return entries


@functools.lru_cache(maxsize=1)
def _load_builtin_table() -> SuffixTable:
    """Load the built-in suffix table on first access."""
    data_path = files("psfontmap.data").joinpath("irregular_suffixes.json")
    table = SuffixTable(_parse_table(json.loads(data_path.read_text(encoding="utf-8"))))
    logger.debug(f"Loaded {len(table)} irregular suffix lists from resource file")
    return table


def suffixes_for(family: str) -> StyleSuffixList:
    """Get the style suffixes for a family from the built-in table."""
    return SuffixTable.builtin().suffixes_for(family)
