"""PostScript font name generation."""

import logging
from typing import NamedTuple

from psfontmap.core.styles import FontStyle
from psfontmap.core.suffixes import SuffixTable

logger = logging.getLogger(__name__)


class FontNameList(NamedTuple):
    """PostScript names for the four styles of a family.

    ``None`` marks a style that is unavailable for the family.
    """

    regular: str | None
    slanted: str | None
    bold: str | None
    slanted_bold: str | None

    def name_for(self, style: FontStyle) -> str | None:
        """Get the PostScript name for the given style."""
        return self[style]

    def available(self) -> dict[FontStyle, str]:
        """Return a mapping of the available styles to their names."""
        return {style: name for style, name in zip(FontStyle, self) if name is not None}


def resolve_names(family: str, table: SuffixTable | None = None) -> FontNameList:
    """Build the PostScript names for all styles of a family.

    The family is used both as the suffix table key and as the name prefix, so
    it must be given in PostScript (output) spelling.

    Args:
        family: Font family name, e.g. "DejaVuSans".
        table: Suffix table to consult. Defaults to the built-in table.

    Returns:
        FontNameList with ``family + suffix`` per style, or None where the
        style is unavailable.

    Example:
        >>> resolve_names("FreeSans")
        FontNameList(regular='FreeSans', slanted='FreeSansOblique', bold='FreeSansBold', slanted_bold='FreeSansBoldOblique')
    """
    if table is None:
        table = SuffixTable.builtin()
    suffixes = table.suffixes_for(family)
    names = FontNameList(
        *(None if suffix is None else f"{family}{suffix}" for suffix in suffixes)
    )
    logger.debug(f"Resolved PostScript names for '{family}': {list(names)}")
    return names
