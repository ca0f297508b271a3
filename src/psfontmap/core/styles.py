"""Font style enumeration and style tags.

PostScript font names are resolved for four style variants. The order of
``FontStyle`` members is fixed and is the slot order of suffix and name lists.
Each style maps to a set of Tk-style tags (``bold``, ``italic``) used as part
of font map keys.
"""

import enum
from collections.abc import Iterable


class StyleTag(str, enum.Enum):
    """Style word as used in Tk font descriptions."""

    BOLD = "bold"
    ITALIC = "italic"

    def __str__(self) -> str:
        return self.value


class FontStyle(enum.IntEnum):
    """Font style variants, in slot order."""

    REGULAR = 0
    SLANTED = 1
    BOLD = 2
    SLANTED_BOLD = 3

    @property
    def tags(self) -> frozenset[StyleTag]:
        """Style tags for this style."""
        return _STYLE_TAGS[self]

    @classmethod
    def from_tags(cls, tags: Iterable[StyleTag | str]) -> "FontStyle":
        """Get the style for a collection of tags (order-insensitive).

        Raises:
            ValueError: If a tag is not a known style word.
        """
        tag_set = frozenset(StyleTag(str(tag).lower()) for tag in tags)
        for style, style_tags in _STYLE_TAGS.items():
            if style_tags == tag_set:
                return style
        raise ValueError(f"No font style for tags {sorted(tag_set)}")


_STYLE_TAGS: dict[FontStyle, frozenset[StyleTag]] = {
    FontStyle.REGULAR: frozenset(),
    FontStyle.SLANTED: frozenset({StyleTag.ITALIC}),
    FontStyle.BOLD: frozenset({StyleTag.BOLD}),
    FontStyle.SLANTED_BOLD: frozenset({StyleTag.BOLD, StyleTag.ITALIC}),
}


def tcl_style_words(tags: frozenset[StyleTag]) -> list[str]:
    """Style words in the order Tk writes them ("bold" before "italic")."""
    return [tag.value for tag in (StyleTag.BOLD, StyleTag.ITALIC) if tag in tags]
