"""Font map generation for Tk's canvas postscript command.

The Tk canvas ``postscript`` command accepts a ``-fontmap`` option through
which font names in the PostScript output can be controlled. A font of a
canvas text item for which an entry exists in the font map is replaced in the
output with the PostScript name and size given in the font map.

It is not possible to have a font map entry that covers all pitches of a
family. One entry is required for each pitch used, so the map is built from a
list of families and their pitches.

Map keys are ``(family, pitch, style tags)`` where the style tags are one of
``{}``, ``{italic}``, ``{bold}`` or ``{bold, italic}``. Values are
``(PostScript name, pitch)``.
"""

import dataclasses
import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, NamedTuple, Union

from psfontmap.config import Settings
from psfontmap.core.names import resolve_names
from psfontmap.core.spelling import FontNormalizer, SpellingReconciler
from psfontmap.core.styles import FontStyle, StyleTag, tcl_style_words
from psfontmap.core.suffixes import SuffixTable
from psfontmap.exceptions import InvalidRequest

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class FontRequest:
    """A font family and the pitches to map it for.

    Duplicate pitches are dropped, keeping the first occurrence.

    Raises:
        InvalidRequest: If the family is empty or a pitch is not a positive
            integer.
    """

    family: str
    pitches: tuple[int, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.family, str) or not self.family.strip():
            raise InvalidRequest(
                f"Font family must be a non-empty string, got {self.family!r}"
            )
        if isinstance(self.pitches, (str, bytes)) or not isinstance(
            self.pitches, Iterable
        ):
            raise InvalidRequest(
                f"Pitches for '{self.family}' must be a sequence, got {self.pitches!r}"
            )
        pitches = tuple(self.pitches)
        if not pitches:
            raise InvalidRequest(f"No pitches requested for '{self.family}'")
        for pitch in pitches:
            if isinstance(pitch, bool) or not isinstance(pitch, int) or pitch <= 0:
                raise InvalidRequest(
                    f"Pitch for '{self.family}' must be a positive integer, "
                    f"got {pitch!r}"
                )
        object.__setattr__(self, "pitches", tuple(dict.fromkeys(pitches)))

    @classmethod
    def coerce(cls, value: Any) -> "FontRequest":
        """Build a request from ``(family, pitches)`` or ``(family, pitch, ...)``.

        Example:
            >>> FontRequest.coerce(("Times", [10, 12]))
            FontRequest(family='Times', pitches=(10, 12))
            >>> FontRequest.coerce(("Times", 10, 12))
            FontRequest(family='Times', pitches=(10, 12))
        """
        if isinstance(value, FontRequest):
            return value
        if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
            raise InvalidRequest(
                f"Font request must be a (family, pitches) sequence, got {value!r}"
            )
        family, *rest = list(value) or [None]
        if len(rest) == 1 and isinstance(rest[0], Iterable) and not isinstance(
            rest[0], (str, bytes)
        ):
            pitches = tuple(rest[0])
        else:
            pitches = tuple(rest)
        return cls(family, pitches)


RequestLike = Union[FontRequest, tuple, list]


def coerce_requests(requests: Iterable[RequestLike]) -> list[FontRequest]:
    """Coerce a collection of request-likes into font requests.

    Raises:
        InvalidRequest: If ``requests`` is not a collection of requests, e.g.
            a single ``FontRequest`` or family string, or any item is invalid.
    """
    if isinstance(requests, (FontRequest, str, bytes)) or not isinstance(
        requests, Iterable
    ):
        raise InvalidRequest(
            f"Font requests must be a list of requests, got {requests!r}"
        )
    return [FontRequest.coerce(request) for request in requests]


class FontMapKey(NamedTuple):
    """Font map key: family spelling, pitch and style tags."""

    family: str
    pitch: int
    styles: frozenset[StyleTag] = frozenset()

    @property
    def style(self) -> FontStyle:
        return FontStyle.from_tags(self.styles)

    @classmethod
    def from_spec(cls, spec: Any) -> "FontMapKey":
        """Build a key from a loose font spec.

        Style words may follow the pitch individually, as one string, or as a
        collection, in any order: ``("Times", 10, "bold", "italic")``,
        ``("Times", 10, "bold italic")`` and ``("Times", 10, {"italic",
        "bold"})`` are the same key.

        Raises:
            ValueError: If the spec cannot describe a font map key.
        """
        if isinstance(spec, FontMapKey):
            return spec
        if isinstance(spec, (str, bytes)) or not isinstance(spec, Iterable):
            raise ValueError(f"Font spec must be a sequence, got {spec!r}")
        items = list(spec)
        if len(items) < 2:
            raise ValueError(f"Font spec needs a family and a pitch, got {spec!r}")
        family, pitch, *rest = items
        if not isinstance(family, str):
            raise ValueError(f"Font family must be a string, got {family!r}")
        if isinstance(pitch, bool) or not isinstance(pitch, int):
            raise ValueError(f"Pitch must be an integer, got {pitch!r}")

        words: list[Any] = []
        for item in rest:
            if isinstance(item, str):
                words.extend(item.split())
            elif isinstance(item, Iterable):
                words.extend(item)
            else:
                raise ValueError(f"Invalid style in font spec: {item!r}")
        return cls(family, pitch, FontStyle.from_tags(words).tags)

    def tcl_name(self) -> str:
        """Tcl list form used as font map array element name."""
        return _tcl_list(
            [self.family, str(self.pitch), _tcl_list(tcl_style_words(self.styles))]
        )


class FontMapValue(NamedTuple):
    """Font map value: PostScript name and pitch."""

    name: str
    pitch: int

    def tcl_value(self) -> str:
        return _tcl_list([self.name, str(self.pitch)])


_TCL_SPECIAL = set(' \t\n{}[]$"\\;')


def _tcl_quote(word: str) -> str:
    if not word:
        return "{}"
    if _TCL_SPECIAL.intersection(word):
        return "{" + word + "}"
    return word


def _tcl_list(words: Iterable[str]) -> str:
    return " ".join(_tcl_quote(word) for word in words)


class FontMap(Mapping[FontMapKey, FontMapValue]):
    """Read-only mapping from font map keys to PostScript names and pitches."""

    def __init__(self, entries: Mapping[FontMapKey, FontMapValue] | None = None) -> None:
        self._entries: dict[FontMapKey, FontMapValue] = dict(entries or {})

    def __getitem__(self, key: FontMapKey) -> FontMapValue:
        return self._entries[key]

    def __iter__(self) -> Iterator[FontMapKey]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} entries)"

    def is_mapped(self, spec: Any) -> bool:
        """Check whether a font spec has an entry in this map."""
        return is_mapped(self, spec)

    def tcl_items(self) -> Iterator[tuple[str, str]]:
        """Yield ``(element name, value)`` pairs of the Tcl fontmap array.

        Example:
            ``("Times 10 {bold italic}", "Times-BoldItalic 10")``
        """
        for key, value in self._entries.items():
            yield key.tcl_name(), value.tcl_value()

    def install(self, widget: Any, varname: str = "fontmap") -> str:
        """Store the map as a global Tcl array in a widget's interpreter.

        Args:
            widget: Any tkinter widget, or a Tcl interpreter (``widget.tk``).
            varname: Name of the Tcl array variable.

        Returns:
            The variable name, for ``canvas.postscript(fontmap=...)``.
        """
        interp = getattr(widget, "tk", widget)
        flat: list[str] = []
        for name, value in self.tcl_items():
            flat.extend((name, value))
        interp.call("array", "set", varname, tuple(flat))
        logger.debug(f"Installed font map with {len(self)} entries as '{varname}'")
        return varname


def build_map(
    requests: Iterable[RequestLike],
    normalizer: FontNormalizer | None = None,
    table: SuffixTable | None = None,
    reference_size: int | None = None,
) -> FontMap:
    """Build a font map for all available styles of the requested families.

    For each family, the display and output spellings are derived through the
    normalizer and PostScript names are resolved against the output spelling.
    Every available style at every requested pitch gets an entry keyed by the
    display spelling. When the spellings differ, a second entry with the same
    value is keyed by the output spelling.

    Args:
        requests: Font requests, as ``FontRequest`` or ``(family, pitches)``.
        normalizer: Font normalizer for spelling reconciliation.
        table: Suffix table.
        reference_size: Size used for normalization queries.

        Collaborators left as None come from ``Settings.default()``.

    Returns:
        New FontMap. An empty request list yields an empty map.

    Raises:
        InvalidRequest: If a request is malformed. Nothing is normalized then.
        NormalizationUnavailable: If a family cannot be normalized.
        ValueError: If the reference size is not a positive integer.
    """
    font_requests = coerce_requests(requests)
    if normalizer is None or table is None or reference_size is None:
        settings = Settings.default()
        if normalizer is None:
            normalizer = settings.normalizer()
        if table is None:
            table = settings.suffix_table()
        if reference_size is None:
            reference_size = settings.reference_size
    reconciler = SpellingReconciler(normalizer, reference_size)

    entries: dict[FontMapKey, FontMapValue] = {}
    for request in font_requests:
        spelling = reconciler.reconcile(request.family)
        names = resolve_names(spelling.output, table)

        families = [spelling.display]
        if spelling.diverges:
            families.append(spelling.output)

        for pitch in request.pitches:
            for style in FontStyle:
                name = names[style]
                if name is None:
                    continue
                value = FontMapValue(name, pitch)
                for family in families:
                    entries[FontMapKey(family, pitch, style.tags)] = value

    font_map = FontMap(entries)
    logger.debug(f"Font map has {len(font_map)} entries")
    if logger.isEnabledFor(logging.DEBUG):
        for name, value in font_map.tcl_items():
            logger.debug(f"  {{{name}}} -> {{{value}}}")
    return font_map


def is_mapped(font_map: Mapping[FontMapKey, FontMapValue], spec: Any) -> bool:
    """Check whether a font spec has an entry in a font map.

    Specs that cannot describe a key are never mapped.
    """
    try:
        key = FontMapKey.from_spec(spec)
    except (TypeError, ValueError) as e:
        logger.debug(f"Font spec {spec!r} is not a font map key: {e}")
        return False
    return key in font_map
