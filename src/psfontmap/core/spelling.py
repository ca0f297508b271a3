"""Family name spelling reconciliation.

A font family is known under two spellings:

- the display spelling, used by the Tk toolkit for font lookups: each word of
  the canonical family title-cased (first letter upper, rest lower) and
  joined without separators, e.g. "DejaVu Sans" -> "DejavuSans";
- the output spelling, used in generated PostScript names: the words of the
  canonical family joined verbatim, e.g. "DejaVu Sans" -> "DejaVuSans".

The canonical family comes from a font normalizer, which asks a font database
what family a request actually resolves to at a reference size. Normalizers
are looked up by name:

- "fontconfig": fontconfig match (Linux/macOS)
- "tk": Tk's ``font actual`` in a running Tcl interpreter
- "verbatim": the requested family split on whitespace, no font database
"""

import dataclasses
import logging
from collections.abc import Sequence
from typing import Any, Callable, Protocol

try:
    import fontconfig

    HAS_FONTCONFIG = True
except ImportError:
    HAS_FONTCONFIG = False

try:
    import tkinter
    from tkinter import font as tkfont

    HAS_TKINTER = True
except ImportError:
    HAS_TKINTER = False

from psfontmap.exceptions import NormalizationUnavailable

logger = logging.getLogger(__name__)

# Font size in points used for normalization queries
REFERENCE_SIZE = 10


class FontNormalizer(Protocol):
    """Resolves a requested family to the words of its canonical family."""

    def normalize(self, family: str, size: int) -> Sequence[str]: ...


def _escape_fontconfig(value: str) -> str:
    """Escape characters with special meaning in fontconfig patterns."""
    for char in ("\\", "-", ":", ","):
        value = value.replace(char, "\\" + char)
    return value


class FontconfigNormalizer:
    """Normalizer backed by fontconfig.

    fontconfig always returns its best match, so an unknown family resolves to
    a substitute family (e.g. "Times" -> "Nimbus Roman") rather than failing.
    """

    def normalize(self, family: str, size: int) -> Sequence[str]:
        if not HAS_FONTCONFIG:
            raise NormalizationUnavailable(
                f"Cannot normalize '{family}': fontconfig is not available. "
                "Install fontconfig-py or select another normalizer."
            )
        try:
            match = fontconfig.match(
                pattern=f":family={_escape_fontconfig(family)}:size={size}",
                select=("family",),
            )
        except Exception as e:
            raise NormalizationUnavailable(
                f"fontconfig failed to match '{family}': {e}"
            ) from e

        if not match or not match.get("family"):
            raise NormalizationUnavailable(f"fontconfig found no match for '{family}'")
        logger.debug(f"fontconfig matched '{family}' to '{match['family']}'")
        return str(match["family"]).split()


class TkNormalizer:
    """Normalizer backed by Tk's font subsystem.

    Args:
        master: Widget whose interpreter is queried. Defaults to the default
            root window, which must exist.
    """

    def __init__(self, master: Any = None) -> None:
        self.master = master

    def normalize(self, family: str, size: int) -> Sequence[str]:
        if not HAS_TKINTER:
            raise NormalizationUnavailable(
                f"Cannot normalize '{family}': tkinter is not available."
            )
        try:
            tk_font = tkfont.Font(root=self.master, family=family, size=size)
            actual = tk_font.actual("family")
        except (RuntimeError, tkinter.TclError) as e:
            raise NormalizationUnavailable(
                f"Tk failed to resolve font '{family}': {e}"
            ) from e
        logger.debug(f"Tk resolved '{family}' to '{actual}'")
        return str(actual).split()


class VerbatimNormalizer:
    """Normalizer that trusts the requested family as canonical."""

    def normalize(self, family: str, size: int) -> Sequence[str]:
        return family.split()


NORMALIZERS: dict[str, Callable[..., FontNormalizer]] = {
    "fontconfig": FontconfigNormalizer,
    "tk": TkNormalizer,
    "verbatim": VerbatimNormalizer,
}


def get_normalizer(name: str, **kwargs: Any) -> FontNormalizer:
    """Create a normalizer by name.

    Args:
        name: One of "fontconfig", "tk" or "verbatim".
        **kwargs: Passed to the normalizer constructor (e.g. ``master`` for tk).

    Raises:
        ValueError: If the name is unknown.
    """
    try:
        factory = NORMALIZERS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown normalizer '{name}', expected one of {sorted(NORMALIZERS)}"
        ) from None
    return factory(**kwargs)


@dataclasses.dataclass(frozen=True)
class Spelling:
    """Display and output spellings of a family."""

    display: str
    output: str

    @property
    def diverges(self) -> bool:
        """Whether the two spellings differ."""
        return self.display != self.output


def _title_word(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


class SpellingReconciler:
    """Derive display and output spellings through a font normalizer.

    Raises:
        ValueError: If the reference size is not a positive integer.
    """

    def __init__(
        self, normalizer: FontNormalizer, reference_size: int = REFERENCE_SIZE
    ) -> None:
        if (
            isinstance(reference_size, bool)
            or not isinstance(reference_size, int)
            or reference_size <= 0
        ):
            raise ValueError(
                f"Reference size must be a positive integer, got {reference_size!r}"
            )
        self.normalizer = normalizer
        self.reference_size = reference_size

    def canonical_words(self, family: str) -> list[str]:
        """Get the words of the canonical family for a requested family.

        Raises:
            NormalizationUnavailable: If the normalizer returns nothing usable.
        """
        words = [
            str(word)
            for word in self.normalizer.normalize(family, self.reference_size)
            if str(word).strip()
        ]
        if not words:
            raise NormalizationUnavailable(
                f"Normalizer returned an empty family for '{family}'"
            )
        return words

    def display_spelling(self, family: str) -> str:
        return "".join(_title_word(word) for word in self.canonical_words(family))

    def output_spelling(self, family: str) -> str:
        return "".join(self.canonical_words(family))

    def reconcile(self, family: str) -> Spelling:
        """Get both spellings with a single normalization query."""
        words = self.canonical_words(family)
        spelling = Spelling(
            display="".join(_title_word(word) for word in words),
            output="".join(words),
        )
        if spelling.diverges:
            logger.debug(
                f"Spellings of '{family}' diverge: display '{spelling.display}', "
                f"output '{spelling.output}'"
            )
        return spelling


def _reconciler(
    normalizer: FontNormalizer | None, reference_size: int | None
) -> SpellingReconciler:
    """Fill missing collaborators from ``Settings.default()``."""
    if normalizer is None or reference_size is None:
        # Deferred: config imports this module
        from psfontmap.config import Settings  # noqa: PLC0415

        settings = Settings.default()
        if normalizer is None:
            normalizer = settings.normalizer()
        if reference_size is None:
            reference_size = settings.reference_size
    return SpellingReconciler(normalizer, reference_size)


def display_spelling(
    family: str,
    normalizer: FontNormalizer | None = None,
    reference_size: int | None = None,
) -> str:
    """Get the display (Tk) spelling of a family.

    A missing normalizer or reference size comes from ``Settings.default()``,
    as in ``build_map``.
    """
    return _reconciler(normalizer, reference_size).display_spelling(family)


def output_spelling(
    family: str,
    normalizer: FontNormalizer | None = None,
    reference_size: int | None = None,
) -> str:
    """Get the output (PostScript) spelling of a family."""
    return _reconciler(normalizer, reference_size).output_spelling(family)
