import logging
from collections.abc import Sequence

import pytest

from psfontmap.core import cache
from psfontmap.exceptions import NormalizationUnavailable

logger = logging.getLogger(__name__)


class StubNormalizer:
    """Normalizer answering from a fixed family table.

    Families not in the table resolve to themselves, split on whitespace.
    A value of None makes normalization fail for that family.
    """

    def __init__(self, families: dict[str, str | None] | None = None) -> None:
        self.families = families or {}
        self.calls: list[tuple[str, int]] = []

    def normalize(self, family: str, size: int) -> Sequence[str]:
        self.calls.append((family, size))
        canonical = self.families.get(family, family)
        if canonical is None:
            raise NormalizationUnavailable(f"Stub cannot resolve '{family}'")
        return canonical.split()


@pytest.fixture
def stub_normalizer() -> StubNormalizer:
    return StubNormalizer(
        {
            "DejaVu Sans": "DejaVu Sans",
            "dejavu sans": "DejaVu Sans",
            "FreeSans": "FreeSans",
            "Times": "Times",
            "Noto Mono": "Noto Mono",
            "Broken": None,
        }
    )


@pytest.fixture
def fresh_default_map(monkeypatch: pytest.MonkeyPatch) -> cache.DefaultFontMap:
    """Replace the process-wide default map with an uninitialized one.

    The default map is built with the verbatim normalizer so that the result
    does not depend on the fonts installed.
    """
    monkeypatch.setenv("PSFONTMAP_NORMALIZER", "verbatim")
    monkeypatch.delenv("PSFONTMAP_SUFFIX_TABLE", raising=False)
    monkeypatch.delenv("PSFONTMAP_REFERENCE_SIZE", raising=False)
    holder = cache.DefaultFontMap()
    monkeypatch.setattr(cache, "_default_font_map", holder)
    return holder


def has_font(family: str) -> bool:
    """Check if a font family is available on the system.

    Args:
        family: Font family name to check.

    Returns:
        True if fontconfig matches the family itself, False otherwise.
    """
    try:
        # Optional dependency - only available on Linux/macOS
        import fontconfig  # noqa: PLC0415

        match = fontconfig.match(
            pattern=f":family={family}",
            select=("family",),
        )
        # Fontconfig returns a fallback font if the requested one isn't found
        if not match or not match.get("family"):
            return False
        return match.get("family", "").lower() == family.lower()
    except Exception as e:
        logger.debug(f"Error checking font availability: {e}")
        return False


requires_dejavu_sans = pytest.mark.skipif(
    not has_font("DejaVu Sans"),
    reason="DejaVu Sans font (or fontconfig) not installed",
)
