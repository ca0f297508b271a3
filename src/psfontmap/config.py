"""Configuration for font map generation.

Settings can be configured via environment variables or constructor
parameters. Constructor parameters take precedence over environment variables.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any

from psfontmap.core.spelling import REFERENCE_SIZE, FontNormalizer, get_normalizer
from psfontmap.core.suffixes import SuffixTable

logger = logging.getLogger(__name__)

DEFAULT_NORMALIZER = "fontconfig"


@dataclass
class Settings:
    """Settings for spelling reconciliation and name resolution.

    Environment variables:
        PSFONTMAP_NORMALIZER: Font normalizer name, one of "fontconfig", "tk"
            or "verbatim" (default: fontconfig)
        PSFONTMAP_REFERENCE_SIZE: Font size in points used when normalizing
            family names (default: 10)
        PSFONTMAP_SUFFIX_TABLE: Path to a JSON suffix table layered over the
            built-in table (default: none)

    Example:
        >>> # Use environment or default settings
        >>> settings = Settings.default()
        >>>
        >>> # Skip the font database and use a custom suffix table
        >>> settings = Settings(normalizer_name="verbatim",
        ...                     suffix_table_path="fonts.json")
    """

    normalizer_name: str = DEFAULT_NORMALIZER
    reference_size: int = REFERENCE_SIZE
    suffix_table_path: str | None = None

    @classmethod
    def default(cls) -> "Settings":
        """Create Settings from environment variables.

        Raises:
            ValueError: If PSFONTMAP_REFERENCE_SIZE is not a valid integer.

        Note:
            A non-positive reference size is replaced by the default with a
            warning logged.
        """
        size_str = os.environ.get("PSFONTMAP_REFERENCE_SIZE")
        reference_size = REFERENCE_SIZE
        if size_str is not None:
            try:
                reference_size = int(size_str)
            except ValueError as e:
                raise ValueError(
                    f"Environment variable PSFONTMAP_REFERENCE_SIZE={size_str!r} "
                    "is not a valid integer"
                ) from e
            if reference_size <= 0:
                logger.warning(
                    f"Environment variable PSFONTMAP_REFERENCE_SIZE={reference_size} "
                    f"is not positive, using {REFERENCE_SIZE} instead."
                )
                reference_size = REFERENCE_SIZE

        return cls(
            normalizer_name=os.environ.get("PSFONTMAP_NORMALIZER", DEFAULT_NORMALIZER),
            reference_size=reference_size,
            suffix_table_path=os.environ.get("PSFONTMAP_SUFFIX_TABLE") or None,
        )

    def normalizer(self, **kwargs: Any) -> FontNormalizer:
        """Create the configured normalizer."""
        return get_normalizer(self.normalizer_name, **kwargs)

    def suffix_table(self) -> SuffixTable:
        """Get the built-in suffix table, layered with the custom one if set."""
        table = SuffixTable.builtin()
        if self.suffix_table_path:
            table = table.layered(SuffixTable.from_json(self.suffix_table_path))
        return table
