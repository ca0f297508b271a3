"""psfontmap - PostScript font names and font maps for Tk canvas output.

Example:
    >>> from psfontmap import font_map_for, font_name_list_for, is_mapped_font
    >>> font_name_list_for("NotoMono")
    FontNameList(regular='NotoMono-Regular', slanted=None, bold=None, slanted_bold=None)
    >>> font_map = font_map_for([("FreeSans", [12, 14]), ("FreeMono", [10])])
    >>> is_mapped_font(font_map, ("FreeSans", 12, "bold"))
    True
"""

from logging import getLogger
from typing import Any, Iterable, Optional

from psfontmap.config import Settings
from psfontmap.core.cache import DEFAULT_FONT_REQUESTS, DefaultFontMap, default_map
from psfontmap.core.font_map import (
    FontMap,
    FontMapKey,
    FontMapValue,
    FontRequest,
    RequestLike,
    build_map,
    coerce_requests,
    is_mapped,
)
from psfontmap.core.names import FontNameList, resolve_names
from psfontmap.core.spelling import FontNormalizer, get_normalizer
from psfontmap.core.styles import FontStyle, StyleTag
from psfontmap.core.suffixes import DEFAULT_SUFFIXES, StyleSuffixList, SuffixTable
from psfontmap.exceptions import FontMapError, InvalidRequest, NormalizationUnavailable
from psfontmap.version import __version__ as __version__

logger = getLogger(__name__)


def font_name_list_for(
    family: str, table: Optional[SuffixTable] = None
) -> FontNameList:
    """Get the PostScript names for the regular, slanted, bold and slanted-bold
    styles of a family. ``None`` marks an unavailable style.

    The family is used as given, so it should already be in PostScript
    spelling (e.g. "DejaVuSans").
    """
    return resolve_names(family, table)


def font_map_for(
    requests: Optional[Iterable[RequestLike]] = None,
    normalizer: Optional[FontNormalizer] = None,
    table: Optional[SuffixTable] = None,
) -> FontMap:
    """Get a font map for the given families and pitches.

    If no requests or an empty list is passed, the process-wide default map
    (Times, Courier and Helvetica at 8, 9, 10, 12, 14 and 15 points) is
    returned instead.

    Example:
        >>> canvas.postscript(
        ...     file="out.ps",
        ...     fontmap=font_map_for([("FreeSans", 12, 14)]).install(canvas),
        ... )
    """
    request_list = coerce_requests(requests) if requests is not None else []
    if not request_list:
        return default_map()
    return build_map(request_list, normalizer=normalizer, table=table)


def is_mapped_font(font_map: FontMap, font_spec: Any) -> bool:
    """Check whether ``font_spec``, e.g. ``("Times", 10, "bold")``, is mapped."""
    return is_mapped(font_map, font_spec)


__all__ = [
    "__version__",
    "font_name_list_for",
    "font_map_for",
    "is_mapped_font",
    "default_map",
    "build_map",
    "resolve_names",
    "get_normalizer",
    "DEFAULT_FONT_REQUESTS",
    "DEFAULT_SUFFIXES",
    "DefaultFontMap",
    "FontMap",
    "FontMapKey",
    "FontMapValue",
    "FontNameList",
    "FontNormalizer",
    "FontRequest",
    "FontStyle",
    "Settings",
    "StyleSuffixList",
    "StyleTag",
    "SuffixTable",
    "FontMapError",
    "InvalidRequest",
    "NormalizationUnavailable",
]
