import argparse
import json
import logging
import sys

from psfontmap import DEFAULT_FONT_REQUESTS, FontMap, FontRequest, Settings, build_map
from psfontmap.core.names import resolve_names
from psfontmap.core.styles import tcl_style_words
from psfontmap.exceptions import FontMapError, InvalidRequest

logger = logging.getLogger(__name__)


def parse_request(value: str) -> FontRequest:
    """Parse ``FAMILY:PITCH[,PITCH...]`` into a font request."""
    family, sep, pitches = value.rpartition(":")
    if not sep:
        raise InvalidRequest(f"Expected FAMILY:PITCH[,PITCH...], got {value!r}")
    try:
        pitch_list = tuple(int(pitch) for pitch in pitches.split(","))
    except ValueError as e:
        raise InvalidRequest(f"Invalid pitch list in {value!r}") from e
    return FontRequest(family, pitch_list)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate PostScript font names and Tk canvas font maps"
    )
    parser.add_argument(
        "--normalizer",
        metavar="NAME",
        type=str,
        choices=["fontconfig", "tk", "verbatim"],
        default=None,
        help="Font normalizer (fontconfig, tk, verbatim). "
        "Default: PSFONTMAP_NORMALIZER or fontconfig",
    )
    parser.add_argument(
        "--reference-size",
        metavar="SIZE",
        type=int,
        default=None,
        help="Font size used when normalizing family names. Default: 10",
    )
    parser.add_argument(
        "--suffix-table",
        metavar="PATH",
        type=str,
        default=None,
        help="JSON suffix table layered over the built-in table.",
    )
    parser.add_argument(
        "--loglevel",
        metavar="LEVEL",
        default="WARNING",
        help="Logging level, default WARNING",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    names_parser = subparsers.add_parser(
        "names", help="Print PostScript names of the four styles of each family."
    )
    names_parser.add_argument(
        "families", metavar="FAMILY", nargs="+", help="Family in PostScript spelling"
    )

    map_parser = subparsers.add_parser(
        "map", help="Print the font map for the given families and pitches."
    )
    map_parser.add_argument(
        "requests",
        metavar="FAMILY:PITCHES",
        nargs="*",
        help="Family and comma-separated pitches, e.g. FreeSans:12,14. "
        "Default: Times, Courier and Helvetica at 8, 9, 10, 12, 14 and 15",
    )
    map_parser.add_argument(
        "--format",
        metavar="FORMAT",
        type=str,
        choices=["json", "tcl"],
        default="json",
        help="Output format (json, tcl). Default: json",
    )
    map_parser.add_argument(
        "--varname",
        metavar="NAME",
        type=str,
        default="fontmap",
        help="Tcl array variable name for tcl output. Default: fontmap",
    )
    return parser.parse_args(argv)


def make_settings(args: argparse.Namespace) -> Settings:
    """Apply command line overrides to the environment settings."""
    settings = Settings.default()
    if args.normalizer is not None:
        settings.normalizer_name = args.normalizer
    if args.reference_size is not None:
        settings.reference_size = args.reference_size
    if args.suffix_table is not None:
        settings.suffix_table_path = args.suffix_table
    return settings


def format_json(font_map: FontMap) -> str:
    records = [
        {
            "family": key.family,
            "pitch": key.pitch,
            "styles": tcl_style_words(key.styles),
            "name": value.name,
            "size": value.pitch,
        }
        for key, value in font_map.items()
    ]
    return json.dumps(records, indent=2)


def format_tcl(font_map: FontMap, varname: str) -> str:
    lines = [f"array set {varname} {{"]
    lines.extend(f"  {{{name}}} {{{value}}}" for name, value in font_map.tcl_items())
    lines.append("}")
    return "\n".join(lines)


def run(args: argparse.Namespace) -> str:
    settings = make_settings(args)

    if args.command == "names":
        table = settings.suffix_table()
        lines = []
        for family in args.families:
            names = resolve_names(family, table)
            lines.append(" ".join(name or "-" for name in names))
        return "\n".join(lines)

    requests = [parse_request(value) for value in args.requests]
    font_map = build_map(
        requests or DEFAULT_FONT_REQUESTS,
        normalizer=settings.normalizer(),
        table=settings.suffix_table(),
        reference_size=settings.reference_size,
    )
    if args.format == "tcl":
        return format_tcl(font_map, args.varname)
    return format_json(font_map)


def main(argv: list[str] | None = None) -> int:
    """Main function to print font names or font maps."""
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.loglevel.upper(), "WARNING"))
    try:
        output = run(args)
    except (FontMapError, ValueError, OSError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"psfontmap: error: {e}", file=sys.stderr)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
