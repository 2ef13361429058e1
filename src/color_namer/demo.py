# src/color_namer/demo.py
import argparse
import json
import logging
import sys


def main(argv=None):
    """CLI demo: name one or more hex colors (simplified / detailed / ISCC-NBS)."""
    from .naming.color.logic.pipelines.name_pipeline import names_for_hex
    from .naming.general.utils.log import debug as topic_debug

    parser = argparse.ArgumentParser(
        prog="color-namer-demo",
        description="Print the simplified, detailed and ISCC-NBS names of hex colors.",
    )
    parser.add_argument(
        "hex",
        nargs="*",
        help="Hex colors to name (e.g. 008080 '#F0F8FF')",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args(argv)
    values = args.hex or ["008080"]

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    try:
        results = []
        for value in values:
            names = names_for_hex(value, debug=args.debug)
            if args.debug:
                topic_debug(f"{value} → {names.simplified}", topic="demo")
            results.append({"hex": value, **names._asdict()})
        print(json.dumps(results, indent=2, ensure_ascii=False))
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
