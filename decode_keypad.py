#!/usr/bin/env python3
"""
Standalone keypad decoding script.

Decodes saved keypad key images (in slot order) against the reference digits
and optionally prints the click sequence for a PIN.
"""

import argparse
import os
import sys

from pinpad_auto.click_sequence import generate
from pinpad_auto.exceptions import ImageDecodeError, InvalidPinError
from pinpad_auto.keymap import ObservedKeypadImage, build_keymap
from pinpad_auto.logging_utils import get_global_logger, setup_global_logging
from pinpad_auto.vision import SIMILARITY_THRESHOLD, decode_png


def load_observed(paths: list) -> list:
    """
    Read keypad images from disk, one slot per path.

    Raises:
        FileNotFoundError: If any path does not exist.
    """
    observed = []
    for slot, path in enumerate(paths):
        if not os.path.exists(path):
            raise FileNotFoundError(f"Image file not found: {path}")
        with open(path, "rb") as f:
            data = f.read()
        try:
            observed.append(ObservedKeypadImage(slot, decode_png(data)))
        except ImageDecodeError as e:
            observed.append(ObservedKeypadImage(slot, None, str(e)))
    return observed


def color_print(text: str, color: str = None):
    """Print text with optional color formatting."""
    if not sys.stdout.isatty():  # No color if output is redirected
        print(text)
        return

    colors = {
        "red": "\033[91m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "reset": "\033[0m",
    }

    if color and color in colors:
        print(f"{colors[color]}{text}{colors['reset']}")
    else:
        print(text)


def main(argv=None):
    """Main entry point for the script."""
    parser = argparse.ArgumentParser(
        description="Decode keypad key images and plan PIN clicks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s slot0.png slot1.png ... slot9.png
  %(prog)s keys/*.png --pin 1234
  %(prog)s keys/*.png --threshold 15.0 --verbose
        """,
    )

    parser.add_argument("images", nargs="+", help="Key images in slot order")

    parser.add_argument("--pin", help="PIN to plan clicks for")

    parser.add_argument(
        "--threshold",
        type=float,
        default=SIMILARITY_THRESHOLD,
        help=f"Maximum per-channel distance for a match (default: {SIMILARITY_THRESHOLD})",
    )

    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output")

    args = parser.parse_args(argv)

    setup_global_logging("DEBUG" if args.verbose else "INFO")
    logger = get_global_logger()

    try:
        observed = load_observed(args.images)
        result = build_keymap(observed, args.threshold)

        print("\nKeymap (digit -> slot):")
        for digit in sorted(result.keymap):
            print(f"  {digit} -> {result.keymap[digit]}")
        for slot, error in sorted(result.decode_failures.items()):
            color_print(f"  slot {slot}: decode error: {error}", color="red")
        for slot in result.unmatched_slots:
            color_print(f"  slot {slot}: no matching digit", color="yellow")
        for digit, lost, new in result.overwritten:
            color_print(f"  digit {digit}: slot {lost} overwritten by slot {new}", color="yellow")

        complete = result.is_complete
        if args.pin is not None:
            clicks = generate(args.pin, result.keymap)
            print(f"\nClick sequence: {list(clicks.slots)}")
            if clicks.unresolved_count:
                color_print(
                    f"[-] {clicks.unresolved_count} PIN digit(s) unresolved "
                    f"at positions {list(clicks.unresolved_positions)}",
                    color="yellow",
                )
            complete = clicks.is_complete

        if complete:
            color_print("\n[*] Keypad decoded completely", color="green")
        else:
            color_print("\n[-] Keypad decoded incompletely", color="yellow")

        sys.exit(0 if complete else 1)

    except FileNotFoundError as e:
        color_print(f"Error: {e}", color="red")
        sys.exit(2)
    except InvalidPinError as e:
        color_print(f"Error: {e}", color="red")
        sys.exit(3)
    except Exception as e:
        color_print(f"Unexpected error: {e}", color="red")
        logger.error("Keypad decoding failed", operation="decode_keypad", exc_info=args.verbose)
        sys.exit(4)


if __name__ == "__main__":
    main()
