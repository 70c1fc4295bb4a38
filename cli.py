#!/usr/bin/env python3
"""
Poly Secret CLI — Recover a polynomial's constant term from base-N shares.

Usage:
    cli.py recover [input.json] [-k 3] [--truncate] [--json]
    cli.py decode VALUE BASE
    cli.py inspect input.json
"""

import argparse
import logging
import os
import sys

from poly_secret import encoding, points, recovery


DEFAULT_INPUT = 'input.json'


def _prompt_filename() -> str:
    print("=== Polynomial Secret Finder ===")
    try:
        filename = input(f"Enter the JSON filename (or press Enter for '{DEFAULT_INPUT}'): ").strip()
    except EOFError:
        filename = ''
    return filename or DEFAULT_INPUT


def _print_collection(collection, k=None):
    if k is None:
        k = collection.k
    print(f"\nPolynomial Information:")
    print(f"  Number of roots provided (n): {collection.n}")
    print(f"  Minimum roots required (k):   {k}")
    print(f"  Polynomial degree (k-1):      {k - 1}")

    print(f"\nDecoded Points (x, y):")
    for p in collection:
        print(f"  {p}")

    if collection.skipped:
        print(f"\nSkipped:")
        for key in collection.skipped:
            print(f"  ⚠️  invalid key {key!r}")


def cmd_recover(args):
    """Reconstruct the secret from a share document."""
    filename = args.file or _prompt_filename()

    if not os.path.exists(filename):
        print(f"Error: File '{filename}' not found!", file=sys.stderr)
        print("Please ensure the JSON file exists in the current directory.", file=sys.stderr)
        return 1

    try:
        collection, result = recovery.recover_file(
            filename, k=args.threshold, truncate=args.truncate
        )
    except (ValueError, OSError) as e:
        print(f"Recovery FAILED: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(result.to_json())
        return 0

    print(f"\nProcessing file: {filename}")
    print('=' * 51)
    _print_collection(collection, k=result.k)

    print(f"\nUsing {len(result.points_used)} points for Lagrange interpolation")
    print(f"\nLagrange Interpolation at x=0:")
    for i, term in enumerate(result.contributions):
        print(f"  L{i}(0) contribution: {term}")

    print(f"\n{'='*50}")
    print(f"SECRET Constant term c: {result.secret}")
    print(f"{'='*50}")

    v = result.verification
    if v is not None:
        print(f"\nVerification with points x = {', '.join(str(p.x) for p in v.points_used)}:")
        if v.matched:
            print(f"Verification successful! Secret confirmed: {result.secret}")
        elif v.alternate_secret is None:
            print(f"⚠️  Alternate point set does not interpolate to an integer")
        else:
            print(f"⚠️  Different point set gave different secret: {v.alternate_secret}")

    return 0


def cmd_decode(args):
    """Decode a single digit string."""
    try:
        base = encoding.parse_base(args.base)
        value = encoding.decode(args.value, base)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(value)
    return 0


def cmd_inspect(args):
    """Show the parsed share document without interpolating."""
    if not os.path.exists(args.file):
        print(f"Error: File '{args.file}' not found!", file=sys.stderr)
        return 1

    try:
        collection = points.parse_document(points.load_document(args.file))
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Share document: {args.file}")
    _print_collection(collection)

    if len(collection) < collection.k:
        print(f"\n⚠️  Need {collection.k} shares, only {len(collection)} usable")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Poly Secret — Recover a polynomial's constant term from base-N encoded shares.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Recover the secret (prompts for a file when none is given)
  %(prog)s recover input.json

  # Force a different threshold and print JSON
  %(prog)s recover input.json -k 3 --json

  # Decode one value
  %(prog)s decode 111 2

  # Inspect a share document
  %(prog)s inspect input.json
        """
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')

    sub = parser.add_subparsers(dest='command', help='Command')

    # Recover
    p_recover = sub.add_parser('recover', help='Reconstruct the secret')
    p_recover.add_argument('file', nargs='?', help=f"Share document (default: prompt, then {DEFAULT_INPUT})")
    p_recover.add_argument('--threshold', '-k', type=int, help="Threshold (default: document's k)")
    p_recover.add_argument('--truncate', action='store_true',
                           help='Truncate inexact terms instead of failing')
    p_recover.add_argument('--json', action='store_true', help='Print the result as JSON')

    # Decode
    p_decode = sub.add_parser('decode', help='Decode a digit string')
    p_decode.add_argument('value', help='Digit string')
    p_decode.add_argument('base', help='Base (2-36)')

    # Inspect
    p_inspect = sub.add_parser('inspect', help='Inspect a share document')
    p_inspect.add_argument('file', help='Share document')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if not args.command:
        parser.print_help()
        return 1

    handlers = {
        'recover': cmd_recover,
        'decode': cmd_decode,
        'inspect': cmd_inspect,
    }

    return handlers[args.command](args)


if __name__ == '__main__':
    sys.exit(main())
