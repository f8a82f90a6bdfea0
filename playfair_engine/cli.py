import sys
import argparse

from . import __version__
from .codec import DEFAULT_FILLER, PlayfairCipher, strip_padding
from .errors import CipherError

# Verbose mode (disabled by default, enabled with --verbose)
VERBOSE = False

def log_info(msg: str):
    """Print info message only if verbose mode is enabled."""
    if VERBOSE:
        print(f"[INFO] {msg}", file=sys.stderr)

def log_warn(msg: str):
    """Print warning message only if verbose mode is enabled."""
    if VERBOSE:
        print(f"[WARN] {msg}", file=sys.stderr)

# ==========================================
#  CLI LOGIC
# ==========================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="playfair",
        description=f"Playfair Cipher Engine v{__version__}",
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument("-k", "--key", required=True, help="Keyword the 5x5 key square is built from")

    # Main action group
    action_group = parser.add_mutually_exclusive_group(required=True)
    action_group.add_argument("-e", "--encode", action="store_true", help="Encrypt mode")
    action_group.add_argument("-d", "--decode", action="store_true", help="Decrypt mode")
    action_group.add_argument("-g", "--grid", action="store_true", help="Print the key square and exit")

    parser.add_argument("-f", "--filler", default=DEFAULT_FILLER, metavar="CHAR",
                        help=f"Padding letter for doubled or trailing letters (default: {DEFAULT_FILLER})")
    parser.add_argument("--strip-padding", action="store_true",
                        help="On decrypt, drop filler letters that look like padding (heuristic)")

    # Verbose output
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose output (info and warning messages)")

    # I/O options
    io_group = parser.add_mutually_exclusive_group()
    io_group.add_argument("-t", "--text", help="Direct text input")
    io_group.add_argument("-i", "--input", help="Input file path")

    parser.add_argument("-o", "--output", help="Output file path")
    return parser


def read_source(args) -> str:
    if args.text is not None:
        return args.text
    if args.input:
        try:
            with open(args.input, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError:
            sys.exit(f"Error: File '{args.input}' not found.")
        except OSError as e:
            sys.exit(f"Error reading input: {e}")
    if not sys.stdin.isatty():
        return sys.stdin.read()
    print("[PLAYFAIR] Paste input below. Ctrl+D (Unix) or Ctrl+Z (Win) to end:", file=sys.stderr)
    try:
        return sys.stdin.read()
    except KeyboardInterrupt:
        sys.exit(0)


def main(argv=None):
    global VERBOSE

    argv = sys.argv[1:] if argv is None else argv

    # Preliminary scan so diagnostics are live before parsing
    VERBOSE = "--verbose" in argv or "-v" in argv

    args = build_parser().parse_args(argv)

    try:
        cipher = PlayfairCipher(args.key, args.filler)
    except CipherError as e:
        sys.exit(f"Error: {e}")
    log_info(f"Key square: {cipher.grid.letters}")

    # Handle --grid action
    if args.grid:
        print(cipher.grid.render())
        return

    if args.strip_padding and not args.decode:
        log_warn("--strip-padding only applies to decryption. Ignoring.")

    # 1. READ INPUT
    source_text = read_source(args)

    # 2. RUN CIPHER
    try:
        if args.encode:
            result = cipher.encode(source_text)
            log_info(f"Encrypted {len(result) // 2} digraph(s).")
        else:
            result = cipher.decode(source_text)
            if args.strip_padding:
                stripped = strip_padding(result, cipher.filler)
                log_info(f"Removed {len(result) - len(stripped)} filler letter(s).")
                result = stripped
    except CipherError as e:
        sys.exit(f"Error: {e}")

    if not result:
        log_warn("Input contained no letters. Output is empty.")

    # 3. WRITE OUTPUT
    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(result + "\n")
        except OSError as e:
            sys.exit(f"Error writing output: {e}")
    else:
        print(result)


if __name__ == "__main__":
    main()
