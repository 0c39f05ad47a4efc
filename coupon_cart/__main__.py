import argparse
import logging
import sys

from .config import load_settings
from .errors import CartError
from .loader import load_entries
from .service import build_cart, print_receipt, sample_entries


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="coupon_cart", description="Price a cart of items and coupons")
    parser.add_argument("cart", nargs="?", help="YAML cart file (defaults to the built-in sample cart)")
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
        logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
        entries = load_entries(args.cart) if args.cart else sample_entries()
    except CartError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print_receipt(build_cart(entries), settings.round_digits)
    return 0


if __name__ == "__main__":
    sys.exit(main())
