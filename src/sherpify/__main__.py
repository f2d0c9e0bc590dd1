from __future__ import annotations

import argparse
import keyword
import logging
import sys
from pathlib import Path
from urllib.parse import urlparse

from .errors import SherpifyError
from .generation import GenerationProfile
from .generator import ClientSpec, generate_module, write_module
from .loader import load_sherpadoc


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sherpify",
        description="Generate a Python client for a sherpa API from its sherpadoc JSON.",
    )
    parser.add_argument("api_name", help="Name of the generated client class, e.g. MyAPI")
    parser.add_argument("base_url", help="Base URL of the API, ending in a slash")
    parser.add_argument(
        "-i",
        "--input",
        help="Path or URL of the sherpadoc JSON (default: standard input)",
    )
    parser.add_argument("-o", "--output", type=Path, help="Output file (default: standard output)")
    parser.add_argument("--python-version", default="3.10", help="Target Python version (e.g. 3.10)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to standard error")

    args = parser.parse_args(argv)
    if not _valid_api_name(args.api_name):
        parser.error(f"api name must be an identifier starting with an upper-case letter: {args.api_name!r}")
    if not _valid_base_url(args.base_url):
        parser.error(f"base url must be an http(s) URL ending in '/': {args.base_url!r}")
    try:
        profile = GenerationProfile.from_version(args.python_version)
    except ValueError:
        parser.error(f"invalid python version: {args.python_version!r}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        document = load_sherpadoc(args.input if args.input else sys.stdin)
        spec = ClientSpec(api_name=args.api_name, base_url=args.base_url)
        if args.output is not None:
            write_module(spec, document, profile, args.output)
        else:
            sys.stdout.write(generate_module(spec, document, profile))
    except SherpifyError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


def _valid_api_name(name: str) -> bool:
    return name.isidentifier() and name[0].isupper() and not keyword.iskeyword(name)


def _valid_base_url(url: str) -> bool:
    parsed = urlparse(url)
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc) and url.endswith("/")


if __name__ == "__main__":
    raise SystemExit(main())
