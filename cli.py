# Compares v1.0.0
#!/usr/bin/env python3
"""
Compares CLI

Command-line interface for comparing JSON and YAML documents.

Exit status: 0 when documents are equal, 1 when they differ,
2 when a document can't be compared.
"""
import argparse
import logging
import sys
from typing import Optional

EXIT_EQUAL = 0
EXIT_DIFFERENT = 1
EXIT_ERROR = 2

logger = logging.getLogger(__name__)


def _resolve_encoding(file_path: str, encoding: Optional[str]) -> str:
    """Use the explicit encoding, else the file extension, else the configured default."""
    from compares import detect_encoding, normalize_encoding
    from config import settings

    if encoding:
        return normalize_encoding(encoding)
    return detect_encoding(file_path, default=settings.DEFAULT_ENCODING)


def compare_files(before_path: str, after_path: str, encoding: Optional[str] = None) -> int:
    """Compare two documents and print the report."""
    from compares import get_comparer, generate_report, read_document

    encoding = _resolve_encoding(before_path, encoding)
    logger.info(f"Comparing {before_path} vs {after_path} as {encoding}")

    result = get_comparer(encoding).compare(
        read_document(before_path),
        read_document(after_path)
    )

    print(generate_report(before_path, after_path, result, encoding))
    return EXIT_EQUAL if result.equal else EXIT_DIFFERENT


def is_equal_files(before_path: str, after_path: str) -> int:
    """Check whether two files are byte-identical."""
    from compares import JsonComparer, read_document

    # Byte identity is the same for every encoding
    equal = JsonComparer().is_equal(read_document(before_path), read_document(after_path))

    print("equal" if equal else "different")
    return EXIT_EQUAL if equal else EXIT_DIFFERENT


def are_equal_files(paths: list[str]) -> int:
    """Check whether a chain of files are byte-identical."""
    from compares import JsonComparer, read_document

    equal, index = JsonComparer().are_equal(*[read_document(p) for p in paths])

    if equal and index == 0:
        print(f"All {len(paths)} files are equal")
        return EXIT_EQUAL

    print(f"First difference at item #{index}: {paths[index]}")
    return EXIT_DIFFERENT


def run_server(host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> int:
    """Run the FastAPI server."""
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=host,
        port=port,
        reload=reload
    )
    return EXIT_EQUAL


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compares",
        description="Compare JSON and YAML documents",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable informational logging")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # compare
    compare_parser = subparsers.add_parser("compare", help="Diff the top-level keys of two documents")
    compare_parser.add_argument("before", help="Before/baseline document (x)")
    compare_parser.add_argument("after", help="After/new document (y)")
    compare_parser.add_argument(
        "--format",
        dest="encoding",
        help="Document encoding (json or yaml); detected from the extension if omitted"
    )

    # is-equal
    is_equal_parser = subparsers.add_parser("is-equal", help="Check two files are byte-identical")
    is_equal_parser.add_argument("before", help="First file")
    is_equal_parser.add_argument("after", help="Second file")

    # are-equal
    are_equal_parser = subparsers.add_parser("are-equal", help="Check a chain of files are byte-identical")
    are_equal_parser.add_argument("files", nargs="*", help="Files to compare in order")

    # serve
    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    from compares import CompareError

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if not args.command:
        parser.print_help()
        return EXIT_ERROR

    try:
        if args.command == "compare":
            return compare_files(args.before, args.after, args.encoding)
        elif args.command == "is-equal":
            return is_equal_files(args.before, args.after)
        elif args.command == "are-equal":
            return are_equal_files(args.files)
        elif args.command == "serve":
            return run_server(args.host, args.port, args.reload)
    except (CompareError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
