"""Command-line interface for javadoc-paranamer."""

import json
import sys
from typing import Dict, List, Optional

import yaml

from javadoc_paranamer.config import APP, parse_arguments
from javadoc_paranamer.data_models import CallableDescriptor, OnMissing, ParanamerConfig
from javadoc_paranamer.errors import ParanamerError
from javadoc_paranamer.paranamer import JavadocParanamer
from javadoc_paranamer.utils import ConfigLoader, Logger


def print_error(error: ParanamerError) -> None:
    """Print an error and its suggestions to stderr."""
    print(f"error [{error.error_code}]: {error.message}", file=sys.stderr)
    for suggestion in error.suggestions:
        print(f"  hint: {suggestion}", file=sys.stderr)


def format_results(results: Dict[str, List[str]], output_format: str) -> str:
    """Render lookup results in the requested format."""
    if output_format == 'json':
        return json.dumps(results, indent=2)
    if output_format == 'yaml':
        return yaml.safe_dump(results, default_flow_style=False, sort_keys=False).rstrip('\n')
    return '\n'.join(f"{signature} -> {', '.join(names)}" for signature, names in results.items())


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI tool."""
    args = parse_arguments(argv)

    config = ParanamerConfig()
    logging_config = {}
    if args.config:
        try:
            loader = ConfigLoader(args.config)
        except (OSError, yaml.YAMLError) as e:
            print(f"error: cannot load config {args.config}: {e}", file=sys.stderr)
            return APP.EXIT_FAILURE
        config = loader.get_paranamer_config()
        logging_config = loader.get_logging_config()

    logger = Logger.from_config(logging_config, level=args.log_level)

    try:
        descriptors = [(signature, CallableDescriptor.parse(signature)) for signature in args.signatures]
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return APP.EXIT_FAILURE

    on_missing = OnMissing.RETURN_EMPTY if args.lenient else OnMissing.RAISE
    results: Dict[str, List[str]] = {}
    exit_code = APP.EXIT_SUCCESS

    try:
        with JavadocParanamer(args.root, config) as paranamer:
            for signature, descriptor in descriptors:
                try:
                    results[signature] = paranamer.lookup(descriptor, on_missing)
                except ParanamerError as e:
                    logger.debug(f"Lookup of {signature} failed: {e.message}")
                    print_error(e)
                    exit_code = APP.EXIT_FAILURE
    except ParanamerError as e:
        print_error(e)
        return APP.EXIT_FAILURE

    if results:
        print(format_results(results, args.output_format))
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
