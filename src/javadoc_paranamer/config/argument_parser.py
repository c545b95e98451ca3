"""Argument parsing for the javadoc-paranamer command."""

import argparse
from typing import List, Optional
from .constants import DEFAULTS, APP


class ArgumentParserBuilder:
    """Builder for creating argument parser with fluent interface."""

    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog=APP.NAME,
            description="Look up method and constructor parameter names in Javadoc",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=self._get_usage_examples()
        )
        self._add_core_arguments()
        self._add_optional_arguments()

    def _add_core_arguments(self) -> None:
        """Add core required arguments."""
        self.parser.add_argument(
            'root',
            type=str,
            help='Javadoc root: directory, archive (e.g. *-javadoc.jar) or base URL'
        )

        self.parser.add_argument(
            '--signature', '-s',
            action='append',
            required=True,
            dest='signatures',
            metavar='SIGNATURE',
            help="Callable to look up, e.g. 'com.example.Foo#process(String,int)'; "
                 "use '<init>' or 'new' for constructors. Repeatable."
        )

    def _add_optional_arguments(self) -> None:
        """Add optional configuration arguments."""
        self.parser.add_argument(
            '--lenient',
            action='store_true',
            help='Print an empty result instead of failing when names are not found'
        )

        self.parser.add_argument(
            '--format', '-f',
            type=str,
            choices=APP.output_formats,
            default=DEFAULTS.OUTPUT_FORMAT,
            dest='output_format',
            help=f'Output format (default: {DEFAULTS.OUTPUT_FORMAT})'
        )

        self.parser.add_argument(
            '--config', '-c',
            type=str,
            default=None,
            help=f'YAML configuration file (e.g. {DEFAULTS.CONFIG_FILE})'
        )

        self.parser.add_argument(
            '--log-level',
            type=str,
            choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
            default=None,
            help=f'Log level (default: from config, else {DEFAULTS.LOG_LEVEL})'
        )

        self.parser.add_argument(
            '--version', '-V',
            action='version',
            version=APP.VERSION
        )

    def _get_usage_examples(self) -> str:
        """Get formatted usage examples."""
        return """
Examples:
  # Look up a method in a Javadoc archive
  javadoc-paranamer commons-lang3-javadoc.jar \\
      -s 'org.apache.commons.lang3.StringUtils#abbreviate(String,int)'

  # Constructor lookup against a published site, JSON output
  javadoc-paranamer https://example.org/apidocs -f json \\
      -s 'com.example.Processor#<init>(java.lang.String)'
        """

    def build(self) -> argparse.ArgumentParser:
        """Build and return the configured parser."""
        return self.parser


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments using builder pattern."""
    parser = ArgumentParserBuilder().build()
    return parser.parse_args(argv)
