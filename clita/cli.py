"""
clitac - command-line driver for the Clita front end.

Reads Clita source from the command line or a file, then prints either the
token stream or the parsed tree. Diagnostics go to stderr and the exit
status is 1 on a lexical or syntax error.

Author: xwest
"""

import argparse
import sys
from typing import List, Optional

from . import __version__
from .lexer import Lexer, LexerError
from .parser import Parser, ParseError
from .printer import format_tree, format_source, summarize


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clitac",
        description="Tokenize and parse Clita source",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    clitac "x := 5."                          # Parse a program, print the tree
    clitac -e binary_expr "20 + 5"            # Start from another production
    clitac --tokens "5 <= 10"                 # Dump the token stream
    clitac -f program.clita --format source   # Reformat a file
        """
    )

    source_group = parser.add_mutually_exclusive_group(required=True)
    source_group.add_argument('source', nargs='?',
                              help='Clita source text')
    source_group.add_argument('-f', '--file',
                              help='Read source from FILE')

    parser.add_argument('-e', '--entry', default='program',
                        choices=sorted(Parser.ENTRY_POINTS),
                        help='Production to parse (default: program)')
    parser.add_argument('--tokens', action='store_true',
                        help='Print tokens instead of parsing')
    parser.add_argument('--format', choices=['tree', 'source', 'summary'], default='tree',
                        help='How to print the parsed node (default: tree)')
    parser.add_argument('--spans', action='store_true',
                        help='Show source spans in the tree output')
    parser.add_argument('--keyword', action='append', default=[], metavar='WORD',
                        help='Reserve WORD as a keyword (repeatable)')
    parser.add_argument('--allow-trailing', action='store_true',
                        help='Accept input left over after the production')
    parser.add_argument('--version', action='version',
                        version=f"%(prog)s {__version__}")
    return parser


def run(args: argparse.Namespace) -> int:
    if args.file:
        try:
            with open(args.file, 'r', encoding='utf-8') as f:
                source = f.read()
        except OSError as e:
            print(f"clitac: cannot read {args.file}: {e.strerror}", file=sys.stderr)
            return 1
        filename = args.file
    else:
        source = args.source
        filename = "<string>"

    try:
        tokens = Lexer(source, filename, args.keyword).tokenize()
        if args.tokens:
            for token in tokens:
                print(token)
            return 0

        node = Parser(tokens).parse(args.entry, args.allow_trailing)
    except (LexerError, ParseError) as e:
        print(str(e), end="", file=sys.stderr)
        return 1

    if args.format == 'source':
        print(format_source(node))
    elif args.format == 'summary':
        print(summarize(node))
    else:
        print(format_tree(node, show_spans=args.spans))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for clitac"""
    args = build_arg_parser().parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
