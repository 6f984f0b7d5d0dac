#!/usr/bin/env python3
"""
Command line interface for the ABI signature codec.

Usage:
    sol-abi selector 'growl(uint,address,string[])'
    sol-abi type 'address[][3]'
    sol-abi spec build/Token.json -v
"""

import argparse
import json
import sys
from typing import List, Optional

from .errors import ParseError
from .parser import parse_selector, parse_type
from .codegen import encode, encode_type, is_dynamic, SpecificationDiagnostics
from .specification import load_specification


def _classification(abi_type) -> str:
    return 'dynamic' if is_dynamic(abi_type) else 'static'


def run_selector(args: argparse.Namespace) -> None:
    """Print the canonical form of a selector."""
    selector = parse_selector(args.signature)
    print(encode(selector))
    if args.dynamic:
        for abi_type in selector.inputs:
            print(f'  {encode_type(abi_type)}: {_classification(abi_type)}')


def run_type(args: argparse.Namespace) -> None:
    """Print the canonical form and classification of a single type."""
    abi_type = parse_type(args.type)
    print(f'{encode_type(abi_type)} {_classification(abi_type)}')


def run_spec(args: argparse.Namespace) -> None:
    """Print one canonical signature per selector in a JSON specification."""
    diagnostics = SpecificationDiagnostics(verbose=args.verbose)
    selectors = load_specification(args.file, diagnostics)
    for selector in selectors:
        print(encode(selector))
    diagnostics.print_summary()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='sol-abi', description='Solidity ABI signature codec')
    subparsers = parser.add_subparsers(dest='command', required=True)

    selector_parser = subparsers.add_parser('selector', help='Parse a function signature')
    selector_parser.add_argument('signature', help='Signature text, e.g. transfer(address,uint256)')
    selector_parser.add_argument('--dynamic', action='store_true',
                                 help='Also print whether each input is dynamic')
    selector_parser.set_defaults(func=run_selector)

    type_parser = subparsers.add_parser('type', help='Parse a single type')
    type_parser.add_argument('type', help='Type text, e.g. address[][3]')
    type_parser.set_defaults(func=run_type)

    spec_parser = subparsers.add_parser('spec', help='List selectors of a JSON contract ABI')
    spec_parser.add_argument('file', help='Path to the JSON specification')
    spec_parser.add_argument('-v', '--verbose', action='store_true',
                             help='Print every diagnostic')
    spec_parser.set_defaults(func=run_spec)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        args.func(args)
    except (ParseError, OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
