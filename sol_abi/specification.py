"""
Contract specification adapter.

Builds FunctionSelector values from the entries of a JSON contract ABI
(the list of ``{"type": "function", "name": ..., "inputs": [...],
"outputs": [...]}`` mappings emitted by the Solidity compiler). Only the
"type" text of each input/output is used; parameter names are dropped.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .errors import ParseError
from .parser import parse_type
from .type_system import FunctionSelector, AbiType
from .codegen.diagnostics import SpecificationDiagnostics


def parse_specification_item(
    item: Dict[str, Any],
    diagnostics: Optional[SpecificationDiagnostics] = None,
    source: str = '',
    index: Optional[int] = None,
) -> Optional[FunctionSelector]:
    """
    Build a selector from a single specification entry.

    Args:
        item: One entry of a contract ABI
        diagnostics: Optional collector for ignored entries and narrowed outputs
        source: Label for diagnostics (usually the file path)
        index: Position of the entry in its specification

    Returns:
        A FunctionSelector for "function" and "fallback" entries, None otherwise.

    Raises:
        ParseError: if a function entry is missing fields or holds a bad type.
    """
    if not isinstance(item, dict):
        raise ParseError(f'Specification entry {index} is not a mapping: {type(item).__name__}', source)
    kind = item.get('type')

    if kind == 'fallback':
        return FunctionSelector(name=None, inputs=[], output=None)

    if kind != 'function':
        if diagnostics is not None:
            diagnostics.info_entry_ignored(str(kind), source, index)
        return None

    try:
        function_name = item['name']
        named_inputs = item['inputs']
        named_outputs = item['outputs']
    except KeyError as e:
        raise ParseError(f'Function entry is missing {e.args[0]!r}', source) from e
    if not isinstance(function_name, str):
        raise ParseError(f'Function name is not a string: {function_name!r}', source)
    if not isinstance(named_inputs, list) or not isinstance(named_outputs, list):
        raise ParseError(f'Function "{function_name}" inputs/outputs are not lists', source)

    input_types = [parse_specification_type(p) for p in named_inputs]
    output_types = [parse_specification_type(p) for p in named_outputs]

    if len(output_types) > 1 and diagnostics is not None:
        diagnostics.warn_outputs_narrowed(function_name, len(output_types), source, index)

    return FunctionSelector(
        name=function_name,
        inputs=input_types,
        output=output_types[0] if output_types else None,
    )


def parse_specification_type(parameter: Dict[str, Any]) -> AbiType:
    """Parse the "type" field of an input/output entry."""
    return parse_type(specification_type_string(parameter))


def specification_type_string(parameter: Dict[str, Any]) -> str:
    """
    Get the signature text for an input/output entry.

    Struct parameters are written as ``"tuple"`` (or ``"tuple[]"``, ...)
    with their fields under ``"components"``; these are expanded into the
    parenthesized form, keeping any array suffix.
    """
    if not isinstance(parameter, dict):
        raise ParseError(f'Parameter entry is not a mapping: {type(parameter).__name__}')
    if 'type' not in parameter:
        raise ParseError('Parameter entry is missing \'type\'', repr(parameter))
    type_string = parameter['type']
    if not isinstance(type_string, str):
        raise ParseError(f'Parameter type is not a string: {type_string!r}')

    if type_string.startswith('tuple') and 'components' in parameter:
        components = parameter['components']
        if not isinstance(components, list):
            raise ParseError(f'Parameter components is not a list: {type(components).__name__}')
        suffix = type_string[len('tuple'):]
        inner = ','.join(specification_type_string(c) for c in components)
        return f'({inner}){suffix}'
    return type_string


def parse_specification(
    specification: Union[List[Dict[str, Any]], Dict[str, Any]],
    diagnostics: Optional[SpecificationDiagnostics] = None,
    source: str = '',
) -> List[FunctionSelector]:
    """
    Build selectors for every function and fallback entry of a contract ABI.

    Accepts either the entry list itself or a compiler artifact mapping
    holding it under "abi".
    """
    if isinstance(specification, dict):
        if 'abi' not in specification:
            raise ParseError('Specification mapping has no \'abi\' list', source)
        specification = specification['abi']
    if not isinstance(specification, list):
        raise ParseError(f'Specification is not a list of entries: {type(specification).__name__}', source)

    selectors = []
    for index, item in enumerate(specification):
        selector = parse_specification_item(item, diagnostics, source, index)
        if selector is not None:
            selectors.append(selector)
    return selectors


def load_specification(
    filepath: str,
    diagnostics: Optional[SpecificationDiagnostics] = None,
) -> List[FunctionSelector]:
    """Load a JSON contract ABI from disk and build its selectors."""
    path = Path(filepath)
    with open(path, 'r', encoding='utf-8') as f:
        specification = json.load(f)
    return parse_specification(specification, diagnostics, source=str(path))
