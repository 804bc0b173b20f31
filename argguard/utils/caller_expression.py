"""
Caller argument expression capture.

Recovers the literal source text a caller passed for a given argument, so a
guard invoked as ``argument_not_null(request.user)`` can report
``request.user`` without the caller naming it.

Works from the caller's frame: the source file is read through linecache,
parsed with ast, and the matching call on the current line is located. Any
failure (no source, syntax error, ambiguous match) yields None.
"""

import ast
import linecache
import logging
from functools import lru_cache
from types import FrameType
from typing import List, Optional

logger = logging.getLogger(__name__)


@lru_cache(maxsize=128)
def _parse_source(filename: str, source: str) -> Optional[ast.AST]:
    """Parse source text, caching by file name and contents."""
    try:
        return ast.parse(source, filename=filename)
    except (SyntaxError, ValueError) as e:
        logger.debug(f"Cannot parse {filename} for expression capture: {e}")
        return None


def _callee_name(func: ast.expr) -> Optional[str]:
    if isinstance(func, ast.Name):
        return func.id
    if isinstance(func, ast.Attribute):
        return func.attr
    return None


def _argument_node(call: ast.Call, position: int, keyword: Optional[str]) -> Optional[ast.expr]:
    """
    Select the argument node for a parameter.

    Positional arguments before any starred argument are matched by index;
    otherwise the keyword with the parameter's name is used.
    """
    for index, arg in enumerate(call.args):
        if isinstance(arg, ast.Starred):
            break
        if index == position:
            return arg

    if keyword is not None:
        for kw in call.keywords:
            if kw.arg == keyword:
                return kw.value

    return None


def find_argument_expression(
    source: str,
    filename: str,
    lineno: int,
    function_name: str,
    position: int = 0,
    keyword: Optional[str] = None,
) -> Optional[str]:
    """
    Find the source text of an argument in a call spanning a line.

    Args:
        source: Full source text of the module
        filename: File name (used for parse caching and diagnostics)
        lineno: Line currently executing in the caller
        function_name: Name of the called function (bare or attribute access)
        position: Positional index of the argument
        keyword: Parameter name, for keyword-style calls

    Returns:
        The argument's source text, or None if not found or ambiguous

    Example:
        >>> find_argument_expression("f(a.b)\\n", "<x>", 1, "f")
        'a.b'
    """
    tree = _parse_source(filename, source)
    if tree is None:
        return None

    expressions: List[str] = []
    for node in ast.walk(tree):
        if not isinstance(node, ast.Call):
            continue
        if _callee_name(node.func) != function_name:
            continue
        end_lineno = getattr(node, "end_lineno", None) or node.lineno
        if not node.lineno <= lineno <= end_lineno:
            continue

        arg_node = _argument_node(node, position, keyword)
        if arg_node is None:
            continue
        text = ast.get_source_segment(source, arg_node)
        if text is not None:
            expressions.append(text)

    # Several calls on the same span with different arguments: no way to tell which one ran
    if len(set(expressions)) != 1:
        return None

    return expressions[0]


def caller_argument_expression(
    frame: Optional[FrameType],
    function_name: str,
    position: int = 0,
    keyword: Optional[str] = None,
) -> Optional[str]:
    """
    Capture the source expression passed as an argument from a caller frame.

    Args:
        frame: The caller's frame (the frame that invoked function_name)
        function_name: Name of the called function
        position: Positional index of the argument
        keyword: Parameter name, for keyword-style calls

    Returns:
        The argument's literal source text, or None if unavailable
    """
    if frame is None:
        return None

    filename = frame.f_code.co_filename
    lineno = frame.f_lineno
    if lineno is None:
        return None

    lines = linecache.getlines(filename, frame.f_globals)
    if not lines:
        return None

    return find_argument_expression("".join(lines), filename, lineno, function_name, position, keyword)
