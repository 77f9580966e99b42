"""Traversal engine: walks a syntax tree and yields trace records.

Every node kind has an ordering rule that lists its tokens and children in
source order. The walker consumes those lists with an explicit stack, so
neither nesting depth nor chain length grows the Python call stack.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from ..ast.nodes import Kind, SyntaxNode, Token
from ..errors import internal_error
from .records import TraceRecord

__all__ = ["DEFAULT_MAX_DEPTH", "ORDER", "traverse"]

DEFAULT_MAX_DEPTH = 512

# A rule yields tokens, child nodes, synthetic literal text, or None for an
# absent slot.
Part = Union[Token, SyntaxNode, str, None]
Rule = Callable[[SyntaxNode], Iterable[Part]]


def _fields(*names: str) -> Rule:
    def rule(node: SyntaxNode) -> List[Part]:
        return [getattr(node, name) for name in names]

    return rule


def _items(node: SyntaxNode) -> Iterable[Part]:
    return node.items


def _formal_parameters(node: SyntaxNode) -> Iterator[Part]:
    for item, comma in zip_longest(node.items, node.commas):
        yield item
        yield comma


def _ui_import(node: SyntaxNode) -> List[Part]:
    target = node.import_uri if node.import_uri is not None else node.file_name_token
    return [
        node.import_token,
        target,
        node.version_token,
        node.as_token,
        node.import_id_token,
        node.semicolon_token,
    ]


def _ui_object_binding(node: SyntaxNode) -> List[Part]:
    if node.has_on_token:
        return [
            node.qualified_type_name_id,
            node.colon_token,
            node.qualified_id,
            node.initializer,
        ]
    return [
        node.qualified_id,
        node.colon_token,
        node.qualified_type_name_id,
        node.initializer,
    ]


def _ui_qualified_id(node: SyntaxNode) -> Iterator[Part]:
    yield node.identifier_token
    if node.next is not None:
        yield node.dot_token if node.dot_token is not None else "."
        yield node.next


_FUNCTION = _fields(
    "function_token",
    "identifier_token",
    "lparen_token",
    "formals",
    "rparen_token",
    "lbrace_token",
    "body",
    "rbrace_token",
)
_LITERAL = _fields("literal_token")
_PROPERTY_NAME = _fields("property_name_token")

ORDER: Dict[Kind, Rule] = {
    # UI
    Kind.UI_PROGRAM: _fields("headers", "members"),
    Kind.UI_HEADER_ITEM_LIST: _items,
    Kind.UI_PRAGMA: _fields("pragma_token", "name_token", "semicolon_token"),
    Kind.UI_IMPORT: _ui_import,
    Kind.UI_OBJECT_MEMBER_LIST: _items,
    Kind.UI_OBJECT_DEFINITION: _fields("qualified_type_name_id", "initializer"),
    Kind.UI_OBJECT_INITIALIZER: _fields("lbrace_token", "members", "rbrace_token"),
    Kind.UI_OBJECT_BINDING: _ui_object_binding,
    Kind.UI_SCRIPT_BINDING: _fields("qualified_id", "colon_token", "statement"),
    Kind.UI_ARRAY_BINDING: _fields(
        "qualified_id",
        "colon_token",
        "lbracket_token",
        "members",
        "rbracket_token",
    ),
    Kind.UI_ARRAY_MEMBER_LIST: _fields("comma_token", "member", "next"),
    Kind.UI_QUALIFIED_ID: _ui_qualified_id,
    Kind.UI_PUBLIC_MEMBER: _fields(
        "default_token",
        "readonly_token",
        "property_token",
        "type_modifier_token",
        "lt_token",
        "type_token",
        "gt_token",
        "identifier_token",
        "lparen_token",
        "parameters",
        "rparen_token",
        "colon_token",
        "statement",
        "binding",
        "semicolon_token",
    ),
    Kind.UI_PARAMETER_LIST: _fields(
        "comma_token", "type_token", "identifier_token", "next"
    ),
    Kind.UI_SOURCE_ELEMENT: _fields("source_element"),
    Kind.UI_ENUM_DECLARATION: _fields(
        "enum_token", "name_token", "lbrace_token", "members", "rbrace_token"
    ),
    Kind.UI_ENUM_MEMBER_LIST: _fields(
        "comma_token", "member_token", "equal_token", "value_token", "next"
    ),
    # Expressions
    Kind.THIS_EXPRESSION: _fields("this_token"),
    Kind.IDENTIFIER_EXPRESSION: _fields("identifier_token"),
    Kind.NULL_EXPRESSION: _fields("null_token"),
    Kind.TRUE_LITERAL: _fields("true_token"),
    Kind.FALSE_LITERAL: _fields("false_token"),
    Kind.NUMERIC_LITERAL: _LITERAL,
    Kind.STRING_LITERAL: _LITERAL,
    Kind.REGEXP_LITERAL: _LITERAL,
    Kind.ARRAY_PATTERN: _fields(
        "lbracket_token", "elements", "comma_token", "elision", "rbracket_token"
    ),
    Kind.OBJECT_PATTERN: _fields("lbrace_token", "properties", "rbrace_token"),
    # left-linked: preceding elements first
    Kind.PATTERN_ELEMENT_LIST: _fields("next", "comma_token", "elision", "element"),
    Kind.PATTERN_ELEMENT: _fields("identifier_token", "equal_token", "initializer"),
    Kind.PATTERN_PROPERTY_LIST: _fields("property", "comma_token", "next"),
    Kind.PATTERN_PROPERTY: _fields("name", "colon_token", "initializer"),
    Kind.ELISION: _fields("next", "comma_token"),
    Kind.IDENTIFIER_PROPERTY_NAME: _PROPERTY_NAME,
    Kind.STRING_LITERAL_PROPERTY_NAME: _PROPERTY_NAME,
    Kind.NUMERIC_LITERAL_PROPERTY_NAME: _PROPERTY_NAME,
    Kind.NESTED_EXPRESSION: _fields("lparen_token", "expression", "rparen_token"),
    Kind.FIELD_MEMBER_EXPRESSION: _fields("base", "dot_token", "identifier_token"),
    Kind.ARRAY_MEMBER_EXPRESSION: _fields(
        "base", "lbracket_token", "expression", "rbracket_token"
    ),
    Kind.CALL_EXPRESSION: _fields(
        "base", "lparen_token", "arguments", "rparen_token"
    ),
    Kind.NEW_MEMBER_EXPRESSION: _fields(
        "new_token", "base", "lparen_token", "arguments", "rparen_token"
    ),
    Kind.NEW_EXPRESSION: _fields("new_token", "expression"),
    Kind.ARGUMENT_LIST: _fields("expression", "comma_token", "next"),
    Kind.POST_INCREMENT_EXPRESSION: _fields("base", "increment_token"),
    Kind.POST_DECREMENT_EXPRESSION: _fields("base", "decrement_token"),
    Kind.DELETE_EXPRESSION: _fields("delete_token", "expression"),
    Kind.VOID_EXPRESSION: _fields("void_token", "expression"),
    Kind.TYPE_OF_EXPRESSION: _fields("typeof_token", "expression"),
    Kind.PRE_INCREMENT_EXPRESSION: _fields("increment_token", "expression"),
    Kind.PRE_DECREMENT_EXPRESSION: _fields("decrement_token", "expression"),
    Kind.UNARY_PLUS_EXPRESSION: _fields("plus_token", "expression"),
    Kind.UNARY_MINUS_EXPRESSION: _fields("minus_token", "expression"),
    Kind.TILDE_EXPRESSION: _fields("tilde_token", "expression"),
    Kind.NOT_EXPRESSION: _fields("not_token", "expression"),
    Kind.BINARY_EXPRESSION: _fields("left", "operator_token", "right"),
    Kind.CONDITIONAL_EXPRESSION: _fields(
        "expression", "question_token", "ok", "colon_token", "ko"
    ),
    Kind.EXPRESSION: _fields("left", "comma_token", "right"),
    Kind.FUNCTION_EXPRESSION: _FUNCTION,
    Kind.FORMAL_PARAMETER_LIST: _formal_parameters,
    # Statements
    Kind.PROGRAM: _fields("statements"),
    Kind.BLOCK: _fields("lbrace_token", "statements", "rbrace_token"),
    Kind.STATEMENT_LIST: _items,
    Kind.VARIABLE_STATEMENT: _fields(
        "declaration_kind_token", "declarations", "semicolon_token"
    ),
    Kind.VARIABLE_DECLARATION_LIST: _fields("declaration", "comma_token", "next"),
    Kind.EMPTY_STATEMENT: _fields("semicolon_token"),
    Kind.EXPRESSION_STATEMENT: _fields("expression", "semicolon_token"),
    Kind.IF_STATEMENT: _fields(
        "if_token",
        "lparen_token",
        "expression",
        "rparen_token",
        "ok",
        "else_token",
        "ko",
    ),
    Kind.DO_WHILE_STATEMENT: _fields(
        "do_token",
        "statement",
        "while_token",
        "lparen_token",
        "expression",
        "rparen_token",
        "semicolon_token",
    ),
    Kind.WHILE_STATEMENT: _fields(
        "while_token", "lparen_token", "expression", "rparen_token", "statement"
    ),
    Kind.FOR_STATEMENT: _fields(
        "for_token",
        "lparen_token",
        "declaration_kind_token",
        "declarations",
        "initialiser",
        "first_semicolon_token",
        "condition",
        "second_semicolon_token",
        "expression",
        "rparen_token",
        "statement",
    ),
    Kind.FOR_EACH_STATEMENT: _fields(
        "for_token",
        "lparen_token",
        "declaration_kind_token",
        "lhs",
        "in_of_token",
        "expression",
        "rparen_token",
        "statement",
    ),
    Kind.CONTINUE_STATEMENT: _fields(
        "continue_token", "label_token", "semicolon_token"
    ),
    Kind.BREAK_STATEMENT: _fields("break_token", "label_token", "semicolon_token"),
    Kind.RETURN_STATEMENT: _fields("return_token", "expression", "semicolon_token"),
    Kind.WITH_STATEMENT: _fields(
        "with_token", "lparen_token", "expression", "rparen_token", "statement"
    ),
    Kind.SWITCH_STATEMENT: _fields(
        "switch_token", "lparen_token", "expression", "rparen_token", "block"
    ),
    Kind.CASE_BLOCK: _fields(
        "lbrace_token", "clauses", "default_clause", "more_clauses", "rbrace_token"
    ),
    Kind.CASE_CLAUSES: _items,
    Kind.CASE_CLAUSE: _fields(
        "case_token", "expression", "colon_token", "statements"
    ),
    Kind.DEFAULT_CLAUSE: _fields("default_token", "colon_token", "statements"),
    Kind.LABELLED_STATEMENT: _fields(
        "identifier_token", "colon_token", "statement"
    ),
    Kind.THROW_STATEMENT: _fields("throw_token", "expression", "semicolon_token"),
    Kind.TRY_STATEMENT: _fields(
        "try_token", "statement", "catch_expression", "finally_expression"
    ),
    Kind.CATCH: _fields(
        "catch_token",
        "lparen_token",
        "identifier_token",
        "rparen_token",
        "statement",
    ),
    Kind.FINALLY: _fields("finally_token", "statement"),
    Kind.FUNCTION_DECLARATION: _FUNCTION,
    Kind.DEBUGGER_STATEMENT: _fields("debugger_token", "semicolon_token"),
}

_missing = [kind.display_name for kind in Kind if kind not in ORDER]
if _missing:
    raise internal_error(
        "no ordering rule for node kinds", context={"kinds": _missing}
    )
del _missing


def traverse(
    root: Optional[SyntaxNode],
    source: str,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Iterator[TraceRecord]:
    """Yield the trace of ``root`` lazily, in source order.

    ``None`` (a failed parse) yields nothing. A node that would be entered at
    ``depth >= max_depth`` is reported by a single ``TRUNCATED`` record and
    its subtree is skipped. Stopping iteration early needs no cleanup.
    """
    if root is None:
        return
    stack: List[Tuple[SyntaxNode, Iterator[Part]]] = []
    depth = 0
    pending: Optional[SyntaxNode] = root
    while True:
        if pending is not None:
            if depth >= max_depth:
                yield TraceRecord.truncated(pending.kind, depth)
            else:
                yield TraceRecord.enter(pending.kind, depth)
                depth += 1
                stack.append((pending, iter(ORDER[pending.kind](pending))))
            pending = None
        if not stack:
            return
        node, parts = stack[-1]
        for part in parts:
            if part is None:
                continue
            if isinstance(part, SyntaxNode):
                pending = part
                break
            if isinstance(part, Token):
                yield TraceRecord.literal(part.text(source), depth, part.offset)
            else:
                yield TraceRecord.literal(part, depth)
        else:
            stack.pop()
            depth -= 1
            yield TraceRecord.exit(node.kind, depth)
