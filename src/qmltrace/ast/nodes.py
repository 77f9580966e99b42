"""Syntax tree model for QML documents and their JavaScript sub-language.

Nodes are frozen dataclasses. Each class carries a ``kind`` tag whose value is
the display name used in traces. Tokens are inline ``(offset, length)`` fields;
``None`` marks an optional token that did not appear in the source.

Chained siblings use one of three shapes, fixed per kind:

* right-linked: ``next`` holds the elements that follow this one;
* left-linked: ``next`` holds the elements that precede this one;
* flat: ``items`` holds every element in source order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple


class Kind(Enum):
    # UI
    UI_PROGRAM = "UiProgram"
    UI_HEADER_ITEM_LIST = "UiHeaderItemList"
    UI_PRAGMA = "UiPragma"
    UI_IMPORT = "UiImport"
    UI_OBJECT_MEMBER_LIST = "UiObjectMemberList"
    UI_OBJECT_DEFINITION = "UiObjectDefinition"
    UI_OBJECT_INITIALIZER = "UiObjectInitializer"
    UI_OBJECT_BINDING = "UiObjectBinding"
    UI_SCRIPT_BINDING = "UiScriptBinding"
    UI_ARRAY_BINDING = "UiArrayBinding"
    UI_ARRAY_MEMBER_LIST = "UiArrayMemberList"
    UI_QUALIFIED_ID = "UiQualifiedId"
    UI_PUBLIC_MEMBER = "UiPublicMember"
    UI_PARAMETER_LIST = "UiParameterList"
    UI_SOURCE_ELEMENT = "UiSourceElement"
    UI_ENUM_DECLARATION = "UiEnumDeclaration"
    UI_ENUM_MEMBER_LIST = "UiEnumMemberList"
    # Expressions
    THIS_EXPRESSION = "ThisExpression"
    IDENTIFIER_EXPRESSION = "IdentifierExpression"
    NULL_EXPRESSION = "NullExpression"
    TRUE_LITERAL = "TrueLiteral"
    FALSE_LITERAL = "FalseLiteral"
    NUMERIC_LITERAL = "NumericLiteral"
    STRING_LITERAL = "StringLiteral"
    REGEXP_LITERAL = "RegExpLiteral"
    ARRAY_PATTERN = "ArrayPattern"
    OBJECT_PATTERN = "ObjectPattern"
    PATTERN_ELEMENT_LIST = "PatternElementList"
    PATTERN_ELEMENT = "PatternElement"
    PATTERN_PROPERTY_LIST = "PatternPropertyList"
    PATTERN_PROPERTY = "PatternProperty"
    ELISION = "Elision"
    IDENTIFIER_PROPERTY_NAME = "IdentifierPropertyName"
    STRING_LITERAL_PROPERTY_NAME = "StringLiteralPropertyName"
    NUMERIC_LITERAL_PROPERTY_NAME = "NumericLiteralPropertyName"
    NESTED_EXPRESSION = "NestedExpression"
    FIELD_MEMBER_EXPRESSION = "FieldMemberExpression"
    ARRAY_MEMBER_EXPRESSION = "ArrayMemberExpression"
    CALL_EXPRESSION = "CallExpression"
    NEW_MEMBER_EXPRESSION = "NewMemberExpression"
    NEW_EXPRESSION = "NewExpression"
    ARGUMENT_LIST = "ArgumentList"
    POST_INCREMENT_EXPRESSION = "PostIncrementExpression"
    POST_DECREMENT_EXPRESSION = "PostDecrementExpression"
    DELETE_EXPRESSION = "DeleteExpression"
    VOID_EXPRESSION = "VoidExpression"
    TYPE_OF_EXPRESSION = "TypeOfExpression"
    PRE_INCREMENT_EXPRESSION = "PreIncrementExpression"
    PRE_DECREMENT_EXPRESSION = "PreDecrementExpression"
    UNARY_PLUS_EXPRESSION = "UnaryPlusExpression"
    UNARY_MINUS_EXPRESSION = "UnaryMinusExpression"
    TILDE_EXPRESSION = "TildeExpression"
    NOT_EXPRESSION = "NotExpression"
    BINARY_EXPRESSION = "BinaryExpression"
    CONDITIONAL_EXPRESSION = "ConditionalExpression"
    EXPRESSION = "Expression"
    FUNCTION_EXPRESSION = "FunctionExpression"
    FORMAL_PARAMETER_LIST = "FormalParameterList"
    # Statements
    PROGRAM = "Program"
    BLOCK = "Block"
    STATEMENT_LIST = "StatementList"
    VARIABLE_STATEMENT = "VariableStatement"
    VARIABLE_DECLARATION_LIST = "VariableDeclarationList"
    EMPTY_STATEMENT = "EmptyStatement"
    EXPRESSION_STATEMENT = "ExpressionStatement"
    IF_STATEMENT = "IfStatement"
    DO_WHILE_STATEMENT = "DoWhileStatement"
    WHILE_STATEMENT = "WhileStatement"
    FOR_STATEMENT = "ForStatement"
    FOR_EACH_STATEMENT = "ForEachStatement"
    CONTINUE_STATEMENT = "ContinueStatement"
    BREAK_STATEMENT = "BreakStatement"
    RETURN_STATEMENT = "ReturnStatement"
    WITH_STATEMENT = "WithStatement"
    SWITCH_STATEMENT = "SwitchStatement"
    CASE_BLOCK = "CaseBlock"
    CASE_CLAUSES = "CaseClauses"
    CASE_CLAUSE = "CaseClause"
    DEFAULT_CLAUSE = "DefaultClause"
    LABELLED_STATEMENT = "LabelledStatement"
    THROW_STATEMENT = "ThrowStatement"
    TRY_STATEMENT = "TryStatement"
    CATCH = "Catch"
    FINALLY = "Finally"
    FUNCTION_DECLARATION = "FunctionDeclaration"
    DEBUGGER_STATEMENT = "DebuggerStatement"

    @property
    def display_name(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Token:
    """Span of the source text: ``source[offset:offset + length]``."""

    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length

    def text(self, source: str) -> str:
        return source[self.offset : self.end]


class SyntaxNode:
    """Base of every node class; ``kind`` is set on each subclass."""

    __slots__ = ()
    kind: ClassVar[Kind]


_node = dataclass(frozen=True, slots=True, eq=False)

OptToken = Optional[Token]
OptNode = Optional[SyntaxNode]


# --------------------------------------------------------------------------- UI


@_node
class UiProgram(SyntaxNode):
    kind = Kind.UI_PROGRAM
    headers: OptNode = None
    members: OptNode = None


@_node
class UiHeaderItemList(SyntaxNode):
    kind = Kind.UI_HEADER_ITEM_LIST
    items: Tuple[SyntaxNode, ...] = ()


@_node
class UiPragma(SyntaxNode):
    kind = Kind.UI_PRAGMA
    pragma_token: OptToken = None
    name_token: OptToken = None
    semicolon_token: OptToken = None


@_node
class UiImport(SyntaxNode):
    kind = Kind.UI_IMPORT
    import_token: OptToken = None
    import_uri: OptNode = None
    file_name_token: OptToken = None
    version_token: OptToken = None
    as_token: OptToken = None
    import_id_token: OptToken = None
    semicolon_token: OptToken = None


@_node
class UiObjectMemberList(SyntaxNode):
    kind = Kind.UI_OBJECT_MEMBER_LIST
    items: Tuple[SyntaxNode, ...] = ()


@_node
class UiObjectDefinition(SyntaxNode):
    kind = Kind.UI_OBJECT_DEFINITION
    qualified_type_name_id: OptNode = None
    initializer: OptNode = None


@_node
class UiObjectInitializer(SyntaxNode):
    kind = Kind.UI_OBJECT_INITIALIZER
    lbrace_token: OptToken = None
    members: OptNode = None
    rbrace_token: OptToken = None


@_node
class UiObjectBinding(SyntaxNode):
    """``id: Type {}`` or, with ``has_on_token``, ``Type on id {}``.

    In the ``on`` form ``colon_token`` holds the ``on`` keyword.
    """

    kind = Kind.UI_OBJECT_BINDING
    qualified_id: OptNode = None
    colon_token: OptToken = None
    qualified_type_name_id: OptNode = None
    initializer: OptNode = None
    has_on_token: bool = False


@_node
class UiScriptBinding(SyntaxNode):
    kind = Kind.UI_SCRIPT_BINDING
    qualified_id: OptNode = None
    colon_token: OptToken = None
    statement: OptNode = None


@_node
class UiArrayBinding(SyntaxNode):
    kind = Kind.UI_ARRAY_BINDING
    qualified_id: OptNode = None
    colon_token: OptToken = None
    lbracket_token: OptToken = None
    members: OptNode = None
    rbracket_token: OptToken = None


@_node
class UiArrayMemberList(SyntaxNode):
    """Right-linked; ``comma_token`` precedes ``member``."""

    kind = Kind.UI_ARRAY_MEMBER_LIST
    comma_token: OptToken = None
    member: OptNode = None
    next: OptNode = None


@_node
class UiQualifiedId(SyntaxNode):
    """Right-linked dotted name; ``dot_token`` is the dot before ``next``."""

    kind = Kind.UI_QUALIFIED_ID
    identifier_token: OptToken = None
    dot_token: OptToken = None
    next: OptNode = None


@_node
class UiPublicMember(SyntaxNode):
    """``property`` and ``signal`` declarations.

    For signals ``property_token`` holds the ``signal`` keyword.
    """

    kind = Kind.UI_PUBLIC_MEMBER
    default_token: OptToken = None
    readonly_token: OptToken = None
    property_token: OptToken = None
    type_modifier_token: OptToken = None
    lt_token: OptToken = None
    type_token: OptToken = None
    gt_token: OptToken = None
    identifier_token: OptToken = None
    lparen_token: OptToken = None
    parameters: OptNode = None
    rparen_token: OptToken = None
    colon_token: OptToken = None
    statement: OptNode = None
    binding: OptNode = None
    semicolon_token: OptToken = None


@_node
class UiParameterList(SyntaxNode):
    kind = Kind.UI_PARAMETER_LIST
    comma_token: OptToken = None
    type_token: OptToken = None
    identifier_token: OptToken = None
    next: OptNode = None


@_node
class UiSourceElement(SyntaxNode):
    kind = Kind.UI_SOURCE_ELEMENT
    source_element: OptNode = None


@_node
class UiEnumDeclaration(SyntaxNode):
    kind = Kind.UI_ENUM_DECLARATION
    enum_token: OptToken = None
    name_token: OptToken = None
    lbrace_token: OptToken = None
    members: OptNode = None
    rbrace_token: OptToken = None


@_node
class UiEnumMemberList(SyntaxNode):
    kind = Kind.UI_ENUM_MEMBER_LIST
    comma_token: OptToken = None
    member_token: OptToken = None
    equal_token: OptToken = None
    value_token: OptToken = None
    next: OptNode = None


# ------------------------------------------------------------------ expressions


@_node
class ThisExpression(SyntaxNode):
    kind = Kind.THIS_EXPRESSION
    this_token: OptToken = None


@_node
class IdentifierExpression(SyntaxNode):
    kind = Kind.IDENTIFIER_EXPRESSION
    identifier_token: OptToken = None


@_node
class NullExpression(SyntaxNode):
    kind = Kind.NULL_EXPRESSION
    null_token: OptToken = None


@_node
class TrueLiteral(SyntaxNode):
    kind = Kind.TRUE_LITERAL
    true_token: OptToken = None


@_node
class FalseLiteral(SyntaxNode):
    kind = Kind.FALSE_LITERAL
    false_token: OptToken = None


@_node
class NumericLiteral(SyntaxNode):
    kind = Kind.NUMERIC_LITERAL
    literal_token: OptToken = None


@_node
class StringLiteral(SyntaxNode):
    kind = Kind.STRING_LITERAL
    literal_token: OptToken = None


@_node
class RegExpLiteral(SyntaxNode):
    kind = Kind.REGEXP_LITERAL
    literal_token: OptToken = None


@_node
class ArrayPattern(SyntaxNode):
    """Array literal; ``comma_token``/``elision`` are trailing commas."""

    kind = Kind.ARRAY_PATTERN
    lbracket_token: OptToken = None
    elements: OptNode = None
    comma_token: OptToken = None
    elision: OptNode = None
    rbracket_token: OptToken = None


@_node
class ObjectPattern(SyntaxNode):
    kind = Kind.OBJECT_PATTERN
    lbrace_token: OptToken = None
    properties: OptNode = None
    rbrace_token: OptToken = None


@_node
class PatternElementList(SyntaxNode):
    """Left-linked array elements: ``next`` holds the preceding elements.

    ``element`` is the element expression itself.
    """

    kind = Kind.PATTERN_ELEMENT_LIST
    next: OptNode = None
    comma_token: OptToken = None
    elision: OptNode = None
    element: OptNode = None


@_node
class PatternElement(SyntaxNode):
    """Binding of a name with an optional ``= initializer``."""

    kind = Kind.PATTERN_ELEMENT
    identifier_token: OptToken = None
    equal_token: OptToken = None
    initializer: OptNode = None


@_node
class PatternPropertyList(SyntaxNode):
    kind = Kind.PATTERN_PROPERTY_LIST
    property: OptNode = None
    comma_token: OptToken = None
    next: OptNode = None


@_node
class PatternProperty(SyntaxNode):
    kind = Kind.PATTERN_PROPERTY
    name: OptNode = None
    colon_token: OptToken = None
    initializer: OptNode = None


@_node
class Elision(SyntaxNode):
    """Left-linked run of bare commas."""

    kind = Kind.ELISION
    next: OptNode = None
    comma_token: OptToken = None


@_node
class IdentifierPropertyName(SyntaxNode):
    kind = Kind.IDENTIFIER_PROPERTY_NAME
    property_name_token: OptToken = None


@_node
class StringLiteralPropertyName(SyntaxNode):
    kind = Kind.STRING_LITERAL_PROPERTY_NAME
    property_name_token: OptToken = None


@_node
class NumericLiteralPropertyName(SyntaxNode):
    kind = Kind.NUMERIC_LITERAL_PROPERTY_NAME
    property_name_token: OptToken = None


@_node
class NestedExpression(SyntaxNode):
    kind = Kind.NESTED_EXPRESSION
    lparen_token: OptToken = None
    expression: OptNode = None
    rparen_token: OptToken = None


@_node
class FieldMemberExpression(SyntaxNode):
    kind = Kind.FIELD_MEMBER_EXPRESSION
    base: OptNode = None
    dot_token: OptToken = None
    identifier_token: OptToken = None


@_node
class ArrayMemberExpression(SyntaxNode):
    kind = Kind.ARRAY_MEMBER_EXPRESSION
    base: OptNode = None
    lbracket_token: OptToken = None
    expression: OptNode = None
    rbracket_token: OptToken = None


@_node
class CallExpression(SyntaxNode):
    kind = Kind.CALL_EXPRESSION
    base: OptNode = None
    lparen_token: OptToken = None
    arguments: OptNode = None
    rparen_token: OptToken = None


@_node
class NewMemberExpression(SyntaxNode):
    kind = Kind.NEW_MEMBER_EXPRESSION
    new_token: OptToken = None
    base: OptNode = None
    lparen_token: OptToken = None
    arguments: OptNode = None
    rparen_token: OptToken = None


@_node
class NewExpression(SyntaxNode):
    kind = Kind.NEW_EXPRESSION
    new_token: OptToken = None
    expression: OptNode = None


@_node
class ArgumentList(SyntaxNode):
    """Right-linked; ``comma_token`` follows ``expression``."""

    kind = Kind.ARGUMENT_LIST
    expression: OptNode = None
    comma_token: OptToken = None
    next: OptNode = None


@_node
class PostIncrementExpression(SyntaxNode):
    kind = Kind.POST_INCREMENT_EXPRESSION
    base: OptNode = None
    increment_token: OptToken = None


@_node
class PostDecrementExpression(SyntaxNode):
    kind = Kind.POST_DECREMENT_EXPRESSION
    base: OptNode = None
    decrement_token: OptToken = None


@_node
class DeleteExpression(SyntaxNode):
    kind = Kind.DELETE_EXPRESSION
    delete_token: OptToken = None
    expression: OptNode = None


@_node
class VoidExpression(SyntaxNode):
    kind = Kind.VOID_EXPRESSION
    void_token: OptToken = None
    expression: OptNode = None


@_node
class TypeOfExpression(SyntaxNode):
    kind = Kind.TYPE_OF_EXPRESSION
    typeof_token: OptToken = None
    expression: OptNode = None


@_node
class PreIncrementExpression(SyntaxNode):
    kind = Kind.PRE_INCREMENT_EXPRESSION
    increment_token: OptToken = None
    expression: OptNode = None


@_node
class PreDecrementExpression(SyntaxNode):
    kind = Kind.PRE_DECREMENT_EXPRESSION
    decrement_token: OptToken = None
    expression: OptNode = None


@_node
class UnaryPlusExpression(SyntaxNode):
    kind = Kind.UNARY_PLUS_EXPRESSION
    plus_token: OptToken = None
    expression: OptNode = None


@_node
class UnaryMinusExpression(SyntaxNode):
    kind = Kind.UNARY_MINUS_EXPRESSION
    minus_token: OptToken = None
    expression: OptNode = None


@_node
class TildeExpression(SyntaxNode):
    kind = Kind.TILDE_EXPRESSION
    tilde_token: OptToken = None
    expression: OptNode = None


@_node
class NotExpression(SyntaxNode):
    kind = Kind.NOT_EXPRESSION
    not_token: OptToken = None
    expression: OptNode = None


@_node
class BinaryExpression(SyntaxNode):
    kind = Kind.BINARY_EXPRESSION
    left: OptNode = None
    operator_token: OptToken = None
    right: OptNode = None


@_node
class ConditionalExpression(SyntaxNode):
    kind = Kind.CONDITIONAL_EXPRESSION
    expression: OptNode = None
    question_token: OptToken = None
    ok: OptNode = None
    colon_token: OptToken = None
    ko: OptNode = None


@_node
class Expression(SyntaxNode):
    """Comma expression ``left, right``."""

    kind = Kind.EXPRESSION
    left: OptNode = None
    comma_token: OptToken = None
    right: OptNode = None


@_node
class FunctionExpression(SyntaxNode):
    kind = Kind.FUNCTION_EXPRESSION
    function_token: OptToken = None
    identifier_token: OptToken = None
    lparen_token: OptToken = None
    formals: OptNode = None
    rparen_token: OptToken = None
    lbrace_token: OptToken = None
    body: OptNode = None
    rbrace_token: OptToken = None


@_node
class FunctionDeclaration(SyntaxNode):
    kind = Kind.FUNCTION_DECLARATION
    function_token: OptToken = None
    identifier_token: OptToken = None
    lparen_token: OptToken = None
    formals: OptNode = None
    rparen_token: OptToken = None
    lbrace_token: OptToken = None
    body: OptNode = None
    rbrace_token: OptToken = None


@_node
class FormalParameterList(SyntaxNode):
    """Flat; ``commas[i]`` is the comma after ``items[i]`` (or ``None``)."""

    kind = Kind.FORMAL_PARAMETER_LIST
    items: Tuple[SyntaxNode, ...] = ()
    commas: Tuple[OptToken, ...] = ()


# ------------------------------------------------------------------- statements


@_node
class Program(SyntaxNode):
    kind = Kind.PROGRAM
    statements: OptNode = None


@_node
class Block(SyntaxNode):
    kind = Kind.BLOCK
    lbrace_token: OptToken = None
    statements: OptNode = None
    rbrace_token: OptToken = None


@_node
class StatementList(SyntaxNode):
    kind = Kind.STATEMENT_LIST
    items: Tuple[SyntaxNode, ...] = ()


@_node
class VariableStatement(SyntaxNode):
    kind = Kind.VARIABLE_STATEMENT
    declaration_kind_token: OptToken = None
    declarations: OptNode = None
    semicolon_token: OptToken = None


@_node
class VariableDeclarationList(SyntaxNode):
    kind = Kind.VARIABLE_DECLARATION_LIST
    declaration: OptNode = None
    comma_token: OptToken = None
    next: OptNode = None


@_node
class EmptyStatement(SyntaxNode):
    kind = Kind.EMPTY_STATEMENT
    semicolon_token: OptToken = None


@_node
class ExpressionStatement(SyntaxNode):
    kind = Kind.EXPRESSION_STATEMENT
    expression: OptNode = None
    semicolon_token: OptToken = None


@_node
class IfStatement(SyntaxNode):
    kind = Kind.IF_STATEMENT
    if_token: OptToken = None
    lparen_token: OptToken = None
    expression: OptNode = None
    rparen_token: OptToken = None
    ok: OptNode = None
    else_token: OptToken = None
    ko: OptNode = None


@_node
class DoWhileStatement(SyntaxNode):
    kind = Kind.DO_WHILE_STATEMENT
    do_token: OptToken = None
    statement: OptNode = None
    while_token: OptToken = None
    lparen_token: OptToken = None
    expression: OptNode = None
    rparen_token: OptToken = None
    semicolon_token: OptToken = None


@_node
class WhileStatement(SyntaxNode):
    kind = Kind.WHILE_STATEMENT
    while_token: OptToken = None
    lparen_token: OptToken = None
    expression: OptNode = None
    rparen_token: OptToken = None
    statement: OptNode = None


@_node
class ForStatement(SyntaxNode):
    kind = Kind.FOR_STATEMENT
    for_token: OptToken = None
    lparen_token: OptToken = None
    declaration_kind_token: OptToken = None
    declarations: OptNode = None
    initialiser: OptNode = None
    first_semicolon_token: OptToken = None
    condition: OptNode = None
    second_semicolon_token: OptToken = None
    expression: OptNode = None
    rparen_token: OptToken = None
    statement: OptNode = None


@_node
class ForEachStatement(SyntaxNode):
    """``for (lhs in expr)`` and ``for (lhs of expr)``."""

    kind = Kind.FOR_EACH_STATEMENT
    for_token: OptToken = None
    lparen_token: OptToken = None
    declaration_kind_token: OptToken = None
    lhs: OptNode = None
    in_of_token: OptToken = None
    expression: OptNode = None
    rparen_token: OptToken = None
    statement: OptNode = None


@_node
class ContinueStatement(SyntaxNode):
    kind = Kind.CONTINUE_STATEMENT
    continue_token: OptToken = None
    label_token: OptToken = None
    semicolon_token: OptToken = None


@_node
class BreakStatement(SyntaxNode):
    kind = Kind.BREAK_STATEMENT
    break_token: OptToken = None
    label_token: OptToken = None
    semicolon_token: OptToken = None


@_node
class ReturnStatement(SyntaxNode):
    kind = Kind.RETURN_STATEMENT
    return_token: OptToken = None
    expression: OptNode = None
    semicolon_token: OptToken = None


@_node
class WithStatement(SyntaxNode):
    kind = Kind.WITH_STATEMENT
    with_token: OptToken = None
    lparen_token: OptToken = None
    expression: OptNode = None
    rparen_token: OptToken = None
    statement: OptNode = None


@_node
class SwitchStatement(SyntaxNode):
    kind = Kind.SWITCH_STATEMENT
    switch_token: OptToken = None
    lparen_token: OptToken = None
    expression: OptNode = None
    rparen_token: OptToken = None
    block: OptNode = None


@_node
class CaseBlock(SyntaxNode):
    kind = Kind.CASE_BLOCK
    lbrace_token: OptToken = None
    clauses: OptNode = None
    default_clause: OptNode = None
    more_clauses: OptNode = None
    rbrace_token: OptToken = None


@_node
class CaseClauses(SyntaxNode):
    kind = Kind.CASE_CLAUSES
    items: Tuple[SyntaxNode, ...] = ()


@_node
class CaseClause(SyntaxNode):
    kind = Kind.CASE_CLAUSE
    case_token: OptToken = None
    expression: OptNode = None
    colon_token: OptToken = None
    statements: OptNode = None


@_node
class DefaultClause(SyntaxNode):
    kind = Kind.DEFAULT_CLAUSE
    default_token: OptToken = None
    colon_token: OptToken = None
    statements: OptNode = None


@_node
class LabelledStatement(SyntaxNode):
    kind = Kind.LABELLED_STATEMENT
    identifier_token: OptToken = None
    colon_token: OptToken = None
    statement: OptNode = None


@_node
class ThrowStatement(SyntaxNode):
    kind = Kind.THROW_STATEMENT
    throw_token: OptToken = None
    expression: OptNode = None
    semicolon_token: OptToken = None


@_node
class TryStatement(SyntaxNode):
    kind = Kind.TRY_STATEMENT
    try_token: OptToken = None
    statement: OptNode = None
    catch_expression: OptNode = None
    finally_expression: OptNode = None


@_node
class Catch(SyntaxNode):
    kind = Kind.CATCH
    catch_token: OptToken = None
    lparen_token: OptToken = None
    identifier_token: OptToken = None
    rparen_token: OptToken = None
    statement: OptNode = None


@_node
class Finally(SyntaxNode):
    kind = Kind.FINALLY
    finally_token: OptToken = None
    statement: OptNode = None


@_node
class DebuggerStatement(SyntaxNode):
    kind = Kind.DEBUGGER_STATEMENT
    debugger_token: OptToken = None
    semicolon_token: OptToken = None
