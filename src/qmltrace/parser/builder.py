"""Lark transformer that turns parse callbacks into SyntaxNode trees.

The transformer runs inline with the LALR parser, so every callback receives
already-built children: ``SyntaxNode`` instances, Lark tokens, ``None`` for
absent ``[...]`` parts, or the small helper tuples defined below.
"""

from __future__ import annotations

from dataclasses import fields
from typing import List, NamedTuple, Optional, Sequence

from lark import Token as LarkToken
from lark import Transformer, v_args

from ..ast import nodes as ast
from ..errors import QmlSyntaxError

__all__ = ["TreeBuilder", "to_token"]


def to_token(tok: Optional[LarkToken]) -> Optional[ast.Token]:
    if tok is None:
        return None
    return ast.Token(tok.start_pos, tok.end_pos - tok.start_pos)


def _is_token(item, type_: str) -> bool:
    return isinstance(item, LarkToken) and item.type == type_


class _Arguments(NamedTuple):
    lparen: Optional[ast.Token]
    arguments: Optional[ast.ArgumentList]
    rparen: Optional[ast.Token]


class _PropertyType(NamedTuple):
    modifier: Optional[ast.Token]
    lt: Optional[ast.Token]
    name: Optional[ast.Token]
    gt: Optional[ast.Token]


class _Parameter(NamedTuple):
    type_token: ast.Token
    identifier_token: ast.Token


class _EnumMember(NamedTuple):
    member: ast.Token
    equal: Optional[ast.Token]
    value: Optional[ast.Token]


def _split_separated(items: Sequence, separator: str):
    """Split ``a , b , c`` into ``[(a, None), (b, comma), (c, comma)]``.

    Each element is paired with the separator that precedes it.
    """
    pairs = []
    pending = None
    for item in items:
        if item is None:
            continue
        if _is_token(item, separator):
            pending = to_token(item)
            continue
        pairs.append((item, pending))
        pending = None
    return pairs, pending


def _statement_list(items: Sequence) -> Optional[ast.StatementList]:
    statements = tuple(s for s in items if s is not None)
    if not statements:
        return None
    return ast.StatementList(items=statements)


def _qualified_id(segments: List[tuple]) -> ast.UiQualifiedId:
    """Build a right-linked id from ``[(identifier, dot_before), ...]``."""
    chain = None
    dot_after = None
    for identifier, dot_before in reversed(segments):
        chain = ast.UiQualifiedId(
            identifier_token=identifier, dot_token=dot_after, next=chain
        )
        dot_after = dot_before
    return chain


def _first_offset(node: ast.SyntaxNode) -> int:
    current = node
    while current is not None:
        child = None
        for field in fields(current):
            value = getattr(current, field.name)
            if isinstance(value, ast.Token):
                return value.offset
            if isinstance(value, ast.SyntaxNode):
                child = value
                break
        current = child
    return 0


def member_to_qualified_id(expr: ast.SyntaxNode) -> ast.UiQualifiedId:
    """Reinterpret ``a.b.C`` parsed as an expression as a type name."""
    segments = []
    current = expr
    while isinstance(current, ast.FieldMemberExpression):
        segments.append((current.identifier_token, current.dot_token))
        current = current.base
    if not isinstance(current, ast.IdentifierExpression):
        raise QmlSyntaxError(
            "expected a type name before '{'",
            context={
                "kind": current.kind.display_name,
                "offset": _first_offset(current),
            },
        )
    segments.append((current.identifier_token, None))
    segments.reverse()
    return _qualified_id(segments)


@v_args(inline=True)
class TreeBuilder(Transformer):
    # ------------------------------------------------------------------ QML

    def ui_program(self, *items):
        headers = tuple(items[:-1])
        root = items[-1]
        return ast.UiProgram(
            headers=ast.UiHeaderItemList(items=headers) if headers else None,
            members=ast.UiObjectMemberList(items=(root,)),
        )

    def ui_pragma(self, pragma, name, semicolon):
        return ast.UiPragma(
            pragma_token=to_token(pragma),
            name_token=to_token(name),
            semicolon_token=to_token(semicolon),
        )

    def ui_import_uri(self, import_, uri, version, as_, import_id, semicolon):
        return ast.UiImport(
            import_token=to_token(import_),
            import_uri=uri,
            version_token=to_token(version),
            as_token=to_token(as_),
            import_id_token=to_token(import_id),
            semicolon_token=to_token(semicolon),
        )

    def ui_import_file(self, import_, file_name, version, as_, import_id, semicolon):
        return ast.UiImport(
            import_token=to_token(import_),
            file_name_token=to_token(file_name),
            version_token=to_token(version),
            as_token=to_token(as_),
            import_id_token=to_token(import_id),
            semicolon_token=to_token(semicolon),
        )

    def ui_qualified_id(self, *items):
        segments, _ = _split_separated(items, "DOT")
        return _qualified_id([(to_token(i), dot) for i, dot in segments])

    def ui_object_definition(self, type_name, initializer):
        return ast.UiObjectDefinition(
            qualified_type_name_id=type_name, initializer=initializer
        )

    def ui_object_initializer(self, lbrace, *rest):
        members = tuple(m for m in rest[:-1] if m is not None)
        return ast.UiObjectInitializer(
            lbrace_token=to_token(lbrace),
            members=ast.UiObjectMemberList(items=members) if members else None,
            rbrace_token=to_token(rest[-1]),
        )

    def ui_object_binding(self, qualified_id, colon, type_expr, initializer):
        return ast.UiObjectBinding(
            qualified_id=qualified_id,
            colon_token=to_token(colon),
            qualified_type_name_id=member_to_qualified_id(type_expr),
            initializer=initializer,
        )

    def ui_on_binding(self, type_name, on, target, initializer):
        return ast.UiObjectBinding(
            qualified_id=target,
            colon_token=to_token(on),
            qualified_type_name_id=type_name,
            initializer=initializer,
            has_on_token=True,
        )

    def ui_script_binding(self, qualified_id, colon, statement):
        return ast.UiScriptBinding(
            qualified_id=qualified_id,
            colon_token=to_token(colon),
            statement=statement,
        )

    def ui_array_binding(self, qualified_id, colon, lbracket, *rest):
        pairs, _ = _split_separated(rest[:-1], "COMMA")
        chain = None
        for member, comma in reversed(pairs):
            chain = ast.UiArrayMemberList(
                comma_token=comma, member=member, next=chain
            )
        return ast.UiArrayBinding(
            qualified_id=qualified_id,
            colon_token=to_token(colon),
            lbracket_token=to_token(lbracket),
            members=chain,
            rbracket_token=to_token(rest[-1]),
        )

    def ui_array_member(self, type_expr, initializer):
        return ast.UiObjectDefinition(
            qualified_type_name_id=member_to_qualified_id(type_expr),
            initializer=initializer,
        )

    def _public_member(self, default, readonly, property_, type_, name, **extra):
        return ast.UiPublicMember(
            default_token=to_token(default),
            readonly_token=to_token(readonly),
            property_token=to_token(property_),
            type_modifier_token=type_.modifier,
            lt_token=type_.lt,
            type_token=type_.name,
            gt_token=type_.gt,
            identifier_token=to_token(name),
            **extra,
        )

    def ui_property(self, default, readonly, property_, type_, name, semicolon):
        return self._public_member(
            default,
            readonly,
            property_,
            type_,
            name,
            semicolon_token=to_token(semicolon),
        )

    def ui_property_statement(
        self, default, readonly, property_, type_, name, colon, statement
    ):
        return self._public_member(
            default,
            readonly,
            property_,
            type_,
            name,
            colon_token=to_token(colon),
            statement=statement,
        )

    def ui_property_binding(
        self, default, readonly, property_, type_, name, colon, type_expr, initializer
    ):
        binding = ast.UiObjectDefinition(
            qualified_type_name_id=member_to_qualified_id(type_expr),
            initializer=initializer,
        )
        return self._public_member(
            default,
            readonly,
            property_,
            type_,
            name,
            colon_token=to_token(colon),
            binding=binding,
        )

    def ui_signal(self, signal, name, parameters, semicolon):
        lparen = rparen = params = None
        if parameters is not None:
            lparen, params, rparen = parameters
        return ast.UiPublicMember(
            property_token=to_token(signal),
            identifier_token=to_token(name),
            lparen_token=lparen,
            parameters=params,
            rparen_token=rparen,
            semicolon_token=to_token(semicolon),
        )

    def ui_plain_type(self, name):
        return _PropertyType(None, None, to_token(name), None)

    def ui_list_type(self, modifier, lt, name, gt):
        return _PropertyType(
            to_token(modifier), to_token(lt), to_token(name), to_token(gt)
        )

    def ui_signal_parameters(self, lparen, *rest):
        pairs, _ = _split_separated(rest[:-1], "COMMA")
        chain = None
        for param, comma in reversed(pairs):
            chain = ast.UiParameterList(
                comma_token=comma,
                type_token=param.type_token,
                identifier_token=param.identifier_token,
                next=chain,
            )
        return _Arguments(to_token(lparen), chain, to_token(rest[-1]))

    def ui_parameter(self, type_name, name):
        return _Parameter(to_token(type_name), to_token(name))

    def ui_source_element(self, element):
        return ast.UiSourceElement(source_element=element)

    def ui_enum_declaration(self, enum, name, lbrace, *rest):
        pairs, _ = _split_separated(rest[:-1], "COMMA")
        chain = None
        for member, comma in reversed(pairs):
            chain = ast.UiEnumMemberList(
                comma_token=comma,
                member_token=member.member,
                equal_token=member.equal,
                value_token=member.value,
                next=chain,
            )
        return ast.UiEnumDeclaration(
            enum_token=to_token(enum),
            name_token=to_token(name),
            lbrace_token=to_token(lbrace),
            members=chain,
            rbrace_token=to_token(rest[-1]),
        )

    def ui_enum_member(self, name, equal, value):
        return _EnumMember(to_token(name), to_token(equal), to_token(value))

    # ----------------------------------------------------------- statements

    def program(self, *statements):
        return ast.Program(statements=_statement_list(statements))

    def block(self, lbrace, *rest):
        return ast.Block(
            lbrace_token=to_token(lbrace),
            statements=_statement_list(rest[:-1]),
            rbrace_token=to_token(rest[-1]),
        )

    def _declaration_list(self, items) -> Optional[ast.VariableDeclarationList]:
        # A declaration owns the comma that follows it.
        pairs, _ = _split_separated(items, "COMMA")
        chain = None
        comma_after = None
        for declaration, comma_before in reversed(pairs):
            chain = ast.VariableDeclarationList(
                declaration=declaration, comma_token=comma_after, next=chain
            )
            comma_after = comma_before
        return chain

    def variable_statement(self, kind, *rest):
        return ast.VariableStatement(
            declaration_kind_token=to_token(kind),
            declarations=self._declaration_list(rest[:-1]),
            semicolon_token=to_token(rest[-1]),
        )

    def variable_declaration(self, name, equal, initializer):
        return ast.PatternElement(
            identifier_token=to_token(name),
            equal_token=to_token(equal),
            initializer=initializer,
        )

    def empty_statement(self, semicolon):
        return ast.EmptyStatement(semicolon_token=to_token(semicolon))

    def expression_statement(self, expression, semicolon):
        return ast.ExpressionStatement(
            expression=expression, semicolon_token=to_token(semicolon)
        )

    def if_statement(self, if_, lparen, expression, rparen, ok, else_, ko):
        return ast.IfStatement(
            if_token=to_token(if_),
            lparen_token=to_token(lparen),
            expression=expression,
            rparen_token=to_token(rparen),
            ok=ok,
            else_token=to_token(else_),
            ko=ko,
        )

    def do_while_statement(
        self, do, statement, while_, lparen, expression, rparen, semicolon
    ):
        return ast.DoWhileStatement(
            do_token=to_token(do),
            statement=statement,
            while_token=to_token(while_),
            lparen_token=to_token(lparen),
            expression=expression,
            rparen_token=to_token(rparen),
            semicolon_token=to_token(semicolon),
        )

    def while_statement(self, while_, lparen, expression, rparen, statement):
        return ast.WhileStatement(
            while_token=to_token(while_),
            lparen_token=to_token(lparen),
            expression=expression,
            rparen_token=to_token(rparen),
            statement=statement,
        )

    def for_statement(
        self,
        for_,
        lparen,
        initialiser,
        first_semicolon,
        condition,
        second_semicolon,
        expression,
        rparen,
        statement,
    ):
        return ast.ForStatement(
            for_token=to_token(for_),
            lparen_token=to_token(lparen),
            initialiser=initialiser,
            first_semicolon_token=to_token(first_semicolon),
            condition=condition,
            second_semicolon_token=to_token(second_semicolon),
            expression=expression,
            rparen_token=to_token(rparen),
            statement=statement,
        )

    def for_declaration_statement(self, for_, lparen, kind, *rest):
        (
            first_semicolon,
            condition,
            second_semicolon,
            expression,
            rparen,
            statement,
        ) = rest[-6:]
        return ast.ForStatement(
            for_token=to_token(for_),
            lparen_token=to_token(lparen),
            declaration_kind_token=to_token(kind),
            declarations=self._declaration_list(rest[:-6]),
            first_semicolon_token=to_token(first_semicolon),
            condition=condition,
            second_semicolon_token=to_token(second_semicolon),
            expression=expression,
            rparen_token=to_token(rparen),
            statement=statement,
        )

    def for_each_statement(
        self, for_, lparen, lhs, in_of, expression, rparen, statement
    ):
        return ast.ForEachStatement(
            for_token=to_token(for_),
            lparen_token=to_token(lparen),
            lhs=lhs,
            in_of_token=to_token(in_of),
            expression=expression,
            rparen_token=to_token(rparen),
            statement=statement,
        )

    def for_each_declaration_statement(
        self, for_, lparen, kind, declaration, in_of, expression, rparen, statement
    ):
        return ast.ForEachStatement(
            for_token=to_token(for_),
            lparen_token=to_token(lparen),
            declaration_kind_token=to_token(kind),
            lhs=declaration,
            in_of_token=to_token(in_of),
            expression=expression,
            rparen_token=to_token(rparen),
            statement=statement,
        )

    def continue_statement(self, continue_, label, semicolon):
        return ast.ContinueStatement(
            continue_token=to_token(continue_),
            label_token=to_token(label),
            semicolon_token=to_token(semicolon),
        )

    def break_statement(self, break_, label, semicolon):
        return ast.BreakStatement(
            break_token=to_token(break_),
            label_token=to_token(label),
            semicolon_token=to_token(semicolon),
        )

    def return_statement(self, return_, expression, semicolon):
        return ast.ReturnStatement(
            return_token=to_token(return_),
            expression=expression,
            semicolon_token=to_token(semicolon),
        )

    def with_statement(self, with_, lparen, expression, rparen, statement):
        return ast.WithStatement(
            with_token=to_token(with_),
            lparen_token=to_token(lparen),
            expression=expression,
            rparen_token=to_token(rparen),
            statement=statement,
        )

    def switch_statement(self, switch, lparen, expression, rparen, block):
        return ast.SwitchStatement(
            switch_token=to_token(switch),
            lparen_token=to_token(lparen),
            expression=expression,
            rparen_token=to_token(rparen),
            block=block,
        )

    @staticmethod
    def _clauses(items) -> Optional[ast.CaseClauses]:
        clauses = tuple(c for c in items if c is not None)
        return ast.CaseClauses(items=clauses) if clauses else None

    def case_block(self, lbrace, *rest):
        inner = [c for c in rest[:-1] if c is not None]
        split = next(
            (i for i, c in enumerate(inner) if isinstance(c, ast.DefaultClause)),
            None,
        )
        if split is None:
            return ast.CaseBlock(
                lbrace_token=to_token(lbrace),
                clauses=self._clauses(inner),
                rbrace_token=to_token(rest[-1]),
            )
        return ast.CaseBlock(
            lbrace_token=to_token(lbrace),
            clauses=self._clauses(inner[:split]),
            default_clause=inner[split],
            more_clauses=self._clauses(inner[split + 1 :]),
            rbrace_token=to_token(rest[-1]),
        )

    def case_clause(self, case, expression, colon, *statements):
        return ast.CaseClause(
            case_token=to_token(case),
            expression=expression,
            colon_token=to_token(colon),
            statements=_statement_list(statements),
        )

    def default_clause(self, default, colon, *statements):
        return ast.DefaultClause(
            default_token=to_token(default),
            colon_token=to_token(colon),
            statements=_statement_list(statements),
        )

    def labelled_statement(self, label, colon, statement):
        return ast.LabelledStatement(
            identifier_token=to_token(label),
            colon_token=to_token(colon),
            statement=statement,
        )

    def throw_statement(self, throw, expression, semicolon):
        return ast.ThrowStatement(
            throw_token=to_token(throw),
            expression=expression,
            semicolon_token=to_token(semicolon),
        )

    def try_catch_statement(self, try_, block, catch, finally_):
        return ast.TryStatement(
            try_token=to_token(try_),
            statement=block,
            catch_expression=catch,
            finally_expression=finally_,
        )

    def try_finally_statement(self, try_, block, finally_):
        return ast.TryStatement(
            try_token=to_token(try_), statement=block, finally_expression=finally_
        )

    def catch_clause(self, catch, lparen, name, rparen, block):
        return ast.Catch(
            catch_token=to_token(catch),
            lparen_token=to_token(lparen),
            identifier_token=to_token(name),
            rparen_token=to_token(rparen),
            statement=block,
        )

    def finally_clause(self, finally_, block):
        return ast.Finally(finally_token=to_token(finally_), statement=block)

    def debugger_statement(self, debugger, semicolon):
        return ast.DebuggerStatement(
            debugger_token=to_token(debugger), semicolon_token=to_token(semicolon)
        )

    def _function(self, cls, function, name, lparen, formals, rparen, lbrace, rest):
        return cls(
            function_token=to_token(function),
            identifier_token=to_token(name),
            lparen_token=to_token(lparen),
            formals=formals,
            rparen_token=to_token(rparen),
            lbrace_token=to_token(lbrace),
            body=_statement_list(rest[:-1]),
            rbrace_token=to_token(rest[-1]),
        )

    def function_declaration(self, function, name, lparen, formals, rparen, lbrace, *rest):
        return self._function(
            ast.FunctionDeclaration, function, name, lparen, formals, rparen, lbrace, rest
        )

    def function_expression(self, function, name, lparen, formals, rparen, lbrace, *rest):
        return self._function(
            ast.FunctionExpression, function, name, lparen, formals, rparen, lbrace, rest
        )

    def anonymous_function(self, function, lparen, formals, rparen, lbrace, *rest):
        return self._function(
            ast.FunctionExpression, function, None, lparen, formals, rparen, lbrace, rest
        )

    def formal_parameters(self, *items):
        pairs, _ = _split_separated(items, "COMMA")
        params = tuple(p for p, _ in pairs)
        # commas[i] follows params[i]
        commas = tuple(c for _, c in pairs[1:]) + (None,)
        return ast.FormalParameterList(items=params, commas=commas)

    # ---------------------------------------------------------- expressions

    def this_expression(self, tok):
        return ast.ThisExpression(this_token=to_token(tok))

    def identifier_expression(self, tok):
        return ast.IdentifierExpression(identifier_token=to_token(tok))

    def null_expression(self, tok):
        return ast.NullExpression(null_token=to_token(tok))

    def true_literal(self, tok):
        return ast.TrueLiteral(true_token=to_token(tok))

    def false_literal(self, tok):
        return ast.FalseLiteral(false_token=to_token(tok))

    def numeric_literal(self, tok):
        return ast.NumericLiteral(literal_token=to_token(tok))

    def string_literal(self, tok):
        return ast.StringLiteral(literal_token=to_token(tok))

    def regexp_literal(self, tok):
        return ast.RegExpLiteral(literal_token=to_token(tok))

    def nested_expression(self, lparen, expression, rparen):
        return ast.NestedExpression(
            lparen_token=to_token(lparen),
            expression=expression,
            rparen_token=to_token(rparen),
        )

    def array_literal(self, lbracket, elements, rbracket):
        return ast.ArrayPattern(
            lbracket_token=to_token(lbracket),
            elements=elements,
            rbracket_token=to_token(rbracket),
        )

    def array_literal_elision(self, lbracket, elision, rbracket):
        return ast.ArrayPattern(
            lbracket_token=to_token(lbracket),
            elision=elision,
            rbracket_token=to_token(rbracket),
        )

    def array_literal_trailing(self, lbracket, elements, comma, elision, rbracket):
        return ast.ArrayPattern(
            lbracket_token=to_token(lbracket),
            elements=elements,
            comma_token=to_token(comma),
            elision=elision,
            rbracket_token=to_token(rbracket),
        )

    def element_list_first(self, elision, element):
        return ast.PatternElementList(elision=elision, element=element)

    def element_list_next(self, previous, comma, elision, element):
        return ast.PatternElementList(
            next=previous,
            comma_token=to_token(comma),
            elision=elision,
            element=element,
        )

    def elision(self, *items):
        if len(items) == 1:
            return ast.Elision(comma_token=to_token(items[0]))
        previous, comma = items
        return ast.Elision(next=previous, comma_token=to_token(comma))

    def object_literal(self, lbrace, *rest):
        pairs, trailing = _split_separated(rest[:-1], "COMMA")
        chain = None
        comma_after = trailing
        for prop, comma_before in reversed(pairs):
            chain = ast.PatternPropertyList(
                property=prop, comma_token=comma_after, next=chain
            )
            comma_after = comma_before
        return ast.ObjectPattern(
            lbrace_token=to_token(lbrace),
            properties=chain,
            rbrace_token=to_token(rest[-1]),
        )

    def property_assignment(self, name, colon, initializer):
        return ast.PatternProperty(
            name=name, colon_token=to_token(colon), initializer=initializer
        )

    def identifier_property_name(self, tok):
        return ast.IdentifierPropertyName(property_name_token=to_token(tok))

    def string_literal_property_name(self, tok):
        return ast.StringLiteralPropertyName(property_name_token=to_token(tok))

    def numeric_literal_property_name(self, tok):
        return ast.NumericLiteralPropertyName(property_name_token=to_token(tok))

    def arguments(self, lparen, *rest):
        pairs, _ = _split_separated(rest[:-1], "COMMA")
        chain = None
        comma_after = None
        for expression, comma_before in reversed(pairs):
            chain = ast.ArgumentList(
                expression=expression, comma_token=comma_after, next=chain
            )
            comma_after = comma_before
        return _Arguments(to_token(lparen), chain, to_token(rest[-1]))

    def field_member_expression(self, base, dot, name):
        return ast.FieldMemberExpression(
            base=base, dot_token=to_token(dot), identifier_token=to_token(name)
        )

    def array_member_expression(self, base, lbracket, expression, rbracket):
        return ast.ArrayMemberExpression(
            base=base,
            lbracket_token=to_token(lbracket),
            expression=expression,
            rbracket_token=to_token(rbracket),
        )

    def new_member_expression(self, new, base, args):
        return ast.NewMemberExpression(
            new_token=to_token(new),
            base=base,
            lparen_token=args.lparen,
            arguments=args.arguments,
            rparen_token=args.rparen,
        )

    def new_expression(self, new, expression):
        return ast.NewExpression(new_token=to_token(new), expression=expression)

    def call_expression(self, base, args):
        return ast.CallExpression(
            base=base,
            lparen_token=args.lparen,
            arguments=args.arguments,
            rparen_token=args.rparen,
        )

    def post_increment_expression(self, base, op):
        return ast.PostIncrementExpression(base=base, increment_token=to_token(op))

    def post_decrement_expression(self, base, op):
        return ast.PostDecrementExpression(base=base, decrement_token=to_token(op))

    def delete_expression(self, op, expression):
        return ast.DeleteExpression(delete_token=to_token(op), expression=expression)

    def void_expression(self, op, expression):
        return ast.VoidExpression(void_token=to_token(op), expression=expression)

    def type_of_expression(self, op, expression):
        return ast.TypeOfExpression(typeof_token=to_token(op), expression=expression)

    def pre_increment_expression(self, op, expression):
        return ast.PreIncrementExpression(
            increment_token=to_token(op), expression=expression
        )

    def pre_decrement_expression(self, op, expression):
        return ast.PreDecrementExpression(
            decrement_token=to_token(op), expression=expression
        )

    def unary_plus_expression(self, op, expression):
        return ast.UnaryPlusExpression(plus_token=to_token(op), expression=expression)

    def unary_minus_expression(self, op, expression):
        return ast.UnaryMinusExpression(
            minus_token=to_token(op), expression=expression
        )

    def tilde_expression(self, op, expression):
        return ast.TildeExpression(tilde_token=to_token(op), expression=expression)

    def not_expression(self, op, expression):
        return ast.NotExpression(not_token=to_token(op), expression=expression)

    def binary_expression(self, left, op, right):
        return ast.BinaryExpression(
            left=left, operator_token=to_token(op), right=right
        )

    def conditional_expression(self, expression, question, ok, colon, ko):
        return ast.ConditionalExpression(
            expression=expression,
            question_token=to_token(question),
            ok=ok,
            colon_token=to_token(colon),
            ko=ko,
        )

    def comma_expression(self, left, comma, right):
        return ast.Expression(left=left, comma_token=to_token(comma), right=right)
