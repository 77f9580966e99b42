"""Traversal order tests on hand-built trees.

The parser is not involved: every tree here is assembled directly from node
classes so the per-kind ordering rules are checked in isolation.
"""

from __future__ import annotations

from qmltrace.ast import nodes as n
from qmltrace.ast.nodes import Kind, Token
from qmltrace.trace import Event, render, traverse


def _tok(source: str, text: str, start: int = 0) -> Token:
    return Token(source.index(text, start), len(text))


def _ident(source: str, text: str, start: int = 0) -> n.IdentifierExpression:
    return n.IdentifierExpression(identifier_token=_tok(source, text, start))


def _call_statement(source: str, name: str, start: int) -> n.ExpressionStatement:
    base = _ident(source, name, start)
    start = base.identifier_token.offset
    lparen = _tok(source, "(", start)
    return n.ExpressionStatement(
        expression=n.CallExpression(
            base=base,
            lparen_token=lparen,
            rparen_token=_tok(source, ")", lparen.offset),
        ),
        semicolon_token=_tok(source, ";", start),
    )


def _if_tree(source: str, with_else: bool) -> n.IfStatement:
    ko = else_token = None
    if with_else:
        else_token = _tok(source, "else")
        ko = _call_statement(source, "z", else_token.offset)
    return n.IfStatement(
        if_token=_tok(source, "if"),
        lparen_token=_tok(source, "("),
        expression=_ident(source, "x"),
        rparen_token=_tok(source, ")"),
        ok=_call_statement(source, "y", 0),
        else_token=else_token,
        ko=ko,
    )


def _literals(records):
    return [r.text for r in records if r.event is Event.LITERAL]


def _shape(records):
    out = []
    for r in records:
        if r.event is Event.LITERAL:
            out.append(r.text)
        elif r.event is Event.ENTER:
            out.append(f"+{r.kind.display_name}")
        elif r.event is Event.EXIT:
            out.append(f"-{r.kind.display_name}")
    return out


def _assert_balanced(records) -> None:
    stack = []
    for r in records:
        assert r.depth >= 0
        if r.event is Event.ENTER:
            assert r.depth == len(stack)
            stack.append(r.kind)
        elif r.event is Event.EXIT:
            assert stack, "exit without enter"
            assert stack.pop() is r.kind
            assert r.depth == len(stack)
        else:
            assert r.depth == len(stack)
    assert not stack


def test_if_else_visits_tokens_in_surface_order():
    source = "if (x) y(); else z();"
    records = list(traverse(_if_tree(source, True), source))
    _assert_balanced(records)
    assert _shape(records) == [
        "+IfStatement",
        "if",
        "(",
        "+IdentifierExpression",
        "x",
        "-IdentifierExpression",
        ")",
        "+ExpressionStatement",
        "+CallExpression",
        "+IdentifierExpression",
        "y",
        "-IdentifierExpression",
        "(",
        ")",
        "-CallExpression",
        ";",
        "-ExpressionStatement",
        "else",
        "+ExpressionStatement",
        "+CallExpression",
        "+IdentifierExpression",
        "z",
        "-IdentifierExpression",
        "(",
        ")",
        "-CallExpression",
        ";",
        "-ExpressionStatement",
        "-IfStatement",
    ]


def test_if_without_else_skips_only_the_else_slots():
    with_else = "if (x) y(); else z();"
    without = "if (x) y();"
    full = _shape(traverse(_if_tree(with_else, True), with_else))
    short = _shape(traverse(_if_tree(without, False), without))
    else_at = full.index("else")
    # everything up to "else" is unchanged, and nothing of the else branch remains
    assert short[:-1] == full[:else_at]
    assert short[-1] == "-IfStatement"
    assert "z" not in short


def test_literal_offsets_follow_source_order():
    source = "if (x) y(); else z();"
    records = list(traverse(_if_tree(source, True), source))
    offsets = [r.offset for r in records if r.event is Event.LITERAL]
    assert offsets == sorted(offsets)
    assert len(set(offsets)) == len(offsets)
    for r in records:
        if r.event is Event.LITERAL:
            assert source[r.offset : r.offset + len(r.text)] == r.text


def test_traversal_is_idempotent():
    source = "if (x) y(); else z();"
    tree = _if_tree(source, True)
    first = [render(r) for r in traverse(tree, source)]
    second = [render(r) for r in traverse(tree, source)]
    assert first == second
    assert list(traverse(tree, source)) == list(traverse(tree, source))


def test_absent_root_yields_nothing():
    assert list(traverse(None, "anything")) == []


def test_empty_statement_without_token_still_enters_and_exits():
    records = list(traverse(n.EmptyStatement(), ""))
    assert [(r.event, r.kind, r.depth) for r in records] == [
        (Event.ENTER, Kind.EMPTY_STATEMENT, 0),
        (Event.EXIT, Kind.EMPTY_STATEMENT, 0),
    ]


def _qualified(source: str, names, synthetic: bool = False) -> n.UiQualifiedId:
    chain = None
    cursor = len(source)
    parts = []
    for name in reversed(names):
        start = source.rindex(name, 0, cursor)
        parts.append((Token(start, len(name)), start))
        cursor = start
    for token, start in parts:
        dot = None
        if chain is not None and not synthetic:
            dot = Token(start + token.length, 1)
        chain = n.UiQualifiedId(identifier_token=token, dot_token=dot, next=chain)
    return chain


def test_object_binding_order_depends_on_on_form():
    source = "font: Font {}"
    plain = n.UiObjectBinding(
        qualified_id=_qualified(source[:4], ["font"]),
        colon_token=_tok(source, ":"),
        qualified_type_name_id=n.UiQualifiedId(identifier_token=_tok(source, "Font")),
        initializer=n.UiObjectInitializer(
            lbrace_token=_tok(source, "{"), rbrace_token=_tok(source, "}")
        ),
    )
    assert _literals(traverse(plain, source)) == ["font", ":", "Font", "{", "}"]

    source = "Behavior on width {}"
    on_form = n.UiObjectBinding(
        qualified_id=n.UiQualifiedId(identifier_token=_tok(source, "width")),
        colon_token=_tok(source, "on"),
        qualified_type_name_id=n.UiQualifiedId(
            identifier_token=_tok(source, "Behavior")
        ),
        initializer=n.UiObjectInitializer(
            lbrace_token=_tok(source, "{"), rbrace_token=_tok(source, "}")
        ),
        has_on_token=True,
    )
    assert _literals(traverse(on_form, source)) == [
        "Behavior",
        "on",
        "width",
        "{",
        "}",
    ]


def test_qualified_id_emits_separator_between_segments():
    source = "a.b.c"
    records = list(traverse(_qualified(source, ["a", "b", "c"]), source))
    _assert_balanced(records)
    assert _literals(records) == ["a", ".", "b", ".", "c"]
    # real dot tokens keep their quotes like any other source text
    assert '  "."' in [render(r) for r in records]
    # each segment nests one level deeper
    enters = [r.depth for r in records if r.event is Event.ENTER]
    assert enters == [0, 1, 2]


def test_qualified_id_without_dot_tokens_uses_synthetic_separator():
    source = "a b"
    records = list(traverse(_qualified(source, ["a", "b"], synthetic=True), source))
    seps = [r for r in records if r.event is Event.LITERAL and r.text == "."]
    assert len(seps) == 1
    assert seps[0].offset is None
    assert render(seps[0]) == "  ."


def test_import_prefers_uri_over_file_name():
    source = 'import "lib.js" as Lib;'
    node = n.UiImport(
        import_token=_tok(source, "import"),
        file_name_token=_tok(source, '"lib.js"'),
        as_token=_tok(source, "as"),
        import_id_token=_tok(source, "Lib"),
        semicolon_token=_tok(source, ";"),
    )
    assert _literals(traverse(node, source)) == [
        "import",
        '"lib.js"',
        "as",
        "Lib",
        ";",
    ]


def test_argument_list_is_right_linked():
    source = "f(a, b, c)"
    a, b, c = (_ident(source, name, 2) for name in "abc")
    first_comma = _tok(source, ",")
    second_comma = _tok(source, ",", first_comma.offset + 1)
    args = n.ArgumentList(
        expression=a,
        comma_token=first_comma,
        next=n.ArgumentList(
            expression=b,
            comma_token=second_comma,
            next=n.ArgumentList(expression=c),
        ),
    )
    call = n.CallExpression(
        base=_ident(source, "f"),
        lparen_token=_tok(source, "("),
        arguments=args,
        rparen_token=_tok(source, ")"),
    )
    records = list(traverse(call, source))
    _assert_balanced(records)
    assert "".join(_literals(records)) == "f(a,b,c)"
    depths = [
        r.depth
        for r in records
        if r.event is Event.ENTER and r.kind is Kind.ARGUMENT_LIST
    ]
    assert depths == [1, 2, 3]


def test_pattern_element_list_is_left_linked():
    source = "[1, , 2]"
    one = n.NumericLiteral(literal_token=_tok(source, "1"))
    two = n.NumericLiteral(literal_token=_tok(source, "2"))
    first_comma = _tok(source, ",")
    hole = _tok(source, ",", first_comma.offset + 1)
    # "next" holds the preceding elements
    elements = n.PatternElementList(
        next=n.PatternElementList(element=one),
        comma_token=first_comma,
        elision=n.Elision(comma_token=hole),
        element=two,
    )
    array = n.ArrayPattern(
        lbracket_token=_tok(source, "["),
        elements=elements,
        rbracket_token=_tok(source, "]"),
    )
    records = list(traverse(array, source))
    _assert_balanced(records)
    assert _literals(records) == ["[", "1", ",", ",", "2", "]"]


def test_elision_visits_preceding_commas_first():
    source = "[,,,]"
    commas = [Token(i, 1) for i in (1, 2, 3)]
    elision = None
    for comma in commas:
        elision = n.Elision(next=elision, comma_token=comma)
    array = n.ArrayPattern(
        lbracket_token=Token(0, 1), elision=elision, rbracket_token=Token(4, 1)
    )
    offsets = [r.offset for r in traverse(array, source) if r.event is Event.LITERAL]
    assert offsets == [0, 1, 2, 3, 4]


def test_formal_parameter_list_is_flat_with_commas_after_items():
    source = "function f(a, b) {}"
    a = n.PatternElement(identifier_token=_tok(source, "a"))
    b = n.PatternElement(identifier_token=_tok(source, "b", 12))
    formals = n.FormalParameterList(items=(a, b), commas=(_tok(source, ","), None))
    fn = n.FunctionDeclaration(
        function_token=_tok(source, "function"),
        identifier_token=_tok(source, "f", 8),
        lparen_token=_tok(source, "("),
        formals=formals,
        rparen_token=_tok(source, ")"),
        lbrace_token=_tok(source, "{"),
        rbrace_token=_tok(source, "}"),
    )
    records = list(traverse(fn, source))
    _assert_balanced(records)
    assert _literals(records) == ["function", "f", "(", "a", ",", "b", ")", "{", "}"]
    formal_enters = [r for r in records if r.kind is Kind.FORMAL_PARAMETER_LIST]
    assert len(formal_enters) == 2  # one Enter and one Exit around all items


def test_statement_list_is_flat():
    source = ";;;"
    statements = tuple(
        n.EmptyStatement(semicolon_token=Token(i, 1)) for i in range(3)
    )
    program = n.Program(statements=n.StatementList(items=statements))
    records = list(traverse(program, source))
    _assert_balanced(records)
    depths = {r.depth for r in records if r.kind is Kind.EMPTY_STATEMENT}
    assert depths == {2}


def test_case_block_keeps_default_between_clause_groups():
    source = "{ case 1: default: case 2: }"
    case_one = n.CaseClause(
        case_token=_tok(source, "case"),
        expression=n.NumericLiteral(literal_token=_tok(source, "1")),
        colon_token=_tok(source, ":"),
    )
    default = n.DefaultClause(
        default_token=_tok(source, "default"),
        colon_token=_tok(source, ":", source.index("default")),
    )
    second = source.index("case", 5)
    case_two = n.CaseClause(
        case_token=Token(second, 4),
        expression=n.NumericLiteral(literal_token=_tok(source, "2")),
        colon_token=_tok(source, ":", second),
    )
    block = n.CaseBlock(
        lbrace_token=_tok(source, "{"),
        clauses=n.CaseClauses(items=(case_one,)),
        default_clause=default,
        more_clauses=n.CaseClauses(items=(case_two,)),
        rbrace_token=_tok(source, "}"),
    )
    assert "".join(_literals(traverse(block, source))) == "{case1:default:case2:}"


def test_render_reference_format():
    source = "x"
    lines = [render(r) for r in traverse(_ident(source, "x"), source)]
    assert lines == ["+ IdentifierExpression", '  "x"', "- IdentifierExpression"]
