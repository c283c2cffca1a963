import pytest

from lvpager.charsets import Charset, IChar
from lvpager.regex import Node, Op, RegexError, parse


def shape(node):
    if node is None:
        return None
    ic = None if node.ic is None else (node.ic.charset, node.ic.c)
    return (node.op, ic, shape(node.left), shape(node.right))


def leaf(ch):
    return (Op.SIMPLE_LEAF, (Charset.ASCII, ord(ch)), None, None)


def bare(op):
    return (op, None, None, None)


def test_literal_sequence_is_concatenation_ending_in_igeta():
    tree = parse("abc")
    inner = (Op.CAT, None, (Op.CAT, None, leaf("a"), leaf("b")), leaf("c"))
    assert shape(tree) == (Op.CAT, None, inner, bare(Op.IGETA))


def test_closure_and_question():
    assert shape(parse("a*").left) == (Op.CLOSURE, None, leaf("a"), None)
    assert shape(parse("a?").left) == (Op.QUESTION, None, leaf("a"), None)


def test_plus_is_cat_with_closure_of_copy():
    tree = parse("a+").left
    assert tree.op == Op.CAT
    assert tree.right.op == Op.CLOSURE
    assert shape(tree.right.left) == shape(tree.left)
    assert tree.right.left is not tree.left


def test_anchors():
    tree = parse("^a$").left
    assert shape(tree) == (
        Op.CAT,
        None,
        (Op.CAT, None, bare(Op.HAT), leaf("a")),
        bare(Op.DOLLAR),
    )


def test_dollar_in_middle_is_literal():
    tree = parse("a$b").left
    assert shape(tree) == (
        Op.CAT,
        None,
        (Op.CAT, None, leaf("a"), leaf("$")),
        leaf("b"),
    )


def test_escaped_bar_is_alternation_plain_bar_is_literal():
    assert shape(parse("a\\|b").left) == (Op.OR, None, leaf("a"), leaf("b"))
    plain = parse("a|b").left
    assert plain.op == Op.CAT
    assert shape(plain.left.right) == leaf("|")


def test_group():
    tree = parse("\\(ab\\)*").left
    assert tree.op == Op.CLOSURE
    assert shape(tree.left) == (Op.CAT, None, leaf("a"), leaf("b"))


def test_period_and_categories():
    assert parse(".").left.op == Op.PERIOD
    assert parse("\\1").left.op == Op.CATEGORY1
    assert parse("\\2").left.op == Op.CATEGORY2


def test_escaped_character_is_leaf():
    assert shape(parse("\\*").left) == leaf("*")


def test_range_and_complement_range():
    rng = parse("[a-c]").left
    assert rng.op == Op.RANGE
    assert shape(rng.left) == leaf("a")
    assert shape(rng.right) == leaf("c")
    assert parse("[^a-c]").left.op == Op.COMPRANGE


def test_charset_alternatives_and_trailing_dash():
    tree = parse("[a-]").left
    assert shape(tree) == (Op.OR, None, leaf("a"), leaf("-"))
    comp = parse("[^ab]").left
    assert comp.op == Op.OR
    assert comp.left.op == Op.COMPLEMENT
    assert comp.right.op == Op.COMPLEMENT


def test_casefold_lowers_ascii_letters():
    assert shape(parse("A", casefold=True).left) == leaf("a")
    assert shape(parse("A").left) == leaf("A")


def test_ichar_input_multibyte():
    wide = IChar(Charset.X0208, 0x2422)
    tree = parse([wide, IChar(Charset.NOSET, 0), IChar(Charset.ASCII, ord("z"))])
    assert shape(tree.left) == (Op.SIMPLE_LEAF, (Charset.X0208, 0x2422), None, None)


@pytest.mark.parametrize(
    "pattern, message",
    [
        ("", "unexpected eol"),
        ("[a", "unmatched ["),
        ("\\(a", "unmatched ("),
        ("\\(a)", "unmatched ("),
        ("a\\|", "unexpected eol"),
    ],
)
def test_errors(pattern, message):
    with pytest.raises(RegexError) as info:
        parse(pattern)
    assert info.value.message == message


def test_overcrossing_range():
    pattern = [
        IChar(Charset.ASCII, ord("[")),
        IChar(Charset.ASCII, ord("a")),
        IChar(Charset.ASCII, ord("-")),
        IChar(Charset.X0208, 0x2422),
        IChar(Charset.ASCII, ord("]")),
    ]
    with pytest.raises(RegexError, match="overcrossing range"):
        parse(pattern)


def test_node_copy_is_deep_and_drops_positions():
    node = parse("ab")
    node.firstpos = [node]
    clone = node.copy()
    assert shape(clone) == shape(node)
    assert clone is not node
    assert clone.left is not node.left
    assert clone.firstpos is None
    assert isinstance(clone, Node)