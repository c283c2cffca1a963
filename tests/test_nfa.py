from lvpager.nfa import firstpos, followpos, lastpos, make_followpos, nullable
from lvpager.regex import Node, Op, parse


def leaves(node):
    if node is None:
        return []
    if node.left is None and node.right is None:
        return [node]
    return leaves(node.left) + leaves(node.right)


def test_nullable():
    assert nullable(parse("a*").left)
    assert nullable(parse("a?").left)
    assert not nullable(parse("a").left)
    assert not nullable(parse("ab*").left)
    assert nullable(parse("a*\\|b").left)
    assert not nullable(None)


def test_leaf_positions_are_itself():
    node = Node(Op.SIMPLE_LEAF)
    assert firstpos(node) == [node]
    assert lastpos(node) == [node]


def test_concatenation_followpos():
    tree = make_followpos(parse("ab"))
    a, b, igeta = leaves(tree)
    assert firstpos(tree) == [a]
    assert lastpos(tree) == [igeta]
    assert a.followpos == [b]
    assert b.followpos == [igeta]
    assert igeta.op == Op.IGETA


def test_closure_followpos_loops():
    tree = make_followpos(parse("a*b"))
    a, b, igeta = leaves(tree)
    assert firstpos(tree) == [a, b]
    assert a.followpos == [a, b]
    assert b.followpos == [igeta]


def test_or_lastpos_order_right_first():
    tree = parse("a\\|b").left
    a, b = tree.left, tree.right
    assert lastpos(tree) == [b, a]
    assert firstpos(tree) == [a, b]


def test_sets_sorted_by_descending_op_without_duplicates():
    tree = make_followpos(parse("\\(.\\|a\\|.\\)*b"))
    for node in leaves(tree) + [tree]:
        for positions in (node.firstpos, node.lastpos, node.followpos):
            if positions:
                ops = [n.op for n in positions]
                assert ops == sorted(ops, reverse=True)
                assert len({id(n) for n in positions}) == len(positions)


def test_firstpos_is_cached():
    tree = parse("ab").left
    first = firstpos(tree)
    assert firstpos(tree) is first
    assert tree.firstpos is first


def test_followpos_of_none_and_question_do_nothing():
    followpos(None)
    tree = parse("a?").left
    followpos(tree)
    assert tree.left.followpos is None


def test_make_followpos_none():
    assert make_followpos(None) is None