from funclite.functional import collection_ops as ops
from funclite.functional import predicates as p


def test_sign_predicates():
    assert p.positive()(1)
    assert not p.positive()(0)
    assert p.negative()(-2)
    assert not p.negative()(0)


def test_none_predicates():
    assert p.is_none()(None)
    assert p.not_none()(0)
    assert ops.filter([None, 1, None, 2], p.not_none()) == (1, 2)


def test_equality_and_membership():
    assert ops.find(["a", "b"], p.equal_to("b")).get() == "b"
    assert ops.filter(range(6), p.is_in({1, 3, 5})) == (1, 3, 5)


def test_constant_predicates():
    assert ops.forall([1, 2], p.always_true())
    assert not ops.exists([1, 2], p.always_false())


def test_combinators():
    even = lambda n: n % 2 == 0
    assert ops.filter(range(6), p.not_(even)) == (1, 3, 5)
    assert ops.filter(range(10), p.and_(even, lambda n: n > 4)) == (6, 8)
    assert ops.filter(range(6), p.or_(p.equal_to(1), p.equal_to(4))) == (1, 4)


def test_empty_combinators():
    assert p.and_()(1) is True
    assert p.or_()(1) is False


def test_and_short_circuits():
    calls = []

    def tracked(result):
        def predicate(value):
            calls.append(result)
            return result

        return predicate

    assert p.and_(tracked(False), tracked(True))(0) is False
    assert calls == [False]
