"""Property-based law checks for every catalog instance."""

from hypothesis import given

from algebraic import (
    MAGMA_TREE_FORK,
    MONOID_BOOLEAN_CONJUNCTION,
    MONOID_BOOLEAN_DISJUNCTION,
    MONOID_ENDOFUNCTION_COMPOSITION,
    MONOID_LIST_CONCATENATION,
    MONOID_NUMBER_ADDITION,
    MONOID_NUMBER_MULTIPLICATION,
    SEMIGROUP_ENDOFUNCTION_COMPOSITION,
    SEMIGROUP_LIST_CONCATENATION,
    SEMIGROUP_NELIST_CONCATENATION,
    SEMIGROUP_NUMBER_ADDITION,
    Fork,
    Leaf,
    Monoid,
    fold_map,
    nelist_from_iterable,
    nelist_to_list,
)
from algebraic.combinators import identity_function

from samples import bools, endofunctions, ints, nelists, sequences, trees


class TestNumberAddition:
    """Test the number addition instances."""

    @given(ints, ints, ints)
    def test_associative(self, a, b, c):
        """Addition is associative."""
        assert MONOID_NUMBER_ADDITION.associative(a, b, c)
        assert SEMIGROUP_NUMBER_ADDITION.associative(a, b, c)

    @given(ints)
    def test_identity(self, x):
        """0 is a two-sided identity."""
        assert MONOID_NUMBER_ADDITION.identity(x)
        assert MONOID_NUMBER_ADDITION.right_identity(x)

    def test_identity_element(self):
        """Test the identity element value."""
        assert MONOID_NUMBER_ADDITION.identity_element == 0
        assert MONOID_NUMBER_ADDITION.identity(0)


class TestNumberMultiplication:
    """Test the number multiplication monoid."""

    @given(ints, ints, ints)
    def test_associative(self, a, b, c):
        """Multiplication is associative."""
        assert MONOID_NUMBER_MULTIPLICATION.associative(a, b, c)

    @given(ints)
    def test_identity(self, x):
        """1 is a two-sided identity."""
        assert MONOID_NUMBER_MULTIPLICATION.identity(x)
        assert MONOID_NUMBER_MULTIPLICATION.right_identity(x)

    def test_zero_absorbs(self):
        """0 absorbs and still satisfies the identity law."""
        assert MONOID_NUMBER_MULTIPLICATION.operation(0, 42) == 0
        assert MONOID_NUMBER_MULTIPLICATION.identity(0)


class TestBooleans:
    """Test the boolean monoids."""

    @given(bools, bools, bools)
    def test_associative(self, a, b, c):
        """Conjunction and disjunction are associative."""
        assert MONOID_BOOLEAN_CONJUNCTION.associative(a, b, c)
        assert MONOID_BOOLEAN_DISJUNCTION.associative(a, b, c)

    @given(bools)
    def test_identity(self, x):
        """True and False are the respective identities."""
        assert MONOID_BOOLEAN_CONJUNCTION.identity(x)
        assert MONOID_BOOLEAN_CONJUNCTION.right_identity(x)
        assert MONOID_BOOLEAN_DISJUNCTION.identity(x)
        assert MONOID_BOOLEAN_DISJUNCTION.right_identity(x)

    def test_identity_elements(self):
        """Test the identity element values."""
        assert MONOID_BOOLEAN_CONJUNCTION.identity_element is True
        assert MONOID_BOOLEAN_DISJUNCTION.identity_element is False


class TestListConcatenation:
    """Test the list concatenation instances."""

    @given(sequences, sequences, sequences)
    def test_associative(self, a, b, c):
        """Concatenation is associative."""
        assert MONOID_LIST_CONCATENATION.associative(a, b, c)
        assert SEMIGROUP_LIST_CONCATENATION.associative(a, b, c)

    @given(sequences)
    def test_identity(self, xs):
        """The empty sequence is a two-sided identity."""
        assert MONOID_LIST_CONCATENATION.identity(xs)
        assert MONOID_LIST_CONCATENATION.right_identity(xs)

    def test_empty_sequence(self):
        """Test the identity element value."""
        assert MONOID_LIST_CONCATENATION.identity_element == ()
        assert MONOID_LIST_CONCATENATION.identity(())

    def test_not_commutative(self):
        """Operand order matters."""
        op = MONOID_LIST_CONCATENATION.operation
        assert op((1,), (2,)) != op((2,), (1,))

    def test_accepts_any_sequence(self):
        """Lists and tuples mix; results are tuples compared by items."""
        assert fold_map(MONOID_LIST_CONCATENATION, lambda x: [x])([1, 2]) == (1, 2)
        assert MONOID_LIST_CONCATENATION.operation([1], (2,)) == (1, 2)
        assert MONOID_LIST_CONCATENATION.identity([1])
        assert MONOID_LIST_CONCATENATION.right_identity([1])
        assert MONOID_LIST_CONCATENATION.eq([1, 2], (1, 2))
        assert not MONOID_LIST_CONCATENATION.eq([1, 2], (2, 1))


class TestEndofunctionComposition:
    """Test the endofunction composition instances."""

    @given(endofunctions, endofunctions, endofunctions)
    def test_associative(self, f, g, h):
        """Composition is associative."""
        assert MONOID_ENDOFUNCTION_COMPOSITION.associative(f, g, h)
        assert SEMIGROUP_ENDOFUNCTION_COMPOSITION.associative(f, g, h)

    @given(endofunctions)
    def test_identity(self, f):
        """The identity function is a two-sided identity."""
        assert MONOID_ENDOFUNCTION_COMPOSITION.identity(f)
        assert MONOID_ENDOFUNCTION_COMPOSITION.right_identity(f)

    @given(endofunctions, ints)
    def test_composition_with_identity_is_observably_f(self, f, x):
        """Composing with the identity gives the same outputs."""
        compose = MONOID_ENDOFUNCTION_COMPOSITION.operation
        assert compose(f, identity_function)(x) == f(x)
        assert compose(identity_function, f)(x) == f(x)

    def test_identity_of_identity(self):
        """The identity function is its own identity."""
        assert MONOID_ENDOFUNCTION_COMPOSITION.identity(identity_function)

    def test_applies_right_operand_first(self):
        """The right operand runs first."""
        compose = MONOID_ENDOFUNCTION_COMPOSITION.operation
        assert compose(lambda x: x + 1, lambda x: x * 10)(2) == 21


class TestNonEmptyListConcatenation:
    """Test the non-empty list semigroup."""

    @given(nelists, nelists, nelists)
    def test_associative(self, a, b, c):
        """Concatenation is associative."""
        assert SEMIGROUP_NELIST_CONCATENATION.associative(a, b, c)

    def test_concatenation_keeps_order(self):
        """Elements keep their order."""
        a = nelist_from_iterable([1, 2])
        b = nelist_from_iterable([3])
        assert nelist_to_list(SEMIGROUP_NELIST_CONCATENATION.operation(a, b)) == [1, 2, 3]

    def test_stays_a_semigroup(self):
        """There is no identity, so it is not a monoid."""
        assert not isinstance(SEMIGROUP_NELIST_CONCATENATION, Monoid)


class TestTreeFork:
    """Test the tree fork magma."""

    @given(trees, trees)
    def test_closed(self, a, b):
        """Forking two trees gives a tree."""
        result = MAGMA_TREE_FORK.operation(a, b)
        assert isinstance(result, Fork)
        assert result.left == a
        assert result.right == b

    def test_not_associative(self):
        """Regrouping changes the tree shape."""
        a, b, c = Leaf(1), Leaf(2), Leaf(3)
        op = MAGMA_TREE_FORK.operation
        assert op(op(a, b), c) != op(a, op(b, c))
