"""Unit tests for the tuples module.

Tests cover:
- Point and vector construction and classification
- Tuple arithmetic and the point/vector rules it implies
- Magnitude, normalisation, dot and cross products
- Tolerance-based equality and string formatting
"""

import math

import pytest

SAMPLE_VECTORS = [
    (1.0, 2.0, 3.0),
    (2.0, 3.0, 4.0),
    (-1.5, 0.25, 7.0),
    (0.0, 0.0, 1.0),
    (1e3, -2e-3, 5.5),
]


class TestConstruction:
    """Tests for point(), vector() and the raw Tuple constructor."""

    def test_tuple_with_w_1_is_a_point(self):
        """Test a tuple with w=1.0 is a point and not a vector."""
        from raytracer.core.tuples import Tuple, TupleKind

        a = Tuple(4.3, -4.2, 3.1, 1.0)

        assert a.x == 4.3
        assert a.y == -4.2
        assert a.z == 3.1
        assert a.w == 1.0
        assert a.is_point()
        assert not a.is_vector()
        assert a.kind is TupleKind.POINT

    def test_tuple_with_w_0_is_a_vector(self):
        """Test a tuple with w=0.0 is a vector and not a point."""
        from raytracer.core.tuples import Tuple, TupleKind

        a = Tuple(4.3, -4.2, 3.1, 0.0)

        assert a.w == 0.0
        assert a.is_vector()
        assert not a.is_point()
        assert a.kind is TupleKind.VECTOR

    def test_point_creates_tuple_with_w_1(self):
        """Test point() always produces w == 1."""
        from raytracer.core.tuples import Tuple, point

        for x, y, z in SAMPLE_VECTORS:
            p = point(x, y, z)
            assert p.w == 1.0
            assert p == Tuple(x, y, z, 1.0)

    def test_vector_creates_tuple_with_w_0(self):
        """Test vector() always produces w == 0."""
        from raytracer.core.tuples import Tuple, vector

        for x, y, z in SAMPLE_VECTORS:
            v = vector(x, y, z)
            assert v.w == 0.0
            assert v == Tuple(x, y, z, 0.0)

    def test_zero_vector(self):
        """Test zero_vector() is (0, 0, 0, 0)."""
        from raytracer.core.tuples import Tuple, zero_vector

        assert zero_vector() == Tuple(0.0, 0.0, 0.0, 0.0)
        assert zero_vector().is_vector()

    def test_kind_is_none_for_other_w(self):
        """Test classification is None when w is neither 0 nor 1."""
        from raytracer.core.tuples import Tuple

        t = Tuple(1.0, 2.0, 3.0, 0.5)

        assert t.kind is None
        assert not t.is_point()
        assert not t.is_vector()

    def test_tuples_are_immutable(self):
        """Test tuple components cannot be reassigned."""
        import dataclasses

        from raytracer.core.tuples import point

        p = point(1.0, 2.0, 3.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.x = 5.0


class TestArithmetic:
    """Tests for tuple arithmetic operators."""

    def test_adding_two_tuples(self):
        """Test adding a vector to a point."""
        from raytracer.core.tuples import Tuple, vector

        a1 = Tuple(3.0, -2.0, 5.0, 1.0)
        a2 = vector(-2.0, 3.0, 1.0)

        result = a1 + a2

        assert result == Tuple(1.0, 1.0, 6.0, 1.0)
        assert result.is_point()

    def test_adding_two_points_is_not_rejected(self):
        """Test point + point is computed and yields w == 2."""
        from raytracer.core.tuples import Tuple, point

        result = point(1.0, 2.0, 3.0) + point(4.0, 5.0, 6.0)

        assert result == Tuple(5.0, 7.0, 9.0, 2.0)
        assert result.kind is None

    def test_subtracting_two_points(self):
        """Test point - point gives a vector."""
        from raytracer.core.tuples import point, vector

        result = point(3.0, 2.0, 1.0) - point(5.0, 6.0, 7.0)

        assert result == vector(-2.0, -4.0, -6.0)
        assert result.w == 0.0

    def test_subtracting_a_vector_from_a_point(self):
        """Test point - vector gives a point."""
        from raytracer.core.tuples import point, vector

        result = point(3.0, 2.0, 1.0) - vector(5.0, 6.0, 7.0)

        assert result == point(-2.0, -4.0, -6.0)
        assert result.w == 1.0

    def test_subtracting_two_vectors(self):
        """Test vector - vector gives a vector."""
        from raytracer.core.tuples import vector

        result = vector(3.0, 2.0, 1.0) - vector(5.0, 6.0, 7.0)

        assert result == vector(-2.0, -4.0, -6.0)
        assert result.w == 0.0

    def test_subtracting_a_vector_from_the_zero_vector(self):
        """Test zero - v negates the vector."""
        from raytracer.core.tuples import vector, zero_vector

        assert zero_vector() - vector(1.0, -2.0, 3.0) == vector(-1.0, 2.0, -3.0)

    def test_negating_a_tuple(self):
        """Test negation flips every component, including w."""
        from raytracer.core.tuples import Tuple

        a = Tuple(1.0, -2.0, 3.0, -4.0)

        assert -a == Tuple(-1.0, 2.0, -3.0, 4.0)

    def test_multiplying_a_tuple_by_a_scalar(self):
        """Test scalar multiplication from either side."""
        from raytracer.core.tuples import Tuple

        a = Tuple(1.0, -2.0, 3.0, -4.0)
        expected = Tuple(3.5, -7.0, 10.5, -14.0)

        assert a * 3.5 == expected
        assert 3.5 * a == expected

    def test_multiplying_a_tuple_by_a_fraction(self):
        """Test multiplying by a fraction."""
        from raytracer.core.tuples import Tuple

        a = Tuple(1.0, -2.0, 3.0, -4.0)

        assert a * 0.5 == Tuple(0.5, -1.0, 1.5, -2.0)

    def test_dividing_a_tuple_by_a_scalar(self):
        """Test scalar division."""
        from raytracer.core.tuples import Tuple

        a = Tuple(1.0, -2.0, 3.0, -4.0)

        assert a / 2 == Tuple(0.5, -1.0, 1.5, -2.0)

    def test_dividing_by_zero_propagates(self):
        """Test division by zero is not guarded."""
        from raytracer.core.tuples import vector

        with pytest.raises(ZeroDivisionError):
            vector(1.0, 2.0, 3.0) / 0.0

    def test_unsupported_operands_raise_type_error(self):
        """Test mixing tuples with unrelated types fails."""
        from raytracer.core.color import color
        from raytracer.core.tuples import point

        p = point(1.0, 2.0, 3.0)

        with pytest.raises(TypeError):
            p + 1.0
        with pytest.raises(TypeError):
            p - color(0.1, 0.2, 0.3)
        with pytest.raises(TypeError):
            p * p


class TestVectorOperations:
    """Tests for magnitude, normalise, dot and cross."""

    @pytest.mark.parametrize(
        "components, expected",
        [
            ((1.0, 0.0, 0.0), 1.0),
            ((0.0, 1.0, 0.0), 1.0),
            ((0.0, 0.0, 1.0), 1.0),
            ((1.0, 2.0, 3.0), math.sqrt(14.0)),
            ((-1.0, -2.0, -3.0), math.sqrt(14.0)),
        ],
    )
    def test_magnitude(self, components, expected):
        """Test the Euclidean length of a vector."""
        from raytracer.core.tuples import vector

        assert vector(*components).magnitude() == pytest.approx(expected)

    def test_magnitude_ignores_w(self):
        """Test w does not contribute to magnitude."""
        from raytracer.core.tuples import Tuple, point

        assert point(3.0, 4.0, 0.0).magnitude() == pytest.approx(5.0)
        assert Tuple(3.0, 4.0, 0.0, 7.0).magnitude() == pytest.approx(5.0)

    def test_normalising_vector_4_0_0(self):
        """Test normalising an axis-aligned vector."""
        from raytracer.core.tuples import vector

        assert vector(4.0, 0.0, 0.0).normalise() == vector(1.0, 0.0, 0.0)

    def test_normalising_vector_1_2_3(self):
        """Test normalising an arbitrary vector."""
        from raytracer.core.tuples import vector

        result = vector(1.0, 2.0, 3.0).normalise()

        assert result == vector(0.26726, 0.53452, 0.80178)
        assert result.is_vector()

    def test_normalised_vectors_have_unit_magnitude(self):
        """Test the magnitude of any normalised nonzero vector is 1."""
        from raytracer.core.tuples import vector

        for components in SAMPLE_VECTORS:
            assert vector(*components).normalise().magnitude() == pytest.approx(1.0)

    def test_normalising_zero_vector_propagates(self):
        """Test normalising the zero vector is not special-cased."""
        from raytracer.core.tuples import zero_vector

        with pytest.raises(ZeroDivisionError):
            zero_vector().normalise()

    def test_dot_product(self):
        """Test the dot product of two vectors."""
        from raytracer.core.tuples import vector

        a = vector(1.0, 2.0, 3.0)
        b = vector(2.0, 3.0, 4.0)

        assert a.dot_product(b) == pytest.approx(20.0)

    def test_dot_product_includes_w(self):
        """Test w participates in the dot product."""
        from raytracer.core.tuples import Tuple

        a = Tuple(1.0, 2.0, 3.0, 2.0)
        b = Tuple(2.0, 3.0, 4.0, 5.0)

        assert a.dot_product(b) == pytest.approx(30.0)

    def test_cross_product(self):
        """Test the cross product in both orders."""
        from raytracer.core.tuples import vector

        a = vector(1.0, 2.0, 3.0)
        b = vector(2.0, 3.0, 4.0)

        assert a.cross_product(b) == vector(-1.0, 2.0, -1.0)
        assert b.cross_product(a) == vector(1.0, -2.0, 1.0)

    def test_cross_product_is_anti_commutative(self):
        """Test a x b == -(b x a) over sample vectors."""
        from raytracer.core.tuples import vector

        for a_components in SAMPLE_VECTORS:
            for b_components in SAMPLE_VECTORS:
                a = vector(*a_components)
                b = vector(*b_components)
                assert a.cross_product(b) == -(b.cross_product(a))

    def test_cross_product_always_returns_a_vector(self):
        """Test the cross product has w == 0 even for points."""
        from raytracer.core.tuples import point

        result = point(1.0, 0.0, 0.0).cross_product(point(0.0, 1.0, 0.0))

        assert result.w == 0.0
        assert result.z == pytest.approx(1.0)

    def test_module_level_helpers(self):
        """Test the free functions match the methods."""
        from raytracer.core.tuples import cross, dot, magnitude, normalise, vector

        a = vector(1.0, 2.0, 3.0)
        b = vector(2.0, 3.0, 4.0)

        assert magnitude(a) == a.magnitude()
        assert normalise(a) == a.normalise()
        assert dot(a, b) == a.dot_product(b)
        assert cross(a, b) == a.cross_product(b)


class TestEqualityAndFormatting:
    """Tests for tolerance-based equality and string output."""

    def test_equality_within_epsilon(self):
        """Test components closer than EPSILON compare equal."""
        from raytracer.core.tuples import EPSILON, point

        assert point(1.0, 2.0, 3.0) == point(1.0 + EPSILON / 2, 2.0, 3.0)
        assert point(1.0, 2.0, 3.0) != point(1.0 + EPSILON * 2, 2.0, 3.0)

    def test_equality_compares_w(self):
        """Test a point never equals a vector with the same x, y, z."""
        from raytracer.core.tuples import point, vector

        assert point(1.0, 2.0, 3.0) != vector(1.0, 2.0, 3.0)

    def test_float_arithmetic_compares_equal(self):
        """Test rounding error from arithmetic is absorbed."""
        from raytracer.core.tuples import vector

        assert vector(0.1, 0.2, 0.3) + vector(0.2, 0.1, 0.0) == vector(0.3, 0.3, 0.3)

    def test_tuples_are_not_hashable(self):
        """Test tolerance-based equality disables hashing."""
        from raytracer.core.tuples import point

        with pytest.raises(TypeError):
            hash(point(1.0, 2.0, 3.0))

    def test_str_omits_w(self):
        """Test display renders (x, y, z) only."""
        from raytracer.core.tuples import point, vector

        assert str(point(4.3, -4.2, 3.1)) == "(4.3, -4.2, 3.1)"
        assert str(vector(0.5, 0.0, -1.0)) == "(0.5, 0.0, -1.0)"
