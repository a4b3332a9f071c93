import numpy as np

import suite
from vecmat import Matrix, Vector, dot, eye, ShapeMismatchError

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

# the 3x3 magic square, written column by column
A = Matrix[3, 3, np.float32](2, 9, 4,
                             7, 5, 3,
                             6, 1, 8)
D = Matrix[3, 3, np.float32](1, 0, 0,
                             0, 2, 0,
                             0, 0, 3)
v = Vector[3, np.float32](1, 2, 3)


# matrix . matrix tests

@test("matrix times diagonal scales columns")
def test_matrix_diagonal():
    expected = Matrix[3, 3, np.float32](2, 9, 4, 14, 10, 6, 18, 3, 24)
    assert_that(dot(A, D) == expected, f"dot(A, D) gave {dot(A, D)}")


@test("diagonal times matrix scales rows")
def test_diagonal_matrix():
    expected = Matrix[3, 3, np.float32](2, 18, 12, 7, 10, 9, 6, 2, 24)
    assert_that(dot(D, A) == expected, f"dot(D, A) gave {dot(D, A)}")


@test("rectangular products take the outer dimensions")
def test_rectangular_product():
    a = Matrix[2, 3, int].from_array([[1, 2, 3], [4, 5, 6]])
    b = Matrix[3, 1, int](1, 1, 1)
    c = dot(a, b)
    assert_that(type(c) is Matrix[2, 1, int], f"unexpected result type {type(c).__name__}")
    assert_that(c == Matrix[2, 1, int](6, 15), f"row sums expected, got {c}")


@test("the identity is neutral on both sides")
def test_identity_neutral():
    a = Matrix[2, 3, int](range(6))
    assert_that(dot(eye(2, int), a) == a, "eye . a should be a")
    assert_that(dot(a, eye(3, int)) == a, "a . eye should be a")


@test("the @ operator is dot")
def test_matmul_operator():
    assert_that(A @ D == dot(A, D), "A @ D should match dot(A, D)")
    assert_that(A @ v == dot(A, v), "A @ v should match dot(A, v)")


@test("a matrix may be multiplied by itself")
def test_self_product():
    a = A.copy()
    squared = dot(a, a)
    assert_that(a == A, "the operand should not be overwritten")
    assert_that(squared(0, 0) == 2 * 2 + 7 * 9 + 6 * 4, "first cell of A.A should be 91")


# matrix . vector tests

@test("matrix times vector")
def test_matrix_vector():
    result = dot(A, v)
    assert_that(result == Vector[3, np.float32](34, 22, 34), f"dot(A, v) gave {result}")


@test("vector times matrix")
def test_vector_matrix():
    result = dot(v, A)
    assert_that(result == Vector[3, np.float32](32, 26, 32), f"dot(v, A) gave {result}")


@test("vector products change length with rectangular matrices")
def test_rectangular_vector_products():
    a = Matrix[2, 3, int].from_array([[1, 2, 3], [4, 5, 6]])
    left = dot(a, Vector[3, int](1, 0, 1))
    right = dot(Vector[2, int](1, 1), a)
    assert_that(left == Vector[2, int](4, 10), f"matrix . vector gave {left}")
    assert_that(right == Vector[3, int](5, 7, 9), f"vector . matrix gave {right}")


# vector . vector tests

@test("vector dot vector is a scalar of the element type")
def test_vector_vector():
    result = dot(Vector[3, int](1, 2, 3), Vector[3, int](4, 5, 6))
    assert_that(result == 32, f"expected 32, got {result}")
    assert_that(isinstance(result, np.int64), f"expected an int64, got {type(result).__name__}")
    assert_that(dot(Vector[0](), Vector[0]()) == 0, "empty dot should be zero")


# shape tests

@test("incompatible shapes are rejected")
def test_shape_mismatch():
    assert_raises(ShapeMismatchError, dot, Matrix[2, 3](), Matrix[2, 3]())
    assert_raises(ShapeMismatchError, dot, Matrix[2, 3](), Vector[2]())
    assert_raises(ShapeMismatchError, dot, Vector[2](), Matrix[3, 3]())
    assert_raises(ShapeMismatchError, dot, Vector[2](), Vector[3]())


@test("dot needs two containers")
def test_dot_types():
    assert_raises(TypeError, dot, Vector[3](), 2)
    assert_raises(TypeError, dot, 2, Matrix[2, 2]())


if __name__ == "__main__":
    suite.run(title="vecmat dot test suite")
