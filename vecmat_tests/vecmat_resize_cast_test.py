import numpy as np

import suite
from vecmat import Matrix, Vector, resize_cast

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

a = Matrix[3, 4, int](1, 2, 3,
                      4, 5, 6,
                      7, 8, 9,
                      10, 11, 12)


# matrix tests

@test("down sizing keeps the leading block and casts")
def test_matrix_down_size():
    b = resize_cast(Matrix[3, 3, np.float32], a)
    assert_that(type(b) is Matrix[3, 3, np.float32], f"unexpected type {type(b).__name__}")
    k = 0
    for j in range(3):
        for i in range(3):
            k += 1
            assert_that(b(i, j) == np.float32(k), f"b({i}, {j}) should be {k}, got {b(i, j)}")


@test("up sizing zero fills the new cells")
def test_matrix_up_size():
    c = resize_cast(Matrix[4, 2, np.uint64], a)
    k = 0
    for j in range(2):
        for i in range(4):
            if i < 3:
                k += 1
                assert_that(c(i, j) == k, f"c({i}, {j}) should be {k}, got {c(i, j)}")
            else:
                assert_that(c(i, j) == 0, f"c({i}, {j}) should be 0, got {c(i, j)}")


@test("same shape and type is a plain copy")
def test_matrix_same_shape():
    b = resize_cast(Matrix[3, 4, int], a)
    assert_that(b == a, "resizing to the same shape should preserve values")
    b[0] = 100
    assert_that(a[0] == 1, "the result should not share storage with the source")


@test("cells outside the overlap are zero for any target shape")
def test_matrix_truncation_rule():
    for rows, cols in ((1, 1), (2, 5), (5, 2), (4, 4)):
        b = resize_cast(Matrix[rows, cols, int], a)
        for i in range(rows):
            for j in range(cols):
                expected = a(i, j) if i < 3 and j < 4 else 0
                assert_that(b(i, j) == expected, f"{rows}x{cols} cell ({i}, {j}) should be {expected}")


@test("floating to integral casts truncate")
def test_matrix_cast_truncates():
    f = Matrix[2, 1, np.float64](1.75, -2.5)
    assert_that(list(resize_cast(Matrix[2, 1, np.int32], f)) == [1, -2], "casts should truncate toward zero")


# vector tests

@test("vectors grow with zeros and shrink by dropping")
def test_vector_resize():
    v = Vector[3, int](1, 2, 3)
    assert_that(resize_cast(Vector[5, np.float32], v) == Vector[5, np.float32](1, 2, 3, 0, 0), "growing should zero fill")
    assert_that(resize_cast(Vector[2, int], v) == Vector[2, int](1, 2), "shrinking should drop the tail")
    assert_that(resize_cast(Vector[0, int], v) == Vector[0, int](), "shrinking to nothing should work")


# error tests

@test("targets must be a specialization of the same family")
def test_resize_errors():
    assert_raises(TypeError, resize_cast, Vector[3, int], a)
    assert_raises(TypeError, resize_cast, Matrix, a)
    assert_raises(TypeError, resize_cast, int, a)


if __name__ == "__main__":
    suite.run(title="vecmat resize_cast test suite")
