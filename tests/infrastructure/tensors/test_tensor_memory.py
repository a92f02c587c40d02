import unittest
import numpy as np

from densetensor import Tensor, AccessMode, InvalidShapeError, ShapeMismatchError


def _sequence(shape, **kwargs) -> Tensor:
    t = Tensor(shape, **kwargs)
    t.fill_sequence()
    return t


class TestTensorRepeat(unittest.TestCase):
    def test_repeat_inner_appends_innermost_axis(self) -> None:
        t = _sequence([2, 3])
        out = t.repeat_inner(4)
        self.assertEqual(out.dim, (2, 3, 4))
        self.assertEqual(out.nelem, t.nelem * 4)
        for i in range(t.nelem):
            np.testing.assert_array_equal(out.vec[i * 4 : i * 4 + 4], t.vec[i])

    def test_repeat_inner_small_example(self) -> None:
        t = Tensor.from_numpy(np.array([1.0, 2.0]))
        np.testing.assert_array_equal(t.repeat_inner(3).vec, [1, 1, 1, 2, 2, 2])

    def test_repeat_outer_prepends_outermost_axis(self) -> None:
        t = _sequence([2, 3])
        out = t.repeat_outer(3)
        self.assertEqual(out.dim, (3, 2, 3))
        self.assertEqual(out.nelem, t.nelem * 3)
        np.testing.assert_array_equal(out.vec, np.concatenate([t.vec] * 3))

    def test_repeat_does_not_mutate_or_alias(self) -> None:
        t = _sequence([2, 2])
        inner = t.repeat_inner(2)
        outer = t.repeat_outer(2)
        inner.vec[0] = 99.0
        outer.vec[0] = 99.0
        self.assertEqual(t.dim, (2, 2))
        np.testing.assert_array_equal(t.vec, np.arange(4))

    def test_repeat_with_non_positive_count_raises(self) -> None:
        t = _sequence([2])
        with self.assertRaises(InvalidShapeError):
            t.repeat_inner(0)
        with self.assertRaises(InvalidShapeError):
            t.repeat_outer(-2)


class TestTensorCopies(unittest.TestCase):
    def test_clone_is_independent(self) -> None:
        t = _sequence([2, 3], dtype=np.int32, access_mode="checked")
        c = t.clone()
        self.assertEqual(c.dim, t.dim)
        self.assertEqual(c.dtype, t.dtype)
        self.assertIs(c.access_mode, AccessMode.CHECKED)
        c.vec[0] = 42
        self.assertEqual(t.vec[0], 0)

    def test_with_access_mode_copies_into_other_mode(self) -> None:
        t = _sequence([2, 3])
        c = t.with_access_mode("checked")
        self.assertIs(c.access_mode, AccessMode.CHECKED)
        self.assertIs(t.access_mode, AccessMode.UNCHECKED)
        np.testing.assert_array_equal(c.vec, t.vec)
        c.vec[1] = -1.0
        self.assertEqual(t.vec[1], 1.0)

    def test_to_numpy_is_shaped_copy(self) -> None:
        t = _sequence([2, 3, 5])
        arr = t.to_numpy()
        self.assertEqual(arr.shape, (2, 3, 5))
        self.assertEqual(arr[1, 2, 3], 28.0)
        arr[0, 0, 0] = 5.0
        self.assertEqual(t.vec[0], 0.0)

    def test_from_numpy_copies_shape_and_values(self) -> None:
        src = np.array([[1, 2, 3], [4, 5, 6]])
        t = Tensor.from_numpy(src, dtype=np.float64)
        self.assertEqual(t.dim, (2, 3))
        self.assertEqual(t[1, 0], 4.0)
        src[1, 0] = 0
        self.assertEqual(t[1, 0], 4.0)

    def test_copy_from_numpy_shape_mismatch_raises(self) -> None:
        t = Tensor((2, 3))
        with self.assertRaises(ShapeMismatchError):
            t.copy_from_numpy(np.zeros((3, 2)))
        self.assertTrue(np.all(t.vec == 0))

    def test_fill_sets_every_element(self) -> None:
        t = Tensor((2, 2))
        t.fill(2.5)
        np.testing.assert_array_equal(t.vec, [2.5] * 4)

    def test_fill_sequence_stores_flat_offsets(self) -> None:
        t = _sequence([2, 3, 5])
        for x in range(t.nelem):
            self.assertEqual(t.vec[x], x)


if __name__ == "__main__":
    unittest.main()
