import unittest
import numpy as np

from densetensor import Tensor, AccessMode, InvalidShapeError


class TestTensorConstruction(unittest.TestCase):
    def test_layout_of_three_axis_tensor(self) -> None:
        t = Tensor([2, 3, 5])
        self.assertEqual(t.dim, (2, 3, 5))
        self.assertEqual(t.shape, (2, 3, 5))
        self.assertEqual(t.offsets, (15, 5, 1))
        self.assertEqual(t.nelem, 30)
        self.assertEqual(t.numel(), 30)
        self.assertEqual(t.rank, 3)

    def test_offsets_cover_suffix_blocks(self) -> None:
        dim = (4, 1, 3, 2)
        t = Tensor(dim)
        self.assertEqual(t.offsets[-1], 1)
        for i in range(len(dim)):
            self.assertEqual(t.offsets[i] * dim[i], int(np.prod(dim[i:])))

    def test_storage_is_zero_initialized_flat_buffer(self) -> None:
        t = Tensor((2, 3))
        self.assertIsInstance(t.vec, np.ndarray)
        self.assertEqual(t.vec.shape, (6,))
        self.assertEqual(t.vec.dtype, np.float64)
        self.assertTrue(np.all(t.vec == 0))

    def test_vec_is_live_storage(self) -> None:
        t = Tensor((2, 2))
        t.vec[3] = 7.0
        self.assertEqual(t[1, 1], 7.0)

    def test_int_shape_is_rank_one(self) -> None:
        t = Tensor(4)
        self.assertEqual(t.dim, (4,))
        self.assertEqual(t.offsets, (1,))

    def test_empty_shape_is_rank_zero_scalar(self) -> None:
        t = Tensor(())
        self.assertEqual(t.dim, ())
        self.assertEqual(t.offsets, ())
        self.assertEqual(t.nelem, 1)
        self.assertEqual(t.rank, 0)

    def test_dtype_is_configurable(self) -> None:
        t = Tensor((2, 2), dtype=np.int32)
        self.assertEqual(t.dtype, np.dtype(np.int32))
        self.assertEqual(t.vec.dtype, np.int32)

    def test_default_access_mode_is_unchecked(self) -> None:
        self.assertIs(Tensor((2,)).access_mode, AccessMode.UNCHECKED)
        self.assertIs(
            Tensor((2,), access_mode="checked").access_mode, AccessMode.CHECKED
        )

    def test_zero_dimension_raises(self) -> None:
        with self.assertRaises(InvalidShapeError) as ctx:
            Tensor((2, 0))
        self.assertEqual(ctx.exception.shape, (2, 0))

    def test_negative_dimension_raises(self) -> None:
        with self.assertRaises(InvalidShapeError):
            Tensor((2, -1))

    def test_non_integer_dimension_raises_value_error(self) -> None:
        with self.assertRaises(ValueError):
            Tensor((2, 3.5))

    def test_invalid_access_mode_raises(self) -> None:
        with self.assertRaises(ValueError):
            Tensor((2,), access_mode="strict")

    def test_repr_mentions_shape_dtype_and_mode(self) -> None:
        r = repr(Tensor((2, 3)))
        self.assertIn("dim=(2, 3)", r)
        self.assertIn("float64", r)
        self.assertIn("unchecked", r)

    def test_iteration_follows_storage_order(self) -> None:
        t = Tensor((2, 2))
        t.fill_sequence()
        self.assertEqual(list(t), [0.0, 1.0, 2.0, 3.0])


if __name__ == "__main__":
    unittest.main()
