import unittest

import numpy as np

import cachematrix
from cachematrix import CacheCell


class TestCacheCell(unittest.TestCase):
    def test_get_returns_float64_copy(self):
        src = np.array([[1, 2], [3, 4]])
        cell = CacheCell(src)

        m = cell.get()
        self.assertEqual(m.dtype, np.float64)
        np.testing.assert_array_equal(m, [[1.0, 2.0], [3.0, 4.0]])

        # The cell owns its data.
        src[0, 0] = 99
        self.assertEqual(cell.get()[0, 0], 1.0)

    def test_get_has_no_side_effects(self):
        cell = CacheCell([[1.0, 2.0], [3.0, 4.0]])
        self.assertIs(cell.get(), cell.get())
        self.assertIsNone(cell.getinv())

    def test_new_cell_has_no_inverse(self):
        cell = CacheCell([[2.0]])
        self.assertIsNone(cell.getinv())
        self.assertFalse(cell.has_inverse())

    def test_setinv_is_trusted(self):
        cell = CacheCell([[1.0, 2.0], [3.0, 4.0]])
        bogus = np.zeros((2, 2))
        cell.setinv(bogus)
        self.assertIs(cell.getinv(), bogus)
        self.assertTrue(cell.has_inverse())

    def test_set_clears_cached_inverse(self):
        cell = CacheCell([[1.0, 2.0], [3.0, 4.0]])
        cell.setinv(np.eye(2))

        cell.set([[2.0, 0.0], [0.0, 2.0]])

        self.assertIsNone(cell.getinv())
        np.testing.assert_array_equal(cell.get(), [[2.0, 0.0], [0.0, 2.0]])

    def test_set_with_same_value_still_invalidates(self):
        cell = CacheCell([[1.0, 2.0], [3.0, 4.0]])
        cell.setinv(np.eye(2))
        cell.set(cell.get())
        self.assertIsNone(cell.getinv())

    def test_set_accepts_non_square(self):
        cell = CacheCell([[1.0]])
        cell.set([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        self.assertEqual(cell.shape, (2, 3))

    def test_placeholder(self):
        cell = CacheCell()
        self.assertIsNone(cell.get())
        self.assertIsNone(cell.shape)
        self.assertIsNone(cell.getinv())

    def test_repr(self):
        cell = CacheCell([[1.0, 0.0], [0.0, 1.0]])
        self.assertEqual(repr(cell), "CacheCell(shape=(2, 2), cached=False)")
        cell.setinv(np.eye(2))
        self.assertEqual(repr(cell), "CacheCell(shape=(2, 2), cached=True)")

    def test_stored_matrix_is_read_only(self):
        cell = CacheCell([[1.0, 2.0], [3.0, 4.0]])
        with self.assertRaisesRegex(ValueError, "read-only"):
            cell.get()[:] = [[2.0, 0.0], [0.0, 2.0]]
        np.testing.assert_array_equal(cell.get(), [[1.0, 2.0], [3.0, 4.0]])

        cell.set([[5.0]])
        self.assertFalse(cell.get().flags.writeable)
        self.assertFalse(cachematrix.make_cache_matrix([[1.0]]).get().flags.writeable)

    def test_set_from_read_only_matrix(self):
        cell = CacheCell([[1.0, 2.0], [3.0, 4.0]])
        other = CacheCell(cell.get())
        self.assertIsNot(other.get(), cell.get())
        np.testing.assert_array_equal(other.get(), cell.get())

    def test_make_cache_matrix(self):
        cell = cachematrix.make_cache_matrix([[4.0]])
        self.assertIsInstance(cell, CacheCell)
        self.assertEqual(cell.shape, (1, 1))

    def test_set_logs_invalidation_only_when_cached(self):
        cell = CacheCell([[1.0]])
        logger_name = "cachematrix._internal.cache_cell"
        with self.assertLogs(logger_name, level="DEBUG") as cm:
            cell.setinv(np.array([[1.0]]))
            cell.set([[2.0]])
            cell.set([[3.0]])
        self.assertEqual(len(cm.records), 1)
        self.assertIn("discarding cached inverse", cm.output[0])


if __name__ == "__main__":
    unittest.main()
