# ==============================================================================
# Файл: tests/test_bit_mixing.py
# Назначение: Юнит-тесты скалярного хеширования координат.
# ==============================================================================
import unittest
import math
import struct

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from fieldhash.numerics.bit_mixing import (
    LONG_SCALE_FACTOR,
    SIGN_MASK,
    UNIT_CEIL,
    coord_hash,
    hash1,
    hash2,
    hash3,
    hash4,
    hash_to_unit,
    mix,
    raw_bits,
    rotate_left,
    unit1,
    unit2,
    unit3,
    unit4,
    unit_hash,
)


def _nan_with_payload(payload: int) -> float:
    return struct.unpack("<d", struct.pack("<Q", 0x7FF8000000000000 | payload))[0]


class TestMix(unittest.TestCase):

    def test_known_values(self):
        self.assertEqual(mix(0), 0)
        self.assertEqual(mix(1), 0x2200011)
        # логический сдвиг вправо: у -1 не должно остаться старших единиц
        self.assertEqual(mix(-1), 0x1E0000F)

    def test_result_is_signed_64(self):
        for a in (1, -1, 0x7FFFFFFFFFFFFFFF, -0x8000000000000000, 123456789123456789):
            h = mix(a)
            self.assertGreaterEqual(h, -(1 << 63))
            self.assertLess(h, 1 << 63)

    def test_rotate_left(self):
        self.assertEqual(rotate_left(1, 17), 1 << 17)
        self.assertEqual(rotate_left(-0x8000000000000000, 1), 1)
        self.assertEqual(rotate_left(0x00FF000000000000, 17), 0x1FE)


class TestRawBits(unittest.TestCase):

    def test_exact_patterns(self):
        self.assertEqual(raw_bits(0.0), 0)
        self.assertEqual(raw_bits(-0.0), -0x8000000000000000)
        self.assertEqual(raw_bits(1.0), 0x3FF0000000000000)
        self.assertEqual(raw_bits(2.0), 0x4000000000000000)
        self.assertEqual(raw_bits(float("inf")), 0x7FF0000000000000)

    def test_nan_payload_is_preserved(self):
        self.assertEqual(raw_bits(_nan_with_payload(0x1)), 0x7FF8000000000001)
        self.assertEqual(raw_bits(_nan_with_payload(0x2A)), 0x7FF800000000002A)


class TestCoordinateHash(unittest.TestCase):
    """Эталонные значения посчитаны независимо, 64-битной целочисленной арифметикой."""

    def test_golden_values(self):
        self.assertEqual(hash1(0.0), 144115188084277762)
        self.assertEqual(hash1(-0.0), 297845092113286934)
        self.assertEqual(hash1(1.0), 1110508942319999703)
        self.assertEqual(hash2(1.0, 2.0), -8359172816346417036)
        self.assertEqual(hash2(2.0, 1.0), 497938209242486266)
        self.assertEqual(hash3(1.0, 2.0, 0.0), -3320010419366098774)
        self.assertEqual(hash4(1.0, 2.0, 0.0, 1.0), 8602374919239996335)

    def test_hash1_is_not_plain_mix(self):
        self.assertNotEqual(hash1(1.0), mix(raw_bits(1.0)))

    def test_signed_zero_hashes_differently(self):
        self.assertNotEqual(hash1(0.0), hash1(-0.0))
        self.assertNotEqual(hash2(0.0, 1.0), hash2(-0.0, 1.0))

    def test_non_commutative(self):
        self.assertNotEqual(hash2(1.0, 2.0), hash2(2.0, 1.0))
        self.assertNotEqual(hash3(0.5, 0.25, 0.125), hash3(0.125, 0.25, 0.5))

    def test_deterministic(self):
        for args in [(0.1,), (0.1, 0.2), (0.1, 0.2, 0.3), (0.1, 0.2, 0.3, 0.4)]:
            self.assertEqual(coord_hash(*args), coord_hash(*args))
            self.assertEqual(unit_hash(*args), unit_hash(*args))

    def test_arity_consistency(self):
        # hash3 сворачивается поверх hash2: при фиксированных x, y результат
        # получается из одного и того же промежуточного значения
        x, y = 3.25, -7.5
        for z in (0.0, 1.0, 1e300, -2.5):
            expected = hash3(x, y, z)
            self.assertEqual(coord_hash(x, y, z), expected)
        self.assertEqual(hash4(1.0, 2.0, 0.0, 1.0), coord_hash(1.0, 2.0, 0.0, 1.0))
        self.assertEqual(coord_hash(1.0, 2.0), hash2(1.0, 2.0))
        self.assertEqual(coord_hash(1.0), hash1(1.0))

    def test_special_values_are_total(self):
        specials = [float("nan"), float("inf"), float("-inf"), 5e-324, -0.0]
        for v in specials:
            self.assertIsInstance(hash1(v), int)
            self.assertIsInstance(hash4(v, v, v, v), int)

    def test_nan_payloads_hash_differently(self):
        a, b = _nan_with_payload(0x1), _nan_with_payload(0x2)
        self.assertNotEqual(hash1(a), hash1(b))
        self.assertEqual(hash1(a), hash1(_nan_with_payload(0x1)))

    def test_wrong_arity(self):
        with self.assertRaises(TypeError):
            coord_hash()
        with self.assertRaises(TypeError):
            unit_hash(1.0, 2.0, 3.0, 4.0, 5.0)


class TestUnitInterval(unittest.TestCase):

    def test_scale_factor_is_exact(self):
        self.assertEqual(LONG_SCALE_FACTOR, 2.0 ** -63)

    def test_golden_unit_values(self):
        self.assertAlmostEqual(unit1(0.0), 0.015625, places=9)
        h = hash2(1.0, 2.0)
        self.assertEqual(unit2(1.0, 2.0), (h & SIGN_MASK) * 2.0 ** -63)
        self.assertEqual(unit3(1.0, 2.0, 0.0), hash_to_unit(hash3(1.0, 2.0, 0.0)))
        self.assertEqual(unit4(1.0, 2.0, 0.0, 1.0), hash_to_unit(hash4(1.0, 2.0, 0.0, 1.0)))

    def test_range_edges(self):
        self.assertEqual(hash_to_unit(0), 0.0)
        self.assertEqual(hash_to_unit(-0x8000000000000000), 0.0)
        self.assertLess(hash_to_unit(SIGN_MASK), 1.0)
        self.assertLess(hash_to_unit(-1), 1.0)
        self.assertEqual(hash_to_unit(SIGN_MASK), UNIT_CEIL)

    def test_range_over_many_inputs(self):
        print("\n[TEST] Running test_range_over_many_inputs...")
        for i in range(2000):
            x = i * 0.37 - 300.0
            for v in (unit1(x), unit2(x, -x), unit3(x, 1.0, x), unit4(x, x, x, x)):
                self.assertGreaterEqual(v, 0.0)
                self.assertLess(v, 1.0)
        print("[TEST] test_range_over_many_inputs: OK")

    def test_rough_uniformity(self):
        # грубая проверка распределения по 10 корзинам
        n = 20000
        buckets = [0] * 10
        for i in range(n):
            buckets[int(unit2(float(i), 0.5) * 10)] += 1
        for count in buckets:
            self.assertTrue(0.08 * n < count < 0.12 * n, buckets)

    def test_nan_maps_into_range(self):
        v = unit_hash(float("nan"), 1.0)
        self.assertFalse(math.isnan(v))
        self.assertTrue(0.0 <= v < 1.0)


if __name__ == '__main__':
    unittest.main()
