import unittest

from maybepy import present, absent, map, apply, and_then, identity, compose

SAMPLES = [present(0), present(7), present(-3), absent()]
FS = [lambda x: x + 1, lambda x: x * 2, str]
GS = [lambda x: [x], repr, lambda x: (x, x)]
BINDS = [
    lambda x: present(x + 1),
    lambda x: absent(),
    lambda x: present(x) if x > 0 else absent(),
]


class TestFunctorLaws(unittest.TestCase):
    def test_identity(self):
        for opt in SAMPLES:
            with self.subTest(opt=opt):
                self.assertEqual(map(identity, opt), opt)

    def test_composition(self):
        for opt in SAMPLES:
            for f in FS:
                for g in GS:
                    with self.subTest(opt=opt):
                        self.assertEqual(map(compose(g, f), opt), map(g, map(f, opt)))


class TestApplicativeLaws(unittest.TestCase):
    def test_identity(self):
        for opt in SAMPLES:
            with self.subTest(opt=opt):
                self.assertEqual(apply(present(identity), opt), opt)

    def test_homomorphism(self):
        for f in FS:
            for x in (0, 7, -3):
                self.assertEqual(apply(present(f), present(x)), present(f(x)))

    def test_consistent_with_map(self):
        for opt in SAMPLES:
            for f in FS:
                with self.subTest(opt=opt):
                    self.assertEqual(apply(present(f), opt), map(f, opt))

    def test_absence_on_either_side(self):
        self.assertEqual(apply(absent(), present(1)), absent())
        self.assertEqual(apply(present(lambda x: x), absent()), absent())
        self.assertEqual(apply(absent(), absent()), absent())


class TestMonadLaws(unittest.TestCase):
    def test_left_identity(self):
        for f in BINDS:
            for x in (0, 7, -3):
                self.assertEqual(and_then(present(x), f), f(x))

    def test_right_identity(self):
        for opt in SAMPLES:
            with self.subTest(opt=opt):
                self.assertEqual(and_then(opt, present), opt)

    def test_associativity(self):
        for a in SAMPLES:
            for f in BINDS:
                for g in BINDS:
                    with self.subTest(a=a):
                        left = and_then(and_then(a, f), g)
                        right = and_then(a, lambda x: and_then(f(x), g))
                        self.assertEqual(left, right)
