from unittest import TestCase

import io

import numpy as np
from numpy.testing import assert_allclose, assert_almost_equal
from click.testing import CliRunner

from levdur.cli.rlevdur import rlevdur, reconstruct_frames
from levdur.core.errors import UnstableLpcError
from levdur.core.input_source import InputSourceFromArray
from levdur.core.levinson import ReverseLevinsonDurbinRecursion


def to_bytes(*frames):
    return np.concatenate(frames).astype(np.float64).tobytes()


class RlevdurCliTestCase(TestCase):

    def setUp(self):
        self.runner = CliRunner()
        self.lpc1 = np.array([np.sqrt(3.0), -0.5, 0.0])
        self.r1 = np.array([4.0, 2.0, 1.0])

    def test_run_successfully(self):
        unity = np.array([1.0, -0.5, 0.0])
        res = self.runner.invoke(rlevdur, ['-m', '2'], input=to_bytes(self.lpc1, unity))
        self.assertEqual(res.exit_code, 0)

        r = np.frombuffer(res.stdout_bytes)
        assert_allclose(r[:3], self.r1, atol=1e-9)
        assert_allclose(r[3:], self.r1 / 3.0, atol=1e-9)

    def test_order_zero(self):
        res = self.runner.invoke(rlevdur, ['-m', '0'], input=to_bytes(np.array([3.0, 0.5])))
        self.assertEqual(res.exit_code, 0)
        assert_almost_equal(np.frombuffer(res.stdout_bytes), [9.0, 0.25])

    def test_unstable_lpc(self):
        res = self.runner.invoke(rlevdur, ['-m', '2'], input=to_bytes(np.array([1.0, 0.5, 1.0])))
        self.assertEqual(res.exit_code, 1)

    def test_singular(self):
        res = self.runner.invoke(rlevdur, ['-m', '2', '-f', '1.0'], input=to_bytes(np.array([0.1, 0.5, 0.0])))
        self.assertEqual(res.exit_code, 1)

    def test_incomplete_frame(self):
        res = self.runner.invoke(rlevdur, ['-m', '2'], input=to_bytes(self.lpc1[:2]))
        self.assertEqual(res.exit_code, 1)

    def test_invalid_options(self):
        for args in [['-m', '-2'], ['-f', 'abc'], ['-e', '1']]:
            res = self.runner.invoke(rlevdur, args, input=b'')
            self.assertEqual(res.exit_code, 1, args)

    def test_help(self):
        res = self.runner.invoke(rlevdur, ['--help'])
        self.assertEqual(res.exit_code, 0)
        self.assertIn('reverse Levinson-Durbin', res.output)

    def test_config(self):
        with self.runner.isolated_filesystem():
            with open('levdur.ini', 'w') as f:
                f.write('[levdur]\nnum_order = 5\n\n[rlevdur]\nnum_order = 2\n')
            res = self.runner.invoke(rlevdur, ['-c', 'levdur.ini'], input=to_bytes(self.lpc1))
        self.assertEqual(res.exit_code, 0)
        assert_allclose(np.frombuffer(res.stdout_bytes), self.r1, atol=1e-9)


class ReconstructFramesTestCase(TestCase):

    def test_reconstruct(self):
        output = io.BytesIO()
        frames = np.array([np.sqrt(3.0), -0.5, 0.0, 2.0, 0.0, 0.0])
        num_frames = reconstruct_frames(InputSourceFromArray(frames, 3),
                                        ReverseLevinsonDurbinRecursion(2), output)
        self.assertEqual(num_frames, 2)
        assert_allclose(np.frombuffer(output.getvalue()), [4.0, 2.0, 1.0, 4.0, 0.0, 0.0], atol=1e-9)

    def test_unstable(self):
        with self.assertRaises(UnstableLpcError):
            reconstruct_frames(InputSourceFromArray([1.0, -1.0], 2),
                               ReverseLevinsonDurbinRecursion(1), io.BytesIO())
