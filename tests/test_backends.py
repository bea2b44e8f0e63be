"""
Test backend implementations.

- Reference: scalar loops, bit-for-bit reproducible
- CPU: vectorised NumPy + SciPy, must agree with the reference to rounding
"""

import math

import pytest
import numpy as np
from pyhouseholder._backends import (
    get_backend,
    list_available_backends,
    print_backend_info,
    BackendBase,
    ReferenceBackend,
    CPUBackendFP64,
)
from pyhouseholder._core import hypotenuse, column_norm, householder_qr, solve_least_squares


class TestBackendSelection:
    """Test backend lookup and diagnostics."""

    def test_list_backends(self):
        """Test backend listing."""
        backends = list_available_backends()
        assert isinstance(backends, list)
        assert backends == ['reference', 'cpu']

    def test_default_is_reference(self):
        """Test the default backend reproduces reference numerics."""
        backend = get_backend()
        assert isinstance(backend, ReferenceBackend)
        assert backend.name == 'reference'

    def test_cpu_backend_creation(self):
        """Test CPU backend initializes correctly."""
        backend = get_backend('cpu')
        assert isinstance(backend, CPUBackendFP64)
        assert backend.name == 'cpu_fp64'
        assert backend.precision == 'fp64'

    def test_instance_passthrough(self):
        """Test a backend instance is returned unchanged."""
        backend = CPUBackendFP64()
        assert get_backend(backend) is backend

    def test_device_info(self):
        """Test device info for every backend."""
        for name in list_available_backends():
            info = get_backend(name).get_device_info()
            assert info['backend'] == 'cpu'
            assert info['precision'] == 'fp64'
            assert 'NumPy' in info['library']

    def test_print_backend_info(self, capsys):
        """Test diagnostic printing."""
        print_backend_info()
        captured = capsys.readouterr()
        assert 'Backend Status' in captured.out
        assert 'reference' in captured.out
        assert 'cpu' in captured.out

    def test_invalid_backend_name(self):
        """Test error on invalid backend name."""
        with pytest.raises(ValueError, match="Unknown backend"):
            get_backend('invalid_backend')

    def test_unhashable_backend_name(self):
        """Test error on a non-string, non-backend argument."""
        with pytest.raises(ValueError, match="Unknown backend"):
            get_backend(['cpu'])

    def test_base_is_abstract(self):
        """Test the base class cannot be instantiated."""
        with pytest.raises(TypeError):
            BackendBase()


class TestNorms:
    """Test the overflow-safe norm accumulation."""

    def test_pythagorean_triple_exact(self):
        """Test 3-4-5 comes out exactly."""
        assert hypotenuse(3.0, 4.0) == 5.0
        assert hypotenuse(-4.0, 3.0) == 5.0

    def test_zero(self):
        """Test hypotenuse of zeros is zero."""
        assert hypotenuse(0.0, 0.0) == 0.0

    def test_no_overflow(self):
        """Test values whose squares overflow."""
        assert hypotenuse(1e200, 1e200) == pytest.approx(math.sqrt(2) * 1e200)

    def test_no_underflow(self):
        """Test values whose squares underflow."""
        assert hypotenuse(3e-200, 4e-200) == pytest.approx(5e-200)

    def test_column_norm(self):
        """Test norm of a sub-column starting at the diagonal."""
        qr = np.array([[100.0, 0.0], [3.0, 0.0], [4.0, 0.0]])
        assert column_norm(qr, 0) == pytest.approx(math.sqrt(10025.0))
        assert column_norm(qr, 1) == 0.0
        qr[1:, 1] = [3.0, 4.0]
        assert column_norm(qr, 1) == 5.0

    def test_empty_column(self):
        """Test a column index past the last row gives zero."""
        assert column_norm(np.zeros((2, 3)), 2) == 0.0


class TestBackendConsistency:
    """Test the vectorised backend agrees with the reference."""

    @pytest.fixture
    def data(self):
        rng = np.random.default_rng(2024)
        return rng.standard_normal((20, 6)), rng.standard_normal((20, 3))

    def test_factor_agreement(self, data):
        """Test compressed factors agree."""
        A, _ = data
        ref = householder_qr(A, backend=get_backend('reference'))
        cpu = householder_qr(A, backend=get_backend('cpu'))
        np.testing.assert_allclose(cpu.qr, ref.qr, rtol=1e-12, atol=1e-12)
        np.testing.assert_allclose(cpu.rdiag, ref.rdiag, rtol=1e-12, atol=1e-12)

    def test_input_untouched(self, data):
        """Test householder_qr works on a copy."""
        A, _ = data
        before = A.copy()
        householder_qr(A)
        np.testing.assert_array_equal(A, before)

    def test_orthogonal_factor_agreement(self, data):
        """Test reconstructed Q agrees."""
        A, _ = data
        factors = householder_qr(A)
        Q_ref = get_backend('reference').orthogonal_factor(factors.qr)
        Q_cpu = get_backend('cpu').orthogonal_factor(factors.qr)
        np.testing.assert_allclose(Q_cpu, Q_ref, rtol=1e-12, atol=1e-12)

    def test_solve_agreement(self, data):
        """Test least-squares solutions agree."""
        A, B = data
        factors = householder_qr(A)
        X_ref = solve_least_squares(factors, B, backend=get_backend('reference'))
        X_cpu = solve_least_squares(factors, B, backend=get_backend('cpu'))
        assert X_ref.shape == (6, 3)
        np.testing.assert_allclose(X_cpu, X_ref, rtol=1e-10, atol=1e-12)

    def test_reference_deterministic(self, data):
        """Test repeated reference runs are bit-for-bit identical."""
        A, B = data
        first = householder_qr(A)
        second = householder_qr(A)
        np.testing.assert_array_equal(first.qr, second.qr)
        np.testing.assert_array_equal(first.rdiag, second.rdiag)
        np.testing.assert_array_equal(
            solve_least_squares(first, B), solve_least_squares(second, B)
        )

    def test_rhs_untouched(self, data):
        """Test solve_least_squares works on a copy of rhs."""
        A, B = data
        before = B.copy()
        solve_least_squares(householder_qr(A), B)
        np.testing.assert_array_equal(B, before)
