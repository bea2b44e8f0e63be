"""
Backend selection and management.

Provides a unified interface to the scalar reference backend and the
vectorised NumPy/SciPy backend.
"""

from typing import Union

from .base import BackendBase
from .reference_backend import ReferenceBackend
from .cpu_fp64_backend import CPUBackendFP64


_BACKENDS = {
    'reference': ReferenceBackend,
    'cpu': CPUBackendFP64,
}


def get_backend(backend: Union[str, BackendBase] = 'reference') -> BackendBase:
    """
    Get computational backend.

    Parameters
    ----------
    backend : str or BackendBase
        Backend selection:
        - 'reference': Scalar loops, bit-for-bit with MatrixPack/Jama
        - 'cpu': Vectorised NumPy + SciPy (FP64)
        - a BackendBase instance is returned unchanged

    Returns
    -------
    BackendBase
        Backend instance

    Examples
    --------
    >>> # Exact reference numerics (default)
    >>> backend = get_backend()

    >>> # Faster on large matrices
    >>> backend = get_backend('cpu')
    """
    if isinstance(backend, BackendBase):
        return backend

    try:
        factory = _BACKENDS[backend]
    except (KeyError, TypeError):
        raise ValueError(
            f"Unknown backend: {backend!r}\n"
            f"Valid options: {', '.join(repr(name) for name in _BACKENDS)}"
        ) from None
    return factory()


def list_available_backends() -> list:
    """List names of available backends."""
    return list(_BACKENDS)


def print_backend_info():
    """Print detailed backend information (diagnostic)."""
    print("PyHouseholder Backend Status")
    print("=" * 50)
    print("\nAvailable Backends:")
    for name in _BACKENDS:
        info = get_backend(name).get_device_info()
        print(f"  {name:<12} ({info['precision']}) - {info['library']}")

    print("\nDefault Backend:")
    print(f"  {get_backend().name}")


# Export main interface
__all__ = [
    'get_backend',
    'list_available_backends',
    'print_backend_info',
    'BackendBase',
    'ReferenceBackend',
    'CPUBackendFP64',
]


if __name__ == "__main__":
    print_backend_info()
