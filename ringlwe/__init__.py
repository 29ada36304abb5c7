"""Ring-LWE building blocks: NTT parameters, NTT-form polynomials, error sampling and helpers."""

__version__ = "0.1.0"
__all__ = ["constant", "expand", "lazy", "ntt", "polynomial", "sampling"]