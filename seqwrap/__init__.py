"""32-bit wrapping sequence numbers and their 64-bit absolute positions."""

__version__ = "0.1.0"
__all__ = ["wrapping_integers"]