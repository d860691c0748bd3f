"""
Core value type, arithmetic engines, and explicit operation results.

Pure, synchronous computations over immutable values: no I/O, no shared
mutable state.
"""
