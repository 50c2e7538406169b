"""
Core value type, limb arithmetic, and data contracts.

Everything here is pure: no I/O, no shared mutable state.
"""
