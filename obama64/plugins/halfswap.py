"""
Half-Swap Hook Plugin - Example for the Obama64 Plugin System

This file demonstrates how to create a custom transform hook.
To create your own hook:

1. Create a new .py file in the plugins/ directory
2. Use the injected base class and decorator (no explicit import needed)
3. Create a class extending TransformHook
4. Use the @register_hook decorator
5. Add an entry to manifest.json with the file name and hook name

A hook must keep every value inside 0-127 and undo itself exactly;
the codec rejects any hook that fails that check for a single value.
"""

# These are injected by the plugin loader - no explicit import needed
# from obama64 import TransformHook, register_hook


@register_hook
class HalfSwapHook(TransformHook):
    """
    Moves 0-63 up by 64 and 64-127 down by 64.

    The secret is ignored, so this hook is its own inverse and
    every message encodes the same way regardless of bluff.
    """

    name = "halfswap"
    description = "Swap the lower and upper halves of 0-127 (example plugin)."

    def _swap(self, value: int) -> int:
        return value - 64 if value > 63 else value + 64

    def transform(self, value: int, secret: int) -> int:
        return self._swap(value)

    def untransform(self, value: int, secret: int) -> int:
        return self._swap(value)
