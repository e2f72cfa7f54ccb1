"""
XOR-7 Hook Plugin - flips the low three bits of every value.
"""


@register_hook
class Xor7Hook(TransformHook):
    name = "xor7"
    description = "XOR each value with the constant 7, ignoring the secret."

    def transform(self, value: int, secret: int) -> int:
        return value ^ 7

    def untransform(self, value: int, secret: int) -> int:
        return value ^ 7
