"""Builtin types of the target language.

The code generation helpers only ask whether a type is undefined; the
other builtins are for callers building a type model.
"""
from sourcegen.ir import types as tp


class UndefinedType(tp.Builtin):
    """A type the upstream type model could not resolve."""

    def __init__(self, name="undefined"):
        super().__init__(name)

    def is_undefined(self):
        return True


class DynamicType(tp.Builtin):
    def __init__(self, name="dynamic"):
        super().__init__(name)


class NullType(tp.Builtin):
    def __init__(self, name="Null"):
        super().__init__(name)


class NumType(tp.Builtin):
    def __init__(self, name="num"):
        super().__init__(name)


class IntType(NumType):
    def __init__(self, name="int"):
        super().__init__(name)


class DoubleType(NumType):
    def __init__(self, name="double"):
        super().__init__(name)


class BoolType(tp.Builtin):
    def __init__(self, name="bool"):
        super().__init__(name)


class StringType(tp.Builtin):
    def __init__(self, name="String"):
        super().__init__(name)
