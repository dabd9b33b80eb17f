from sourcegen.ir import types as tp


class TypeChecker(object):
    """Identity of a class declaration, used to test other types against it.

    A checker built from `Serializable<T>` matches `Serializable` itself and
    every instantiation of it (`Serializable<int>`, ...).
    """

    def __init__(self, definition: tp.Type):
        assert definition.get_definition() is not None, \
            "{} is not a class declaration".format(definition)
        self.definition = definition.get_definition()

    def is_exactly(self, t: tp.Type) -> bool:
        return t.get_definition() is self.definition

    def is_super_of(self, t: tp.Type) -> bool:
        """Check if the checked declaration is a proper ancestor of `t`."""
        if self.is_exactly(t):
            return False
        return any(self.is_exactly(supertype)
                   for supertype in t.get_supertypes())

    def is_assignable_from(self, t: tp.Type) -> bool:
        return self.is_exactly(t) or self.is_super_of(t)

    def __str__(self):
        return "TypeChecker({})".format(self.definition.get_name())

    def __repr__(self):
        return self.__str__()
