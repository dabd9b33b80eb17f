from typing import List, Optional

from sourcegen.ir import types as tp
from sourcegen.ir.type_checker import TypeChecker
from sourcegen.codegen.instrumentation import trace_operation


@trace_operation(param_names=['t', 'checker'])
def type_arguments_of(t: tp.Type,
                      checker: TypeChecker) -> Optional[List[tp.Type]]:
    """
    If `t` is, or implements, the class represented by `checker`, return
    the type arguments `t` instantiates it with.

    For example, given

        class Box<T> implements Serializable<T>
        class IntBox extends Box<int>

    the type arguments of `IntBox` for `Serializable` are `[int]`.

    Returns an empty list when the match is not generic, and `None` when `t`
    does not implement the checked class at all.
    """
    implementation = implementation_of(t, checker)
    if implementation is None:
        return None
    return list(implementation.type_args)


def implementation_of(t: tp.Type, checker: TypeChecker) -> Optional[tp.Type]:
    """Return the first type in the ancestry of `t` that is exactly the
    class represented by `checker`.

    Interfaces are searched before mixins, both in declaration order, and
    the superclass only when neither matched. When two ancestors implement
    the class with different type arguments, the first one found wins.
    """
    if checker.is_exactly(t):
        return t

    if not t.is_class():
        return None

    for supertype in t.interfaces + t.mixins:
        match = implementation_of(supertype, checker)
        if match is not None:
            return match

    if t.superclass is not None:
        return implementation_of(t.superclass, checker)
    return None


def all_implementations_of(t: tp.Type, checker: TypeChecker) -> List[tp.Type]:
    """Return every distinct instantiation of the checked class found in
    the ancestry of `t`, in the order `implementation_of` visits them.

    A caller that must not depend on which of several divergent
    instantiations comes first can reject a result longer than one.
    """
    found = []

    def visit(current):
        if checker.is_exactly(current):
            if current not in found:
                found.append(current)
            return
        if not current.is_class():
            return
        for supertype in current.interfaces + current.mixins:
            visit(supertype)
        if current.superclass is not None:
            visit(current.superclass)

    visit(t)
    return found
