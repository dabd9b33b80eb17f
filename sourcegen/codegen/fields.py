import heapq
from typing import List

from sourcegen.ir import types as tp
from sourcegen.ir.type_checker import TypeChecker
from sourcegen.codegen.diagnostics import DiagnosticSink, \
    warn_undefined_elements
from sourcegen.codegen.instrumentation import trace_operation


@trace_operation(param_names=['class_type'])
def create_sorted_field_set(class_type: tp.Type,
                            sink: DiagnosticSink = None
                            ) -> List[tp.FieldDescriptor]:
    """
    Return all instance fields of `class_type`, including the
    property-backed fields it inherits, without duplicates.

    Fields are sorted first by their place in the class hierarchy (fields
    of a superclass come first) and then by their position in the source
    file.
    """
    definition = class_type.get_definition()
    fields_list = [f for f in definition.fields if not f.is_static]
    fields_list.extend(_inherited_property_fields(definition))

    warn_undefined_elements(fields_list, sink)

    return _sort_by_location(list(dict.fromkeys(fields_list)))


def _ancestors(definition: tp.ClassType) -> List[tp.ClassType]:
    """Return the declarations `definition` inherits from, without the
    root: the last mixin first, then the superclass chain, then interfaces.
    """
    ancestors = []

    def visit(t):
        d = t.get_definition()
        if d is None or d.is_root() or d in ancestors:
            return
        ancestors.append(d)
        for supertype in _lookup_order(d):
            visit(supertype)

    for supertype in _lookup_order(definition):
        visit(supertype)
    return ancestors


def _lookup_order(definition):
    supertypes = list(reversed(definition.mixins))
    if definition.superclass is not None:
        supertypes.append(definition.superclass)
    return supertypes + definition.interfaces


def _inherited_property_fields(
        definition: tp.ClassType) -> List[tp.FieldDescriptor]:
    """Collect the property-backed fields `definition` inherits.

    A field is hidden when a subtype of its class, itself an ancestor of
    `definition`, declares a field with the same name. Same-named fields
    of unrelated ancestors are all kept.
    """
    ancestors = _ancestors(definition)
    declared = {
        d: {f.name for f in d.fields if not f.is_static} for d in ancestors
    }

    inherited = []
    for owner in ancestors:
        checker = TypeChecker(owner)
        overriders = [d for d in ancestors if checker.is_super_of(d)]
        for field in owner.fields:
            if field.is_static or not field.property_backed:
                continue
            if any(field.name in declared[d] for d in overriders):
                continue
            inherited.append(field)
    return inherited


def _sort_by_location(
        fields: List[tp.FieldDescriptor]) -> List[tp.FieldDescriptor]:
    """Order fields so that a field of a class comes after every field of
    its ancestors. Among the fields whose ancestors are all placed, the one
    with the lowest source offset goes first.
    """
    successors = {i: [] for i in range(len(fields))}
    pending = [0] * len(fields)
    for i, a in enumerate(fields):
        checker = TypeChecker(a.enclosing)
        for j, b in enumerate(fields):
            if a.enclosing is not b.enclosing and \
                    checker.is_super_of(b.enclosing):
                successors[i].append(j)
                pending[j] += 1

    ready = [(f.sort_offset(), i) for i, f in enumerate(fields)
             if pending[i] == 0]
    heapq.heapify(ready)
    ordered = []
    while ready:
        _, i = heapq.heappop(ready)
        ordered.append(fields[i])
        for j in successors[i]:
            pending[j] -= 1
            if pending[j] == 0:
                heapq.heappush(ready, (fields[j].sort_offset(), j))
    return ordered
