from typing import Callable, Dict, Iterable, List, Optional, Set

from sourcegen.ir import types as tp
from sourcegen.codegen.config import InvocationLayout, cfg
from sourcegen.codegen.diagnostics import DiagnosticSink, \
    warn_undefined_elements
from sourcegen.codegen.errors import ConstructionError
from sourcegen.codegen.instrumentation import trace_operation


class ConstructorData(object):
    """The result of `write_constructor_invocation`.

    `content` is the constructor invocation, `fields_to_set` the writeable
    fields the constructor does not set and `used_ctor_params_and_fields`
    every name that is assigned either way.
    """

    def __init__(self, content: str, fields_to_set: Set[str],
                 used_ctor_params_and_fields: Set[str]):
        self.content = content
        self.fields_to_set = fields_to_set
        self.used_ctor_params_and_fields = used_ctor_params_and_fields

    def __str__(self):
        return self.content

    def __repr__(self):
        return "ConstructorData({!r}, fields_to_set={})".format(
            self.content, sorted(self.fields_to_set))


def is_enum(t: tp.Type) -> bool:
    return t.is_class() and t.is_enum


def generic_class_arguments(class_type: tp.ClassType,
                            with_constraints: Optional[bool]) -> str:
    """
    Return the type arguments declared on `class_type`.

    For `class Sample<T extends num, S>`:

        with_constraints=False  ->  "<T, S>"
        with_constraints=True   ->  "<T extends num, S>"

    An empty string is returned when `with_constraints` is None or the
    class is not generic.
    """
    if with_constraints is None or not class_type.type_parameters:
        return ''
    values = ', '.join(
        str(t) if with_constraints else t.name
        for t in class_type.type_parameters)
    return '<{}>'.format(values)


@trace_operation(param_names=['class_type', 'available_ctor_params',
                              'writeable_fields'])
def write_constructor_invocation(
        class_type: tp.Type,
        available_ctor_params: Iterable[str],
        writeable_fields: Iterable[str],
        unavailable_reasons: Dict[str, str],
        deserialize_for_field: Callable[..., str],
        sink: DiagnosticSink = None,
        layout: InvocationLayout = None) -> ConstructorData:
    """
    Write an invocation of the unnamed constructor of `class_type`.

    Every constructor parameter named in `available_ctor_params` is passed,
    with the value returned by
    `deserialize_for_field(name, ctor_param=param)`. An optional parameter
    that is not available is left out. A required one raises a
    `ConstructionError`; if `unavailable_reasons` has an entry for it, the
    reason is added to the message.

    `writeable_fields` that are not set by a constructor parameter of the
    same name end up in `fields_to_set` of the result.
    """
    definition = class_type.get_definition()
    class_name = definition.name
    layout = layout or cfg.invocation

    ctor = definition.constructor
    if ctor is None:
        raise ConstructionError(
            'The class `{}` has no default constructor.'.format(class_name),
            class_name=class_name)

    available = set(available_ctor_params)
    used_ctor_params_and_fields = set()
    ctor_arguments = []
    named_ctor_arguments = []

    for param in ctor.parameters:
        if param.name not in available:
            if param.required:
                msg = ('Cannot populate the required constructor '
                       'argument: {}.{}.'.format(class_name, param.name))
                additional_info = unavailable_reasons.get(param.name)
                if additional_info is not None:
                    msg = '{} {}'.format(msg, additional_info)
                raise ConstructionError(msg, class_name=class_name,
                                        parameter_name=param.name)
            continue

        if param.is_named():
            named_ctor_arguments.append(param)
        else:
            ctor_arguments.append(param)
        used_ctor_params_and_fields.add(param.name)

    warn_undefined_elements(ctor_arguments + named_ctor_arguments, sink)

    # Fields that aren't already set by the constructor
    remaining_fields = set(writeable_fields) - used_ctor_params_and_fields

    content = _render_invocation(
        definition,
        [deserialize_for_field(p.name, ctor_param=p)
         for p in ctor_arguments],
        [(p.name, deserialize_for_field(p.name, ctor_param=p))
         for p in named_ctor_arguments],
        layout)

    used_ctor_params_and_fields.update(remaining_fields)
    return ConstructorData(content, remaining_fields,
                           used_ctor_params_and_fields)


def _render_invocation(definition: tp.ClassType,
                       positional: List[str],
                       named: List[tuple],
                       layout: InvocationLayout) -> str:
    arguments = positional + ['{}: {}'.format(name, value)
                              for name, value in named]
    prefix = 'new ' if layout.new_keyword else ''
    head = '{}{}{}('.format(prefix, definition.name,
                            generic_class_arguments(definition, False))
    if not arguments:
        return head + ')'
    if not layout.multiline:
        return head + ', '.join(arguments) + ')'
    indent = ' ' * layout.indent
    return head + '\n' + ',\n'.join(indent + a for a in arguments) + ')'
