# pylint: disable=abstract-method
from __future__ import annotations
from typing import List, Dict, Optional

from sourcegen.ir.span import SourceSpan


class Type(object):
    def __init__(self, name):
        self.name = name

    def __str__(self):
        return str(self.name)

    def __repr__(self):
        return self.__str__()

    @property
    def supertypes(self) -> List[Type]:
        return []

    def has_type_variables(self):
        raise NotImplementedError("You have to implement has_type_variables()")

    def is_type_var(self):
        return False

    def is_parameterized(self):
        return False

    def is_class(self):
        return False

    def is_undefined(self):
        return False

    def get_definition(self) -> Optional[ClassType]:
        """Return the class declaration this type refers to, if any."""
        return None

    def get_supertypes(self):
        """Return self and the transitive closure of the supertypes"""
        stack = [self]
        visited = {self}
        while stack:
            source = stack.pop()
            for supertype in source.supertypes:
                if supertype not in visited:
                    visited.add(supertype)
                    stack.append(supertype)
        return visited

    def substitute_type(self, type_map: Dict[TypeParameter, Type]):
        return self

    def get_name(self):
        return str(self.name)


class Builtin(Type):
    """A type provided by the target language that has no declaration in
    the type model (e.g. `int`, `String`).
    """

    def has_type_variables(self):
        return False

    def __str__(self):
        return str(self.name) + "(builtin)"

    def __eq__(self, other: Type):
        """Check if two Builtin objects are of the same Type"""
        return self.__class__ == other.__class__

    def __hash__(self):
        """Hash based on the Type"""
        return hash(str(self.__class__))


class TypeParameter(Type):

    def __init__(self, name: str, bound: Type | None = None):
        super().__init__(name)
        self.bound = bound

    def is_type_var(self):
        return True

    def has_type_variables(self):
        return True

    def substitute_type(self, type_map):
        t = type_map.get(self)
        if t is None:
            if self.bound is not None:
                new_bound = self.bound.substitute_type(type_map)
                if new_bound is not self.bound:
                    return TypeParameter(self.name, new_bound)
            return self
        return t

    def __eq__(self, other):
        return (self.__class__ == other.__class__ and
                self.name == other.name and
                self.bound == other.bound)

    def __hash__(self):
        return hash(str(self.name))

    def __str__(self):
        return "{}{}".format(
            self.name,
            ' extends ' + self.bound.get_name()
            if self.bound is not None else ''
        )


class ClassType(Type):
    """A class-like declaration: a class, an interface, a mixin or an enum.

    Every class has exactly one superclass except the root type (`Object`),
    which has none. When no superclass is given the root is used.
    `interfaces` and `mixins` keep their declaration order, which matters
    for `type_arguments_of`.

    The model is built once by the caller and treated as read-only by the
    code generation helpers. Fields and the constructor are attached through
    `add_field()` and `set_constructor()` so that they know their enclosing
    class.
    """

    def __init__(self, name: str,
                 type_parameters: List[TypeParameter] = None,
                 superclass: Type = None,
                 interfaces: List[Type] = None,
                 mixins: List[Type] = None,
                 fields: List[FieldDescriptor] = None,
                 constructor: ConstructorDescriptor = None,
                 is_enum: bool = False,
                 span: SourceSpan = None):
        super().__init__(name)
        self.type_parameters = list(type_parameters or [])
        self.superclass = (superclass if superclass is not None
                           else self._default_superclass())
        self.interfaces = list(interfaces or [])
        self.mixins = list(mixins or [])
        self.is_enum = is_enum
        self.span = span
        self.fields = []
        self.constructor = None
        for field in fields or []:
            self.add_field(field)
        if constructor is not None:
            self.set_constructor(constructor)

    def _default_superclass(self):
        return OBJECT

    def add_field(self, field: FieldDescriptor):
        field.enclosing = self
        self.fields.append(field)
        return field

    def set_constructor(self, constructor: ConstructorDescriptor):
        constructor.enclosing = self
        self.constructor = constructor
        return constructor

    @property
    def supertypes(self):
        supertypes = [] if self.superclass is None else [self.superclass]
        return supertypes + self.interfaces + self.mixins

    @property
    def type_args(self):
        # A raw declaration is instantiated with its own type parameters.
        return list(self.type_parameters)

    def is_class(self):
        return True

    def is_root(self):
        return self.superclass is None

    def get_definition(self):
        return self

    def has_type_variables(self):
        return bool(self.type_parameters)

    def new(self, type_args: List[Type]):
        return ParameterizedType(self, type_args)

    def __str__(self):
        return "{}{}{}".format(
            self.name,
            '' if not self.type_parameters else
            '<' + ', '.join(map(str, self.type_parameters)) + '>',
            '' if self.superclass is None else
            ' extends ' + self.superclass.get_name()
        )

    def get_name(self):
        return str(self.name)


class ObjectType(ClassType):
    """The universal root type. It terminates every walk of an ancestry."""

    def __init__(self, name="Object"):
        super().__init__(name)
        self.set_constructor(ConstructorDescriptor([]))

    def _default_superclass(self):
        return None


class ParameterizedType(Type):
    """An instantiation of a generic class with concrete type arguments.

    The supertypes are those of the declaration with its type parameters
    replaced by the type arguments. Given

        class Box<T> implements Serializable<T>

    the type `Box<int>` implements `Serializable<int>`.
    """

    def __init__(self, definition: ClassType, type_args: List[Type]):
        super().__init__(definition.name)
        assert len(definition.type_parameters) == len(type_args), \
            "You should provide {} types for {}".format(
                len(definition.type_parameters), definition)
        self.definition = definition
        self.type_args = list(type_args)

    def get_type_variable_assignments(self):
        return {
            t_param: self.type_args[i]
            for i, t_param in enumerate(self.definition.type_parameters)
        }

    def _substitute(self, t):
        if t is None:
            return None
        return t.substitute_type(self.get_type_variable_assignments())

    @property
    def superclass(self):
        return self._substitute(self.definition.superclass)

    @property
    def interfaces(self):
        return [self._substitute(t) for t in self.definition.interfaces]

    @property
    def mixins(self):
        return [self._substitute(t) for t in self.definition.mixins]

    @property
    def supertypes(self):
        supertypes = [] if self.superclass is None else [self.superclass]
        return supertypes + self.interfaces + self.mixins

    @property
    def type_parameters(self):
        return self.definition.type_parameters

    @property
    def fields(self):
        return self.definition.fields

    @property
    def constructor(self):
        return self.definition.constructor

    @property
    def is_enum(self):
        return self.definition.is_enum

    def is_parameterized(self):
        return True

    def is_class(self):
        return True

    def is_root(self):
        return False

    def get_definition(self):
        return self.definition

    def has_type_variables(self):
        return any(t_arg.has_type_variables() for t_arg in self.type_args)

    def substitute_type(self, type_map):
        type_args = [t_arg.substitute_type(type_map)
                     for t_arg in self.type_args]
        return ParameterizedType(self.definition, type_args)

    def __eq__(self, other: Type):
        if not isinstance(other, ParameterizedType):
            return False
        return (self.definition is other.definition and
                self.type_args == other.type_args)

    def __hash__(self):
        return hash((self.name, tuple(self.type_args)))

    def __str__(self):
        return "{}<{}>".format(self.name,
                               ", ".join(map(str, self.type_args)))

    def get_name(self):
        return "{}<{}>".format(self.name, ", ".join([t.get_name()
                                                     for t in self.type_args]))


class FieldDescriptor(object):
    """An instance or static field of a class.

    `offset` is the position of the field's name in its source file. A
    property-backed field is read through a getter; `getter_offset` is the
    getter's position when it is declared apart from the field itself.

    Fields compare by identity: two classes may declare fields with the
    same name and both are kept.
    """

    def __init__(self, name: str, field_type: Type, offset: int,
                 is_static: bool = False, property_backed: bool = True,
                 getter_offset: Optional[int] = None,
                 span: SourceSpan = None):
        self.name = name
        self.field_type = field_type
        self.offset = offset
        self.is_static = is_static
        self.property_backed = property_backed
        self.getter_offset = getter_offset
        self.span = span
        self.enclosing = None

    def get_type(self):
        return self.field_type

    def sort_offset(self):
        """Offset used to order fields, preferring the getter if it's
        declared somewhere else.
        """
        if (self.property_backed and self.getter_offset is not None and
                self.getter_offset != self.offset):
            return self.getter_offset
        return self.offset

    def __str__(self):
        return "{}{}: {}".format(
            'static ' if self.is_static else '',
            self.name, self.field_type.get_name())

    def __repr__(self):
        owner = self.enclosing.name if self.enclosing is not None else '?'
        return "FieldDescriptor({}.{})".format(owner, self.name)


class ParameterDescriptor(object):
    def __init__(self, name: str, param_type: Type, named: bool = False,
                 required: bool = True, span: SourceSpan = None):
        self.name = name
        self.param_type = param_type
        self.named = named
        self.required = required
        self.span = span

    def get_type(self):
        return self.param_type

    def is_named(self):
        return self.named

    def is_positional(self):
        return not self.named

    def is_optional(self):
        return not self.required

    def __str__(self):
        text = "{} {}".format(self.param_type.get_name(), self.name)
        if self.named:
            return "{" + ('required ' if self.required else '') + text + "}"
        return text if self.required else "[" + text + "]"

    def __repr__(self):
        return "ParameterDescriptor({})".format(self)


class ConstructorDescriptor(object):
    """The unnamed (default) constructor of a class."""

    def __init__(self, parameters: List[ParameterDescriptor],
                 span: SourceSpan = None):
        self.parameters = list(parameters)
        self.span = span
        self.enclosing = None

    def __str__(self):
        owner = self.enclosing.name if self.enclosing is not None else ''
        return "{}({})".format(owner, ', '.join(map(str, self.parameters)))


OBJECT = ObjectType()
