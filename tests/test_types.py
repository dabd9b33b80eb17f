from sourcegen.ir import types as tp
from sourcegen.ir import builtins as bt
from sourcegen.ir.span import SourceSpan
from sourcegen.ir.type_checker import TypeChecker


def test_default_superclass_is_root():
    cls = tp.ClassType('Point')
    assert cls.superclass is tp.OBJECT
    assert tp.OBJECT.is_root()
    assert not cls.is_root()
    assert tp.OBJECT.superclass is None


def test_supertypes_order():
    base = tp.ClassType('Base')
    iface = tp.ClassType('Iface')
    mixin = tp.ClassType('Mixin')
    cls = tp.ClassType('Cls', superclass=base, interfaces=[iface],
                       mixins=[mixin])
    assert cls.supertypes == [base, iface, mixin]
    assert cls.get_supertypes() == {cls, base, iface, mixin, tp.OBJECT}


def test_fields_and_constructor_know_their_class():
    f = tp.FieldDescriptor('x', bt.IntType(), 1)
    ctor = tp.ConstructorDescriptor([tp.ParameterDescriptor('x', bt.IntType())])
    cls = tp.ClassType('Point', fields=[f], constructor=ctor)
    assert f.enclosing is cls
    assert ctor.enclosing is cls
    assert str(ctor) == 'Point(int x)'


def test_fields_compare_by_identity():
    a = tp.FieldDescriptor('x', bt.IntType(), 1)
    b = tp.FieldDescriptor('x', bt.IntType(), 1)
    assert a != b
    assert len({a, b}) == 2


def test_parameterized_supertypes_are_substituted():
    # class Pair<A, B> extends Base<B> implements Iface<A>
    t_param = tp.TypeParameter('T')
    base = tp.ClassType('Base', [t_param])
    iface = tp.ClassType('Iface', [t_param])
    a_param, b_param = tp.TypeParameter('A'), tp.TypeParameter('B')
    pair = tp.ClassType('Pair', [a_param, b_param],
                        superclass=base.new([b_param]),
                        interfaces=[iface.new([a_param])])

    instance = pair.new([bt.IntType(), bt.StringType()])
    assert instance.superclass == base.new([bt.StringType()])
    assert instance.interfaces == [iface.new([bt.IntType()])]
    assert instance.get_name() == 'Pair<int, String>'
    assert instance.get_definition() is pair
    assert not instance.has_type_variables()


def test_nested_type_arguments_are_substituted():
    t_param = tp.TypeParameter('T')
    listing = tp.ClassType('List', [t_param])
    e_param = tp.TypeParameter('E')
    wrapper = tp.ClassType('Wrapper', [e_param],
                           interfaces=[listing.new([listing.new([e_param])])])
    instance = wrapper.new([bt.BoolType()])
    assert instance.interfaces == [
        listing.new([listing.new([bt.BoolType()])])]


def test_type_parameter_str():
    assert str(tp.TypeParameter('T', bt.NumType())) == 'T extends num'
    assert tp.TypeParameter('T', bt.NumType()).get_name() == 'T'


def test_type_checker():
    base = tp.ClassType('Base')
    middle = tp.ClassType('Middle', superclass=base)
    leaf = tp.ClassType('Leaf', superclass=middle)

    checker = TypeChecker(base)
    assert checker.is_exactly(base)
    assert not checker.is_exactly(leaf)
    assert checker.is_super_of(leaf)
    assert checker.is_super_of(middle)
    assert not checker.is_super_of(base)
    assert not TypeChecker(leaf).is_super_of(base)
    assert checker.is_assignable_from(base)
    assert checker.is_assignable_from(leaf)
    assert not checker.is_super_of(bt.IntType())


def test_type_checker_matches_instantiations():
    t_param = tp.TypeParameter('T')
    box = tp.ClassType('Box', [t_param])
    checker = TypeChecker(box.new([bt.IntType()]))
    assert checker.definition is box
    assert checker.is_exactly(box.new([bt.StringType()]))
    int_box = tp.ClassType('IntBox', superclass=box.new([bt.IntType()]))
    assert checker.is_super_of(int_box)


def test_undefined_type():
    assert bt.UndefinedType().is_undefined()
    assert not bt.IntType().is_undefined()
    assert not tp.ClassType('Point').is_undefined()


def test_source_span():
    span = SourceSpan('lib/a.dart', 2, 5, 3, text='int foo;')
    assert span.tool_string() == 'lib/a.dart:2:5'
    assert span.highlight() == 'int foo;\n    ^^^'
    assert SourceSpan('lib/a.dart', 1, 1).highlight() == ''
