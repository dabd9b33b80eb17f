import itertools

from sourcegen.ir import types as tp
from sourcegen.ir import builtins as bt
from sourcegen.ir.span import SourceSpan
from sourcegen.codegen.diagnostics import DiagnosticSink
from sourcegen.codegen.fields import create_sorted_field_set


def field(name, offset, **kwargs):
    field_type = kwargs.pop('field_type', bt.StringType())
    return tp.FieldDescriptor(name, field_type, offset, **kwargs)


def names(fields):
    return [f.name for f in fields]


def test_own_fields_sorted_by_offset():
    cls = tp.ClassType('Point', fields=[field('y', 20), field('x', 10)])
    assert names(create_sorted_field_set(cls)) == ['x', 'y']


def test_static_fields_are_excluded():
    cls = tp.ClassType('Config', fields=[
        field('instance', 10),
        field('defaults', 5, is_static=True),
    ])
    assert names(create_sorted_field_set(cls)) == ['instance']


def test_superclass_fields_come_first_regardless_of_offset():
    base = tp.ClassType('Base', fields=[field('a', 50), field('b', 60)])
    derived = tp.ClassType('Derived', superclass=base,
                           fields=[field('c', 10)])
    assert names(create_sorted_field_set(derived)) == ['a', 'b', 'c']


def test_deep_hierarchy_order():
    root = tp.ClassType('Root', fields=[field('r', 300)])
    middle = tp.ClassType('Middle', superclass=root,
                          fields=[field('m', 200)])
    leaf = tp.ClassType('Leaf', superclass=middle, fields=[field('l', 100)])
    assert names(create_sorted_field_set(leaf)) == ['r', 'm', 'l']


def test_getter_offset_is_preferred():
    cls = tp.ClassType('Person', fields=[
        field('name', 30, getter_offset=5),
        field('age', 10),
    ])
    assert names(create_sorted_field_set(cls)) == ['name', 'age']


def test_getter_offset_of_stored_field_is_ignored():
    cls = tp.ClassType('Person', fields=[
        field('name', 30, property_backed=False, getter_offset=5),
        field('age', 10),
    ])
    assert names(create_sorted_field_set(cls)) == ['age', 'name']


def test_inherited_stored_fields_are_not_collected():
    base = tp.ClassType('Base', fields=[
        field('stored', 1, property_backed=False),
        field('property', 2),
    ])
    derived = tp.ClassType('Derived', superclass=base)
    assert names(create_sorted_field_set(derived)) == ['property']


def test_root_fields_are_excluded():
    root = tp.ObjectType()
    root.add_field(field('hashCode', 1))
    cls = tp.ClassType('Item', superclass=root, fields=[field('id', 10)])
    assert names(create_sorted_field_set(cls)) == ['id']


def test_interface_and_mixin_fields():
    identifiable = tp.ClassType('Identifiable', fields=[field('id', 40)])
    timestamps = tp.ClassType('Timestamps', fields=[field('created', 30)])
    cls = tp.ClassType('Record', interfaces=[identifiable],
                       mixins=[timestamps], fields=[field('body', 1)])
    # Unrelated ancestors are ordered by offset, both before the class.
    assert names(create_sorted_field_set(cls)) == ['created', 'id', 'body']


def test_diamond_field_collected_once():
    entity = tp.ClassType('Entity', fields=[field('id', 1)])
    named = tp.ClassType('Named', interfaces=[entity],
                         fields=[field('name', 2)])
    base = tp.ClassType('Base', interfaces=[entity])
    user = tp.ClassType('User', superclass=base, interfaces=[named],
                        fields=[field('email', 3)])

    fields = create_sorted_field_set(user)
    assert names(fields) == ['id', 'name', 'email']
    assert fields[0] is entity.fields[0]


def test_nearest_declaration_hides_inherited_one():
    base = tp.ClassType('Base', fields=[field('name', 1)])
    middle = tp.ClassType('Middle', superclass=base,
                          fields=[field('name', 2)])
    leaf = tp.ClassType('Leaf', superclass=middle)

    fields = create_sorted_field_set(leaf)
    assert len(fields) == 1
    assert fields[0] is middle.fields[0]


def test_same_name_in_class_and_superclass_are_both_kept():
    base = tp.ClassType('Base', fields=[field('value', 1)])
    derived = tp.ClassType('Derived', superclass=base,
                           fields=[field('value', 2)])

    fields = create_sorted_field_set(derived)
    assert names(fields) == ['value', 'value']
    assert fields[0].enclosing is base
    assert fields[1].enclosing is derived


def test_parameterized_type_uses_its_declaration():
    t_param = tp.TypeParameter('T')
    box = tp.ClassType('Box', [t_param], fields=[field('value', 1,
                                                       field_type=t_param)])
    fields = create_sorted_field_set(box.new([bt.IntType()]))
    assert fields == box.fields


def test_undefined_field_type_is_reported():
    span = SourceSpan('lib/model.dart', 3, 3, 7, text='  Missing missing;')
    cls = tp.ClassType('Broken', fields=[
        field('missing', 10, field_type=bt.UndefinedType(), span=span),
        field('fine', 20),
    ])
    sink = DiagnosticSink()

    assert names(create_sorted_field_set(cls, sink)) == ['missing', 'fine']
    warnings = sink.get_warnings()
    assert len(warnings) == 1
    assert warnings[0].span is span
    assert 'lib/model.dart:3:3' in warnings[0].message
    assert 'undefined type' in warnings[0].message


def test_empty_class():
    assert create_sorted_field_set(tp.ClassType('Empty')) == []


def test_superclass_fields_come_first_with_mixins():
    # class B extends A; class D extends B with M, N
    a = tp.ClassType('A', fields=[field('a', 30)])
    b = tp.ClassType('B', superclass=a, fields=[field('b', 10)])
    m = tp.ClassType('M', fields=[field('m', 40)])
    n = tp.ClassType('N', fields=[field('n', 20)])
    d = tp.ClassType('D', superclass=b, mixins=[m, n],
                     fields=[field('d', 0)])

    result = names(create_sorted_field_set(d))
    assert result.index('a') < result.index('b')
    assert result == ['n', 'a', 'b', 'm', 'd']


def test_ancestor_first_for_every_offset_order():
    for offsets in itertools.permutations([10, 20, 30, 40]):
        a = tp.ClassType('A', fields=[field('a', offsets[0])])
        b = tp.ClassType('B', superclass=a, fields=[field('b', offsets[1])])
        m = tp.ClassType('M', fields=[field('m', offsets[2])])
        n = tp.ClassType('N', fields=[field('n', offsets[3])])
        d = tp.ClassType('D', superclass=b, mixins=[m, n],
                         fields=[field('d', 0)])
        result = names(create_sorted_field_set(d))
        assert result.index('a') < result.index('b') < result.index('d')
        assert result.index('m') < result.index('d')
        assert result.index('n') < result.index('d')


def test_same_name_in_unrelated_ancestors_are_both_kept():
    # class D extends B implements I, both B and I declare x
    b = tp.ClassType('B', fields=[field('x', 1)])
    i = tp.ClassType('I', fields=[field('x', 2)])
    d = tp.ClassType('D', superclass=b, interfaces=[i])

    fields = create_sorted_field_set(d)
    assert len(fields) == 2
    assert fields[0] is b.fields[0]
    assert fields[1] is i.fields[0]
