import pytest

from modtool.basic import BinaryReader, BinaryWriter, Vector3f
from modtool.joint import Joint, JointMatPoly


def roundtrip(obj):
    writer = BinaryWriter()
    obj.write(writer)
    reader = BinaryReader(writer.getvalue())
    result = type(obj).read(reader)
    assert reader.remaining() == 0
    return result


def test_mat_poly_roundtrip():
    poly = JointMatPoly(3, -2)
    assert roundtrip(poly) == poly


def test_joint_roundtrip():
    joint = Joint(
        parent_index=-1,
        is_visible=1,
        min_bounds=Vector3f(-1.0, -2.0, -3.0),
        max_bounds=Vector3f(1.0, 2.0, 3.0),
        volume_radius=4.5,
        scale=Vector3f(1.0, 1.0, 1.0),
        rotation=Vector3f(0.0, 0.5, 0.0),
        position=Vector3f(10.0, 0.0, -10.0),
        linked_polygons=[JointMatPoly(0, 1), JointMatPoly(2, 3)],
    )
    assert roundtrip(joint) == joint


def test_default_joint_roundtrip():
    assert roundtrip(Joint()) == Joint()


def test_truncated_joint_raises():
    writer = BinaryWriter()
    Joint(linked_polygons=[JointMatPoly(1, 1)]).write(writer)
    with pytest.raises(EOFError):
        Joint.read(BinaryReader(writer.getvalue()[:-1]))