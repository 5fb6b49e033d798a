import numpy as np
import pytest
from nbody_sim.frame import Frame
from nbody_sim.types import Body


def nested_chain() -> list[Frame]:
    root = Frame(position=(320.0, 240.0), rotation=0.3, scale=(2.0, -1.5))
    mid = Frame(parent=root, position=(-40.0, 12.5), rotation=-1.1, scale=(0.25, 0.8))
    leaf = Frame(parent=mid, position=(7.0, -3.0), rotation=2.7, scale=(-3.0, 1.2))
    tip = Frame(parent=leaf, position=(0.5, 0.5), rotation=np.pi / 5, scale=(1.0, 4.0))
    return [root, mid, leaf, tip]


def test_round_trip_random_points():
    """to_local(to_global(P)) == P for every level of a 4-deep chain."""
    rng = np.random.default_rng(12345)
    points = rng.uniform(-1000.0, 1000.0, size=(100, 2))
    for frame in nested_chain():
        for p in points:
            q = frame.to_local(frame.to_global(p))
            assert np.allclose(q, p, rtol=1e-9, atol=1e-6)
            r = frame.to_global(frame.to_local(p))
            assert np.allclose(r, p, rtol=1e-9, atol=1e-6)


def test_known_composition():
    """
    child: translate (1,0) only.
    root: scale 2, rotate 90°, translate (10,0).
    child (1,0) -> (2,0) -> scale (4,0) -> rotate (0,4) -> translate (10,4)
    """
    root = Frame(position=(10.0, 0.0), rotation=np.pi / 2, scale=(2.0, 2.0))
    child = Frame(parent=root, position=(1.0, 0.0))
    assert np.allclose(child.to_global((1.0, 0.0)), (10.0, 4.0))
    assert np.allclose(child.to_local((10.0, 4.0)), (1.0, 0.0))
    assert np.allclose(root.to_global((0.0, 0.0)), (10.0, 0.0))


def test_scale_then_rotate_then_translate_order():
    f = Frame(position=(5.0, 0.0), rotation=np.pi / 2, scale=(3.0, 1.0))
    # (1,1) -> scale (3,1) -> rotate (-1,3) -> translate (4,3)
    assert np.allclose(f.to_global((1.0, 1.0)), (4.0, 3.0))


def test_root_frame_identity_by_default():
    f = Frame()
    p = np.array([3.0, -4.0])
    assert np.array_equal(f.to_global(p), p)
    assert np.array_equal(f.to_local(p), p)
    assert f.depth == 0
    assert f.root is f


def test_mutators_only_affect_own_frame():
    root, mid, leaf, tip = nested_chain()
    p = np.array([1.0, 2.0])
    mid_before = mid.to_global(p)
    root_before = root.to_global(p)

    leaf.set_position((100.0, 100.0))
    leaf.set_rotation(0.0)

    assert np.array_equal(mid.to_global(p), mid_before)
    assert np.array_equal(root.to_global(p), root_before)
    # takes effect immediately for the frame and its descendants
    assert np.allclose(leaf.to_global((0.0, 0.0)), mid.to_global((100.0, 100.0)))
    assert np.allclose(tip.to_local(tip.to_global(p)), p)


def test_attribute_assignment_is_a_mutator():
    f = Frame()
    f.position = [2, 3]
    f.rotation = np.pi
    assert isinstance(f.position, np.ndarray)
    assert np.allclose(f.to_global((1.0, 0.0)), (1.0, 3.0))


def test_cycle_rejected():
    a = Frame()
    b = Frame(parent=a)
    c = Frame(parent=b)
    with pytest.raises(ValueError):
        a.set_parent(c)
    with pytest.raises(ValueError):
        a.parent = a
    assert a.parent is None
    # re-parenting without a cycle is fine
    c.set_parent(a)
    assert c.depth == 1
    assert list(b.ancestors()) == [a]


def test_zero_scale_rejected():
    with pytest.raises(ValueError):
        Frame(scale=(0.0, 1.0))
    f = Frame()
    with pytest.raises(ValueError):
        f.scale = (1.0, 0.0)


def test_non_finite_rejected():
    with pytest.raises(ValueError):
        Frame(position=(float("nan"), 0.0))
    with pytest.raises(ValueError):
        Frame(rotation=float("inf"))


def test_global_matrix_matches_point_transform():
    frames = nested_chain()
    tip = frames[-1]
    m = tip.global_matrix()
    p = np.array([3.0, -7.0])
    expected = tip.to_global(p)
    assert np.allclose(m @ np.array([p[0], p[1], 1.0]), np.append(expected, 1.0))


def test_batch_conversions_match_single():
    tip = nested_chain()[-1]
    rng = np.random.default_rng(5)
    pts = rng.uniform(-50, 50, size=(20, 2))
    g = tip.to_global_points(pts)
    for p, q in zip(pts, g):
        assert np.allclose(q, tip.to_global(p))
    assert np.allclose(tip.to_local_points(g), pts, atol=1e-8)


def test_follow_body():
    screen = Frame(position=(320.0, 240.0))
    view = Frame(parent=screen)
    body = Body(position=(10.0, 20.0), velocity=(0.0, 5.0))
    view.follow(body)
    assert np.array_equal(view.position, body.position)
    assert view.rotation == pytest.approx(np.pi / 2)
    # +x of the view points along the velocity
    assert np.allclose(view.to_global((1.0, 0.0)), (330.0, 261.0))

    # at rest the heading is kept
    body.velocity[:] = 0.0
    view.follow(body)
    assert view.rotation == pytest.approx(np.pi / 2)

    # view does not alias body state
    body.position[0] = -1.0
    assert view.position[0] == 10.0


@pytest.mark.parametrize("velocity", [(3.0, 4.0), (-1.0, 0.5), (0.0, -2.0)])
@pytest.mark.parametrize("parent_scale", [(1.0, 1.0), (1.0, -1.0)])
def test_follow_heading_measured_from_parent_x_toward_y(velocity, parent_scale):
    """Local +x lands on v/|v| in parent space, for y-up and y-down parents."""
    screen = Frame(position=(400.0, 300.0), scale=parent_scale)
    view = Frame(parent=screen)
    body = Body(position=(10.0, 20.0), velocity=velocity)
    view.follow(body)

    v = np.asarray(velocity)
    assert np.allclose(view.to_parent((1.0, 0.0)) - view.position, v / np.linalg.norm(v))
    # on screen the heading is the parent's mirror of the velocity
    heading = view.to_global((1.0, 0.0)) - view.to_global((0.0, 0.0))
    assert np.allclose(heading, np.multiply(parent_scale, v) / np.linalg.norm(v))
