import pytest

from pose_overlay.pose_utils import scale_body_part_coords


@pytest.mark.parametrize("coords", [(0.0, 0.0), (12.5, 7.0), (223.0, 223.0)])
def test_identity_transform(coords):
    assert scale_body_part_coords(coords, (224, 224), (224.0, 224.0), (0, 0), False) == coords


def test_mirror_only_flips_horizontal_axis():
    coords = (30.0, 40.0)
    plain = scale_body_part_coords(coords, (288, 224), (640.0, 480.0), (5, 0), False)
    mirrored = scale_body_part_coords(coords, (288, 224), (640.0, 480.0), (5, 0), True)

    assert mirrored[1] == plain[1]
    assert mirrored[0] == pytest.approx(640.0 - plain[0])
    # Reflection about the vertical midline
    assert (mirrored[0] + plain[0]) / 2 == pytest.approx(320.0)


def test_offset_and_scale_applied():
    x, y = scale_body_part_coords((10.0, 20.0), (288, 224), (640.0, 480.0), (5, 0), False)
    assert x == pytest.approx(15 * 480 / 224)
    assert y == pytest.approx(20 * 480 / 224)


def test_uses_smaller_dimensions_for_scale():
    # Portrait input and screen
    x, y = scale_body_part_coords((10.0, 10.0), (224, 288), (480.0, 640.0), (0, 5), False)
    assert x == pytest.approx(10 * 480 / 224)
    assert y == pytest.approx(15 * 480 / 224)
