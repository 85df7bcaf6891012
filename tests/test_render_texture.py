import gc

import numpy as np
import pytest

from pose_overlay import render_texture


def test_get_and_release_temporary():
    before = render_texture.active_count()
    texture = render_texture.get_temporary(32, 16)

    assert texture.dims == (32, 16)
    assert texture.buffer.shape == (16, 32, 3)
    assert texture.buffer.dtype == np.float16
    assert render_texture.active_count() == before + 1

    render_texture.release_temporary(texture)
    assert render_texture.active_count() == before


def test_double_release_raises():
    texture = render_texture.get_temporary(4, 4)
    render_texture.release_temporary(texture)
    with pytest.raises(ValueError):
        render_texture.release_temporary(texture)


def test_blit_resizes_into_target():
    image = np.full((40, 80, 3), 200, dtype=np.uint8)
    texture = render_texture.get_temporary(20, 10)
    try:
        render_texture.blit(image, texture)
        assert np.all(texture.buffer == 200)
    finally:
        render_texture.release_temporary(texture)


def test_unreleased_texture_counted_after_collection():
    existing = set(render_texture._live_textures)
    before = render_texture.active_count()

    render_texture.get_temporary(8, 8)
    gc.collect()
    kept = render_texture.get_temporary(8, 8)

    assert render_texture.active_count() == before + 2

    for texture in set(render_texture._live_textures) - existing:
        render_texture.release_temporary(texture)
    assert kept.released
