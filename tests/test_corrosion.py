"""
Tests for the corrosion automaton.
"""

import numpy as np
import pytest
from sprite_overlay.procedural import CorrosionOverlay, OverlayConfig, corrode
from conftest import ConstantRng, make_sprite


def block(size=12, start=4, stop=8):
    mask = np.zeros((size, size), dtype=bool)
    mask[start:stop, start:stop] = True
    return mask


@pytest.mark.parametrize("iterations", [0, 1, 3, 10])
@pytest.mark.parametrize("seeds", [0, 1, 5, 500])
def test_corrosion_stays_inside_silhouette(blob_sprite, iterations, seeds):
    rng = np.random.default_rng(iterations * 1000 + seeds)
    mask = corrode(blob_sprite.occupied, iterations, seeds, rng)

    assert not np.any(mask & ~blob_sprite.occupied)


def test_zero_iterations_is_empty():
    mask = corrode(block(), 0, 5, np.random.default_rng(1))

    assert not mask.any()


def test_one_iteration_returns_seeds():
    occupied = block()
    mask = corrode(occupied, 1, 5, np.random.default_rng(1))

    assert np.count_nonzero(mask) == 5


def test_more_seeds_than_cells_seeds_everything():
    occupied = np.zeros((4, 4), dtype=bool)
    occupied[1, 1:4] = True
    mask = corrode(occupied, 1, 100, np.random.default_rng(2))

    assert np.array_equal(mask, occupied)


def test_no_seeds_never_corrodes():
    mask = corrode(block(), 20, 0, ConstantRng(integer=0))

    assert not mask.any()


def test_spreads_one_ring_per_step_when_draws_are_zero():
    occupied = block()
    rng = ConstantRng(integer=0)

    assert not corrode(occupied, 0, 1, rng).any()

    # Identity permutation: the first occupied cell is (4, 4)
    assert np.argwhere(corrode(occupied, 1, 1, rng)).tolist() == [[4, 4]]

    two = corrode(occupied, 2, 1, rng)
    assert np.argwhere(two).tolist() == [[4, 4], [4, 5], [5, 4], [5, 5]]

    three = corrode(occupied, 3, 1, rng)
    assert np.array_equal(np.argwhere(three), np.argwhere(block(12, 4, 7)))

    four = corrode(occupied, 4, 1, rng)
    assert np.array_equal(four, occupied)


def test_high_draws_never_spread():
    mask = corrode(block(), 10, 1, ConstantRng(integer=7))

    assert np.count_nonzero(mask) == 1


def test_holes_stay_clean():
    occupied = np.ones((7, 7), dtype=bool)
    occupied[3, 3] = False
    mask = corrode(occupied, 12, 2, ConstantRng(integer=0))

    assert not mask[3, 3]
    assert np.array_equal(mask, occupied)


def test_corrosion_is_monotonic():
    occupied = block(16, 2, 14)
    previous = None
    for iterations in range(6):
        mask = corrode(occupied, iterations, 3, np.random.default_rng(11))
        if previous is not None:
            assert np.all(mask[previous])
        previous = mask


def test_overlay_paints_corroded_cells(blob_sprite):
    config = OverlayConfig(
        colors=["#112233"],
        rng=ConstantRng(integer=0),
        extra={'iterations': 2, 'seeds': 1},
    )
    layer = CorrosionOverlay(config).apply(blob_sprite)

    painted = layer.pixels[:, :, 3] > 0
    assert painted.any()
    assert not np.any(painted & ~blob_sprite.occupied)
    assert np.all(layer.pixels[painted] == (0x11, 0x22, 0x33, 255))


def test_same_seed_same_layer(blob_sprite):
    first = CorrosionOverlay(OverlayConfig(seed=5)).apply(blob_sprite)
    second = CorrosionOverlay(OverlayConfig(seed=5)).apply(blob_sprite)

    assert first.pixels.tobytes() == second.pixels.tobytes()


@pytest.mark.parametrize("iterations, seeds", [(-1, 3), (3, -1)])
def test_rejects_negative_counts(iterations, seeds):
    with pytest.raises(ValueError):
        corrode(block(), iterations, seeds, np.random.default_rng(0))
