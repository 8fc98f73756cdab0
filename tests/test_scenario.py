# -*- coding: utf-8 -*-
"""
Scenario Builder Tests - Image / flow dispatch, warping and reproducibility.

Dependencies
------------
pytest

Author
------
regflow contributors

License
-------
MIT License
Copyright (c) 2026 regflow contributors
See LICENSE file for full text.

Created
-------
2026-10-17

Modified
--------
2026-10-17
"""

import numpy as np
import pytest

from regflow.exceptions import ValidationError
from regflow.flow import vector_length
from regflow.image_ops import warp_image
from regflow.images import chessboard
from regflow.scenario import (
    FLOW_GENERATORS,
    IMAGE_BUILDERS,
    Scenario,
    gen_init,
    generate_scenario,
)
from regflow.vocabulary import FlowKind, ImageKind


class TestDispatchTables:
    """Test that every kind has a registered builder."""

    def test_all_image_kinds_covered(self):
        assert set(IMAGE_BUILDERS) == set(ImageKind)

    def test_all_flow_kinds_covered(self):
        assert set(FLOW_GENERATORS) == set(FlowKind)


class TestUniformChessScenario:
    """Chessboard warped by a uniform 5 px horizontal shift."""

    @pytest.fixture
    def scenario(self):
        return generate_scenario(ImageKind.CHESS, FlowKind.UNIFORM,
                                 flow_args=[1 + 0j, 5])

    def test_image_is_default_chessboard(self, scenario):
        np.testing.assert_array_equal(scenario.image, chessboard(50, 4))

    def test_flow(self, scenario):
        assert scenario.flow.shape == scenario.image.shape
        assert np.all(scenario.flow == 5 + 0j)

    def test_warped_matches_negated_flow(self, scenario):
        expected = warp_image(scenario.image,
                              np.full(scenario.image.shape, -5.0),
                              np.zeros(scenario.image.shape))
        np.testing.assert_array_equal(scenario.warped, expected)

    def test_content_moves_right(self, scenario):
        np.testing.assert_allclose(scenario.warped[:, 5:],
                                   scenario.image[:, :-5])

    def test_unpacks_as_triple(self, scenario):
        image, warped, flow = scenario
        assert isinstance(scenario, Scenario)
        assert image is scenario.image
        assert warped is scenario.warped
        assert flow is scenario.flow


class TestGenerateScenario:
    """Test generate_scenario dispatch and arguments."""

    def test_defaults(self):
        image, warped, flow = generate_scenario(rng=0)
        assert image.shape == warped.shape == flow.shape == (256, 256)
        assert vector_length(flow).max() == pytest.approx(10.0)

    def test_string_kinds(self):
        image, _, flow = generate_scenario('chess', 'tiled', flow_args=[15],
                                           chess_args=[10, 4], rng=1)
        assert image.shape == flow.shape == (40, 40)
        assert vector_length(flow).max() == pytest.approx(15.0)

    def test_quad_flow_args(self):
        _, _, flow = generate_scenario('chess', 'quad', flow_args=[20], rng=2)
        assert vector_length(flow).max() == pytest.approx(20.0)

    def test_float_chess_args_coerced(self):
        image, _, _ = generate_scenario('chess', 'uniform',
                                        chess_args=[10.0, 2.0])
        assert image.shape == (20, 20)

    def test_chess_args_ignored_for_lena(self):
        image, _, _ = generate_scenario('lena', 'uniform', chess_args=[10, 3])
        assert image.shape == (256, 256)

    def test_same_seed_reproducible(self):
        first = generate_scenario('chess', 'tiled', rng=42)
        second = generate_scenario('chess', 'tiled', rng=42)
        for a, b in zip(first, second):
            np.testing.assert_array_equal(a, b)

    def test_different_seeds_differ(self):
        first = generate_scenario('chess', 'quad', rng=1)
        second = generate_scenario('chess', 'quad', rng=2)
        assert not np.allclose(first.flow, second.flow)

    def test_gen_init_alias(self):
        assert gen_init is generate_scenario

    def test_unknown_image_kind_raises(self):
        with pytest.raises(ValidationError, match="ImageKind"):
            generate_scenario('circle', 'quad')

    def test_unknown_flow_kind_raises(self):
        with pytest.raises(ValidationError, match="FlowKind"):
            generate_scenario('chess', 'spiral')

    def test_odd_board_raises(self):
        with pytest.raises(ValidationError, match="even"):
            generate_scenario('chess', 'quad', chess_args=[10, 3])

    def test_too_many_chess_args_raises(self):
        with pytest.raises(ValidationError, match="chess_args"):
            generate_scenario('chess', 'quad', chess_args=[10, 4, 2])

    def test_too_many_flow_args_raises(self):
        with pytest.raises(ValidationError, match="flow_args"):
            generate_scenario('chess', 'quad', flow_args=[1, 2, 3])

    def test_zero_direction_raises(self):
        with pytest.raises(ValidationError, match="non-zero"):
            generate_scenario('chess', 'uniform', flow_args=[0j])
