"""Tests for patterns, rotation and the pattern builder."""

import numpy as np
import pytest

from termlife.core.errors import UnknownPatternName
from termlife.core.patterns import (
    CATALOG,
    Orientation,
    Pattern,
    PatternBuilder,
    PatternLibrary,
    rotate_cells,
)

T, F = True, False


class TestPattern:
    """Test cases for the Pattern class."""

    def test_initialization(self):
        """Test pattern initialization."""
        pattern = Pattern("bar", [[T, T, T]], "Three in a row")

        assert pattern.name == "bar"
        assert pattern.description == "Three in a row"
        assert pattern.size == (1, 3)
        assert pattern.population == 3
        assert not pattern.is_empty

    def test_ragged_rows_are_padded(self):
        """Test that short rows are padded with dead cells."""
        pattern = Pattern("ragged", [[T], [T, F, T], []])

        assert pattern.size == (3, 3)
        assert pattern.to_list() == [[T, F, F], [T, F, T], [F, F, F]]

    def test_empty_pattern(self):
        """Test a pattern without cells."""
        pattern = Pattern("empty")
        assert pattern.is_empty
        assert pattern.size == (0, 0)
        assert pattern.population == 0

    def test_cells_are_read_only(self):
        """Test that pattern cells cannot be modified through the view."""
        pattern = Pattern("bar", [[T, T]])
        with pytest.raises(ValueError):
            pattern.cells[0, 0] = False

    def test_equality(self):
        """Test that equality compares cells only."""
        assert Pattern("a", [[T, F]]) == Pattern("b", [[T, F]])
        assert Pattern("a", [[T, F]]) != Pattern("a", [[T], [F]])


class TestRotation:
    """Test clockwise rotation."""

    def test_quarter_turn(self):
        """Test the 90 degree primitive on the glider."""
        glider = np.array([[F, T, F], [F, F, T], [T, T, T]])

        rotated = rotate_cells(glider, 90)

        assert rotated.tolist() == [[T, F, F], [T, F, T], [T, T, F]]

    def test_quarter_turn_swaps_dimensions(self):
        """Test that an R x C shape becomes C x R."""
        toad = np.array([[F, T, T, T], [T, T, T, F]])

        rotated = rotate_cells(toad, 90)

        assert rotated.shape == (4, 2)
        assert rotated.tolist() == [[T, F], [T, T], [T, T], [F, T]]

    def test_cell_mapping(self):
        """Test rotated[j][R-1-i] == original[i][j] for every cell."""
        original = np.random.default_rng(3).random((3, 5)) < 0.5
        rotated = rotate_cells(original, 90)

        rows = original.shape[0]
        for i in range(original.shape[0]):
            for j in range(original.shape[1]):
                assert rotated[j][rows - 1 - i] == original[i][j]

    def test_half_and_three_quarter_turns(self):
        """Test that larger angles are repeated quarter turns."""
        original = np.array([[T, T, F], [F, F, F]])
        quarter = rotate_cells(original, 90)

        assert np.array_equal(rotate_cells(original, 180), rotate_cells(quarter, 90))
        assert np.array_equal(rotate_cells(original, 270), rotate_cells(rotate_cells(quarter, 90), 90))
        assert rotate_cells(original, 180).tolist() == [[F, F, F], [F, T, T]]

    @pytest.mark.parametrize("name", sorted(CATALOG))
    def test_four_quarter_turns_round_trip(self, name):
        """Test that four quarter turns restore every catalog pattern."""
        original = PatternLibrary().get_pattern(name)

        pattern = original
        for _ in range(4):
            pattern = pattern.rotated(90)

        assert pattern.size == original.size
        assert pattern == original

    def test_rotation_does_not_alias(self):
        """Test that rotation never returns a view of the input."""
        original = np.array([[T, F], [F, F]])

        for degrees in (0, 90, 180, 270):
            rotated = rotate_cells(original, degrees)
            rotated[:] = True
            assert original.tolist() == [[T, F], [F, F]]

    def test_invalid_angle(self):
        """Test that only quarter turns are accepted."""
        with pytest.raises(ValueError):
            rotate_cells(np.array([[T]]), 45)

        with pytest.raises(ValueError):
            rotate_cells(np.array([[T]]), 360)

    def test_empty_rotation(self):
        """Test that rotating an empty shape leaves it empty."""
        assert rotate_cells(np.zeros((0, 0), dtype=bool), 90).size == 0


class TestOrientation:
    """Test orientation parsing."""

    def test_degrees(self):
        """Test the degree mapping."""
        assert [o.degrees for o in Orientation] == [0, 90, 180, 270]

    def test_parse(self):
        """Test parsing names and passing enums through."""
        assert Orientation.parse("RIGHT") is Orientation.RIGHT
        assert Orientation.parse(Orientation.LEFT) is Orientation.LEFT

    def test_parse_unknown(self):
        """Test that unknown names raise ValueError."""
        with pytest.raises(ValueError):
            Orientation.parse("sideways")


class TestPatternLibrary:
    """Test the built-in catalog."""

    def test_catalog_names(self):
        """Test that every built-in shape is present."""
        library = PatternLibrary()
        assert set(library.list_patterns()) == {
            "glider", "blinker", "toad", "beacon", "pulsar", "oscillator", "spaceship",
        }

    def test_catalog_layouts(self):
        """Test the exact cell layouts of the small shapes."""
        library = PatternLibrary()

        assert library.get_pattern("glider").to_list() == [[F, T, F], [F, F, T], [T, T, T]]
        assert library.get_pattern("blinker").to_list() == [[T], [T], [T]]
        assert library.get_pattern("toad").to_list() == [[F, T, T, T], [T, T, T, F]]
        assert library.get_pattern("beacon").to_list() == [
            [T, T, F, F],
            [T, T, F, F],
            [F, F, T, T],
            [F, F, T, T],
        ]
        assert library.get_pattern("oscillator").to_list() == [[T, T, T]]
        assert library.get_pattern("spaceship").to_list() == [
            [F, T, T, F],
            [T, F, F, T],
            [F, T, F, T],
            [F, F, T, T],
        ]

    def test_pulsar_layout(self):
        """Test the pulsar table."""
        pulsar = PatternLibrary().get_pattern("pulsar")
        spoke = [F, F, F, T, F, F, F, T, F, F, F]
        bar = [T, T, T, F, T, T, T, F, T, T, T]

        assert pulsar.size == (11, 11)
        for index, row in enumerate(pulsar.to_list()):
            assert row == (bar if index in (3, 7) else spoke)
        assert pulsar == pulsar.rotated(90)

    def test_get_pattern_returns_copy(self):
        """Test that callers cannot affect the catalog."""
        library = PatternLibrary()
        assert library.get_pattern("glider") is not library.get_pattern("glider")

    def test_unknown_pattern(self):
        """Test lookup of a missing name."""
        assert PatternLibrary().get_pattern("NonExistent") is None

    def test_categories(self):
        """Test category grouping."""
        categories = PatternLibrary().get_patterns_by_category()
        assert "glider" in categories["Spaceships"]
        assert "blinker" in categories["Oscillators"]


class TestPatternBuilder:
    """Test staged pattern construction."""

    def test_select_and_build(self):
        """Test building a catalog pattern."""
        pattern = PatternBuilder().select_type("toad").build()
        assert pattern.name == "toad"
        assert pattern.size == (2, 4)

    def test_chained_rotation(self):
        """Test select, rotate and build in one chain."""
        pattern = PatternBuilder().select_type("blinker").rotate("right").build()
        assert pattern.to_list() == [[T, T, T]]

    @pytest.mark.parametrize(
        "orientation,degrees",
        [("up", 0), ("right", 90), ("down", 180), ("left", 270)],
    )
    def test_orientations(self, orientation, degrees):
        """Test that each orientation rotates by its angle."""
        built = PatternBuilder().select_type("spaceship").rotate(orientation).build()
        expected = PatternLibrary().get_pattern("spaceship").rotated(degrees)
        assert built == expected

    def test_build_without_select(self):
        """Test that building with no selection gives an empty pattern."""
        pattern = PatternBuilder().build()
        assert pattern.is_empty

    def test_rotate_without_select(self):
        """Test that rotating nothing is harmless."""
        pattern = PatternBuilder().rotate(Orientation.DOWN).build()
        assert pattern.is_empty

    def test_unknown_name(self):
        """Test that an unknown name raises instead of leaving an empty shape."""
        with pytest.raises(UnknownPatternName) as excinfo:
            PatternBuilder().select_type("lwss")
        assert "glider" in str(excinfo.value)

    def test_unknown_orientation(self):
        """Test that an unknown orientation raises ValueError."""
        with pytest.raises(ValueError):
            PatternBuilder().select_type("glider").rotate("north")

    def test_build_is_not_aliased(self):
        """Test that later builder calls do not change an earlier build."""
        builder = PatternBuilder().select_type("toad")
        first = builder.build()
        builder.rotate("right")
        second = builder.build()

        assert first.size == (2, 4)
        assert second.size == (4, 2)
