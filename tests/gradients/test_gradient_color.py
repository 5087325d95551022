import logging

import pytest

from chromapick.gradients import (
    GradientColor,
    GradientStop,
    DirectionMode,
    DEFAULT_STOPS,
)


@pytest.fixture
def two_stops():
    return GradientColor(stops=[
        {"color": "#000", "position": "100%"},
        {"color": "#fff", "position": "0%"},
    ])


def test_default_gradient():
    g = GradientColor()
    assert g.direction == 90
    assert g.stops == list(DEFAULT_STOPS)
    assert g.to_string() == "linear-gradient(90deg,#ffffff 0%,#000000 100%)"


def test_construction_sorts_stops(two_stops):
    assert [(s.color, s.position) for s in two_stops.stops] == [("#fff", "0%"), ("#000", "100%")]
    assert two_stops.to_string() == "linear-gradient(90deg,#fff 0%,#000 100%)"
    assert str(two_stops) == two_stops.to_string()


def test_stops_sorted_numerically_not_lexically():
    g = GradientColor("0deg", [("#a", "100%"), ("#b", "20%"), ("#c", "3.5%"), ("#d", "-10%")])
    assert [s.position for s in g.stops] == ["-10%", "3.5%", "20%", "100%"]


def test_sort_is_stable_for_equal_positions():
    g = GradientColor(stops=[("#a", "50%"), ("#b", "0%"), ("#c", "50%")])
    assert [s.color for s in g.stops] == ["#b", "#a", "#c"]


def test_positions_without_number_sort_last():
    g = GradientColor(stops=[("#a", ""), ("#b", "10%")])
    assert [s.color for s in g.stops] == ["#b", "#a"]


def test_stops_setter_sorts_on_assignment(two_stops):
    two_stops.stops = [GradientStop("#f00", "75%"), GradientStop("#0f0", "25%")]
    assert [s.color for s in two_stops.stops] == ["#0f0", "#f00"]


def test_stops_getter_returns_copy(two_stops):
    stops = two_stops.stops
    stops.append(GradientStop("#123", "50%"))
    assert len(two_stops) == 2


def test_instances_do_not_share_stops():
    a = GradientColor()
    b = GradientColor()
    a.set_stop_color(0, "#123456")
    assert b.stops[0].color == "#ffffff"
    assert DEFAULT_STOPS[0].color == "#ffffff"


def test_caller_list_is_not_mutated():
    given = [("#000", "100%"), ("#fff", "0%")]
    GradientColor(stops=given)
    assert given == [("#000", "100%"), ("#fff", "0%")]


def test_invalid_stop_values():
    with pytest.raises(ValueError, match="position"):
        GradientColor(stops=[{"color": "#fff"}])
    with pytest.raises(TypeError):
        GradientColor(stops=[42])


def test_set_stop_color(two_stops):
    two_stops.set_stop_color(1, "#123456")
    assert two_stops.stops[1] == GradientStop("#123456", "100%")
    assert two_stops.to_string() == "linear-gradient(90deg,#fff 0%,#123456 100%)"


@pytest.mark.parametrize("index", [2, 5, -1, -3])
def test_set_stop_color_out_of_bounds_is_ignored(two_stops, index, caplog):
    before = two_stops.copy()
    with caplog.at_level(logging.DEBUG, logger="chromapick.gradients.gradient_color"):
        two_stops.set_stop_color(index, "#123456")
    assert two_stops == before
    assert "out of 2" in caplog.text


def test_set_gradient_index_is_deprecated(two_stops):
    with pytest.warns(DeprecationWarning, match="set_stop_color"):
        two_stops.set_gradient_index(0, "#abcdef")
    assert two_stops.stops[0].color == "#abcdef"


def test_direction_getter_parses_integer_part():
    assert GradientColor("45deg").direction == 45
    assert GradientColor("45.9deg").direction == 45
    assert GradientColor("to right").direction is None


def test_direction_setter_clamps_by_default():
    g = GradientColor()
    g.direction = 400
    assert g.direction == 360
    assert g.direction_string == "360deg"
    g.direction = -20
    assert g.direction == 0
    g.direction = 135
    assert g.to_string().startswith("linear-gradient(135deg,")


def test_direction_setter_wrap():
    g = GradientColor(direction_mode=DirectionMode.WRAP)
    g.direction = 370
    assert g.direction == 10
    g.direction = -90
    assert g.direction == 270
    g.direction = 360
    assert g.direction == 0


def test_direction_setter_unclamped_keeps_raw_value():
    g = GradientColor(direction_mode="unclamped")
    g.direction = 400
    assert g.direction == 400
    assert g.direction_string == "400deg"


def test_direction_setter_truncates_floats():
    g = GradientColor()
    g.direction = 45.7
    assert g.direction_string == "45deg"


def test_numeric_direction_in_constructor_goes_through_setter():
    assert GradientColor(720).direction == 360
    assert GradientColor(720, direction_mode=DirectionMode.WRAP).direction == 0


@pytest.mark.parametrize("mode", list(DirectionMode))
@pytest.mark.parametrize("degrees", [float("nan"), float("inf"), float("-inf")])
def test_direction_setter_rejects_non_finite(mode, degrees):
    g = GradientColor("45deg", direction_mode=mode)
    with pytest.raises(ValueError, match="finite"):
        g.direction = degrees
    assert g.direction_string == "45deg"


def test_empty_model_serializes_without_stops():
    g = GradientColor("45deg", [])
    assert len(g) == 0
    assert g.to_string() == "linear-gradient(45deg)"


def test_equality_and_copy(two_stops):
    clone = two_stops.copy()
    assert clone == two_stops
    assert clone is not two_stops
    clone.set_stop_color(0, "#111")
    assert clone != two_stops


def test_iteration(two_stops):
    assert [s.color for s in two_stops] == ["#fff", "#000"]
