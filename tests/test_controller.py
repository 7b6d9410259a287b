import threading

import pytest
from conftest import at, make_trip

from bikeflow.traffic.controller import RecomputeController, StationView
from bikeflow.traffic.types import ANY_TIME, Station


def _by_key(view):
    return {s.key: s for s in view.stations}


def test_initial_view_is_unfiltered(stations, trips):
    controller = RecomputeController(stations, trips)
    view = controller.view

    assert controller.time_filter == ANY_TIME
    assert not view.is_filtered
    assert view.selected_time == ""

    a = _by_key(view)["A"]
    assert (a.departures, a.arrivals, a.total_traffic) == (1, 1, 2)
    assert a.tooltip_text == "2 trips (1 departures, 1 arrivals)"
    assert a.radius == pytest.approx(40)
    assert a.flow_bucket == 0.5


def test_window_without_trips_goes_neutral(stations, trips):
    controller = RecomputeController(stations, trips)
    view = controller.select_time(600)

    assert controller.time_filter == 600
    assert view.is_filtered
    assert view.selected_time == "10:00 AM"
    for s in view.stations:
        assert s.total_traffic == 0
        assert s.flow_bucket == 0.5
        # radius domain stays fixed from the full dataset
        assert s.radius == pytest.approx(2)


def test_window_with_all_trips_matches_unfiltered(stations, trips):
    controller = RecomputeController(stations, trips)
    unfiltered = controller.view

    view = controller.select_time(480)

    assert view.selected_time == "8:00 AM"
    assert [(s.key, s.total_traffic, s.radius) for s in view.stations] == [
        (s.key, s.total_traffic, s.radius) for s in unfiltered.stations
    ]


def test_filters_do_not_stack(stations, trips):
    controller = RecomputeController(stations, trips)
    controller.select_time(600)
    view = controller.select_time(480)

    assert {k: s.total_traffic for k, s in _by_key(view).items()} == {"A": 2, "B": 2}

    view = controller.select_time(ANY_TIME)
    assert view.selected_time == ""
    assert {k: s.total_traffic for k, s in _by_key(view).items()} == {"A": 2, "B": 2}


def test_radius_domain_fixed_across_filters():
    stations = [
        Station(short_name="A", name="A", lon=0.0, lat=0.0),
        Station(short_name="B", name="B", lon=0.0, lat=0.0),
    ]
    trips = [make_trip("A", "A", at(8, 0), at(8, 5)) for _ in range(8)]
    trips.append(make_trip("B", "B", at(18, 0), at(18, 5)))

    controller = RecomputeController(stations, trips)
    assert controller.radius_scale.domain == (0, 16)

    evening = _by_key(controller.select_time(1080))
    # B has 2 of a possible 16: not scaled up to the max radius
    assert evening["B"].radius == pytest.approx(controller.radius_scale(2))
    assert evening["B"].radius < 40
    assert controller.radius_scale.domain == (0, 16)


def test_flow_bucket_follows_departure_ratio():
    stations = [
        Station(short_name="A", name="A", lon=0.0, lat=0.0),
        Station(short_name="B", name="B", lon=0.0, lat=0.0),
    ]
    trips = [make_trip("A", "B", at(8, 0), at(8, 5)) for _ in range(3)]

    view = RecomputeController(stations, trips).view
    assert _by_key(view)["A"].flow_bucket == 1.0
    assert _by_key(view)["B"].flow_bucket == 0.0


def test_views_are_fresh_values(stations, trips):
    controller = RecomputeController(stations, trips)
    first = controller.view

    controller.select_time(600)

    assert _by_key(first)["A"].total_traffic == 2
    assert isinstance(first.stations[0], StationView)
    with pytest.raises(AttributeError):
        first.stations[0].radius = 1.0


@pytest.mark.parametrize("bad", [1440, -2, 3.5, None, "480"])
def test_rejects_invalid_selection(stations, trips, bad):
    controller = RecomputeController(stations, trips)
    with pytest.raises(ValueError):
        controller.select_time(bad)
    assert controller.time_filter == ANY_TIME


def test_to_dict_shape(stations, trips):
    data = RecomputeController(stations, trips).select_time(480).to_dict()

    assert data["time_filter"] == 480
    assert data["selected_time"] == "8:00 AM"
    assert data["is_filtered"] is True
    assert {"key", "radius", "flow_bucket", "tooltip_text"} <= set(data["stations"][0])


def test_concurrent_selections_each_get_their_own_view(stations, trips):
    controller = RecomputeController(stations, trips)
    results = {}

    def run(t):
        results[t] = controller.select_time(t)

    threads = [threading.Thread(target=run, args=(t,)) for t in (480, 600) * 10]
    for th in threads:
        th.start()
    for th in threads:
        th.join()

    assert results[480].time_filter == 480
    assert all(s.total_traffic == 2 for s in results[480].stations)
    assert all(s.total_traffic == 0 for s in results[600].stations)
