import math

import pytest

from beltworks.catalog import Coord, RouteData, TransitCatalog, calc_distance


def test_distance_to_same_point_is_zero():
    lat, lon = math.radians(55.6), math.radians(37.2)
    assert calc_distance(lat, lon, lat, lon) == pytest.approx(0.0, abs=1e-3)


def test_distance_is_symmetric():
    a = (math.radians(55.611087), math.radians(37.20829))
    b = (math.radians(55.595884), math.radians(37.209755))
    assert calc_distance(*a, *b) == pytest.approx(calc_distance(*b, *a))


def test_distance_along_equator_is_additive():
    quarter = calc_distance(0.0, 0.0, 0.0, math.pi / 2)
    half = calc_distance(0.0, 0.0, 0.0, math.pi)
    assert half == pytest.approx(2 * quarter)


def _catalog_with_three_stops():
    catalog = TransitCatalog()
    catalog.add_stop("A", Coord(math.radians(55.611087), math.radians(37.20829)))
    catalog.add_stop("B", Coord(math.radians(55.595884), math.radians(37.209755)))
    catalog.add_stop("C", Coord(math.radians(55.632761), math.radians(37.333324)))
    return catalog


def _dist(catalog_coords, first, second):
    a, b = catalog_coords[first], catalog_coords[second]
    return calc_distance(a.latitude, a.longitude, b.latitude, b.longitude)


def test_linear_route_counts_and_length():
    catalog = _catalog_with_three_stops()
    catalog.add_route(750, ["A", "B", "C"], False)
    route = catalog.route_data(750)
    assert route.stops_count() == 5
    assert route.unique_stops_count() == 3
    coords = {
        "A": Coord(math.radians(55.611087), math.radians(37.20829)),
        "B": Coord(math.radians(55.595884), math.radians(37.209755)),
        "C": Coord(math.radians(55.632761), math.radians(37.333324)),
    }
    one_way = _dist(coords, "A", "B") + _dist(coords, "B", "C")
    assert route.route_length() == pytest.approx(2 * one_way)


def test_cyclic_route_counts_and_length():
    catalog = _catalog_with_three_stops()
    catalog.add_route(1, ["A", "B", "A"], True)
    route = catalog.route_data(1)
    assert route.stops_count() == len(route.route)
    assert route.unique_stops_count() == 2
    assert route.is_cyclic
    linear = TransitCatalog()
    linear.add_stop("A", Coord(math.radians(55.611087), math.radians(37.20829)))
    linear.add_stop("B", Coord(math.radians(55.595884), math.radians(37.209755)))
    linear.add_route(2, ["A", "B"], False)
    assert route.route_length() == pytest.approx(linear.route_data(2).route_length())


def test_missing_coordinates_raise():
    catalog = TransitCatalog()
    catalog.add_route(5, ["X", "Y"], False)
    with pytest.raises(RuntimeError, match="stop data was not set"):
        catalog.route_data(5).route_length()


def test_stop_added_later_is_seen_by_route():
    catalog = TransitCatalog()
    catalog.add_route(5, ["X", "Y"], False)
    assert catalog.add_stop("X", Coord(0.0, 0.0)) is False
    assert catalog.add_stop("Y", Coord(0.0, 0.5)) is False
    expected = 2 * calc_distance(0.0, 0.0, 0.0, 0.5)
    assert catalog.route_data(5).route_length() == pytest.approx(expected)


def test_add_stop_reports_insertion_and_updates():
    catalog = TransitCatalog()
    assert catalog.add_stop("S", Coord(0.0, 0.0)) is True
    assert catalog.add_stop("S", Coord(0.0, 1.0)) is False
    catalog.add_stop("T", Coord(0.0, 0.0))
    catalog.add_route(3, ["S", "T"], False)
    assert catalog.route_data(3).route_length() == pytest.approx(
        2 * calc_distance(0.0, 1.0, 0.0, 0.0)
    )


def test_add_stop_without_coord_keeps_existing():
    catalog = TransitCatalog()
    catalog.add_stop("S", Coord(0.0, 0.3))
    catalog.add_stop("S", None)
    catalog.add_stop("T", Coord(0.0, 0.0))
    catalog.add_route(3, ["S", "T"], True)
    assert catalog.route_data(3).route_length() == pytest.approx(
        calc_distance(0.0, 0.3, 0.0, 0.0)
    )


def test_unknown_route_is_none():
    assert TransitCatalog().route_data(42) is None


def test_existing_route_is_not_replaced():
    catalog = TransitCatalog()
    catalog.add_route(7, ["A", "B"], False)
    catalog.add_route(7, ["C", "D", "E"], True)
    assert catalog.route_data(7).route == ("A", "B")


def test_route_data_direct_construction():
    stops = {"P": Coord(0.0, 0.0), "Q": Coord(0.0, 0.2)}
    route = RouteData(stops, ["P", "Q", "P"], True)
    assert route.route_length() == pytest.approx(2 * calc_distance(0.0, 0.0, 0.0, 0.2))