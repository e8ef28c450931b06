from quickshapes.color import Color
from quickshapes.points import PointsItem


def test_defaults():
    item = PointsItem()
    assert item.color == Color.from_name("blue")
    assert item.point_size == 3.0
    assert item.vertices() == []


def test_vertices_scaled_by_size():
    item = PointsItem(width=200.0, height=100.0, x_positions=[0.0, 0.5, 1.0],
                      y_positions=[1.0, 0.5, 0.0])
    assert item.vertices() == [(0.0, 100.0), (100.0, 50.0), (200.0, 0.0)]


def test_shorter_list_limits_count():
    item = PointsItem(width=10.0, height=10.0, x_positions=[0.1, 0.2, 0.3],
                      y_positions=[0.4])
    vertices = item.vertices()
    assert len(vertices) == 1
    assert vertices[0][0] == 10.0 * 0.1


def test_hidden_item_has_no_vertices():
    item = PointsItem(width=10.0, height=10.0, x_positions=[0.5], y_positions=[0.5],
                      visible=False)
    assert item.vertices() == []


def test_scaled_point_size():
    item = PointsItem(point_size=4.0, device_pixel_ratio=2.0)
    assert item.scaled_point_size == 8.0


def test_vertices_stay_inside_item():
    item = PointsItem(width=30.0, height=40.0, x_positions=[0.0, 0.25, 0.9],
                      y_positions=[0.3, 1.0, 0.0])
    for x, y in item.vertices():
        assert 0.0 <= x <= item.width
        assert 0.0 <= y <= item.height