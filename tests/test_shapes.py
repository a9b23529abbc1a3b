import pytest

from tddkit.shapes import Circle, Rectangle, Shape, Triangle, perimeter


def test_perimeter():
    assert perimeter(Rectangle(4.0, 5.0)) == 18.0


@pytest.mark.parametrize(
    "shape, expected",
    [
        (Rectangle(width=12, height=6), 72.0),
        (Circle(radius=10), 314.1592653589793),
        (Triangle(base=12, height=6), 36.0),
    ],
)
def test_area(shape, expected):
    assert shape.area() == expected


def test_shape_is_abstract():
    with pytest.raises(TypeError):
        Shape()