import pytest

from morphosis.quaternion import Quat
from morphosis.sampling import (
    Formula,
    JuliaParams,
    sample_julia_deep_zoom,
    sample_julia_formula,
    sample_mandelbrot,
)

ZERO_C = Quat(0.0, 0.0, 0.0, 0.0)


def zero_julia(max_iter=6):
    return JuliaParams(max_iter=max_iter, c=ZERO_C)


@pytest.mark.parametrize("formula", list(Formula))
def test_origin_with_zero_constant_is_inside(formula):
    assert sample_julia_formula(zero_julia(), (0.0, 0.0, 0.0), formula) == 1.0


@pytest.mark.parametrize("formula", list(Formula))
def test_far_point_escapes(formula):
    assert sample_julia_formula(zero_julia(), (3.0, 3.0, 3.0), formula) == 0.0


def test_formula_accepts_int_and_enum_alike():
    julia = JuliaParams()
    points = [(0.1, 0.2, 0.3), (1.0, -0.5, 0.2), (-0.3, 0.4, 0.0)]
    for f in Formula:
        for p in points:
            assert sample_julia_formula(julia, p, int(f)) == sample_julia_formula(
                julia, p, f
            )


def test_unknown_formula_falls_back_to_standard():
    julia = JuliaParams()
    points = [(0.1, 0.2, 0.3), (1.0, -0.5, 0.2), (2.5, 0.0, 0.0), (0.0, 0.0, 0.0)]
    for p in points:
        assert sample_julia_formula(julia, p, 7) == sample_julia_formula(
            julia, p, Formula.STANDARD
        )


def test_magnitude_formula_cancels_real_axis():
    # |z|^2 - z^2 vanishes for a purely real z, so a real point never escapes.
    assert sample_julia_formula(zero_julia(), (10.0, 0.0, 0.0), Formula.MAGNITUDE) == 1.0
    assert sample_julia_formula(zero_julia(), (10.0, 0.0, 0.0), Formula.STANDARD) == 0.0


def test_zero_iterations_is_always_inside():
    julia = zero_julia(max_iter=0)
    assert sample_julia_formula(julia, (100.0, 100.0, 100.0), Formula.CUBIC) == 1.0
    assert sample_mandelbrot(julia, (100.0, 0.0, 0.0)) == 1.0
    assert sample_julia_deep_zoom(julia, (100.0, 0.0, 0.0), 1.0) == 1.0


def test_escape_radii_differ_between_samplers():
    julia = zero_julia(max_iter=1)
    pos = (2.0, 0.0, 0.0)
    assert sample_julia_formula(julia, pos, Formula.STANDARD) == 1.0
    assert sample_julia_deep_zoom(julia, pos, 1.0) == 0.0


def test_deep_zoom_divides_position():
    julia = zero_julia()
    pos = (3.0, 3.0, 3.0)
    assert sample_julia_deep_zoom(julia, pos, 1.0) == 0.0
    assert sample_julia_deep_zoom(julia, pos, 1_000_000.0) == 1.0


def test_deep_zoom_divides_w():
    julia = JuliaParams(max_iter=6, w=5.0, c=ZERO_C)
    assert sample_julia_deep_zoom(julia, (0.0, 0.0, 0.0), 1.0) == 0.0
    assert sample_julia_deep_zoom(julia, (0.0, 0.0, 0.0), 1000.0) == 1.0


def test_deep_zoom_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        sample_julia_deep_zoom(JuliaParams(), (0.0, 0.0, 0.0), 0.0)


def test_mandelbrot_origin_inside_far_point_outside():
    julia = zero_julia()
    assert sample_mandelbrot(julia, (0.0, 0.0, 0.0)) == 1.0
    assert sample_mandelbrot(julia, (3.0, 0.0, 0.0)) == 0.0


def test_mandelbrot_uses_w_parameter():
    julia = JuliaParams(max_iter=6, w=3.0, c=ZERO_C)
    assert sample_mandelbrot(julia, (0.0, 0.0, 0.0)) == 0.0


def test_samplers_return_only_inside_or_outside():
    julia = JuliaParams()
    grid = [(x / 2, y / 2, 0.25) for x in range(-3, 4) for y in range(-3, 4)]
    values = {sample_julia_formula(julia, p, f) for p in grid for f in Formula}
    values |= {sample_mandelbrot(julia, p) for p in grid}
    values |= {sample_julia_deep_zoom(julia, p, 2.0) for p in grid}
    assert values <= {0.0, 1.0}
    assert values == {0.0, 1.0}


def test_formula_labels():
    assert Formula(1).label == "Cubic z³+c"
    assert Formula(3).label == "|z|²-z²+c"
    assert Formula(1) is Formula.CUBIC