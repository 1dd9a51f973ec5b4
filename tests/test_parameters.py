import pytest

from mcoptions.parameters import (
    Parameters,
    ParametersConstant,
    ParametersPiecewiseConstant,
)


def test_parameters_is_abstract():
    with pytest.raises(TypeError):
        Parameters()


@pytest.mark.parametrize("value", [0.2, 0.05, -0.01, 1.5])
def test_constant_mean_is_the_constant(value):
    param = ParametersConstant(value)
    assert param.mean(0.0, 2.0) == pytest.approx(value)
    assert param.mean(1.0, 4.5) == pytest.approx(value)


@pytest.mark.parametrize("value", [0.2, 0.3, 1.5])
def test_constant_root_mean_square_is_mean_square(value):
    param = ParametersConstant(value)
    assert param.root_mean_square(0.0, 3.0) == pytest.approx(value * value)


def test_constant_integral_is_additive():
    param = ParametersConstant(0.25)
    whole = param.integral(0.0, 3.0)
    assert param.integral(0.0, 1.0) + param.integral(1.0, 3.0) == pytest.approx(whole)
    whole_sq = param.integral_square(0.0, 3.0)
    assert param.integral_square(0.0, 1.0) + param.integral_square(
        1.0, 3.0
    ) == pytest.approx(whole_sq)


def test_constant_integral_over_empty_interval_is_zero():
    param = ParametersConstant(0.4)
    assert param.integral(2.0, 2.0) == 0.0
    assert param.integral_square(2.0, 2.0) == 0.0


def test_constant_mean_over_empty_interval_raises():
    with pytest.raises(ZeroDivisionError):
        ParametersConstant(0.4).mean(1.0, 1.0)


def test_constant_integral_square_matches_square_constant_integral():
    value = 0.3
    assert ParametersConstant(value).integral_square(0.0, 2.0) == pytest.approx(
        ParametersConstant(value * value).integral(0.0, 2.0)
    )


def test_constant_clone_is_equal_and_distinct():
    param = ParametersConstant(0.2)
    cloned = param.clone()
    assert cloned == param
    assert cloned is not param
    assert cloned.integral(0.0, 1.0) == param.integral(0.0, 1.0)


def test_piecewise_single_piece_matches_constant():
    expiry = 2.0
    value = 0.03
    piecewise = ParametersPiecewiseConstant([(expiry, value)])
    constant = ParametersConstant(value)
    assert piecewise.integral(0.0, expiry) == pytest.approx(
        constant.integral(0.0, expiry)
    )
    assert piecewise.integral_square(0.0, expiry) == pytest.approx(
        constant.integral_square(0.0, expiry)
    )


def test_piecewise_equal_values_match_constant():
    expiry = 3.0
    value = 0.02
    piecewise = ParametersPiecewiseConstant(
        [(expiry / 3, value), (2 * expiry / 3, value), (expiry, value)]
    )
    constant = ParametersConstant(value)
    assert piecewise.integral(0.0, expiry) == pytest.approx(
        constant.integral(0.0, expiry)
    )
    assert piecewise.mean(0.0, expiry) == pytest.approx(value)


def test_piecewise_three_even_pieces_average_to_middle_rate():
    expiry = 1.5
    t_piece = expiry / 3
    param = ParametersPiecewiseConstant(
        [(t_piece, 0.015), (t_piece * 2, 0.02), (t_piece * 3, 0.025)]
    )
    assert param.integral(0.0, expiry) == pytest.approx(
        ParametersConstant(0.02).integral(0.0, expiry)
    )


def test_piecewise_integral_square_squares_each_value():
    pieces = [(0.5, 0.1), (1.0, 0.2), (2.0, 0.3)]
    param = ParametersPiecewiseConstant(pieces)
    squared = ParametersPiecewiseConstant([(t, v * v) for t, v in pieces])
    assert param.integral_square(0.0, 2.0) == pytest.approx(squared.integral(0.0, 2.0))


def test_piecewise_ignores_time_arguments():
    param = ParametersPiecewiseConstant([(1.0, 0.01), (2.0, 0.04)])
    assert param.integral(0.0, 2.0) == param.integral(5.0, 7.0)
    assert param.integral_square(0.0, 2.0) == param.integral_square(3.0, 9.0)


def test_piecewise_str_lists_pieces():
    param = ParametersPiecewiseConstant([(1.0, 0.015), (2.0, 0.02)])
    assert str(param) == "(time=1, value=0.015)\n(time=2, value=0.02)\n"


def test_piecewise_accepts_generator():
    param = ParametersPiecewiseConstant((t, 0.1) for t in (1.0, 2.0))
    assert param.pieces == ((1.0, 0.1), (2.0, 0.1))


def test_piecewise_empty_raises():
    with pytest.raises(ValueError):
        ParametersPiecewiseConstant([])


def test_piecewise_clone_is_deep_and_equal():
    param = ParametersPiecewiseConstant([(1.0, 0.015), (2.0, 0.02)])
    cloned = param.clone()
    assert cloned == param
    assert cloned is not param
    assert cloned.integral(0.0, 2.0) == param.integral(0.0, 2.0)