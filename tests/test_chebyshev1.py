import math

import pytest

from iirkit.chebyshev1 import AnalogLowPass, AnalogLowShelf

# Ripple for which the ripple factor epsilon is exactly one.
_UNIT_EPS_RIPPLE = 10 * math.log10(2)


def _poles(layout):
    result = []
    for pair in layout:
        if pair.is_single_pole():
            result.append(pair.poles[0])
        else:
            result.extend(pair.poles)
    return result


def _zeros(layout):
    result = []
    for pair in layout:
        if pair.is_single_pole():
            result.append(pair.zeros[0])
        else:
            result.extend(pair.zeros)
    return result


def test_first_order_unit_eps_pole():
    proto = AnalogLowPass()
    proto.design(1, _UNIT_EPS_RIPPLE)
    assert proto[0].is_single_pole()
    assert proto[0].poles[0].real == pytest.approx(-1.0)
    assert proto[0].poles[0].imag == 0


@pytest.mark.parametrize("order", [2, 3, 4, 5, 6])
@pytest.mark.parametrize("ripple", [0.5, 1.0, 3.0])
def test_poles_lie_on_ellipse_with_foci_at_unit_j(order, ripple):
    proto = AnalogLowPass()
    proto.design(order, ripple)
    poles = _poles(proto)
    assert len(poles) == order
    sums = [abs(p - 1j) + abs(p + 1j) for p in poles]
    for s in sums:
        assert s == pytest.approx(sums[0])
    assert all(p.real < 0 for p in poles)


@pytest.mark.parametrize("order", [2, 3, 4])
def test_zeros_at_infinity(order):
    proto = AnalogLowPass()
    proto.design(order, 1.0)
    zeros = _zeros(proto)
    assert len(zeros) == order
    assert [math.isinf(z.real) for z in zeros] == [True] * order


@pytest.mark.parametrize("ripple", [0.5, 1.0, 2.0])
def test_even_order_normalised_below_unity(ripple):
    proto = AnalogLowPass()
    proto.design(4, ripple)
    assert proto.normal_w == 0.0
    assert proto.normal_gain == pytest.approx(10 ** (-ripple / 20))


def test_odd_order_normalised_to_unity():
    proto = AnalogLowPass()
    proto.design(3, 1.0)
    assert proto.normal_gain == 1.0
    assert proto[1].is_single_pole()


def test_same_design_is_not_duplicated():
    proto = AnalogLowPass()
    proto.design(4, 1.0)
    proto.design(4, 1.0)
    assert proto.num_poles == 4
    assert len(proto) == 2


def test_ripple_change_moves_poles():
    proto = AnalogLowPass()
    proto.design(2, 0.5)
    small = _poles(proto)[0]
    proto.design(2, 3.0)
    large = _poles(proto)[0]
    assert abs(large.real) < abs(small.real)


def test_non_positive_ripple_rejected():
    with pytest.raises(ValueError):
        AnalogLowPass().design(4, 0.0)


def test_zero_order_rejected():
    with pytest.raises(ValueError):
        AnalogLowPass().design(0, 1.0)


def test_max_poles_enforced():
    proto = AnalogLowPass(max_poles=2)
    with pytest.raises(ValueError):
        proto.design(4, 1.0)


def test_shelf_normalisation_point():
    proto = AnalogLowShelf()
    assert proto.normal_w == math.pi
    assert proto.normal_gain == 1.0


def test_shelf_ripple_clamped_to_gain():
    clamped = AnalogLowShelf()
    clamped.design(4, 3.0, 10.0)
    exact = AnalogLowShelf()
    exact.design(4, 3.0, 3.0)
    assert _poles(clamped) == pytest.approx(_poles(exact))
    assert _zeros(clamped) == pytest.approx(_zeros(exact))


@pytest.mark.parametrize("order", [1, 2, 3, 4, 5])
def test_shelf_pole_count_and_structure(order):
    proto = AnalogLowShelf()
    proto.design(order, 6.0, 1.0)
    assert proto.num_poles == order
    assert len(_poles(proto)) == order
    assert len(_zeros(proto)) == order
    if order % 2:
        assert proto[order // 2].is_single_pole()


def test_shelf_pairs_are_conjugate():
    proto = AnalogLowShelf()
    proto.design(4, -6.0, 1.0)
    for pair in proto:
        assert pair.poles[1] == pair.poles[0].conjugate()
        assert pair.zeros[1] == pair.zeros[0].conjugate()


def test_shelf_redesigns_on_gain_change():
    proto = AnalogLowShelf()
    proto.design(2, 6.0, 1.0)
    first = _zeros(proto)
    proto.design(2, 12.0, 1.0)
    assert proto.num_poles == 2
    assert _zeros(proto) != pytest.approx(first)


def test_shelf_zero_gain_rejected():
    with pytest.raises(ValueError):
        AnalogLowShelf().design(4, 0.0, 1.0)


def test_shelf_zero_order_rejected():
    with pytest.raises(ValueError):
        AnalogLowShelf().design(0, 6.0, 1.0)