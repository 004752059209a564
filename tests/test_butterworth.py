import cmath
import math

import pytest

from iirkit.butterworth import AnalogLowPass, AnalogLowShelf


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


@pytest.mark.parametrize("order", [1, 2, 3, 4, 5, 6, 8])
def test_lowpass_poles_on_left_unit_circle(order):
    proto = AnalogLowPass()
    proto.design(order)
    poles = _poles(proto)
    assert proto.num_poles == order
    assert len(poles) == order
    for pole in poles:
        assert abs(pole) == pytest.approx(1.0)
        assert pole.real < 0


@pytest.mark.parametrize("order", [2, 3, 4])
def test_lowpass_zeros_at_infinity(order):
    proto = AnalogLowPass()
    proto.design(order)
    zeros = _zeros(proto)
    assert len(zeros) == order
    assert [math.isinf(z.real) for z in zeros] == [True] * order


@pytest.mark.parametrize("order", [2, 3, 4, 7])
def test_lowpass_unity_dc_and_half_power_at_cutoff(order):
    proto = AnalogLowPass()
    proto.design(order)
    poles = _poles(proto)

    def gain(s):
        h = complex(1)
        for p in poles:
            h *= -p / (s - p)
        return h

    assert abs(gain(0j)) == pytest.approx(1.0)
    assert abs(gain(1j)) == pytest.approx(1 / math.sqrt(2))


def test_lowpass_pairs_are_conjugate():
    proto = AnalogLowPass()
    proto.design(4)
    for pair in proto:
        assert pair.poles[1] == pair.poles[0].conjugate()


def test_lowpass_odd_order_ends_with_real_pole():
    proto = AnalogLowPass()
    proto.design(5)
    last = proto[2]
    assert last.is_single_pole()
    assert last.poles[0] == -1
    assert len(proto) == 3


def test_lowpass_normalisation_point():
    proto = AnalogLowPass()
    assert (proto.normal_w, proto.normal_gain) == (0.0, 1.0)


def test_lowpass_same_order_is_not_duplicated():
    proto = AnalogLowPass()
    proto.design(4)
    proto.design(4)
    assert proto.num_poles == 4
    assert len(proto) == 2


def test_lowpass_redesign_replaces_poles():
    proto = AnalogLowPass()
    proto.design(6)
    proto.design(3)
    assert proto.num_poles == 3
    assert len(_poles(proto)) == 3


def test_lowpass_respects_max_poles():
    proto = AnalogLowPass(max_poles=2)
    with pytest.raises(ValueError):
        proto.design(3)


def test_lowpass_negative_order_rejected():
    with pytest.raises(ValueError):
        AnalogLowPass().design(-1)


def test_shelf_normalisation_point():
    proto = AnalogLowShelf()
    assert proto.normal_w == math.pi
    assert proto.normal_gain == 1.0


@pytest.mark.parametrize("order", [1, 2, 3, 4])
@pytest.mark.parametrize("gain_db", [-6.0, 3.0, 12.0])
def test_shelf_dc_gain_matches_request(order, gain_db):
    proto = AnalogLowShelf()
    proto.design(order, gain_db)
    ratio = complex(1)
    for z, p in zip(_zeros(proto), _poles(proto)):
        ratio *= z / p
    assert abs(ratio) == pytest.approx(10 ** (gain_db / 20))


def test_shelf_zero_gain_puts_zeros_on_poles():
    proto = AnalogLowShelf()
    proto.design(4, 0.0)
    for z, p in zip(_zeros(proto), _poles(proto)):
        assert cmath.isclose(z, p)


def test_shelf_redesign_on_gain_change():
    proto = AnalogLowShelf()
    proto.design(2, 6.0)
    first = _zeros(proto)
    proto.design(2, -6.0)
    second = _zeros(proto)
    assert proto.num_poles == 2
    assert abs(first[0]) > abs(second[0])


def test_shelf_rejects_zero_order():
    with pytest.raises(ValueError):
        AnalogLowShelf().design(0, 6.0)