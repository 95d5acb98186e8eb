from imgsizes.values import is_calc, is_length, is_unitless_zero, is_valid_non_negative_source_size_value, LENGTH_UNITS

import pytest

@pytest.mark.parametrize('unit', LENGTH_UNITS)
def test_length_units(unit):
    assert is_length('1' + unit)
    assert is_length('0.5' + unit.upper())

@pytest.mark.parametrize('value', ['1px', '+1px', '050ch', '.1px', '0.1em', '-0px', '-0e-0px', '0.2e1px', '0.3E1px', '.4E1px', '1e+2vw', '1PX'])
def test_lengths(value):
    assert is_length(value)

@pytest.mark.parametrize('value', ['-1px', '-1e0px', '+0.11e+01px', '1e1.5px', '1', 'px', '1 px', '1q', '0.1%', '1px ', '\\1px', '1\u0131n', '1vm\u0131n'])
def test_not_lengths(value):
    assert not is_length(value)

@pytest.mark.parametrize('value', ['0.1deg', '0.1grad', '0.1rad', '0.1turn', '0.1s', '0.1ms', '0.1Hz', '0.1kHz', '0.1dpi', '0.1dpcm', '0.1dppx', '0.1%', '100%'])
def test_disallowed_units(value):
    assert not is_valid_non_negative_source_size_value(value)

@pytest.mark.parametrize('value, expected', [('0', True), ('-0', True), ('+0', True), ('00', False), ('0.0', False), ('1', False), ('', False)])
def test_unitless_zero(value, expected):
    assert is_unitless_zero(value) is expected

@pytest.mark.parametrize('value', ['calc(1px)', 'calc(5px + 5px)', 'calc((5px + 5px)*2)', 'calc(200px * 1.4)', 'calc(20.2em + 10px)', 'CALC(100vw - 2em)', 'calc(1px))'])
def test_calc(value):
    assert is_calc(value)

@pytest.mark.parametrize('value', ['calc(1px', 'calc()', 'calc(1px) ', 'calc(50% - 1px)', 'xcalc(1px)', 'min(1px, 2px)', 'calc(\u212a)', 'calc(1\u017fpx)', 'calc(1\u0131n)'])
def test_not_calc(value):
    assert not is_calc(value)

@pytest.mark.parametrize('value', ['inherit', 'auto', 'initial', 'unset', 'default', 'var(--foo)', 'toggle(1px)', 'attr(data-foo, px, 1px)', '!important', ''])
def test_invalid_source_size_values(value):
    assert not is_valid_non_negative_source_size_value(value)
