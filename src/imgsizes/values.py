"""Validation of `<source-size-value>` component values, the lengths permitted in a `sizes` attribute.

The `<source-size-value>` production is defined (see http://html.spec.whatwg.org/multipage/images.html#sizes-attributes) in terms of the `<length>` type of the ["CSS Values and Units Module"](http://drafts.csswg.org/css-values-4/#lengths) specification, with percentages explicitly disallowed and the value required to be non-negative. Only the subset of the type we can reasonably check without a CSS parser, is implemented:

* a number immediately followed by one of the units in `LENGTH_UNITS`, compared ASCII case-insensitively (http://www.w3.org/TR/CSS2/syndata.html#characters)
* unitless zero, optionally signed -- "-0 is equivalent to 0 and is not a negative number" (http://www.w3.org/TR/CSS2/syndata.html#numbers)
* a `calc()` expression, checked only for consisting of characters that may occur in one; there is no attempt at parsing the expression
"""

import re

LENGTH_UNITS = ('ch', 'cm', 'em', 'ex', 'in', 'mm', 'pc', 'pt', 'px', 'rem', 'vh', 'vmin', 'vmax', 'vw') # The units a `<source-size-value>` length may be expressed in

length_pattern = re.compile(r'(?P<number>(?:[+-]?[0-9]+|[0-9]*\.[0-9]+)(?:[eE][+-]?[0-9]+)?)(?:' + '|'.join(LENGTH_UNITS) + ')', re.IGNORECASE | re.ASCII) # A sign is only permitted with an integer mantissa, e.g. `+0.11e+01px` does not match
calc_pattern = re.compile(r'calc\([0-9a-z .+\-*/()]+\)', re.IGNORECASE | re.ASCII) # Matching parentheses inside the expression is beyond a regular expression (and is not attempted), so e.g. `calc(1px))` matches while `calc(1px` does not

def is_length(value: str) -> bool:
    """Determine whether a component value is a non-negative length with one of the allowed units.

    E.g. `"1px"`, `".4E1px"` and `"-0e-0px"` (the value being negative zero) are lengths, while `"-1e0px"`, `"0.1%"` and `"1q"` are not.
    """
    if (m := length_pattern.fullmatch(value)) is None:
        return False
    return float(m['number']) >= 0

def is_unitless_zero(value: str) -> bool:
    return value in ('0', '-0', '+0')

def is_calc(value: str) -> bool:
    """Determine whether a component value is a `calc()` expression, in the lenient sense described by the module documentation."""
    return calc_pattern.fullmatch(value) is not None

def is_valid_non_negative_source_size_value(value: str) -> bool:
    """Determine whether a component value is a valid non-negative `<source-size-value>`.

    Any CSS function other than `calc()` is invalid, as are keywords (e.g. `auto` or `inherit`) and percentages.

    See step 2 of http://html.spec.whatwg.org/multipage/images.html#parse-a-sizes-attribute.
    """
    return is_length(value) or is_unitless_zero(value) or is_calc(value)
