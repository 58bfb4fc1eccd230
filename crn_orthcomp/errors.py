"""Error and warning types raised by the pipeline."""

from __future__ import annotations


class MalformedNetworkError(ValueError):
    """A reaction or complex is inconsistent.

    Raised for a species listed twice in one complex, a species missing from
    the species list, a species/stoichiometry length mismatch, or a
    coefficient that is not a finite real number.
    """


class NumericToleranceAmbiguity(UserWarning):
    """A pivot was accepted with a magnitude barely above the zero tolerance.

    Pivot selection may then depend on rounding; pass an explicit ``tol`` to
    make the choice deliberate.
    """
