"""Letter case conversion of path names."""

from collections.abc import Callable

from .core import LetterCase

_CONVERTERS: dict[LetterCase, Callable[[str], str]] = {
    LetterCase.UPPER: str.upper,
    LetterCase.LOWER: str.lower,
}


def convert_case(name: str, case: LetterCase) -> str:
    """Convert every case-bearing character of ``name`` to ``case``.

    Characters without case (digits, punctuation, dots) are left alone, so
    ``baz.zip`` becomes ``BAZ.ZIP`` and ``12345`` stays ``12345``.
    """
    return _CONVERTERS[case](name)
