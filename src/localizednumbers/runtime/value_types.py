"""Value types produced by the locale service.

Python 3.13+.
"""

from dataclasses import dataclass

from localizednumbers.enums import NumberPartType

__all__ = [
    "NumberPart",
]


@dataclass(frozen=True, slots=True)
class NumberPart:
    """One classified fragment of a formatted number.

    A formatted number is the concatenation of the values of its parts,
    in order: "".join(part.value for part in parts).

    Attributes:
        type: What the fragment represents (digits, separator, sign, literal)
        value: The fragment text exactly as formatted, in the locale's digits

    Example:
        >>> NumberPart(NumberPartType.GROUP, ",")
        NumberPart(type=<NumberPartType.GROUP: 'group'>, value=',')
    """

    type: NumberPartType
    value: str
