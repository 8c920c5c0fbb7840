"""
Display masks for the Brazilian fields of the form.

A template uses '#' for a digit slot; any other character is a literal that
is only written while there are digits left to place after it.
"""

from typing import Callable, Dict, Optional

from registration.state import FieldName
from registration.validator import digits


POSTAL_CODE_MASK = "#####-###"
TAX_ID_MASK = "###.###.###-##"
PHONE_MASK = "(##) ####-####"
CELL_PHONE_MASK = "(##) #####-####"


def apply_mask(value: str, template: str) -> str:
    if not value:
        return ""

    out = []
    idx = 0
    for ch in template:
        if idx >= len(value):
            break
        if ch == "#":
            out.append(value[idx])
            idx += 1
        else:
            out.append(ch)

    return "".join(out)


def format_postal_code(raw: str) -> str:
    return apply_mask(digits(raw), POSTAL_CODE_MASK)


def format_tax_id(raw: str) -> str:
    return apply_mask(digits(raw), TAX_ID_MASK)


def format_phone(raw: str) -> str:
    """(NN) NNNN-NNNN for landlines, (NN) NNNNN-NNNN once an 11th digit arrives."""
    d = digits(raw)
    if len(d) > 10:
        return apply_mask(d, CELL_PHONE_MASK)
    return apply_mask(d, PHONE_MASK)


MASKS: Dict[FieldName, Callable[[str], str]] = {
    FieldName.POSTAL_CODE: format_postal_code,
    FieldName.TAX_ID: format_tax_id,
    FieldName.PHONE: format_phone,
}


def mask_for(field: FieldName) -> Optional[Callable[[str], str]]:
    return MASKS.get(FieldName(field))


def masked_value(field: FieldName, keystrokes: str) -> str:
    fmt = mask_for(field)
    if fmt is None:
        return keystrokes
    return fmt(keystrokes)
