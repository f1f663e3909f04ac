"""Per-mask state machines and the table that dispatches to them."""

from __future__ import annotations

from masked_textual.masks.base import MaskMachine, MaskSettings
from masked_textual.masks.dates import DayFirstDateMachine, MonthFirstDateMachine
from masked_textual.masks.grouped import PhoneMachine, SsnMachine
from masked_textual.masks.ip import IpAddressMachine
from masked_textual.masks.numeric import DecimalMachine, DigitOnlyMachine
from masked_textual.models import DateFormat, MaskKind

# Machines keep no state of their own, so one instance serves every field.
_MACHINES: dict[MaskKind, MaskMachine] = {
    MaskKind.PHONE_WITH_AREA: PhoneMachine(),
    MaskKind.SSN: SsnMachine(),
    MaskKind.IP_ADDRESS: IpAddressMachine(),
    MaskKind.DECIMAL: DecimalMachine(),
    MaskKind.DIGIT_ONLY: DigitOnlyMachine(),
}

_DATE_MACHINES: dict[DateFormat, MaskMachine] = {
    DateFormat.DDMMYYYY: DayFirstDateMachine(),
    DateFormat.MMDDYYYY: MonthFirstDateMachine(),
}


def machine_for(kind: MaskKind, date_format: DateFormat) -> MaskMachine | None:
    """Return the machine for *kind*, or None for an unmasked field.

    Args:
        kind: The active mask.
        date_format: The date layout; only used for ``MaskKind.DATE_ONLY``.
    """
    if kind is MaskKind.DATE_ONLY:
        return _DATE_MACHINES[date_format]
    return _MACHINES.get(kind)


__all__ = ["MaskMachine", "MaskSettings", "machine_for"]
