"""
Sparse-patch merging used by the edit handlers.

A patch field only overwrites the stored value when it carries something
meaningful. ``None``, blank strings, numeric zero, the zero datetime
(``datetime.min`` or the Unix epoch) and the all-zero UUID are all treated as
"not provided". A boolean is meaningful once supplied, so ``False`` can clear
a flag. Collections are not handled here.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Iterable, List
import uuid

ZERO_UUID = uuid.UUID(int=0)
EPOCH = datetime(1970, 1, 1)


def is_zero_uuid(value: Any) -> bool:
    """True for None, "" and the all-zero GUID in either UUID or text form"""
    if value is None:
        return True
    if isinstance(value, uuid.UUID):
        return value == ZERO_UUID
    text = str(value).strip()
    if not text:
        return True
    try:
        return uuid.UUID(text) == ZERO_UUID
    except ValueError:
        return False


def is_meaningful(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, bool):
        return True
    if isinstance(value, (int, float, Decimal)):
        return value != 0
    if isinstance(value, datetime):
        naive = value.replace(tzinfo=None)
        return naive not in (datetime.min, EPOCH)
    if isinstance(value, date):
        return value not in (date.min, EPOCH.date())
    if isinstance(value, uuid.UUID):
        return value != ZERO_UUID
    return True


def merge_patch(patch: Any, target: Any, fields: Iterable[str]) -> List[str]:
    """Copy meaningful ``fields`` from ``patch`` onto ``target``.

    Returns the names of the fields that were written.
    """
    written = []
    for name in fields:
        value = getattr(patch, name, None)
        if is_meaningful(value):
            setattr(target, name, value)
            written.append(name)
    return written
