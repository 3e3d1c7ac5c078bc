from __future__ import annotations

from dataclasses import dataclass, field

from ..interfaces import QifAccountType
from .q_record import QRecord


@dataclass(frozen=True)
class QRecordSet:
    """The opening (header) record of a QIF export plus its body records."""

    opening: QRecord
    records: tuple[QRecord, ...] = field(default_factory=tuple)

    @property
    def account_type(self) -> QifAccountType | None:
        return QifAccountType.from_header(self.opening.type)

    def account_name(self) -> str:
        """
        Name of the account the export belongs to.

        The header's ``L[Account name]`` line has its brackets removed by the
        reader, so the opening label already is the bare name.
        """
        return self.opening.label
