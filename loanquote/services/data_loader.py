from __future__ import annotations

import csv
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Iterable

from loanquote.core.logging import get_logger
from loanquote.core.money import to_currency, to_rate
from loanquote.models import Offer, OfferValidationError

logger = get_logger(__name__)

ROW_LENGTH = 3


class MarketFileError(ValueError):
    """A market file row could not be turned into a lender offer."""


class MarketReader:
    """Reads lender offers from a delimited ``lender,rate,amount`` file."""

    def __init__(self, separator: str = ",", skip_header: bool = False) -> None:
        if len(separator) != 1:
            raise ValueError(f"separator must be a single character, got {separator!r}")
        self.separator = separator
        self.skip_header = skip_header

    def read(self, path: str | Path) -> tuple[Offer, ...]:
        path = Path(path)
        if not path.exists():
            logger.error("market file not found: %s", path)
            raise FileNotFoundError(path)
        offers = tuple(self._convert(line_no, row) for line_no, row in self._rows(path))
        logger.info("read %d offers from %s", len(offers), path)
        return offers

    def _rows(self, path: Path) -> Iterable[tuple[int, list[str]]]:
        try:
            with path.open("r", encoding="utf-8", newline="") as handle:
                reader = csv.reader(handle, delimiter=self.separator, quotechar='"')
                for row in reader:
                    if self.skip_header and reader.line_num == 1:
                        continue
                    if not any(cell.strip() for cell in row):
                        continue
                    yield reader.line_num, [cell.strip() for cell in row]
        except (OSError, UnicodeDecodeError, csv.Error) as exc:
            logger.error("could not read market file %s: %s", path, exc)
            raise MarketFileError(f"could not read market file {path}: {exc}") from exc

    @staticmethod
    def _convert(line_no: int, row: list[str]) -> Offer:
        if len(row) != ROW_LENGTH:
            logger.error("invalid row length on line %d: %s", line_no, row)
            raise MarketFileError(f"line {line_no}: expected {ROW_LENGTH} cells, got {len(row)}: {row}")
        lender, rate, amount = row
        try:
            return Offer(
                lender_name=lender,
                rate=to_rate(Decimal(rate)),
                amount=to_currency(Decimal(amount)),
            )
        except (InvalidOperation, OfferValidationError) as exc:
            logger.error("improper offer on line %d: %s", line_no, row)
            raise MarketFileError(f"line {line_no}: improper offer {row}") from exc
