from __future__ import annotations

from decimal import Decimal
from pathlib import Path

import click

from loanquote.core.config import get_settings, validate_loan_amount
from loanquote.core.logging import configure_logging, get_logger
from loanquote.services import LoanCalculator, MarketFileError, MarketReader, QuoteFormatter

logger = get_logger(__name__)


def _check_amount(_ctx: click.Context, _param: click.Parameter, value: int) -> int:
    try:
        return validate_loan_amount(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


def _check_separator(_ctx: click.Context, _param: click.Parameter, value: str | None) -> str | None:
    if value is None:
        return None
    if value == "\\t":
        return "\t"
    if len(value) != 1:
        raise click.BadParameter(f"separator must be a single character, got {value!r}")
    return value


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("market_file", type=click.Path(path_type=Path))
@click.option("-a", "--amount", required=True, type=int, callback=_check_amount, help="Loan amount requested.")
@click.option("-s", "--sep", "separator", callback=_check_separator, help="Custom CSV cells separator.")
@click.option("-l", "--line-skip", "skip_line", is_flag=True, help="Skip first line (header row) in CSV.")
@click.option("--log-level", default=None, help="Logging level, defaults to LOG_LEVEL or INFO.")
def main(market_file: Path, amount: int, separator: str | None, skip_line: bool, log_level: str | None) -> None:
    """Quote the cheapest loan the market in MARKET_FILE can offer for AMOUNT."""

    configure_logging(log_level or get_settings().log_level)
    reader = MarketReader(separator=separator or ",", skip_header=skip_line)
    try:
        offers = reader.read(market_file)
    except (FileNotFoundError, MarketFileError) as exc:
        logger.error("could not read market data: %s", exc)
        raise SystemExit(1) from exc

    quote = LoanCalculator(offers).calculate(Decimal(amount))
    click.echo(QuoteFormatter().format(quote))
