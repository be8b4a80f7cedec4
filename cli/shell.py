import logging
from collections.abc import Callable
from datetime import datetime
from enum import Enum
from typing import assert_never

from application.services import ConversionService
from cli.formatting import (
    format_cache_stats,
    format_conversion,
    format_currency,
    format_history_entry,
    format_rate_table,
)
from domain.models.currency import ConversionHistoryEntry
from domain.models.result import ConversionSuccess, Failure

logger = logging.getLogger(__name__)


class Command(Enum):
    CONVERT = "1"
    LIST_CURRENCIES = "2"
    SHOW_RATES = "3"
    HISTORY = "4"
    REFRESH = "5"
    CACHE_STATS = "6"
    HELP = "7"
    EXIT = "0"


MENU = (
    (Command.CONVERT, "Convert currencies"),
    (Command.LIST_CURRENCIES, "List available currencies"),
    (Command.SHOW_RATES, "Show current rates for a currency"),
    (Command.HISTORY, "Show conversion history"),
    (Command.REFRESH, "Refresh exchange rates"),
    (Command.CACHE_STATS, "Show cache statistics"),
    (Command.HELP, "Help"),
    (Command.EXIT, "Exit"),
)

EXIT_WORDS = {"q", "quit", "exit"}
HELP_WORDS = {"h", "help", "?"}

HELP_TEXT = (
    "HOW TO CONVERT:",
    "1. Choose option 1 from the menu",
    "2. Enter the source currency code (e.g. USD)",
    "3. Enter the target currency code (e.g. EUR)",
    "4. Enter the amount, using a dot for decimals (e.g. 123.45)",
    "TIPS:",
    "- Currency codes have three letters; option 2 lists them all",
    "- Rates are cached for a few minutes; option 5 fetches fresh ones",
    "- Option 4 shows the conversions made in this session",
    "- If lookups keep failing, check your internet connection and API key",
)


def parse_command(choice: str) -> Command | None:
    choice = choice.strip().lower()
    if choice in EXIT_WORDS:
        return Command.EXIT
    if choice in HELP_WORDS:
        return Command.HELP
    try:
        return Command(choice)
    except ValueError:
        return None


class CurrencyShell:
    """Menu-driven terminal front end over a ConversionService.

    One command runs at a time. A failing command is reported and the loop
    carries on; only the exit command or end of input stops it.
    """

    def __init__(
        self,
        converter: ConversionService,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.converter = converter
        self.input_func = input_func
        self.output = output
        self.clock = clock
        self.history: list[ConversionHistoryEntry] = []

    def _ask(self, prompt: str) -> str:
        return self.input_func(prompt).strip()

    def _print_lines(self, lines: list[str]) -> None:
        for line in lines:
            self.output(line)

    async def run(self) -> None:
        self.output("=" * 60)
        self.output("CURRENCY CONVERTER")
        self.output("=" * 60)
        self.output("Live exchange rates powered by ExchangeRate-API")

        while True:
            self.output("")
            self.output("MAIN MENU:")
            for command, label in MENU:
                self.output(f"{command.value}. {label}")

            try:
                choice = self._ask("Select an option: ")
            except (EOFError, KeyboardInterrupt):
                break

            command = parse_command(choice)
            if command is None:
                self.output(f"Invalid option {choice!r}. Choose one of the menu numbers.")
                continue
            if command is Command.EXIT:
                break

            try:
                await self.dispatch(command)
            except (EOFError, KeyboardInterrupt):
                break
            except Exception as e:
                logger.exception(f"Command {command.name} failed")
                self.output(f"Unexpected error: {e}")

        self.output("Thanks for using the currency converter!")

    async def dispatch(self, command: Command) -> None:
        match command:
            case Command.CONVERT:
                await self.perform_conversion()
            case Command.LIST_CURRENCIES:
                self.show_currencies()
            case Command.SHOW_RATES:
                await self.show_rates()
            case Command.HISTORY:
                self.show_history()
            case Command.REFRESH:
                self.refresh_rates()
            case Command.CACHE_STATS:
                self.output(format_cache_stats(self.converter.cache_stats()))
            case Command.HELP:
                self._print_lines(list(HELP_TEXT))
            case Command.EXIT:
                pass
            case _:
                assert_never(command)

    async def perform_conversion(self) -> None:
        self.output("")
        self.output("CURRENCY CONVERSION")
        from_currency = self._ask("Source currency (e.g. USD): ").upper()
        to_currency = self._ask("Target currency (e.g. EUR): ").upper()
        if from_currency and from_currency == to_currency:
            self.output(f"Source and target currencies are both {from_currency}; nothing to convert.")
            return
        amount_text = self._ask("Amount to convert: ")

        try:
            amount = float(amount_text)
        except ValueError:
            self.output("Please enter a valid amount greater than 0.")
            return

        self.output("Fetching exchange rate...")
        result = await self.converter.convert(from_currency, to_currency, amount)
        if not isinstance(result, ConversionSuccess):
            self.output(f"Conversion failed: {result.message}")
            return

        self.output("Conversion successful:")
        self._print_lines(format_conversion(result))
        self.history.append(
            ConversionHistoryEntry(
                from_currency=result.from_currency,
                to_currency=result.to_currency,
                amount=result.amount,
                converted_amount=result.converted_amount,
                exchange_rate=result.exchange_rate,
                timestamp=self.clock(),
            )
        )

    def show_currencies(self) -> None:
        currencies = self.converter.get_supported_currencies()
        self.output("")
        self.output("AVAILABLE CURRENCIES:")
        for currency in currencies:
            self.output(format_currency(currency))
        self.output(f"Total: {len(currencies)} currencies")

    async def show_rates(self) -> None:
        base = self._ask("Base currency (e.g. USD): ").upper()
        self.output("Fetching rates...")
        lookup = await self.converter.get_rates(base)
        if isinstance(lookup, Failure):
            self.output(f"Could not fetch rates: {lookup.message}")
            return
        codes = [c.code for c in self.converter.get_supported_currencies()]
        self._print_lines(format_rate_table(lookup.value, codes))

    def show_history(self) -> None:
        self.output("")
        self.output("CONVERSION HISTORY:")
        if not self.history:
            self.output("No conversions yet.")
            return
        for index, entry in enumerate(self.history, start=1):
            self._print_lines(format_history_entry(index, entry))

    def refresh_rates(self) -> None:
        self.converter.clear_cache()
        self.output("Cached rates cleared; the next conversion fetches fresh rates.")
