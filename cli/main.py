import argparse
import asyncio
import locale
import logging
import sys

from cli.dependencies import cleanup_dependencies, init_dependencies
from cli.formatting import format_conversion, format_currency, format_rate_table
from cli.shell import CurrencyShell
from config.logging import configure_logging
from config.settings import Settings, get_settings
from domain.models.result import ConversionSuccess, Failure

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(description='Currency converter using live exchange rates')
	parser.add_argument('--from', dest='from_code', help='Source currency code, e.g. USD')
	parser.add_argument('--to', dest='to_code', help='Target currency code, e.g. EUR')
	parser.add_argument('--amount', type=float, help='Amount to convert')
	parser.add_argument('--list', action='store_true', help='List supported currencies and exit')
	parser.add_argument('--rates', metavar='BASE', help='Show current rates for BASE and exit')
	parser.add_argument('--log-level', help='Console log level (default from LOG_LEVEL)')
	return parser


async def run(args: argparse.Namespace, settings: Settings) -> int:
	deps = init_dependencies(settings)
	converter = deps.conversion_service
	try:
		if args.list:
			for currency in converter.get_supported_currencies():
				print(format_currency(currency))
			return 0

		if args.rates:
			lookup = await converter.get_rates(args.rates)
			if isinstance(lookup, Failure):
				print(f'Could not fetch rates: {lookup.message}', file=sys.stderr)
				return 1
			codes = [c.code for c in converter.get_supported_currencies()]
			print('\n'.join(format_rate_table(lookup.value, codes)))
			return 0

		if args.from_code and args.to_code and args.amount is not None:
			result = await converter.convert(args.from_code, args.to_code, args.amount)
			if not isinstance(result, ConversionSuccess):
				print(f'Conversion failed: {result.message}', file=sys.stderr)
				return 1
			print('\n'.join(format_conversion(result)))
			return 0

		await CurrencyShell(converter).run()
		return 0
	finally:
		await cleanup_dependencies(deps)


def main(argv: list[str] | None = None) -> int:
	parser = build_parser()
	args = parser.parse_args(argv)
	one_shot = (args.from_code, args.to_code, args.amount)
	if any(v is not None for v in one_shot) and not all(v is not None for v in one_shot):
		parser.error('--from, --to and --amount must be given together')

	settings = get_settings()
	configure_logging(args.log_level or settings.LOG_LEVEL, settings.LOG_FILE)
	try:
		locale.setlocale(locale.LC_TIME, '')
	except locale.Error as e:
		logger.warning(f'Could not apply the system time locale: {e}')
	logger.info(f'Starting {settings.APP_NAME}')
	return asyncio.run(run(args, settings))


if __name__ == '__main__':
	sys.exit(main())
