from domain.models.currency import CacheStats, ConversionHistoryEntry, Currency, RateTable
from domain.models.result import ConversionSuccess


def format_currency(currency: Currency) -> str:
    return f"{currency.code} - {currency.name} ({currency.symbol})"


def format_conversion(result: ConversionSuccess) -> list[str]:
    lines = [
        f"{result.amount} {result.from_currency} = "
        f"{result.converted_amount:.4f} {result.to_currency}",
        f"Exchange rate: 1 {result.from_currency} = "
        f"{result.exchange_rate:.6f} {result.to_currency}",
        f"Last update: {result.last_update}",
    ]
    if abs(result.percentage_difference) > 0.01:
        lines.append(f"Difference from parity: {result.percentage_difference:.2f}%")
    lines.append(f"Summary: {result.summary()}")
    return lines


def format_history_entry(index: int, entry: ConversionHistoryEntry) -> list[str]:
    return [
        f"{index}. {entry.amount} {entry.from_currency} -> "
        f"{entry.converted_amount:.4f} {entry.to_currency}",
        f"   Rate: {entry.exchange_rate:.6f} | {entry.timestamp.strftime('%c')}",
    ]


def format_rate_table(table: RateTable, codes: list[str]) -> list[str]:
    """Rates from the table's base to each of `codes`, skipping the base itself."""
    lines = [f"1 {table.base_currency} equals:"]
    for code in codes:
        if code == table.base_currency or code not in table.rates:
            continue
        lines.append(f"  {code}: {table.rates[code]:.6f}")
    lines.append(f"Last update: {table.last_update}")
    return lines


def format_cache_stats(stats: CacheStats) -> str:
    return f"Cached pairs: {stats.size} | TTL: {stats.ttl_seconds:.0f}s"
