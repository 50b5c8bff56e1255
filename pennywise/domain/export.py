"""Pure functions for CSV export of transactions.

Default output matches files exported by earlier versions byte for byte:
fields are comma-joined without escaping, so a description containing a
comma shifts the columns of its row. Pass quote=True for standard CSV quoting.
"""

import csv
import io

from pennywise.domain.ledger import Transaction
from pennywise.domain.models import format_amount

CSV_HEADER: tuple[str, ...] = ("Description", "Montant", "Catégorie", "Type", "Date")
CSV_MIME_TYPE = "text/csv;charset=utf-8"
EXPORT_FILENAME = "transactions.csv"


def transaction_row(transaction: Transaction) -> list[str]:
    """Fields of a transaction in export column order."""
    return [
        transaction.description,
        format_amount(transaction.amount),
        transaction.category.value,
        transaction.type.value,
        transaction.date,
    ]


def render_csv(transactions: list[Transaction], quote: bool = False) -> str:
    """Render transactions as CSV text.

    Args:
        transactions: Transactions in ledger order.
        quote: Apply standard CSV quoting to fields that need it.

    Returns:
        Header line plus one line per transaction, joined by newlines,
        without a trailing newline.
    """
    rows = [list(CSV_HEADER)] + [transaction_row(t) for t in transactions]

    if not quote:
        return "\n".join(",".join(row) for row in rows)

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    writer.writerows(rows)
    return buffer.getvalue().removesuffix("\n")


def export_csv(transactions: list[Transaction], quote: bool = False) -> bytes:
    """Export transactions as UTF-8 encoded CSV bytes.

    Args:
        transactions: Transactions in ledger order.
        quote: Apply standard CSV quoting to fields that need it.

    Returns:
        CSV content encoded as UTF-8.
    """
    return render_csv(transactions, quote).encode("utf-8")
