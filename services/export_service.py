### Export service writes simulation results to spreadsheet and CSV files.
import csv
import logging
from pathlib import Path

from openpyxl import Workbook

from utils.money import to_cents

logger = logging.getLogger(__name__)

BALANCE_HEADERS = ["Date", "Account", "Balance"]
PAYMENT_HEADERS = ["Date", "Cash Flow", "Amount"]
CSV_HEADERS = ["Kind", "Date", "Name", "Amount"]


def write_xlsx(result, path):
    """Write balances and payments to separate sheets of an .xlsx workbook."""
    workbook = Workbook()

    balances = workbook.active
    balances.title = "Balances"
    balances.append(BALANCE_HEADERS)
    for b in result.balances:
        balances.append([b.date, b.account_name, float(to_cents(b.balance))])

    payments = workbook.create_sheet("Payments")
    payments.append(PAYMENT_HEADERS)
    for p in result.payments:
        payments.append([p.date, p.cash_flow_name or "", float(to_cents(p.amount))])

    for sheet in (balances, payments):
        for cell in sheet["A"][1:]:
            cell.number_format = "yyyy-mm-dd"

    path = Path(path)
    workbook.save(path)
    logger.info(
        "Wrote %d balances and %d payments to %s",
        len(result.balances), len(result.payments), path,
    )
    return path


def write_csv(result, path):
    """Write balances then payments to one CSV, tagged by a Kind column."""
    path = Path(path)
    with path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.writer(fh)
        writer.writerow(CSV_HEADERS)
        for b in result.balances:
            writer.writerow(["balance", b.date.isoformat(), b.account_name, to_cents(b.balance)])
        for p in result.payments:
            writer.writerow(["payment", p.date.isoformat(), p.cash_flow_name or "", to_cents(p.amount)])

    logger.info("Wrote simulation CSV to %s", path)
    return path
