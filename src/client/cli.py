"""Invoice Maker command line client

Usage:
    python -m src.client.cli login admin
    python -m src.client.cli list --search globex
    python -m src.client.cli new draft.yaml
    python -m src.client.cli edit 12 draft.yaml --status sent
    python -m src.client.cli pdf draft.yaml --output out.pdf
    python -m src.client.cli pdf --id 12

Drafts are YAML files whose keys are the InvoiceDraft fields
(invoice_number, company_details, bill_to, items, tax_rate, ...).
"""

import argparse
import getpass
import logging
import sys
from typing import List, Optional

import yaml
from pydantic import ValidationError

from config import ApplicationConfig
from src.adapter.services.pdf_service import ReportLabPdfService
from src.client.api_client import ApiError, InvoiceApiClient
from src.client.mapping import filter_invoices, record_to_draft
from src.client.session import ClientSession
from src.domain.invoice import InvoiceStatus
from src.domain.invoice_draft import InvoiceDraft
from src.domain.invoice_totals import format_amount

logger = logging.getLogger(__name__)


class CliError(Exception):
    pass


def load_draft(path: str) -> InvoiceDraft:
    """Read a YAML draft file"""
    try:
        with open(path, "r") as r_file:
            data = yaml.safe_load(r_file) or dict()
    except OSError as e:
        raise CliError(f"Cannot read draft file {path}: {e.strerror}") from e
    except yaml.YAMLError as e:
        raise CliError(f"Draft file {path} is not valid YAML: {e}") from e

    if not isinstance(data, dict):
        raise CliError(f"Draft file {path} must contain a mapping of draft fields")

    data.setdefault("currency", ApplicationConfig.DEFAULT_CURRENCY)
    try:
        return InvoiceDraft(**data)
    except ValidationError as e:
        raise CliError(f"Invalid draft file {path}: {e}") from e


def write_pdf(draft: InvoiceDraft, output: Optional[str]) -> str:
    pdf_service = ReportLabPdfService()
    try:
        content = pdf_service.render_invoice(draft)
    except ValueError as e:
        raise CliError(f"Failed to generate PDF: {e}") from e

    path = output or pdf_service.filename_for(draft)
    with open(path, "wb") as w_file:
        w_file.write(content)
    return path


def print_totals(draft: InvoiceDraft) -> None:
    totals = draft.totals()
    currency = draft.currency
    print(f"Subtotal:      {format_amount(totals.subtotal, currency)}")
    print(f"Tax ({totals.tax_rate:g}%):     {format_amount(totals.tax_amount, currency)}")
    print(f"Discount:      -{format_amount(totals.discount, currency)}")
    print(f"Shipping:      {format_amount(totals.shipping_fee, currency)}")
    print(f"Invoice Total: {format_amount(totals.total, currency)}")


def require_login(session: ClientSession) -> None:
    if not session.is_authenticated():
        raise CliError("Not logged in. Run 'login' first.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Invoice Maker client")
    parser.add_argument("--base-url", default=ApplicationConfig.API_BASE_URL, help="API server URL")
    parser.add_argument("--session-file", default=ApplicationConfig.CLIENT_SESSION_FILE)
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    login = commands.add_parser("login", help="Log in with username or email")
    login.add_argument("username")
    login.add_argument("--password", help="Prompted for when omitted")

    commands.add_parser("logout", help="Forget the stored session")
    commands.add_parser("whoami", help="Show the logged-in user")

    list_cmd = commands.add_parser("list", help="List invoices, newest first")
    list_cmd.add_argument("--search", help="Filter by invoice number or client name")

    show = commands.add_parser("show", help="Show an invoice with its items")
    show.add_argument("invoice_id", type=int)

    new = commands.add_parser("new", help="Save a draft file as a new invoice")
    new.add_argument("file")

    edit = commands.add_parser("edit", help="Overwrite an invoice from a draft file")
    edit.add_argument("invoice_id", type=int)
    edit.add_argument("file")
    edit.add_argument("--status", choices=[s.value for s in InvoiceStatus])

    delete = commands.add_parser("delete", help="Delete an invoice")
    delete.add_argument("invoice_id", type=int)

    pdf = commands.add_parser("pdf", help="Render a draft file or stored invoice as PDF")
    source = pdf.add_mutually_exclusive_group(required=True)
    source.add_argument("file", nargs="?")
    source.add_argument("--id", dest="invoice_id", type=int)
    pdf.add_argument("--output", "-o", help="Output path (default invoice-<number>.pdf)")

    totals = commands.add_parser("totals", help="Show the totals of a draft file")
    totals.add_argument("file")

    return parser


def run(args: argparse.Namespace, client: InvoiceApiClient, session: ClientSession) -> None:
    if args.command == "login":
        password = args.password or getpass.getpass("Password: ")
        user = client.login(args.username, password)
        print(f"Welcome back, {user.get('fullName') or user['username']}")

    elif args.command == "logout":
        client.logout()
        print("Logged out")

    elif args.command == "whoami":
        require_login(session)
        user = client.verify()
        print(f"{user['username']} <{user['email']}>")

    elif args.command == "list":
        require_login(session)
        invoices = filter_invoices(client.list_invoices(), args.search)
        if not invoices:
            print("No invoices found")
        for invoice in invoices:
            print(
                f"{invoice['id']:>5}  {invoice['invoice_number']:<12} "
                f"{invoice['invoice_date']}  {(invoice.get('client_name') or '-'):<24} "
                f"{invoice['total_amount']:>12}  {invoice['status']:<8} "
                f"{invoice['item_count']} items"
            )

    elif args.command == "show":
        require_login(session)
        record = client.get_invoice(args.invoice_id)
        print(yaml.safe_dump(record, sort_keys=False, allow_unicode=True))

    elif args.command == "new":
        require_login(session)
        invoice_id = client.save_invoice(load_draft(args.file))
        print(f"Invoice saved successfully (id {invoice_id})")

    elif args.command == "edit":
        require_login(session)
        client.save_invoice(load_draft(args.file), invoice_id=args.invoice_id, status=args.status)
        print("Invoice updated successfully")

    elif args.command == "delete":
        require_login(session)
        client.delete_invoice(args.invoice_id)
        print("Invoice deleted successfully")

    elif args.command == "pdf":
        if args.invoice_id is not None:
            require_login(session)
            draft = record_to_draft(
                client.get_invoice(args.invoice_id),
                currency=ApplicationConfig.DEFAULT_CURRENCY,
            )
        else:
            draft = load_draft(args.file)
        print(f"Wrote {write_pdf(draft, args.output)}")

    elif args.command == "totals":
        print_totals(load_draft(args.file))


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    session = ClientSession(args.session_file).init()
    client = InvoiceApiClient(
        args.base_url,
        session,
        timeout=ApplicationConfig.CLIENT_TIMEOUT_SECONDS,
    )
    try:
        run(args, client, session)
    except (ApiError, CliError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
