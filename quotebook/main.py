"""Command-line entry point for the quotation, invoice and receipt book.

Examples:
    quotebook invoices new > invoice.json
    quotebook invoices totals invoice.json
    quotebook invoices add invoice.json
    quotebook invoices list
    quotebook invoices update <id> invoice.json
    quotebook receipts delete <id>
"""

import sys
import json
import logging
import argparse
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional
from dotenv import load_dotenv

from quotebook import config
from quotebook.exceptions import FormValidationError, StorageError
from quotebook.models.schemas import BaseDocument
from quotebook.repositories import (
    KeyValueStore, RecordStore, InvoiceRepository, QuotationRepository,
    ReceiptRepository, create_kv_store
)
from quotebook.services import (
    parse_invoice_form, parse_quotation_form, parse_receipt_form, preview_totals,
    new_invoice_defaults, new_quotation_defaults, new_receipt_defaults
)
from quotebook.services.sample_data import sample_invoices, sample_quotations, sample_receipts

logger = logging.getLogger(__name__)


@dataclass
class DocumentKind:
    """Everything the CLI needs to handle one document type."""
    repository_class: type
    parse_form: Callable[[Dict[str, Any]], BaseDocument]
    new_form: Callable[[], Dict[str, Any]]
    samples: Callable[[], List[BaseDocument]]
    number_field: str
    party_field: str
    date_field: str
    state_field: str


DOCUMENT_KINDS: Dict[str, DocumentKind] = {
    config.INVOICES_STORAGE_KEY: DocumentKind(
        repository_class=InvoiceRepository,
        parse_form=parse_invoice_form,
        new_form=new_invoice_defaults,
        samples=sample_invoices,
        number_field="invoice_number",
        party_field="customer_name",
        date_field="issue_date",
        state_field="status",
    ),
    config.QUOTATIONS_STORAGE_KEY: DocumentKind(
        repository_class=QuotationRepository,
        parse_form=parse_quotation_form,
        new_form=new_quotation_defaults,
        samples=sample_quotations,
        number_field="quotation_number",
        party_field="customer_name",
        date_field="date",
        state_field="status",
    ),
    config.RECEIPTS_STORAGE_KEY: DocumentKind(
        repository_class=ReceiptRepository,
        parse_form=parse_receipt_form,
        new_form=new_receipt_defaults,
        samples=sample_receipts,
        number_field="receipt_number",
        party_field="vendor_name",
        date_field="date",
        state_field="payment_method",
    ),
}


def build_kv_store() -> Optional[KeyValueStore]:
    """Create the storage backend named in the environment, or None if it cannot be set up."""
    backend = config.get_storage_backend()
    try:
        return create_kv_store(
            backend,
            data_dir=config.get_data_dir(),
            collection_prefix=config.get_collection_prefix(),
        )
    except ValueError as e:
        logger.warning(f"Storage backend '{backend}' unavailable, continuing without storage: {str(e)}")
        return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quotebook", description="Quotation, invoice and receipt book")
    parser.add_argument("document_type", choices=sorted(DOCUMENT_KINDS), help="Document collection to work on")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("list", help="List all documents")
    show = commands.add_parser("show", help="Show one document as JSON")
    show.add_argument("id")
    add = commands.add_parser("add", help="Add a document from a JSON form file ('-' for stdin)")
    add.add_argument("file")
    update = commands.add_parser("update", help="Replace a document from a JSON form file")
    update.add_argument("id")
    update.add_argument("file")
    delete = commands.add_parser("delete", help="Delete a document")
    delete.add_argument("id")
    totals = commands.add_parser("totals", help="Show running totals for a JSON form file")
    totals.add_argument("file")
    commands.add_parser("new", help="Print a form pre-filled with default values")
    commands.add_parser("seed", help="Add sample documents to an empty collection")
    return parser


def _read_form(path: str) -> Any:
    if path == "-":
        return json.load(sys.stdin)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2))


def _print_listing(kind: DocumentKind, records: List[BaseDocument]) -> None:
    if not records:
        print("No documents found.")
        return
    for record in records:
        state = getattr(record, kind.state_field)
        print(
            f"{record.id}  {getattr(record, kind.number_field):<14} "
            f"{getattr(record, kind.date_field):<10}  {getattr(record, kind.party_field):<30} "
            f"{record.total_amount:>12.2f}  {state.value if state else ''}"
        )


def run_command(args: argparse.Namespace, repository: RecordStore) -> int:
    """
    Execute one parsed command against a repository.

    Returns:
        Process exit code
    """
    kind = DOCUMENT_KINDS[args.document_type]

    if args.command == "list":
        _print_listing(kind, repository.list())
        return 0

    if args.command == "show":
        record = repository.get_by_id(args.id)
        if record is None:
            print(f"No {args.document_type} record with id {args.id}", file=sys.stderr)
            return 1
        _print_json(record.to_dict())
        return 0

    if args.command == "new":
        _print_json(kind.new_form())
        return 0

    if args.command == "seed":
        count = repository.seed(kind.samples())
        print(f"Seeded {count} {args.document_type}")
        return 0

    if args.command == "delete":
        if not repository.delete(args.id):
            print(f"No {args.document_type} record with id {args.id}", file=sys.stderr)
            return 1
        print(f"Deleted {args.id}")
        return 0

    try:
        form = _read_form(args.file)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read form file {args.file}: {str(e)}")
        return 1

    if args.command == "totals":
        totals = preview_totals(form)
        _print_json({
            "subTotal": totals.sub_total,
            "taxAmount": totals.tax_amount,
            "totalAmount": totals.total_amount,
        })
        return 0

    record = kind.parse_form(form)

    if args.command == "add":
        _print_json(repository.add(record).to_dict())
        return 0

    # update
    updated = repository.update(record.copy(id=args.id))
    if updated is None:
        print(f"No {args.document_type} record with id {args.id}", file=sys.stderr)
        return 1
    _print_json(updated.to_dict())
    return 0


def main(argv: Optional[List[str]] = None, kv_store: Optional[KeyValueStore] = None) -> int:
    """Main entry point."""
    # Load environment variables from .env file
    load_dotenv()

    logging.basicConfig(level=config.get_log_level(), format=config.LOG_FORMAT)

    args = build_parser().parse_args(argv)

    if kv_store is None:
        kv_store = build_kv_store()
    repository = DOCUMENT_KINDS[args.document_type].repository_class(kv_store)

    try:
        return run_command(args, repository)
    except FormValidationError as e:
        print("The form has errors:", file=sys.stderr)
        for field, messages in e.errors.items():
            for message in messages:
                print(f"  {field}: {message}", file=sys.stderr)
        return 1
    except StorageError as e:
        logger.error(f"Storage error: {str(e)}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
