"""
Tests for the command-line entry point
"""

import json
import os
from unittest.mock import patch

import pytest

from quotebook.main import main, build_kv_store
from quotebook.mocks import InMemoryKeyValueStore
from quotebook.repositories import FileKeyValueStore

WIDGET_FORM = {
    "customerName": "MegaCorp Solutions",
    "invoiceNumber": "INV-2025-0001",
    "issueDate": "2025-07-01",
    "dueDate": "2025-07-08",
    "items": [{"description": "Widget", "quantity": 2, "unitPrice": 9.995}],
    "taxRate": 0.08,
    "status": "sent",
}


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def form_file(tmp_path):
    """Write a form dict to a JSON file and return its path."""
    def _write(form, name="form.json"):
        path = tmp_path / name
        path.write_text(json.dumps(form), encoding="utf-8")
        return str(path)
    return _write


def _run(capsys, store, *argv):
    code = main(list(argv), kv_store=store)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_add_show_update_delete(capsys, store, form_file):
    """A document goes through its whole lifecycle from the command line."""
    code, out, _ = _run(capsys, store, "invoices", "add", form_file(WIDGET_FORM))
    assert code == 0
    added = json.loads(out)
    assert added["subTotal"] == 19.99
    assert added["taxAmount"] == 1.6
    assert added["totalAmount"] == 21.59

    code, out, _ = _run(capsys, store, "invoices", "show", added["id"])
    assert code == 0
    assert json.loads(out) == added

    code, out, _ = _run(capsys, store, "invoices", "list")
    assert code == 0
    assert added["id"] in out
    assert "21.59" in out

    untaxed = dict(WIDGET_FORM, taxRate=0)
    code, out, _ = _run(capsys, store, "invoices", "update", added["id"], form_file(untaxed, "edit.json"))
    assert code == 0
    updated = json.loads(out)
    assert updated["id"] == added["id"]
    assert updated["createdAt"] == added["createdAt"]
    assert updated["taxAmount"] == 0.0
    assert updated["totalAmount"] == 19.99

    code, out, _ = _run(capsys, store, "invoices", "delete", added["id"])
    assert code == 0

    code, out, _ = _run(capsys, store, "invoices", "list")
    assert "No documents found." in out


def test_missing_documents_exit_with_error(capsys, store, form_file):
    assert _run(capsys, store, "receipts", "show", "missing")[0] == 1
    assert _run(capsys, store, "receipts", "delete", "missing")[0] == 1

    code, _, err = _run(capsys, store, "invoices", "update", "missing", form_file(WIDGET_FORM))
    assert code == 1
    assert "missing" in err


def test_invalid_form_is_reported(capsys, store, form_file):
    """Validation errors are printed and nothing is stored."""
    code, _, err = _run(capsys, store, "invoices", "add", form_file(dict(WIDGET_FORM, customerName="", items=[])))

    assert code == 1
    assert "customerName" in err
    assert "items" in err
    assert store.data == {}


def test_unreadable_form_file(capsys, store, tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{oops", encoding="utf-8")

    assert _run(capsys, store, "invoices", "add", str(bad))[0] == 1
    assert _run(capsys, store, "invoices", "add", str(tmp_path / "absent.json"))[0] == 1


def test_totals_preview(capsys, store, form_file):
    """Running totals need no valid form and store nothing."""
    half_done = {"items": [{"quantity": "2", "unitPrice": "9.995"}, {"quantity": ""}], "taxRate": "0.08"}

    code, out, _ = _run(capsys, store, "quotations", "totals", form_file(half_done))

    assert code == 0
    assert json.loads(out) == {"subTotal": 19.99, "taxAmount": 1.6, "totalAmount": 21.59}
    assert store.data == {}


def test_new_prints_defaults(capsys, store):
    code, out, _ = _run(capsys, store, "receipts", "new")

    assert code == 0
    form = json.loads(out)
    assert form["receiptNumber"].startswith("REC-")
    assert form["paymentMethod"] == "cash"


def test_seed_only_once(capsys, store):
    code, out, _ = _run(capsys, store, "invoices", "seed")
    assert code == 0
    assert "Seeded 2 invoices" in out

    stored = json.loads(store.data["invoices"])
    assert [inv["totalAmount"] for inv in stored] == [2754.0, 1296.0]

    _, out, _ = _run(capsys, store, "invoices", "seed")
    assert "Seeded 0 invoices" in out


def test_corrupted_store_is_reported(capsys):
    store = InMemoryKeyValueStore(initial={"quotations": "{broken"})

    assert _run(capsys, store, "quotations", "list")[0] == 1


def test_build_kv_store_from_environment(tmp_path):
    with patch.dict(os.environ, {"QUOTEBOOK_STORAGE_BACKEND": "file", "QUOTEBOOK_DATA_DIR": str(tmp_path)}):
        kv_store = build_kv_store()
    assert isinstance(kv_store, FileKeyValueStore)
    assert kv_store.data_dir == str(tmp_path)

    with patch.dict(os.environ, {"QUOTEBOOK_STORAGE_BACKEND": "memory"}):
        assert isinstance(build_kv_store(), InMemoryKeyValueStore)


def test_build_kv_store_without_firestore_project():
    """A backend that cannot be configured leaves the book without storage."""
    with patch.dict(os.environ, {"QUOTEBOOK_STORAGE_BACKEND": "firestore"}, clear=True):
        assert build_kv_store() is None
