import pytest
from slipscan.domain.models import FieldKind
from slipscan.session.invoice_fields import InvoiceFields, format_display_value


@pytest.mark.parametrize("value,kind,expected", [
    ("4711223344 #", FieldKind.REFERENCE, "4711223344"),
    ("1250 00", FieldKind.AMOUNT, "1250,00"),
    ("12 50", FieldKind.AMOUNT, "12,50"),
    ("1234567#89#", FieldKind.ACCOUNT_NUMBER, "1234567"),
])
def test_format_display_value(value, kind, expected):
    assert format_display_value(value, kind) == expected


def test_empty_fields():
    fields = InvoiceFields()
    assert not fields.is_complete
    assert fields.display() == {"reference": None, "amount": None, "account_number": None}


def test_set_get_clear():
    fields = InvoiceFields()
    fields.set(FieldKind.AMOUNT, "1250 00")
    assert fields.amount == "1250 00"
    assert fields.get(FieldKind.AMOUNT) == "1250 00"
    assert fields.to_dict()["amount"] == "1250 00"

    fields.clear()
    assert fields.get(FieldKind.AMOUNT) is None


def test_complete():
    fields = InvoiceFields(reference="4711223344 #", amount="1250 00", account_number="1234567#89#")
    assert fields.is_complete
