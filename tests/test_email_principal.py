import pytest
from pydantic import ValidationError

from docquery.models.EmailPrincipal import EmailPrincipal, new_principal
from docquery.query.exceptions import InvalidArgument


def test_new_principal_sets_all_fields():
    principal = new_principal("alice@example.com", "reader", display_name="Alice", is_primary=True)
    assert principal.address == "alice@example.com"
    assert principal.relation_tag == "reader"
    assert principal.display_name == "Alice"
    assert principal.is_primary is True


def test_new_principal_defaults():
    principal = new_principal("bob@example.com", "collaborator")
    assert principal.display_name is None
    assert principal.is_primary is False


@pytest.mark.parametrize("address", ["", None])
def test_new_principal_rejects_empty_address(address):
    with pytest.raises(InvalidArgument):
        new_principal(address, "reader")


def test_invalid_argument_is_a_value_error():
    assert issubclass(InvalidArgument, ValueError)


def test_direct_construction_rejects_empty_address():
    with pytest.raises(ValidationError):
        EmailPrincipal(address="", relation_tag="reader")


def test_principal_is_immutable():
    principal = new_principal("alice@example.com", "reader")
    with pytest.raises(ValidationError):
        principal.address = "mallory@example.com"


def test_principals_compare_by_value():
    assert new_principal("a@x.com", "reader") == new_principal("a@x.com", "reader")
    assert new_principal("a@x.com", "reader") != new_principal("a@x.com", "collaborator")


def test_address_is_not_normalized():
    assert new_principal("Alice@Example.COM", "reader").address == "Alice@Example.COM"
