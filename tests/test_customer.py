import pytest

from redirect_gateway.error_codes import ErrorCodes
from redirect_gateway.exceptions import DecodeError, NotFoundError
from redirect_gateway.models.requests import CreditCardRequest, CustomerRequest
from redirect_gateway.services.query_codec import decode

from .conftest import GATEWAY_URL, MERCHANT_ID, REDIRECT_URL


def test_transparent_redirect_urls(gateway):
    base = f"{GATEWAY_URL}/merchants/{MERCHANT_ID}"
    assert gateway.customer.transparent_redirect_create_url() == (
        base + "/customers/all/create_via_transparent_redirect_request"
    )
    assert gateway.customer.transparent_redirect_update_url() == (
        base + "/customers/all/update_via_transparent_redirect_request"
    )


def test_tr_data_for_update_is_valid(gateway):
    tr_data = gateway.customer.tr_data_for_update(CustomerRequest(customer_id="123"), REDIRECT_URL)
    data = decode(tr_data, gateway.config.private_key).data
    assert data["customer_id"] == "123"
    assert data["kind"] == "update_customer"


def test_create_without_params(gateway):
    result = gateway.customer.create()
    assert result.is_success
    assert result.target.id
    assert result.target.credit_cards == []


def test_create_with_id_and_fields(gateway):
    result = gateway.customer.create(CustomerRequest(
        id="customer_1", first_name="Bill", last_name="Gates", company="Microsoft", email="bill@example.com"
    ))
    assert result.is_success
    assert result.target.id == "customer_1"
    assert result.target.company == "Microsoft"


def test_create_with_taken_id(gateway):
    gateway.customer.create(CustomerRequest(id="taken"))
    result = gateway.customer.create(CustomerRequest(id="taken"))

    assert not result.is_success
    assert result.errors.for_object("customer").on("id")[0].code == ErrorCodes.Customer.IdIsInUse


def test_create_with_invalid_fields(gateway):
    result = gateway.customer.create(CustomerRequest(id="not valid!", email="nope"))

    customer_errors = result.errors.for_object("customer")
    assert customer_errors.on("id")[0].code == ErrorCodes.Customer.IdIsInvalid
    assert customer_errors.on("email")[0].code == ErrorCodes.Customer.EmailIsInvalid
    assert "Email is an invalid format." in result.message


def test_find_includes_cards(gateway):
    customer = gateway.customer.create().target
    gateway.credit_card.create(CreditCardRequest(
        customer_id=customer.id, number="4111111111111111", expiration_date="05/12"
    ))

    found = gateway.customer.find(customer.id)

    assert found.id == customer.id
    assert [card.last_four for card in found.credit_cards] == ["1111"]


@pytest.mark.parametrize("customer_id", ["", " ", None])
def test_find_with_blank_id(gateway, customer_id):
    with pytest.raises(NotFoundError):
        gateway.customer.find(customer_id)


def test_update(gateway):
    customer = gateway.customer.create(CustomerRequest(first_name="Old", email="old@example.com")).target
    result = gateway.customer.update(customer.id, CustomerRequest(first_name="New"))

    assert result.is_success
    assert result.target.first_name == "New"
    assert result.target.email == "old@example.com"


def test_delete_removes_customer_and_cards(gateway):
    customer = gateway.customer.create().target
    card = gateway.credit_card.create(CreditCardRequest(
        customer_id=customer.id, number="4111111111111111", expiration_date="05/12"
    )).target

    gateway.customer.delete(customer.id)

    with pytest.raises(NotFoundError):
        gateway.customer.find(customer.id)
    with pytest.raises(NotFoundError):
        gateway.credit_card.find(card.token)


def test_create_via_transparent_redirect(gateway, post_form):
    query_string = post_form(
        CustomerRequest(company="Trusted Co"),
        CustomerRequest(first_name="John", last_name="Doe", email="john@example.com"),
        gateway.customer.transparent_redirect_create_url(),
    )

    result = gateway.customer.confirm_transparent_redirect(query_string)

    assert result.is_success
    assert result.target.first_name == "John"
    assert result.target.company == "Trusted Co"
    assert gateway.customer.find(result.target.id).email == "john@example.com"


def test_update_via_transparent_redirect(gateway, post_form):
    customer = gateway.customer.create(CustomerRequest(first_name="John", last_name="Doe")).target
    query_string = post_form(
        CustomerRequest(customer_id=customer.id),
        CustomerRequest(last_name="Smith"),
        gateway.customer.transparent_redirect_update_url(),
    )

    result = gateway.customer.confirm_transparent_redirect(query_string)

    assert result.is_success
    assert result.target.id == customer.id
    assert result.target.first_name == "John"
    assert result.target.last_name == "Smith"


def test_create_via_transparent_redirect_with_errors(gateway, post_form):
    query_string = post_form(
        CustomerRequest(),
        CustomerRequest(email="not-an-email"),
        gateway.customer.transparent_redirect_create_url(),
    )

    result = gateway.customer.confirm_transparent_redirect(query_string)
    again = gateway.customer.confirm_transparent_redirect(query_string)

    assert not result.is_success
    assert result.errors.for_object("customer").on("email")[0].code == ErrorCodes.Customer.EmailIsInvalid
    assert not again.is_success


def test_gateway_level_confirm_dispatches_to_customer(gateway, post_form):
    query_string = post_form(
        CustomerRequest(),
        CustomerRequest(first_name="Any"),
        gateway.customer.transparent_redirect_create_url(),
    )

    result = gateway.confirm_transparent_redirect(query_string)

    assert result.target.first_name == "Any"


def test_confirm_credit_card_query_string_as_customer(gateway, post_form):
    customer = gateway.customer.create().target
    query_string = post_form(
        CreditCardRequest(customer_id=customer.id),
        CreditCardRequest(number="4111111111111111", expiration_date="05/12"),
        gateway.credit_card.transparent_redirect_create_url(),
    )
    with pytest.raises(DecodeError):
        gateway.customer.confirm_transparent_redirect(query_string)
