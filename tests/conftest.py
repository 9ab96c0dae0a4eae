"""
Shared fixtures.

Integration tests run the SDK against the in-process sandbox gateway: the
gateway's requests.Session gets a SandboxAdapter mounted for GATEWAY_URL, so
API calls and browser form posts both reach the FastAPI sandbox app.
"""
from typing import Any, Mapping, Union
from urllib.parse import urlsplit

import pytest
import requests

from redirect_gateway import PaymentGateway
from redirect_gateway.config import Configuration, Credentials
from redirect_gateway.models.requests import CreditCardRequest, CustomerRequest
from redirect_gateway.services.http import RequestsTransport
from redirect_gateway.services.query_codec import flatten

from tests.sandbox import SandboxAdapter, create_app


MERCHANT_ID = "integration_merchant_id"
PUBLIC_KEY = "integration_public_key"
PRIVATE_KEY = "integration_private_key"
GATEWAY_URL = "https://sandbox.gateway.test"
REDIRECT_URL = "http://example.com/path"


@pytest.fixture
def config() -> Configuration:
    return Configuration(
        gateway_url=GATEWAY_URL,
        credentials=Credentials(
            merchant_id=MERCHANT_ID,
            public_key=PUBLIC_KEY,
            private_key=PRIVATE_KEY,
        ),
    )


@pytest.fixture
def sandbox_app(config):
    return create_app(config)


@pytest.fixture
def vault(sandbox_app):
    return sandbox_app.state.vault


@pytest.fixture
def session(sandbox_app):
    session = requests.Session()
    session.mount(GATEWAY_URL, SandboxAdapter(sandbox_app))
    yield session
    session.close()


@pytest.fixture
def gateway(config, session) -> PaymentGateway:
    return PaymentGateway(config, RequestsTransport(config, session))


@pytest.fixture
def post_form(gateway, session):
    """
    Simulate the browser side of a Transparent Redirect.

    Posts the form fields plus trData to the gateway URL and returns the
    query string of the redirect back to the merchant.
    """

    def post(
        tr_params: Union[CreditCardRequest, CustomerRequest],
        form: Union[CreditCardRequest, CustomerRequest, Mapping[str, Any], None],
        url: str,
        redirect_url: str = REDIRECT_URL,
    ) -> str:
        if isinstance(form, (CreditCardRequest, CustomerRequest)):
            fields = flatten(form.to_params())
        else:
            fields = flatten(form or {})
        fields["tr_data"] = gateway.tr_data(tr_params, redirect_url)

        response = session.post(url, data=fields, allow_redirects=False)
        assert response.status_code == 303, response.text

        location = response.headers["Location"]
        assert location.startswith(redirect_url + "?")
        return urlsplit(location).query

    return post
