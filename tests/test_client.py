from decimal import Decimal
import pytest
from client import (
    ApiClient, ApiError, AuthService, DocumentBrowser, DocumentService,
    ProductEntryForm, ProductEntryService, TokenStore, UserDirectory, UserService,
)


@pytest.fixture
def api(client, tmp_path):
    return ApiClient(base_url="http://testserver", session=client, token_store=TokenStore(tmp_path / "token.json"))


@pytest.fixture
def auth_service(api):
    return AuthService(api)


@pytest.fixture
def logged_in(auth_service, user_payload):
    auth_service.register(user_payload)
    return auth_service.login(user_payload["email"], user_payload["password"])


def test_token_store_roundtrip(tmp_path):
    store = TokenStore(tmp_path / "nested" / "token.json")

    assert store.get() is None
    store.set("abc")
    assert TokenStore(tmp_path / "nested" / "token.json").get() == "abc"
    store.clear()
    assert store.get() is None


def test_unreadable_token_file_is_ignored(tmp_path):
    path = tmp_path / "token.json"
    path.write_text("{not json")

    assert TokenStore(path).get() is None


def test_login_keeps_the_token_and_logout_drops_it(auth_service, logged_in, user_payload):
    assert auth_service.is_logged_in()
    assert auth_service.get_token() == logged_in["access_token"]
    assert auth_service.whoami()["email"] == user_payload["email"]

    auth_service.logout()

    assert not auth_service.is_logged_in()
    with pytest.raises(ApiError) as excinfo:
        auth_service.whoami()
    assert excinfo.value.status_code == 401


def test_register_failure_surfaces_the_message(auth_service, user_payload):
    auth_service.register(user_payload)

    with pytest.raises(ApiError) as excinfo:
        auth_service.register(user_payload)

    assert excinfo.value.status_code == 400
    assert excinfo.value.message == "User already exists"


def test_validation_errors_are_flattened(auth_service, user_payload):
    with pytest.raises(ApiError) as excinfo:
        auth_service.register({**user_payload, "cpf": "1"})

    assert excinfo.value.status_code == 422
    assert "11 digits" in excinfo.value.message


def test_user_service_and_directory(api, user_payload):
    users = UserService(api)
    maria = users.create_user(user_payload)
    users.create_user({**user_payload, "name": "Joao Lima", "email": "joao@example.com", "cpf": "98765432100"})

    directory = UserDirectory(users)
    directory.load()

    assert [u["name"] for u in directory.apply_filter("987.654")] == ["Joao Lima"]
    assert len(directory.apply_filter("  ")) == 2

    users.update_user(maria["id"], {"name": "Maria Souza Lima"})
    users.delete_user(maria["id"])
    assert [u["name"] for u in users.get_users()] == ["Joao Lima"]


def test_document_browser(api, logged_in, tmp_path, pdf_bytes):
    service = DocumentService(api)
    service.upload_document("Invoice-77.pdf", pdf_bytes)
    service.upload_document("contrato.pdf", pdf_bytes)
    browser = DocumentBrowser(service)

    found = browser.search(filename="INV")
    assert [d["filename"] for d in found] == ["Invoice-77.pdf"]
    assert len(browser.search()) == 2

    saved = browser.download(found[0], tmp_path)
    assert saved.read_bytes() == pdf_bytes


def test_entry_form_against_the_api(api, logged_in, product, supplier, pdf_bytes):
    notices = []
    form = ProductEntryForm(ProductEntryService(api), notify=notices.append)
    form.load()
    assert form.entries.rows == []
    assert [p["name"] for p in form.products] == [product["name"]]

    form.set_value("product_id", str(product["id"]))
    assert form.on_product_id_blur()
    form.select_supplier_name(supplier["name"])
    form.set_value("quantity", "2")
    form.set_value("unit_value", "10.5")
    form.set_value("invoice_number", "NF-900")
    assert form.select_file("nf-900.pdf", "application/pdf", pdf_bytes)

    saved = form.submit()

    assert notices == []
    assert Decimal(saved["total_value"]) == Decimal("21.00")
    assert saved["supplier_name"] == supplier["name"]
    assert form.entries.rows == [saved]
    assert form.values["invoice_number"] == ""

    assert form.delete_entry(saved)
    assert form.entries.rows == []


def test_entry_form_reports_server_errors(api, logged_in, product, supplier, pdf_bytes):
    notices = []
    form = ProductEntryForm(ProductEntryService(api), notify=notices.append)
    form.load()
    form.values.update(product_id=product["id"], supplier_id=supplier["id"] + 100,
                       quantity="1", unit_value="1", total_value="1.00", invoice_number="NF-1")
    form.select_file("nf.pdf", "application/pdf", pdf_bytes)

    assert form.submit() is None
    assert notices == ["Error saving: Supplier not found"]


def test_lookups_by_id_swallow_failures(api):
    service = ProductEntryService(api)

    assert service.get_product_by_id(404) is None
    assert service.get_supplier_by_id("abc") is None
