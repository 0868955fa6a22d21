from .users import create_user, get_user, get_users, update_user, delete_user, find_by_credentials, find_by_uid
from .auth import register, login, validate
from .suppliers import create_supplier, get_supplier, get_suppliers, update_supplier, delete_supplier, find_by_code
from .products import create_product, get_product, get_products, update_product, delete_product
from .documents import create_document, find_with_filters, find_by_id, get_document_content, delete_document
from .product_entry import create_entry, get_entry, get_entries, delete_entry
