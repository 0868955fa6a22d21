from .api import ApiClient, ApiError, TokenStore
from .auth import AuthService
from .users import UserService, UserDirectory
from .documents import DocumentService, DocumentBrowser
from .product_entry import ProductEntryService
from .forms import ProductEntryForm
from .tables import FilteredTable
