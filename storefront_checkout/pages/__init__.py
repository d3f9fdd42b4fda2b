"""Page objects for the storefront, grouped behind a single Pages accessor."""
from functools import cached_property

from playwright.async_api import Page

from .cart_pane import CartPane
from .checkout import CheckoutPage
from .home import HomePage
from .login_pane import LoginPane
from .product_detail import ProductDetailPage
from .shop_all import ShopAllPage
from .signup_pane import SignUpPane


class Pages:
    """Lazily builds each page object once per Playwright page."""

    def __init__(self, page: Page):
        self.page = page

    @cached_property
    def home(self) -> HomePage:
        return HomePage(self.page)

    @cached_property
    def cart_pane(self) -> CartPane:
        return CartPane(self.page)

    @cached_property
    def login_pane(self) -> LoginPane:
        return LoginPane(self.page)

    @cached_property
    def sign_up_pane(self) -> SignUpPane:
        return SignUpPane(self.page)

    @cached_property
    def shop_all(self) -> ShopAllPage:
        return ShopAllPage(self.page)

    @cached_property
    def product_detail(self) -> ProductDetailPage:
        return ProductDetailPage(self.page)

    @cached_property
    def checkout(self) -> CheckoutPage:
        return CheckoutPage(self.page)


__all__ = [
    "CartPane",
    "CheckoutPage",
    "HomePage",
    "LoginPane",
    "Pages",
    "ProductDetailPage",
    "ShopAllPage",
    "SignUpPane",
]
