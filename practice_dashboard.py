"""Client dashboard for the Practice CRUD API.

This module contains everything on the client side of the practice
system:

* :class:`PracticeAPI` – a thin ``requests`` wrapper around the five
  HTTP endpoints.
* :class:`Dashboard` – the view state (users, products, status line,
  loading flag and the two input forms) together with the user actions
  that drive the API.
* :func:`run_console` – a small interactive front end over a
  :class:`Dashboard`, started by running this file directly.

Form values live in the dashboard's own state and are changed through
:meth:`Dashboard.set_field`; the actions read them from there.  Only one
action may be in flight at a time.  While ``loading`` is true the
controls are disabled and any further action is refused.

The base URL is read from ``PRACTICE_API_URL`` (default
``http://localhost:3000``).
"""

from __future__ import annotations

import logging
import os
import sys
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Union

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3000"
CONNECTION_ERROR = "Error: Failed to connect to server"


@dataclass
class ApiResult:
    """Outcome of one HTTP call: status code plus the decoded JSON body."""

    status_code: int
    payload: Dict[str, Any]

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def data(self) -> Any:
        return self.payload.get("data")

    @property
    def error(self) -> Optional[str]:
        return self.payload.get("error")


class PracticeAPI:
    """Client for the practice API.

    Any object with a ``requests``‑compatible ``request`` method can be
    passed as ``session``; tests use the FastAPI test client.  Transport
    failures propagate as ``requests.RequestException`` and undecodable
    bodies as ``ValueError``.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        session: Optional[Any] = None,
        timeout: float = 10,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, json_body: Any = None) -> ApiResult:
        url = f"{self.base_url}{path}"
        logger.debug("Sending %s request to %s", method, url)
        response = self.session.request(method, url, json=json_body, timeout=self.timeout)
        payload = response.json()
        if not isinstance(payload, dict):
            raise ValueError(f"Unexpected response body from {url}: {payload!r}")
        return ApiResult(status_code=response.status_code, payload=payload)

    def status(self) -> ApiResult:
        return self._request("GET", "/api/status")

    def list_users(self) -> ApiResult:
        return self._request("GET", "/api/users")

    def create_user(self, name: str, email: str) -> ApiResult:
        return self._request("POST", "/api/users", {"name": name, "email": email})

    def list_products(self) -> ApiResult:
        return self._request("GET", "/api/products")

    def create_product(self, name: str, price: float, category: str) -> ApiResult:
        return self._request(
            "POST", "/api/products", {"name": name, "price": price, "category": category}
        )


@dataclass
class StatusMessage:
    text: str = ""
    is_error: bool = False


def _empty_user_form() -> Dict[str, str]:
    return {"name": "", "email": ""}


def _empty_product_form() -> Dict[str, str]:
    return {"name": "", "price": "", "category": ""}


def _parse_price(raw: str) -> Union[int, float]:
    """Parse the price input, keeping whole numbers as ints."""
    try:
        return int(raw)
    except ValueError:
        return float(raw)


@dataclass
class Dashboard:
    """View state and actions of the dashboard.

    Every action is a single request/response cycle: it sets
    ``loading``, calls the API, updates the lists and the status line,
    and always clears ``loading`` again.  An action started while
    another one is running is refused and returns ``False``.
    """

    api: PracticeAPI
    users: List[Dict[str, Any]] = field(default_factory=list)
    products: List[Dict[str, Any]] = field(default_factory=list)
    status: StatusMessage = field(default_factory=StatusMessage)
    loading: bool = False
    user_form: Dict[str, str] = field(default_factory=_empty_user_form)
    product_form: Dict[str, str] = field(default_factory=_empty_product_form)
    _busy: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    @property
    def controls_enabled(self) -> bool:
        return not self.loading

    def set_field(self, form: str, name: str, value: str) -> None:
        """Update one input of ``form`` (``"user"`` or ``"product"``)."""
        forms = {"user": self.user_form, "product": self.product_form}
        if form not in forms:
            raise ValueError(f"Unknown form {form!r}")
        if name not in forms[form]:
            raise ValueError(f"Unknown field {name!r} for the {form} form")
        forms[form][name] = value

    def _set_status(self, text: str, is_error: bool = False) -> None:
        self.status = StatusMessage(text=text, is_error=is_error)

    def _fail(self, result: ApiResult, fallback: str) -> None:
        self._set_status(f"Error: {result.error or fallback}", is_error=True)

    def _run(self, action: Callable[[], None]) -> bool:
        """Run ``action`` as one guarded request cycle."""
        if not self._busy.acquire(blocking=False):
            logger.debug("Ignoring action while another request is in flight")
            return False
        self.loading = True
        try:
            action()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Request failed: %s", exc)
            self._set_status(CONNECTION_ERROR, is_error=True)
        finally:
            self.loading = False
            self._busy.release()
        return True

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def _fetch_users(self) -> ApiResult:
        result = self.api.list_users()
        if result.ok:
            self.users = list(result.data or [])
        return result

    def load_users(self) -> bool:
        def action() -> None:
            result = self._fetch_users()
            if result.ok:
                self._set_status("Users loaded successfully!")
            else:
                self._fail(result, "Failed to load users")

        return self._run(action)

    def add_user(self) -> bool:
        if self.loading:
            return False
        # Values are sent as typed; stripping only decides emptiness.
        name = self.user_form["name"]
        email = self.user_form["email"]
        if not name.strip() or not email.strip():
            self._set_status("Please fill in both name and email", is_error=True)
            return False

        def action() -> None:
            result = self.api.create_user(name, email)
            if not result.ok:
                self._fail(result, "Failed to add user")
                return
            self.user_form = _empty_user_form()
            self._fetch_users()
            self._set_status("User added successfully!")

        return self._run(action)

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------
    def _fetch_products(self) -> ApiResult:
        result = self.api.list_products()
        if result.ok:
            self.products = list(result.data or [])
        return result

    def load_products(self) -> bool:
        def action() -> None:
            result = self._fetch_products()
            if result.ok:
                self._set_status("Products loaded successfully!")
            else:
                self._fail(result, "Failed to load products")

        return self._run(action)

    def add_product(self) -> bool:
        if self.loading:
            return False
        name = self.product_form["name"]
        raw_price = self.product_form["price"]
        category = self.product_form["category"]
        if not name.strip() or not raw_price.strip() or not category.strip():
            self._set_status("Please fill in all product fields", is_error=True)
            return False
        try:
            price = _parse_price(raw_price)
        except ValueError:
            self._set_status("Error: Price must be a number", is_error=True)
            return False

        def action() -> None:
            result = self.api.create_product(name, price, category)
            if not result.ok:
                self._fail(result, "Failed to add product")
                return
            self.product_form = _empty_product_form()
            self._fetch_products()
            self._set_status("Product added successfully!")

        return self._run(action)

    # ------------------------------------------------------------------
    # Connection check
    # ------------------------------------------------------------------
    def test_connection(self) -> bool:
        def action() -> None:
            result = self.api.status()
            if result.ok:
                self._set_status(f"Server Status: {result.payload.get('message')}")
            else:
                self._fail(result, "Server not responding")

        return self._run(action)


# ----------------------------------------------------------------------
# Console front end
# ----------------------------------------------------------------------
HELP_TEXT = """Commands:
  status        test the connection to the server
  users         list users
  products      list products
  add-user      add a user (prompts for name and email)
  add-product   add a product (prompts for name, price and category)
  help          show this message
  quit          exit"""


def _format_status(status: StatusMessage) -> str:
    marker = "!" if status.is_error else "*"
    return f"[{marker}] {status.text}"


def _format_user(user: Dict[str, Any]) -> str:
    return f"  {user.get('id')}  {user.get('name')} <{user.get('email')}>"


def _format_product(product: Dict[str, Any]) -> str:
    return f"  {product.get('id')}  {product.get('name')}  ${product.get('price')}  ({product.get('category')})"


def run_console(
    dashboard: Dashboard,
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> None:
    """Read commands until ``quit`` or end of input, printing the results."""
    output(HELP_TEXT)
    while True:
        try:
            command = input_fn("> ").strip().lower()
        except EOFError:
            break
        if command in ("quit", "exit"):
            break
        if not command:
            continue
        if command == "help":
            output(HELP_TEXT)
            continue
        if command == "status":
            dashboard.test_connection()
        elif command == "users":
            dashboard.load_users()
            for user in dashboard.users:
                output(_format_user(user))
        elif command == "products":
            dashboard.load_products()
            for product in dashboard.products:
                output(_format_product(product))
        elif command == "add-user":
            for name in ("name", "email"):
                dashboard.set_field("user", name, input_fn(f"{name}: "))
            dashboard.add_user()
        elif command == "add-product":
            for name in ("name", "price", "category"):
                dashboard.set_field("product", name, input_fn(f"{name}: "))
            dashboard.add_product()
        else:
            output(f"Unknown command {command!r}; type 'help' for a list")
            continue
        output(_format_status(dashboard.status))


def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s [%(levelname)s] %(message)s")
    base_url = os.getenv("PRACTICE_API_URL") or DEFAULT_BASE_URL
    dashboard = Dashboard(api=PracticeAPI(base_url))
    try:
        run_console(dashboard)
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    main()
