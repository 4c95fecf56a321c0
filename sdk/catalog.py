# sdk/catalog.py
import requests
import httpx
from typing import Optional, Dict, Any
from rich import print


class CatalogError(Exception):
    """Raised for any non-2xx response; carries the server's error body."""

    def __init__(self, status_code: int, type_: str, message: str):
        super().__init__(f"{status_code} {type_}: {message}")
        self.status_code = status_code
        self.type = type_
        self.message = message

    @classmethod
    def from_response(cls, r) -> "CatalogError":
        try:
            err = r.json().get("error", {})
        except ValueError:
            err = {}
        if not isinstance(err, dict):
            err = {"message": str(err)}
        return cls(r.status_code, err.get("type", "HTTPError"), err.get("message", r.text))


class CatalogClient:
    def __init__(self, base_url: str = "http://localhost:8085", api_key: Optional[str] = None,
                 timeout: int = 10, session=None):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        if api_key:
            self.session.headers.update({"x-api-key": api_key})

    def _check(self, r):
        if r.status_code >= 400:
            raise CatalogError.from_response(r)
        return r

    def reset(self):
        r = self.session.post(f"{self.base_url}/reset", timeout=self.timeout)
        return self._check(r).json()

    # Products
    def list_products(self, category: Optional[str] = None, page: Optional[int] = None, limit: Optional[int] = None):
        params = {}
        if category:
            params["category"] = category
        if page is not None:
            params["page"] = str(page)
        if limit is not None:
            params["limit"] = str(limit)
        r = self.session.get(f"{self.base_url}/api/products", params=params, timeout=self.timeout)
        return self._check(r).json()

    def get_product(self, product_id: str):
        r = self.session.get(f"{self.base_url}/api/products/{product_id}", timeout=self.timeout)
        return self._check(r).json()

    def create_product(self, name: str, price: float, category: str,
                       description: Optional[str] = None, in_stock: Optional[bool] = None):
        payload: Dict[str, Any] = {"name": name, "price": price, "category": category}
        if description is not None:
            payload["description"] = description
        if in_stock is not None:
            payload["inStock"] = in_stock
        r = self.session.post(f"{self.base_url}/api/products", json=payload, timeout=self.timeout)
        return self._check(r).json()

    def update_product(self, product_id: str, **fields):
        r = self.session.put(f"{self.base_url}/api/products/{product_id}", json=fields, timeout=self.timeout)
        return self._check(r).json()

    def delete_product(self, product_id: str) -> None:
        r = self.session.delete(f"{self.base_url}/api/products/{product_id}", timeout=self.timeout)
        self._check(r)

    def search_products(self, q: str):
        r = self.session.get(f"{self.base_url}/api/products/search", params={"q": q}, timeout=self.timeout)
        return self._check(r).json()

    def product_stats(self):
        r = self.session.get(f"{self.base_url}/api/products/stats", timeout=self.timeout)
        return self._check(r).json()

    # Async create (used by demo_concurrent.py)
    async def create_product_async(self, name: str, price: float, category: str,
                                   client: Optional[httpx.AsyncClient] = None):
        payload = {"name": name, "price": price, "category": category}
        headers = {"x-api-key": self.api_key} if self.api_key else {}
        if client is not None:
            r = await client.post(f"{self.base_url}/api/products", json=payload, headers=headers)
            return self._check(r).json()
        async with httpx.AsyncClient(timeout=self.timeout) as ac:
            r = await ac.post(f"{self.base_url}/api/products", json=payload, headers=headers)
            return self._check(r).json()


def _build_parser():
    import argparse

    parser = argparse.ArgumentParser(description="Product catalog CLI")
    parser.add_argument("--base-url", default="http://127.0.0.1:8085")
    parser.add_argument("--api-key", default=None)
    subparsers = parser.add_subparsers(dest="command", required=True)

    lp = subparsers.add_parser("list-products", help="List products")
    lp.add_argument("--category", help="Filter products by category")
    lp.add_argument("--page", type=int, help="Page number")
    lp.add_argument("--limit", type=int, help="Items per page")

    sp = subparsers.add_parser("search", help="Search products by name or description")
    sp.add_argument("--q", required=True, help="Search text")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True, help="ID of the product")

    cp = subparsers.add_parser("create-product", help="Create a new product")
    cp.add_argument("--name", required=True, help="Product name")
    cp.add_argument("--price", type=float, required=True, help="Price")
    cp.add_argument("--category", required=True, help="Product category")
    cp.add_argument("--description", help="Product description")
    cp.add_argument("--out-of-stock", action="store_true", help="Mark the product as out of stock")

    up = subparsers.add_parser("update-product", help="Update a product")
    up.add_argument("--product-id", required=True, help="ID of the product")
    up.add_argument("--name", required=True, help="Product name")
    up.add_argument("--price", type=float, required=True, help="Price")
    up.add_argument("--category", required=True, help="Product category")
    up.add_argument("--description", help="Product description")

    dp = subparsers.add_parser("delete-product", help="Delete a product")
    dp.add_argument("--product-id", required=True, help="ID of the product")

    subparsers.add_parser("stats", help="Product count per category")
    subparsers.add_parser("reset", help="Reset the store to its seed data")
    return parser


if __name__ == "__main__":
    args = _build_parser().parse_args()
    c = CatalogClient(base_url=args.base_url, api_key=args.api_key)

    try:
        if args.command == "list-products":
            print(c.list_products(args.category, args.page, args.limit))
        elif args.command == "search":
            print(c.search_products(args.q))
        elif args.command == "get-product":
            print(c.get_product(args.product_id))
        elif args.command == "create-product":
            print(c.create_product(args.name, args.price, args.category, args.description,
                                   False if args.out_of_stock else None))
        elif args.command == "update-product":
            fields = {"name": args.name, "price": args.price, "category": args.category}
            if args.description is not None:
                fields["description"] = args.description
            print(c.update_product(args.product_id, **fields))
        elif args.command == "delete-product":
            c.delete_product(args.product_id)
            print(f"[green]Deleted {args.product_id}[/green]")
        elif args.command == "stats":
            print(c.product_stats())
        elif args.command == "reset":
            print(c.reset())
    except CatalogError as e:
        print(f"[red]{e}[/red]")
        raise SystemExit(1)
