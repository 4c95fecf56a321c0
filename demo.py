#!/usr/bin/env python
import os
from sdk.catalog import CatalogClient, CatalogError

def main():
    c = CatalogClient(base_url="http://127.0.0.1:8085", api_key=os.getenv("API_KEY") or None)

    # -----------------------------
    # Reset to the seed catalog
    # -----------------------------
    print("Resetting catalog...")
    print(c.reset())

    # -----------------------------
    # Create products
    # -----------------------------
    print("\nCreating products...")
    mouse = c.create_product("Mouse", 25, "electronics", "Wireless optical mouse")
    kettle = c.create_product("Kettle", 40, "kitchen", in_stock=False)
    print(mouse)
    print(kettle)

    # -----------------------------
    # List, filter, paginate
    # -----------------------------
    print("\nFirst page, two per page...")
    print(c.list_products(page=1, limit=2))
    print("\nKitchen products...")
    print(c.list_products(category="kitchen"))

    # -----------------------------
    # Search and stats
    # -----------------------------
    print("\nSearching for 'laptop'...")
    print(c.search_products("laptop"))
    print("\nCategory stats...")
    print(c.product_stats())

    # -----------------------------
    # Update and delete
    # -----------------------------
    print("\nMarking the kettle in stock...")
    print(c.update_product(kettle["id"], name="Kettle", price=35, category="kitchen", inStock=True))
    print("\nDeleting the mouse...")
    c.delete_product(mouse["id"])
    try:
        c.get_product(mouse["id"])
    except CatalogError as e:
        print(f"Lookup after delete: {e}")

    # -----------------------------
    # Validation failure
    # -----------------------------
    print("\nCreating a product with a negative price...")
    try:
        c.create_product("Broken", -5, "misc")
    except CatalogError as e:
        print(f"Rejected: {e}")

if __name__ == "__main__":
    main()
