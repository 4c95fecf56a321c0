# cli.py - interactive product catalog console
import os
import sys
from datetime import datetime
from typing import List, Dict, Any, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk.catalog import CatalogClient, CatalogError

console = Console()
c = CatalogClient(
    base_url=os.getenv("CATALOG_URL", "http://127.0.0.1:8085"),
    api_key=os.getenv("API_KEY") or None,
)

status_message = "Ready"
product_cache: List[Dict[str, Any]] = []

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def products_table(products: List[Dict[str, Any]], title: str = "📦 Products Catalog") -> Table:
    table = Table(
        title=title,
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=12)
    table.add_column("Name", style="bold", width=20)
    table.add_column("Description", width=30)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Category", width=15)
    table.add_column("Stock", width=8)

    for p in products:
        in_stock = p.get("inStock", True)
        table.add_row(
            str(p.get("id", "N/A")),
            p.get("name", "N/A"),
            p.get("description") or "",
            f"${float(p.get('price', 0)):.2f}",
            p.get("category", "N/A"),
            "[green]yes[/green]" if in_stock else "[red]no[/red]",
        )
    return table


def show_products(products: List[Dict[str, Any]], title: str = "📦 Products Catalog"):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return
    console.print(products_table(products, title))


def show_page(result: Dict[str, Any]):
    total = result.get("totalItems", 0)
    page, limit = result.get("page", 1), result.get("limit", 10)
    pages = max(1, -(-total // limit)) if limit else 1
    show_products(result.get("data", []), title=f"📦 Page {page}/{pages} ({total} items)")


def show_stats(stats: Dict[str, int]):
    if not stats:
        console.print("[italic yellow]No products in the catalog[/italic yellow]")
        return
    table = Table(title="📊 Products per category", box=box.ROUNDED, header_style="bold yellow")
    table.add_column("Category", width=20)
    table.add_column("Count", justify="right", width=8)
    for category, count in stats.items():
        table.add_row(category, str(count))
    console.print(table)


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner.
    Returns the result, or None after printing the error.
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)

        if success_msg:
            status_message = success_msg
            console.print(show_status(success_msg, True))
        return result
    except CatalogError as e:
        status_message = f"Error: {e.message}"
        console.print(show_status(f"{e.type} ({e.status_code}): {e.message}", False))
        return None
    except Exception as e:
        status_message = f"Error: {e}"
        console.print(show_status(f"Error: {e}", False))
        return None


# ---------------------------
# Autocompletion helpers
# ---------------------------
def refresh_cache():
    global product_cache
    result = try_api(c.list_products, limit=1000)
    product_cache = result.get("data", []) if result else []


def get_product_completer():
    if not product_cache:
        refresh_cache()
    words = [p.get("id", "") for p in product_cache] + [p.get("name", "") for p in product_cache]
    return WordCompleter([w for w in words if w], ignore_case=True)


def get_category_completer():
    if not product_cache:
        refresh_cache()
    return WordCompleter(sorted({p.get("category", "") for p in product_cache} - {""}), ignore_case=True)


# ---------------------------
# Header / input helpers
# ---------------------------
def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Product Catalog",
        "[bold blue]Catalog CLI with Autocomplete[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_float(message: str, default: float = 10.0) -> float:
    while True:
        raw = Prompt.ask(message, default=str(default))
        try:
            return float(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


def ask_product_fields(current: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    current = current or {}
    name = prompt_with_autocomplete("Product name", default=current.get("name", ""))
    description = prompt_with_autocomplete("Description", default=current.get("description") or "")
    price = ask_float("💰 Price", default=float(current.get("price", 10.0)))
    category = prompt_with_autocomplete("🏷️ Category", completer=get_category_completer(),
                                        default=current.get("category", ""))
    in_stock = Confirm.ask("In stock?", default=current.get("inStock", True))
    fields = {"name": name, "price": price, "category": category, "inStock": in_stock}
    # blank clears it; leaving the key out would keep the stored description
    fields["description"] = description or None
    return fields


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message, product_cache

    console.clear()
    console.print(create_header())
    refresh_cache()

    while True:
        if status_message:
            console.print(show_status(status_message, not status_message.startswith("Error")))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "📦 List products", "6", "✏️ Update product"),
            ("2", "🏷️ Filter by category", "7", "🗑️ Delete product"),
            ("3", "🔍 Search products", "8", "📊 Category stats"),
            ("4", "ℹ️ Get product by ID", "9", "🔄 Reset catalog"),
            ("5", "➕ Create product", "q", "👋 Quit"),
        ]
        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 10)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            page = IntPrompt.ask("Page", default=1)
            limit = IntPrompt.ask("Items per page", default=10)
            result = try_api(c.list_products, page=page, limit=limit, success_msg="Products loaded")
            if result is not None:
                show_page(result)

        elif choice == "2":
            category = prompt_with_autocomplete("Category", completer=get_category_completer())
            result = try_api(c.list_products, category=category, success_msg=f"Filtered by '{category}'")
            if result is not None:
                show_page(result)

        elif choice == "3":
            term = prompt_with_autocomplete("Search text")
            res = try_api(c.search_products, term, success_msg=f"Search for '{term}' completed")
            if res is not None:
                show_products(res, title=f"🔍 Results for '{term}'")

        elif choice == "4":
            pid = prompt_with_autocomplete("Product ID", completer=get_product_completer())
            resp = try_api(c.get_product, pid, success_msg=f"Product {pid} loaded")
            if resp:
                show_products([resp])

        elif choice == "5":
            fields = ask_product_fields()
            resp = try_api(
                c.create_product, fields["name"], fields["price"], fields["category"],
                fields.get("description"), fields["inStock"],
                success_msg=f"Product '{fields['name']}' created"
            )
            if resp:
                console.print(Panel(f"Created product: [green]{resp['id']}[/green]"))
                refresh_cache()

        elif choice == "6":
            pid = prompt_with_autocomplete("Product ID", completer=get_product_completer())
            current = try_api(c.get_product, pid)
            if current:
                fields = ask_product_fields(current)
                resp = try_api(c.update_product, pid, success_msg=f"Product {pid} updated", **fields)
                if resp:
                    show_products([resp])
                    refresh_cache()

        elif choice == "7":
            pid = prompt_with_autocomplete("Product ID", completer=get_product_completer())
            if Confirm.ask(f"[red]Delete product {pid}?[/red]"):
                try_api(c.delete_product, pid, success_msg=f"Product {pid} deleted")
                refresh_cache()

        elif choice == "8":
            stats = try_api(c.product_stats, success_msg="Stats loaded")
            if stats is not None:
                show_stats(stats)

        elif choice == "9":
            if Confirm.ask("[red]This will restore the seed catalog. Continue?[/red]"):
                resp = try_api(c.reset, success_msg="Catalog reset")
                console.print(resp)
                product_cache = []

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Bye! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
    except Exception as e:
        console.print(f"\n\n[bold red]Unexpected error: {e}[/bold red]")
        sys.exit(1)
