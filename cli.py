# cli.py - interactive basket client with autocomplete
import os
import sys
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.text import Text
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk.client import StoreClient

console = Console()
c = StoreClient(base_url=os.environ.get("BOOTIQUE_URL", "http://127.0.0.1:8085"))


status_message = "Ready"
product_cache: List[Dict[str, Any]] = []
basket_cache = set()

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


def _money(value: Any) -> str:
    # prices arrive as decimal strings
    return f"${Decimal(str(value)):.2f}"


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]]):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title="📦 Products Catalog",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=8)
    table.add_column("Title", style="bold", width=20)
    table.add_column("Brand", width=15)
    table.add_column("Price", justify="right", width=12)

    for p in products:
        table.add_row(
            p.get("id", "N/A"),
            p.get("title", "N/A"),
            p.get("brand", "N/A"),
            _money(p.get("listPrice", "0")),
        )
    console.print(table)


def _title_for(product_id: str) -> str:
    for p in product_cache:
        if p.get("id") == product_id:
            return f"{p.get('brand', '')} {p.get('title', '')}".strip()
    return f"Product {product_id}"


def show_basket(basket_id: str, basket: Dict[str, Any]):
    title = Text()
    title.append("🛒 Basket - ", style="bold")
    title.append(basket_id, style="bold cyan")
    title.append(f" - Total: {_money(basket.get('totalPrice', '0'))}", style="bold green")

    items = basket.get("orderItems", [])
    if not items:
        console.print(Panel("Your basket is empty 🛍️", title=title, style="blue"))
        return

    table = Table(box=box.ROUNDED, header_style="bold blue", show_lines=True)
    table.add_column("Product", style="bold", width=30)
    table.add_column("Qty", justify="right", width=8)
    table.add_column("Price", justify="right", width=12)
    table.add_column("Subtotal", justify="right", width=12)

    for it in items:
        price = Decimal(str(it.get("price", "0")))
        qty = int(it.get("quantity", 0))
        table.add_row(
            _title_for(it.get("productId", "?")),
            str(qty),
            _money(price),
            _money(price * qty),
        )

    console.print(Panel(table, title=title, border_style="blue"))


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, on_error: Any = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner.
    Errors are shown in the status panel and on_error is returned.
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
    except Exception as e:
        status_message = f"Error: {e}"
        console.print(show_status(f"Error: {e}", False))
        return on_error


# ---------------------------
# Autocompletion helpers
# ---------------------------
def get_product_completer():
    global product_cache
    if not product_cache:
        product_cache = try_api(c.list_products) or []
    return WordCompleter([p.get("id", "") for p in product_cache if p.get("id")], ignore_case=True)


def get_basket_completer():
    return WordCompleter(sorted(basket_cache), ignore_case=True)


def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Bootique",
        "[bold blue]Basket CLI with Autocomplete[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_basket_id() -> str:
    basket_id = prompt_with_autocomplete("Enter basket (session) id", completer=get_basket_completer()).strip()
    if basket_id:
        basket_cache.add(basket_id)
    return basket_id


def lookup_product(pid: str):
    # get_product answers None for an unknown id; False means the call failed
    resp = try_api(c.get_product, pid, on_error=False)
    if resp:
        show_products([resp])
    elif resp is None:
        console.print(f"[yellow]No product with id {pid}[/yellow]")
    return resp


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global product_cache

    console.clear()
    console.print(create_header())

    product_cache = try_api(c.list_products) or []

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_row("1", "📦 List products", "3", "🛒 View basket")
        menu_table.add_row("2", "ℹ️ Get product by ID", "4", "➕ Add to basket")
        menu_table.add_row("", "", "q", "👋 Quit")
        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter(["1", "2", "3", "4", "q", "quit", "exit"])
        ).strip()

        if choice == "1":
            products = try_api(c.list_products, success_msg="Products loaded successfully")
            if products is not None:
                product_cache = products
                show_products(products)

        elif choice == "2":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer()).strip()
            lookup_product(pid)

        elif choice == "3":
            basket_id = ask_basket_id()
            resp = try_api(c.view_basket, basket_id, success_msg=f"Basket {basket_id} loaded")
            if resp is not None:
                show_basket(basket_id, resp)

        elif choice == "4":
            basket_id = ask_basket_id()
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer()).strip()
            qty = IntPrompt.ask("Enter quantity", default=1)
            resp = try_api(c.add_to_basket, basket_id, pid, qty, success_msg=f"Added {qty} of product {pid}")
            if resp is not None:
                show_basket(basket_id, resp)

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Thank you for shopping! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
