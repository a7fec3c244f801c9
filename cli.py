# cli.py
import sys
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import Completer, WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from inventory.config import Settings, get_settings
from inventory.core import ProductIn, ProductPatch, _make_product, apply_patch
from inventory.database import ProductRepository
from inventory.errors import InvalidQuantityError, InventoryError, ProductNotFoundError
from inventory.logging_config import setup_logging
from inventory.models import Product
from inventory.parsing import ParseResult, parse_decimal, parse_int
from inventory.seed import load_sample_products

# Custom prompt style for prompt_toolkit
custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})

MENU_OPTIONS = [
    ("1", "📦 Display All Products"),
    ("2", "🔍 Search Products"),
    ("3", "➕ Add New Product"),
    ("4", "✏️ Update Product"),
    ("5", "🗑️ Delete Product"),
    ("6", "🔄 Update Stock"),
    ("0", "👋 Exit"),
]

# ask(message, completer) -> raw line typed by the user
AskFn = Callable[[str, Optional[Completer]], str]


# ---------------------------
# Display helpers
# ---------------------------
def format_price(price: Decimal, currency: str = "$") -> str:
    # Half-up, as on a till receipt: 0.125 shows as 0.13
    cents = price.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{escape(currency)}{cents}"


def show_products(console: Console, products: List[Product], currency: str = "$", title: str = "📦 Products"):
    table = Table(
        title=title,
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
    )
    table.add_column("ID", style="dim", width=5)
    table.add_column("Name", style="bold", width=20)
    table.add_column("Category", width=15)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Stock", justify="right", width=10)

    for p in products:
        table.add_row(
            str(p.id),
            escape(p.name),
            escape(p.category),
            format_price(p.price, currency),
            str(p.stock),
        )
    console.print(table)


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{escape(message)}[/{style}]", title="Status")


def create_header(app_name: str):
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(f"[bold blue]{escape(app_name)}[/bold blue]", f"[dim]{now}[/dim]")
    return Panel(header, style="bold blue")


def create_menu(app_name: str):
    menu_table = Table.grid(padding=(0, 2))
    menu_table.add_column("Key", style="bold cyan", width=4)
    menu_table.add_column("Option", width=30)
    for row in MENU_OPTIONS:
        menu_table.add_row(*row)
    return Panel(menu_table, title=f"📋 {escape(app_name)}", border_style="yellow")


# ---------------------------
# Input helpers with autocomplete
# ---------------------------
def prompt_with_autocomplete(message: str, completer: Optional[Completer] = None) -> str:
    return prompt(f"{message} ", completer=completer, style=custom_style)


# ---------------------------
# Menu
# ---------------------------
class InventoryMenu:
    """
    Numbered text menu over a ProductRepository.

    Input goes through ``ask`` and output through ``console`` so the whole
    loop can be driven from tests.
    """

    def __init__(
        self,
        repo: ProductRepository,
        console: Optional[Console] = None,
        ask: Optional[AskFn] = None,
        settings: Optional[Settings] = None,
    ):
        self.repo = repo
        self.console = console or Console()
        self.ask = ask or prompt_with_autocomplete
        self.settings = settings or get_settings()
        self.running = False
        self.actions = {
            1: self.display_all_products,
            2: self.search_products,
            3: self.add_product,
            4: self.update_product,
            5: self.delete_product,
            6: self.update_stock,
            0: self.exit,
        }

    def run(self) -> None:
        self.running = True
        self.console.print(create_header(self.settings.app_name))

        while self.running:
            self.console.print(create_menu(self.settings.app_name))
            try:
                choice = self._read(parse_int, "Enter your choice:", WordCompleter([k for k, _ in MENU_OPTIONS]))
            except EOFError:
                self.exit()
                break

            action = self.actions.get(choice)
            if action is None:
                self.console.print("[yellow]Invalid choice. Please try again.[/yellow]")
                continue

            try:
                action()
            except EOFError:
                self.exit()
            except InventoryError as e:
                self.console.print(show_status(str(e), False))

    # ---------------------------
    # Actions
    # ---------------------------
    def display_all_products(self) -> None:
        products = self.repo.list()
        if not products:
            self.console.print("[italic yellow]No products found in the system.[/italic yellow]")
            return
        show_products(self.console, products, self.settings.currency_symbol, title="📦 All Products")

    def search_products(self) -> None:
        keyword = self.ask("Enter search keyword:", None)
        results = self.repo.search(keyword)
        if not results:
            self.console.print(f"[italic yellow]No products found matching the keyword: {escape(keyword)}[/italic yellow]")
            return
        show_products(self.console, results, self.settings.currency_symbol, title="🔍 Search Results")

    def add_product(self) -> None:
        self.console.rule("Add New Product")
        payload = ProductIn(
            name=self.ask("Enter product name:", None),
            category=self.ask("Enter product category:", self._category_completer()),
            price=self._read(parse_decimal, "Enter product price:"),
            stock=self._read(parse_int, "Enter initial stock:"),
        )
        product = self.repo.add(_make_product(payload))
        self.console.print(show_status(f"Product added successfully with ID: {product.id}"))

    def update_product(self) -> None:
        self.console.rule("Update Product")
        product = self._find_product("Enter product ID to update:")
        if product is None:
            return
        self._show_current(product, "Current details")

        patch = ProductPatch()
        name = self.ask("Enter new name (or press enter to keep current):", None)
        if name:
            patch.name = name
        category = self.ask("Enter new category (or press enter to keep current):", self._category_completer())
        if category:
            patch.category = category
        raw_price = self.ask("Enter new price (or press enter to keep current):", None)
        if raw_price:
            parsed = parse_decimal(raw_price)
            if parsed.ok:
                patch.price = parsed.value
            else:
                self.console.print("[red]Invalid price format. Price not updated.[/red]")

        updated = self.repo.update(apply_patch(product, patch))
        self.console.print(show_status("Product updated successfully"))
        show_products(self.console, [updated], self.settings.currency_symbol)

    def delete_product(self) -> None:
        self.console.rule("Delete Product")
        product = self._find_product("Enter product ID to delete:")
        if product is None:
            return
        self._show_current(product, "Product to delete")

        confirm = self.ask("Are you sure you want to delete this product? (y/n):", WordCompleter(["y", "n"]))
        if confirm.lower() != "y":
            self.console.print("[yellow]Delete operation cancelled.[/yellow]")
            return

        if self.repo.delete(product.id):
            self.console.print(show_status("Product deleted successfully."))
        else:
            self.console.print(show_status("Failed to delete product.", False))

    def update_stock(self) -> None:
        self.console.rule("Update Stock")
        product = self._find_product("Enter product ID:")
        if product is None:
            return
        self._show_current(product, "Current product")
        self.console.print(f"Current stock: {product.stock}")

        delta = self._read(parse_int, "Enter quantity to add (positive) or remove (negative):")
        try:
            updated = self.repo.adjust_stock(product.id, delta)
        except InvalidQuantityError:
            self.console.print(show_status(
                "Failed to update stock. Check if requested quantity exceeds available stock.", False
            ))
            return
        self.console.print(show_status(f"Stock updated successfully. New stock: {updated.stock}"))

    def exit(self) -> None:
        self.console.print(Panel.fit(
            f"[bold green]Exiting {escape(self.settings.app_name)}. Goodbye![/bold green]",
            title="Goodbye",
        ))
        self.running = False

    # ---------------------------
    # Helpers
    # ---------------------------
    def _read(self, parser: Callable[[str], ParseResult], message: str, completer: Optional[Completer] = None):
        while True:
            result = parser(self.ask(message, completer))
            if result.ok:
                return result.value
            self.console.print(f"[red]{escape(result.error)}[/red]")

    def _find_product(self, message: str) -> Optional[Product]:
        product_id = self._read(parse_int, message, self._id_completer())
        try:
            return self.repo.get(product_id)
        except ProductNotFoundError as e:
            self.console.print(f"[red]{escape(str(e))}[/red]")
            return None

    def _show_current(self, product: Product, label: str) -> None:
        show_products(self.console, [product], self.settings.currency_symbol, title=label)

    def _id_completer(self) -> WordCompleter:
        return WordCompleter([str(p.id) for p in self.repo.list()])

    def _category_completer(self) -> WordCompleter:
        categories = sorted({p.category for p in self.repo.list()})
        return WordCompleter(categories, ignore_case=True)


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)

    repo = ProductRepository()
    if settings.seed_samples:
        load_sample_products(repo)

    InventoryMenu(repo, settings=settings).run()


if __name__ == "__main__":
    console = Console()
    try:
        main()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
    except Exception as e:
        console.print(f"\n\n[bold red]Unexpected error: {escape(str(e))}[/bold red]")
        sys.exit(1)
