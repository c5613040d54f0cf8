"""Hotel-Konsole: Haupt-CLI.

Verwendung:
  python main.py                          Interaktives Menü (wie 'run')
  python main.py run                      Interaktives Menü starten
  python main.py run --nights 5           Buchungen über 5 Nächte
  python main.py rooms                    Zimmerbestand anzeigen
  python main.py config show              Konfiguration anzeigen
  python main.py config init              Standard-Konfiguration als YAML anlegen

Alle Buchungen leben nur im Speicher und gehen beim Beenden verloren.
"""

import logging
import sys
from datetime import date, timedelta
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich import box

console = Console()
logger = logging.getLogger(__name__)

MENU_EXIT = "4"


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_config_or_abort(config_path: Optional[Path]):
    """Lädt die Konfiguration (oder Standardwerte) bzw. bricht mit Fehlermeldung ab."""
    from config.manager import ConfigManager
    mgr = ConfigManager()
    try:
        return mgr, mgr.load_or_default(config_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red bold]Konfiguration fehlerhaft:[/red bold]\n{escape(str(e))}")
        sys.exit(1)


def _parse_int(raw: str) -> Optional[int]:
    try:
        return int(raw.strip())
    except ValueError:
        return None


# ─── INTERAKTIVE SITZUNG ──────────────────────────────────────────────────────

class HotelSession:
    """Eine interaktive Konsolensitzung über einem Katalog und einem Ledger.

    Liest Eingaben, ruft die Buchungslogik auf und stellt Meldungen dar.
    """

    def __init__(self, config, nights: Optional[int] = None,
                 today: Optional[date] = None) -> None:
        from booking.catalog import RoomCatalog
        from booking.ledger import ReservationLedger

        self.config = config
        self.nights = nights or config.default_nights
        self.today = today
        self.catalog = RoomCatalog.from_config(config)
        self.ledger = ReservationLedger(
            self.catalog,
            tax_rate=config.tax_rate,
            currency=config.currency_symbol,
            first_reservation_id=config.first_reservation_id,
            first_guest_id=config.first_guest_id,
            notify=self.show_notice,
        )

    # ─── Ausgabe ───

    def show_notice(self, notice) -> None:
        from export.console_renderer import notice_markup
        logger.debug(f"Meldung [{notice.kind}]")
        if notice.kind == "invoice":
            # Rechnung wird im check_out_flow als Panel dargestellt
            return
        console.print(notice_markup(notice))

    def _invalid(self, text: str) -> None:
        from booking.errors import invalid_input
        from models.notice import Notice
        error = invalid_input(text)
        self.show_notice(Notice(kind="invalid_input", text=f"Fehler: {error.message}"))

    def _display_menu(self) -> None:
        console.print()
        console.print(Panel(
            f"[bold]{self.config.hotel_name}[/bold] – Aktion wählen",
            border_style="cyan",
        ))
        console.print("  [bold]1.[/bold] Freie Zimmer anzeigen")
        console.print("  [bold]2.[/bold] Zimmer buchen")
        console.print("  [bold]3.[/bold] Check-out und Rechnung")
        console.print("  [bold]4.[/bold] Beenden")
        console.print("  [bold]5.[/bold] Reservierungen anzeigen")

    # ─── Abläufe ───

    def view_available_rooms_flow(self) -> None:
        from export.console_renderer import rooms_table
        available = self.ledger.available_rooms()
        if not available:
            console.print("[yellow]Aktuell keine Zimmer frei.[/yellow]")
            return
        console.print(rooms_table(available, "Freie Zimmer",
                                  self.config.currency_symbol))

    def book_room_flow(self) -> None:
        name = Prompt.ask("\nName des Gastes")
        contact = Prompt.ask("Kontakt (z.B. 555-1234)")
        room_number = _parse_int(Prompt.ask("Zimmernummer"))
        if room_number is None:
            self._invalid("Zimmernummer muss eine ganze Zahl sein.")
            return

        check_in = self.today or date.today()
        check_out = check_in + timedelta(days=self.nights)
        console.print(
            f"[dim]Buchungszeitraum angenommen: {check_in.isoformat()} "
            f"bis {check_out.isoformat()}[/dim]"
        )
        self.ledger.book_room(name, contact, room_number, check_in, check_out)

    def check_out_flow(self) -> None:
        from export.console_renderer import invoice_panel
        reservation_id = _parse_int(
            Prompt.ask("\nReservierungsnummer für den Check-out"))
        if reservation_id is None:
            self._invalid("Reservierungsnummer muss eine ganze Zahl sein.")
            return

        result = self.ledger.check_out(reservation_id)
        if result.ok:
            console.print(invoice_panel(result.invoice, self.config.currency_symbol))
            console.print(
                f"[green]✓[/green] Check-out abgeschlossen: Reservierung "
                f"{reservation_id}, Gesamtbetrag "
                f"{self.config.currency_symbol}{result.total:.2f}"
            )

    def reservations_flow(self) -> None:
        from export.console_renderer import reservations_table
        if not self.ledger.reservations:
            console.print("[dim]Noch keine Reservierungen.[/dim]")
            return
        console.print(reservations_table(self.ledger.reservations))

    def run(self) -> None:
        """Menüschleife bis 'Beenden' gewählt wird."""
        flows = {
            "1": self.view_available_rooms_flow,
            "2": self.book_room_flow,
            "3": self.check_out_flow,
            "5": self.reservations_flow,
        }
        console.print(f"[bold]Willkommen bei der Hotel-Konsole – "
                      f"{self.config.hotel_name}[/bold]")
        while True:
            self._display_menu()
            choice = Prompt.ask("Ihre Auswahl").strip()
            if choice == MENU_EXIT:
                console.print("Sitzung beendet. Auf Wiedersehen!")
                break
            if _parse_int(choice) is None:
                self._invalid("Bitte eine Zahl für die Menüauswahl eingeben.")
                continue
            flow = flows.get(choice)
            if flow is None:
                self._invalid("Ungültige Auswahl. Bitte 1, 2, 3, 4 oder 5 eingeben.")
                continue
            flow()


# ─── RUN ──────────────────────────────────────────────────────────────────────

@click.command("run")
@click.option("--nights", type=click.IntRange(min=1), default=None,
              help="Nächte pro Buchung (Standard aus Config).")
@click.pass_context
def cmd_run(ctx: click.Context, nights: Optional[int]):
    """Startet das interaktive Menü (Buchen, Check-out, Übersicht)."""
    mgr, config = _load_config_or_abort(ctx.obj["config_path"])
    HotelSession(config, nights=nights).run()


# ─── ROOMS ────────────────────────────────────────────────────────────────────

@click.command("rooms")
@click.pass_context
def cmd_rooms(ctx: click.Context):
    """Zeigt den Zimmerbestand laut Konfiguration an."""
    from booking.catalog import RoomCatalog
    from export.console_renderer import rooms_table

    mgr, config = _load_config_or_abort(ctx.obj["config_path"])
    catalog = RoomCatalog.from_config(config)
    console.print(rooms_table(catalog.all_rooms(), "Zimmerbestand",
                              config.currency_symbol))


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anzeigen oder anlegen."""


@cmd_config.command("show")
@click.pass_context
def config_show(ctx: click.Context):
    """Zeigt die aktuelle Konfiguration an."""
    mgr, config = _load_config_or_abort(ctx.obj["config_path"])

    console.print(Panel(
        f"[bold]{config.hotel_name}[/bold]  |  "
        f"Steuer: {config.tax_rate * 100:.0f}%  |  "
        f"Währung: {config.currency_symbol}",
        title="Hotelkonfiguration",
        border_style="cyan",
    ))

    table = Table(title="Zimmer", box=box.ROUNDED)
    table.add_column("Nr.")
    table.add_column("Kategorie")
    table.add_column("Preis/Nacht")
    for rd in config.rooms:
        table.add_row(str(rd.number), rd.category,
                      f"{config.currency_symbol}{rd.price:.2f}")
    console.print(table)

    console.print(
        f"\n[bold]Nummernkreise:[/bold] Reservierungen ab "
        f"{config.first_reservation_id} | Gäste ab {config.first_guest_id}"
    )
    console.print(f"[bold]Standard-Aufenthalt:[/bold] {config.default_nights} Nächte")


@cmd_config.command("init")
@click.option("--force", is_flag=True, default=False,
              help="Vorhandene Konfiguration überschreiben.")
@click.pass_context
def config_init(ctx: click.Context, force: bool):
    """Legt die Standard-Konfiguration als YAML-Datei an."""
    from config.defaults import default_hotel_config
    from config.manager import ConfigManager

    mgr = ConfigManager()
    target = ctx.obj["config_path"] or mgr.DEFAULT_CONFIG
    if target.exists() and not force:
        console.print(
            f"[yellow]Konfiguration existiert bereits: {target}[/yellow]\n"
            "Mit [bold]--force[/bold] überschreiben."
        )
        return
    mgr.save(default_hotel_config(), target)


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group(invoke_without_command=True)
@click.option("--config", "config_path", type=click.Path(path_type=Path),
              default=None, help="Pfad zur YAML-Konfiguration.")
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Ausführliches Logging.")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], verbose: bool):
    """Hotel-Konsole: Zimmerbestand, Buchungen und Check-out mit Rechnung.

    Starten Sie mit: python main.py run
    """
    _setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    if ctx.invoked_subcommand is None:
        ctx.invoke(cmd_run)


def main():
    """Einstiegspunkt. Ohne Befehl startet das interaktive Menü."""
    cli()


# Befehle registrieren
cli.add_command(cmd_run)
cli.add_command(cmd_rooms)
cli.add_command(cmd_config)


if __name__ == "__main__":
    main()
