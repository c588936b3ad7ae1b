import typer
from rich.console import Console
from rich.table import Table
from typing import List
from datetime import datetime

from studylist.database import SessionLocal, init_db
from studylist.exceptions import StudyListError
from studylist.logging import configure_logging
from studylist.schemas import StudyItem
from studylist.store import StudyItemStore
from studylist.study_list import StudyList

app = typer.Typer(help="Study To-Do List CLI - track study topics and revise them on a schedule")
console = Console()

TAB_TODAY = "Today"
TAB_COMPLETED = "Completed"
TAB_TO_REVISE = "What to revise today"


def get_study_list() -> StudyList:
    """Load the study list from the configured database"""
    init_db()
    return StudyList(StudyItemStore(SessionLocal)).load()


def format_local_date(value) -> str:
    """Render a datetime or ISO string as a local YYYY-MM-DD date"""
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    return value.astimezone().strftime("%Y-%m-%d")


def print_history(item: StudyItem):
    for entry in item.history:
        console.print(f"    {format_local_date(entry.date)} - {entry.action}")


def fail(message: str):
    console.print(f"[red]✗[/red] {message}")
    raise typer.Exit(code=1)


@app.callback()
def main():
    """Configure logging before any command runs"""
    configure_logging()

@app.command()
def init():
    """Initialize database tables"""
    init_db()
    console.print("[green]✓[/green] Database initialized successfully!")

@app.command()
def add(text: str = typer.Argument(..., help="What do you want to study?")):
    """Add a new study item to today's list"""
    item = get_study_list().add(text)
    if item is None:
        console.print("[yellow]Nothing to add - study text is empty.[/yellow]")
        return
    console.print(f"[green]✓[/green] Added: {item.text}")
    console.print(f"  ID: {item.id}")

@app.command()
def complete(item_id: str):
    """Mark a study item as completed"""
    try:
        item = get_study_list().complete(item_id)
    except StudyListError as e:
        fail(str(e))

    console.print(f"[green]✓[/green] Completed: {item.text}")
    console.print(f"  Next review: {format_local_date(item.next_review_date)}")

@app.command()
def revise(item_id: str):
    """Record a revision of a completed study item"""
    try:
        item = get_study_list().revise(item_id)
    except StudyListError as e:
        fail(str(e))

    console.print(f"[green]✓[/green] Revised: {item.text} (Revised {item.repetitions} times)")
    console.print(f"  Next review: {format_local_date(item.next_review_date)}")

@app.command()
def today():
    """List study items not yet completed, newest first"""
    items = get_study_list().tabs().today
    console.print(f"\n[bold]{TAB_TODAY}[/bold]")
    if not items:
        console.print("[dim]Nothing left to study today.[/dim]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="cyan")
    table.add_column("Topic", style="green")
    for item in items:
        table.add_row(item.id, item.text)
    console.print(table)

@app.command()
def completed():
    """List completed study items with their history"""
    items = get_study_list().tabs().completed
    console.print(f"\n[bold]{TAB_COMPLETED}[/bold]")
    if not items:
        console.print("[dim]No completed items yet.[/dim]")
        return

    for item in items:
        console.print(f"  {item.text} (Revised {item.repetitions} times)")
        print_history(item)

@app.command("to-revise")
def to_revise():
    """List completed items that are due for revision"""
    study_list = get_study_list()
    items: List[StudyItem] = study_list.tabs().to_revise
    console.print(f"\n[bold]{TAB_TO_REVISE}[/bold]")
    if not items:
        console.print("[dim]Nothing to revise today.[/dim]")
        return

    for item in items:
        overdue = study_list.scheduler.days_overdue(item)
        overdue_str = f" [red]({overdue} days overdue)[/red]" if overdue > 0 else ""
        console.print(f"  [cyan]{item.id}[/cyan] {item.text}{overdue_str}")
        print_history(item)

@app.command()
def history(item_id: str):
    """Show the completion/revision history of a study item"""
    try:
        item = get_study_list().get(item_id)
    except StudyListError as e:
        fail(str(e))

    console.print(f"\n[bold]{item.text}[/bold] (Revised {item.repetitions} times)")
    if not item.history:
        console.print("[dim]No history yet.[/dim]")
        return
    print_history(item)

@app.command()
def clear(yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation")):
    """Delete all study items (WARNING: irreversible!)"""
    if not yes and not typer.confirm("This will DELETE ALL study items. Are you sure?"):
        console.print("[yellow]Cancelled.[/yellow]")
        return

    get_study_list().clear()
    console.print("[green]✓[/green] All study items cleared.")

if __name__ == "__main__":
    app()
