"""CLI interface for pedigree-sync."""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from .config import CONFIG
from .exceptions import PedigreeError
from .storage.json_store import JsonFilePedigreeStore

app = typer.Typer(
    name="pedigree-sync",
    help="Inspect and edit patient links in stored pedigrees",
    add_completion=False,
)
console = Console()


def get_config():
    """Load configuration from environment (and .env)."""
    from dotenv import load_dotenv
    import os

    load_dotenv()

    return {
        "store_dir": os.getenv("PEDIGREE_STORE_DIR", CONFIG.store_dir),
        "log_level": os.getenv("PEDIGREE_LOG_LEVEL", "WARNING"),
    }


def _open_store(store_dir: Path | None) -> JsonFilePedigreeStore:
    from .logging import configure_logging

    config = get_config()
    configure_logging(config["log_level"])
    return JsonFilePedigreeStore(store_dir or Path(config["store_dir"]))


def _fail(message: str) -> None:
    console.print(f"[red]Error: {message}[/red]")
    raise typer.Exit(1)


@app.command()
def ids(
    pedigree_id: str = typer.Argument(..., help="Pedigree id"),
    store_dir: Path = typer.Option(None, "--store", "-s", help="Pedigree store directory"),
):
    """List the patient ids linked from a pedigree."""
    store = _open_store(store_dir)
    try:
        pedigree = store.load(pedigree_id).to_pedigree()
        linked = pedigree.extract_ids()
    except (PedigreeError, ValueError) as e:
        _fail(str(e))

    if not linked:
        console.print(f"[yellow]Pedigree {pedigree_id} has no linked patients[/yellow]")
        return

    table = Table(title=f"Linked patients: {pedigree_id}")
    table.add_column("#", style="dim")
    table.add_column("Patient ID", style="cyan")
    for i, patient_id in enumerate(linked, 1):
        table.add_row(str(i), patient_id)
    console.print(table)


@app.command()
def unlink(
    pedigree_id: str = typer.Argument(..., help="Pedigree id"),
    patient_id: str = typer.Argument(..., help="Patient id to unlink"),
    store_dir: Path = typer.Option(None, "--store", "-s", help="Pedigree store directory"),
):
    """Remove a patient link from a pedigree's data and drawing."""
    from .services import unlink_patient

    store = _open_store(store_dir)
    try:
        pedigree = unlink_patient(store, pedigree_id, patient_id)
    except (PedigreeError, ValueError) as e:
        _fail(str(e))

    remaining = len(pedigree.extract_ids())
    console.print(f"[green]Unlinked {patient_id} from {pedigree_id} ({remaining} links remain)[/green]")


@app.command()
def render(
    pedigree_id: str = typer.Argument(..., help="Pedigree id"),
    viewer: str = typer.Option(None, "--viewer", help="Patient to highlight"),
    output: Path = typer.Option(None, "--output", "-o", help="Write SVG to this file"),
    store_dir: Path = typer.Option(None, "--store", "-s", help="Pedigree store directory"),
):
    """Print a pedigree's drawing, highlighted for a viewer."""
    from .services import render_for_viewer

    store = _open_store(store_dir)
    try:
        image = render_for_viewer(store, pedigree_id, viewer)
    except (PedigreeError, ValueError) as e:
        _fail(str(e))

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(image, encoding="utf-8")
        console.print(f"[green]Drawing saved to {output}[/green]")
    else:
        typer.echo(image)


@app.command("import-json")
def import_json(
    pedigree_id: str = typer.Argument(..., help="Id to store the pedigree under"),
    data_file: Path = typer.Argument(..., help="Pedigree JSON file"),
    image: Path = typer.Option(None, "--image", help="SVG drawing file"),
    store_dir: Path = typer.Option(None, "--store", "-s", help="Pedigree store directory"),
):
    """Store a pedigree from a JSON file and optional SVG drawing."""
    from .pedigree import Pedigree

    if not data_file.exists():
        _fail(f"File not found: {data_file}")
    if image and not image.exists():
        _fail(f"File not found: {image}")

    store = _open_store(store_dir)
    try:
        data = json.loads(data_file.read_text(encoding="utf-8"))
        svg_text = image.read_text(encoding="utf-8") if image else ""
        pedigree = Pedigree(data, svg_text)
        linked = pedigree.extract_ids()
        store.save(pedigree.to_record(pedigree_id))
    except json.JSONDecodeError as e:
        _fail(f"{data_file} is not valid JSON: {e}")
    except (PedigreeError, ValueError) as e:
        _fail(str(e))

    console.print(f"[green]Stored {pedigree_id} with {len(linked)} linked patients[/green]")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
