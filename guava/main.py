"""
Point d'entree CLI de Guava.

Commandes : serve (serveur HTTP), info, version, check (coherence catalogue/assets).
"""

from typing import Annotated, Optional

import typer
from loguru import logger
from rich.console import Console
from sqlmodel import Session

from . import __version__
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="guava",
    help="Service de catalogue multimedia",
)
container = Container()
console = Console()


def get_config() -> Settings:
    """Recupere les parametres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration Guava")
    typer.echo(f"Store : {config.masked_connection_string}")
    typer.echo(f"Assets : {config.assets_dir}")
    typer.echo(
        f"Listing partiel : {'autorise' if config.listing_allow_partial else 'refuse'}"
    )
    typer.echo(f"Ecoute HTTP : {config.http_host}:{config.http_port}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Guava v{__version__}")


@app.command()
def check(
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Afficher le rapport au format JSON"),
    ] = False,
) -> None:
    """Verifie la coherence entre le catalogue et les assets (lecture seule)."""
    container.database.init()

    with Session(container.engine()) as session:
        checker = container.integrity_checker(
            repository=container.content_repository(session=session)
        )
        with console.status("[cyan]Verification en cours..."):
            report = checker.check()

    if json_output:
        console.print_json(report.to_json())
    else:
        console.print(report.format_text(), highlight=False)

    if report.has_issues:
        raise typer.Exit(code=1)


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Adresse d'ecoute")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port d'ecoute")] = None,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur HTTP Guava."""
    import uvicorn

    config = get_config()
    host = host or config.http_host
    port = port or config.http_port

    typer.echo(f"Demarrage du serveur sur {host}:{port}")
    uvicorn.run("guava.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entree du script guava."""
    settings = get_config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.debug("Demarrage de la CLI Guava", version=__version__)

    app()


if __name__ == "__main__":
    main()
