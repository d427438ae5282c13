"""Main CLI application using Typer."""
import asyncio
from pathlib import Path
from typing import Any

import typer
import yaml
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel

from ..chat import ChatSession
from ..drafting import DocumentForm, DocumentGenerator, DocumentType, ExportFormat, export_draft
from ..errors import LicitaGovError
from .providers import LogLevel, configure_logging, get_gateway, get_settings, get_store, open_library
from .rendering import (
    drafts_table,
    render_knowledge_base,
    render_message,
    render_text_reply,
)

# Load environment variables
load_dotenv()

app = typer.Typer(
    name="licitagov",
    help="Assistente de licitações públicas (Lei 14.133/2021) com IA",
    no_args_is_help=True,
    add_completion=True,
)
drafts_app = typer.Typer(help="Gerencia os rascunhos salvos", no_args_is_help=True)
app.add_typer(drafts_app, name="rascunhos")

console = Console()

CLEAR_COMMAND = "/limpar"
TOGGLE_THOUGHT_COMMAND = "/pensamento"
EXIT_COMMANDS = ("/sair", "/exit", "/quit")


@app.callback()
def main(
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING,
        "--log-level",
        case_sensitive=False,
        help="Log level for diagnostic output (DEBUG, INFO, WARNING, ERROR)"
    )
):
    """Consultor normativo, gerador de minutas e base de conhecimento."""
    configure_logging(log_level)


@app.command()
def chat(
    show_thought: bool = typer.Option(
        False,
        "--show-thought",
        "-t",
        help="Show the agent's reasoning block"
    )
):
    """Interactive chat with the procurement assistant."""
    async def _chat():
        gateway = get_gateway(get_settings(), console)
        session = ChatSession(gateway)
        thought_visible = show_thought

        console.print(Panel(
            "Tire dúvidas sobre a Lei 14.133/2021 e processos operacionais.\n"
            f"[dim]{CLEAR_COMMAND} limpa a conversa, {TOGGLE_THOUGHT_COMMAND} alterna o raciocínio, "
            "/sair encerra.[/dim]",
            title="Consultas Normativas",
            border_style="blue",
        ))
        render_message(console, session.messages[0])

        try:
            while True:
                try:
                    text = console.input("[bold blue]Você[/bold blue] > ")
                except (EOFError, KeyboardInterrupt):
                    console.print()
                    break

                command = text.strip().lower()
                if command in EXIT_COMMANDS:
                    break
                if command == CLEAR_COMMAND:
                    session.clear()
                    render_message(console, session.messages[0])
                    continue
                if command == TOGGLE_THOUGHT_COMMAND:
                    thought_visible = not thought_visible
                    state = "visível" if thought_visible else "oculto"
                    console.print(f"[dim]Raciocínio {state}.[/dim]")
                    continue

                with console.status("Analisando legislação..."):
                    reply = await session.send(text)
                if reply is not None:
                    render_message(console, reply, thought_visible)
        finally:
            await gateway.close()

        console.print(
            "[dim]As respostas são baseadas na Lei 14.133/2021. "
            "Verifique sempre com a assessoria jurídica.[/dim]"
        )

    asyncio.run(_chat())


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question for the assistant"),
    show_thought: bool = typer.Option(
        False,
        "--show-thought",
        "-t",
        help="Show the agent's reasoning block"
    )
):
    """Ask a single question and print the answer."""
    async def _ask():
        gateway = get_gateway(get_settings(), console)
        try:
            with console.status("Analisando legislação..."):
                reply = await gateway.send_message(question)
        finally:
            await gateway.close()
        render_text_reply(console, reply, show_thought)

    asyncio.run(_ask())


def parse_doc_type(value: str) -> DocumentType:
    """Accept a member name (``tr``, ``edital``) or the full label."""
    try:
        return DocumentType[value.upper().replace("-", "_")]
    except KeyError:
        pass
    try:
        return DocumentType(value)
    except ValueError:
        names = ", ".join(member.name.lower() for member in DocumentType)
        raise typer.BadParameter(f"Unknown document type '{value}'. Use one of: {names}")


def load_form_file(path: Path) -> dict[str, Any]:
    """Read form fields from a YAML or JSON file."""
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise typer.BadParameter(f"{path} must contain a mapping of form fields")
    return data


def write_export(exported, output_dir: Path) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    target = output_dir / exported.filename
    target.write_bytes(exported.data)
    return target


@app.command()
def minuta(
    tipo: str | None = typer.Option(
        None,
        "--tipo",
        "-t",
        help="Document type: tr, etp, pesquisa_precos, justificativa_contratacao_direta, aviso_dispensa, edital"
    ),
    objeto: str | None = typer.Option(None, "--objeto", "-o", help="Object of the procurement (required)"),
    orgao: str | None = typer.Option(None, "--orgao", help="Contracting body"),
    cnpj: str | None = typer.Option(None, "--cnpj", help="CNPJ of the contracting body"),
    setor: str | None = typer.Option(None, "--setor", help="Responsible department"),
    justificativa: str | None = typer.Option(None, "--justificativa", help="Short justification of the need"),
    processo: str | None = typer.Option(None, "--processo", help="Administrative process number"),
    form_file: Path | None = typer.Option(
        None,
        "--form",
        "-f",
        exists=True,
        dir_okay=False,
        help="YAML or JSON file with form fields"
    ),
    prompt_only: bool = typer.Option(
        False,
        "--prompt-only",
        help="Print the drafting prompt without calling the model"
    ),
    save: bool = typer.Option(False, "--save", "-s", help="Save the minuta to the draft history"),
    export: ExportFormat | None = typer.Option(None, "--export", "-e", help="Write the minuta as txt or doc"),
    output_dir: Path = typer.Option(Path("."), "--output-dir", help="Directory for exported files"),
):
    """Generate a document draft from form fields."""
    try:
        fields: dict[str, Any] = load_form_file(form_file) if form_file else {}
    except (yaml.YAMLError, OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error: could not read form file {form_file}[/red]")
        console.print(str(e), markup=False, highlight=False)
        raise typer.Exit(code=1)
    overrides = {
        "objeto": objeto,
        "orgao": orgao,
        "cnpj": cnpj,
        "setor": setor,
        "justificativa": justificativa,
        "processo": processo,
    }
    fields.update({k: v for k, v in overrides.items() if v is not None})
    if tipo is not None:
        fields["doc_type"] = parse_doc_type(tipo)
    elif isinstance(fields.get("doc_type"), str):
        fields["doc_type"] = parse_doc_type(fields["doc_type"])

    try:
        form = DocumentForm.model_validate(fields)
    except ValidationError as e:
        console.print("[red]Error: invalid form fields[/red]")
        console.print(str(e), markup=False, highlight=False)
        raise typer.Exit(code=1)

    async def _minuta():
        settings = get_settings()
        gateway = get_gateway(settings, console)
        store = get_store(settings)
        try:
            library = await open_library(store)
            generator = DocumentGenerator(gateway, library, form)

            if prompt_only:
                console.print(generator.build_prompt(), markup=False, highlight=False, soft_wrap=True)
                return

            with console.status("Gerando minuta..."):
                await generator.generate()

            console.print(Panel(Markdown(generator.content), title=form.doc_type.value, border_style="blue"))

            if save:
                draft = await generator.save_draft()
                console.print(f"[green]Salvo nos rascunhos![/green] [dim]({draft.id})[/dim]")
            if export is not None:
                target = write_export(generator.export(export), output_dir)
                console.print(f"[green]Arquivo gerado:[/green] {target}")

        except LicitaGovError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(code=1)
        finally:
            await store.disconnect()
            await gateway.close()

    asyncio.run(_minuta())


@drafts_app.command("list")
def list_drafts():
    """List saved drafts, newest first."""
    async def _list():
        store = get_store(get_settings())
        try:
            library = await open_library(store)
            if not len(library):
                console.print("[yellow]Nenhum rascunho encontrado.[/yellow]")
                return
            console.print(f"[green]Meus Rascunhos ({len(library)})[/green]")
            console.print(drafts_table(library.drafts))
        finally:
            await store.disconnect()

    asyncio.run(_list())


@drafts_app.command("show")
def show_draft(draft_id: str = typer.Argument(..., help="Draft ID")):
    """Print a saved draft."""
    async def _show():
        store = get_store(get_settings())
        try:
            library = await open_library(store)
            draft = library.get(draft_id)
            console.print(Panel(Markdown(draft.content), title=draft.title, subtitle=draft.date))
        except LicitaGovError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(code=1)
        finally:
            await store.disconnect()

    asyncio.run(_show())


@drafts_app.command("delete")
def delete_draft(
    draft_id: str = typer.Argument(..., help="Draft ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt")
):
    """Delete a saved draft."""
    async def _delete():
        store = get_store(get_settings())
        try:
            library = await open_library(store)
            draft = library.get(draft_id)
            if not yes and not typer.confirm(f"Excluir '{draft.title}'?"):
                console.print("[dim]Aborted.[/dim]")
                return
            await library.delete(draft_id)
            console.print(f"[green]Rascunho excluído.[/green] Restam {len(library)}.")
        except LicitaGovError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(code=1)
        finally:
            await store.disconnect()

    asyncio.run(_delete())


@drafts_app.command("export")
def export_saved_draft(
    draft_id: str = typer.Argument(..., help="Draft ID"),
    fmt: ExportFormat = typer.Option(ExportFormat.DOC, "--format", "-f", help="txt or doc"),
    output_dir: Path = typer.Option(Path("."), "--output-dir", help="Directory for the exported file"),
):
    """Export a saved draft as .txt or Word-compatible .doc."""
    async def _export():
        store = get_store(get_settings())
        try:
            library = await open_library(store)
            draft = library.get(draft_id)
            target = write_export(export_draft(draft.content, draft.type, fmt), output_dir)
            console.print(f"[green]Arquivo gerado:[/green] {target}")
        except LicitaGovError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(code=1)
        finally:
            await store.disconnect()

    asyncio.run(_export())


@app.command()
def base():
    """Show the documents in the assistant's knowledge base."""
    console.print("[bold]Base de Conhecimento[/bold]")
    console.print("[dim]Documentos carregados no contexto do Agente de IA para fundamentar as respostas.[/dim]\n")
    render_knowledge_base(console)


@app.command()
def health():
    """Check the connection to the Gemini API."""
    async def _health():
        gateway = get_gateway(get_settings(), console)
        try:
            with console.status("Testando conexão..."):
                status = await gateway.check_connection()
        finally:
            await gateway.close()

        if status.success:
            console.print(f"[green]+[/green] {status.message}")
        else:
            console.print(f"[red]x[/red] {status.message}")
            raise typer.Exit(code=1)

    asyncio.run(_health())


if __name__ == "__main__":
    app()
