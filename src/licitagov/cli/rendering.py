"""Rich rendering of chat messages, drafts and the knowledge base.

Hides how model text is laid out on the terminal.
"""

from rich.columns import Columns
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..chat import Message
from ..drafts import SavedDraft
from ..knowledge import (
    KNOWLEDGE_BASE,
    SECURE_ENVIRONMENT_NOTICE,
    SECURE_ENVIRONMENT_TITLE,
)
from ..parsing import ThoughtResponse, split_thought


def render_reply(console: Console, reply: ThoughtResponse, show_thought: bool = False) -> None:
    """Print a model reply, with its reasoning block when requested."""
    if reply.has_thought:
        if show_thought:
            console.print(Panel(
                Markdown(reply.thought or "_(vazio)_"),
                title="Raciocínio do agente",
                border_style="dim",
                style="dim",
            ))
        else:
            console.print("[dim]Raciocínio oculto. Use /pensamento para exibir.[/dim]")
    console.print(Panel(Markdown(reply.response), title="LicitaGov AI", border_style="green"))


def render_message(console: Console, message: Message, show_thought: bool = False) -> None:
    if message.is_bot:
        render_reply(console, message.parsed(), show_thought)
    else:
        console.print(Panel(Text(message.text), title="Você", border_style="blue"))


def render_text_reply(console: Console, text: str, show_thought: bool = False) -> None:
    render_reply(console, split_thought(text), show_thought)


def drafts_table(drafts: list[SavedDraft]) -> Table:
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("ID", style="dim")
    table.add_column("Título", style="cyan")
    table.add_column("Data", style="green")
    for draft in drafts:
        table.add_row(draft.id, Text(draft.title), draft.date)
    return table


def render_knowledge_base(console: Console) -> None:
    console.print(Panel(SECURE_ENVIRONMENT_NOTICE, title=SECURE_ENVIRONMENT_TITLE, border_style="blue"))
    panels = []
    for folder in KNOWLEDGE_BASE:
        body = "\n".join(f"- {name}" for name in folder.files)
        panels.append(Panel(body, title=f"[bold]{folder.name}[/bold]", border_style=folder.color))
    console.print(Columns(panels, equal=True, expand=True))
