"""Static knowledge-base directory.

A fixed list of the reference material the assistant is told to rely on.
It is a label list for display, not a search index.
"""

from pydantic import BaseModel, ConfigDict


class KnowledgeFolder(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    files: tuple[str, ...]
    color: str  # Rich style used when the folder is listed


KNOWLEDGE_BASE: tuple[KnowledgeFolder, ...] = (
    KnowledgeFolder(
        name="Legislação Federal",
        files=(
            "Lei nº 14.133/2021 (NLLC)",
            "Constituição Federal (Arts. 37-41)",
            "IN SEGES/ME nº 65/2021",
        ),
        color="blue",
    ),
    KnowledgeFolder(
        name="Jurisprudência TCU",
        files=(
            "Súmulas Selecionadas",
            "Acórdãos Relevantes 2023-2024",
            "Boletins de Jurisprudência",
        ),
        color="yellow",
    ),
    KnowledgeFolder(
        name="Modelos AGU",
        files=(
            "Termo de Referência Padrão",
            "Edital de Pregão Eletrônico",
            "Minutas de Contratos",
        ),
        color="green",
    ),
)

SECURE_ENVIRONMENT_TITLE = "Ambiente Seguro"
SECURE_ENVIRONMENT_NOTICE = (
    "Esta base de conhecimento é processada pelo Google AI Studio dentro de um contêiner isolado. "
    "As respostas do chat utilizam exclusivamente este contexto para garantir conformidade legal."
)
