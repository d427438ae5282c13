"""Form model for the document generator.

``DocumentForm`` is a flat mapping of free-text, enum and boolean fields.
It is mutated field by field as the user fills it in and consumed once to
build a drafting prompt.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DocumentType(str, Enum):
    """Documents the generator can draft."""

    TR = "Termo de Referência (TR)"
    ETP = "Estudo Técnico Preliminar (ETP)"
    PESQUISA_PRECOS = "Pesquisa de Preços"
    JUSTIFICATIVA_CONTRATACAO_DIRETA = "Justificativa de Contratação Direta"
    AVISO_DISPENSA = "Aviso de Dispensa"
    EDITAL = "Edital Completo (Lei 14.133/21)"

    @property
    def is_full_edital(self) -> bool:
        return self is DocumentType.EDITAL

    @property
    def is_planning(self) -> bool:
        """TR and ETP: planning-phase documents."""
        return self in (DocumentType.TR, DocumentType.ETP)

    @property
    def is_direct_contracting(self) -> bool:
        return self in (DocumentType.JUSTIFICATIVA_CONTRATACAO_DIRETA, DocumentType.AVISO_DISPENSA)


class Modalidade(str, Enum):
    PREGAO = "Pregão"
    CONCORRENCIA = "Concorrência"


class CriterioJulgamento(str, Enum):
    MENOR_PRECO = "Menor Preço"
    MAIOR_DESCONTO = "Maior Desconto"
    MELHOR_TECNICA = "Melhor Técnica"
    TECNICA_E_PRECO = "Técnica e Preço"


class ValorStatus(str, Enum):
    DIVULGADO = "divulgado"
    SIGILOSO = "sigiloso"


class ModoDisputa(str, Enum):
    ABERTO = "Aberto"
    ABERTO_E_FECHADO = "Aberto e Fechado"
    FECHADO_E_ABERTO = "Fechado e Aberto"


class UnidadeVigencia(str, Enum):
    MESES = "Meses"
    ANOS = "Anos"
    DIAS = "Dias"


# Fields that must be non-blank before a draft can be requested
REQUIRED_FIELDS: tuple[str, ...] = ("objeto",)


class DocumentForm(BaseModel):
    """State of the document generator form."""

    # YAML form files may hold numbers in text fields (cep, numero, vigencia)
    model_config = ConfigDict(validate_assignment=True, coerce_numbers_to_str=True)

    doc_type: DocumentType = DocumentType.TR
    modalidade: Modalidade = Modalidade.PREGAO

    # Identificação
    cnpj: str = ""
    orgao: str = ""
    setor: str = ""
    objeto: str = ""
    justificativa: str = Field(default="", description="Used by TR, ETP and direct contracting")
    processo: str = ""
    numero_edital: str = Field(default="", description="Full edital only")
    codigo_contratante: str = ""

    # Localização
    cep: str = ""
    endereco: str = ""
    numero: str = ""
    complemento: str = ""
    bairro: str = ""
    cidade: str = ""
    uf: str = ""

    # Parâmetros da contratação
    criterio: CriterioJulgamento = CriterioJulgamento.MENOR_PRECO
    is_tic: bool = False
    is_srp: bool = False
    is_meepp: bool = True
    is_margem_preferencia: bool = False
    valor_estimado_status: ValorStatus = ValorStatus.DIVULGADO
    valor_estimado: str = ""
    modo_disputa: ModoDisputa = ModoDisputa.ABERTO

    # Prazos e execução
    vigencia: str = ""
    unidade_vigencia: UnidadeVigencia = UnidadeVigencia.MESES
    prazo_entrega: str = Field(default="", description="Days")
    tem_garantia: bool = False
    tem_matriz_riscos: bool = False

    def missing_required_fields(self) -> list[str]:
        """Names of required fields that are blank."""
        return [name for name in REQUIRED_FIELDS if not str(getattr(self, name)).strip()]

    @property
    def is_complete(self) -> bool:
        return not self.missing_required_fields()
