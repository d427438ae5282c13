"""Rendering of a ``DocumentForm`` into a drafting prompt.

The prompt is a pure function of the form: the same form always yields the
same text. Blank fields become bracketed placeholders, which the drafting
rules tell the model to carry into the minuta for manual completion.
"""

from ..prompts import render_prompt
from .models import DocumentForm, DocumentType, ValorStatus

PLACEHOLDERS = {
    "cnpj": "[CNPJ]",
    "orgao": "[Órgão]",
    "setor": "[Setor]",
    "objeto": "[Objeto]",
    "justificativa": "[Justificativa da necessidade]",
    "processo": "[Processo]",
    "numero_edital": "[Número do Edital]",
    "cep": "[CEP]",
    "endereco": "[Endereço]",
    "bairro": "[Bairro]",
    "cidade": "[Cidade]",
    "uf": "[UF]",
    "valor_estimado": "[Valor estimado]",
}

STRUCTURE_BY_TYPE = {
    DocumentType.TR: (
        "Estruture o Termo de Referência conforme o art. 6º, XXIII, da Lei 14.133/2021: definição do objeto, "
        "fundamentação da contratação, descrição da solução, requisitos da contratação, modelo de execução, "
        "modelo de gestão do contrato, critérios de medição e pagamento, forma de seleção do fornecedor "
        "e estimativa do valor com adequação orçamentária."
    ),
    DocumentType.ETP: (
        "Estruture o Estudo Técnico Preliminar conforme o art. 18, § 1º, da Lei 14.133/2021: descrição da "
        "necessidade, requisitos da contratação, levantamento de mercado, estimativas de quantidades e de valor, "
        "justificativa para o parcelamento ou não, resultados pretendidos, providências prévias, impactos "
        "ambientais e posicionamento conclusivo sobre a viabilidade."
    ),
    DocumentType.PESQUISA_PRECOS: (
        "Estruture a pesquisa conforme o art. 23 da Lei 14.133/2021 e a IN SEGES/ME nº 65/2021: parâmetros "
        "utilizados, fontes consultadas, série de preços coletados, metodologia de cálculo (média, mediana ou "
        "menor valor) e justificativa para eventuais preços desconsiderados."
    ),
    DocumentType.JUSTIFICATIVA_CONTRATACAO_DIRETA: (
        "Instrua o processo conforme o art. 72 da Lei 14.133/2021: caracterização da hipótese de dispensa ou "
        "inexigibilidade (arts. 74 e 75), razão da escolha do contratado, justificativa de preço e demonstração "
        "da compatibilidade da previsão de recursos orçamentários."
    ),
    DocumentType.AVISO_DISPENSA: (
        "Redija o aviso nos termos do art. 75, § 3º, da Lei 14.133/2021, com prazo mínimo de 3 (três) dias úteis "
        "para recebimento de propostas adicionais, descrição do objeto, quantidades, condições de participação "
        "e forma de envio das propostas."
    ),
    DocumentType.EDITAL: (
        "Estruture o edital conforme o art. 25 da Lei 14.133/2021: preâmbulo, objeto, condições de participação, "
        "apresentação das propostas, fase de lances no modo de disputa indicado, julgamento, habilitação, "
        "recursos, sanções administrativas e anexos (Termo de Referência, minuta de contrato e modelos de "
        "declaração)."
    ),
}


def _filled(value: str) -> bool:
    return bool(value.strip())


def _field(form: DocumentForm, name: str) -> str:
    value = getattr(form, name)
    return value if _filled(value) else PLACEHOLDERS[name]


def _yes_no(flag: bool) -> str:
    return "Sim" if flag else "Não"


def _address(form: DocumentForm) -> str:
    street = _field(form, "endereco")
    if _filled(form.numero):
        street += f", nº {form.numero}"
    if _filled(form.complemento):
        street += f" - {form.complemento}"
    return (
        f"{street}, {_field(form, 'bairro')}, {_field(form, 'cidade')}-{_field(form, 'uf')} "
        f"(CEP: {_field(form, 'cep')})"
    )


def _estimated_value(form: DocumentForm) -> str:
    # A confidential budget (art. 24) is never sent to the model
    if form.valor_estimado_status is ValorStatus.SIGILOSO:
        return "Sigiloso"
    return f"R$ {_field(form, 'valor_estimado')}"


def _identification(form: DocumentForm) -> list[str]:
    doc_type = form.doc_type
    lines = [
        f"- Órgão: {_field(form, 'orgao')} (CNPJ: {_field(form, 'cnpj')})",
    ]
    if _filled(form.codigo_contratante):
        lines.append(f"- Código do Contratante (UASG): {form.codigo_contratante}")
    lines.append(f"- Setor: {_field(form, 'setor')}")
    lines.append(f"- Objeto: {_field(form, 'objeto')}")
    if not doc_type.is_full_edital or _filled(form.justificativa):
        lines.append(f"- Justificativa Base: {_field(form, 'justificativa')}")
    lines.append(f"- Processo: {_field(form, 'processo')}")
    if doc_type.is_full_edital or _filled(form.numero_edital):
        lines.append(f"- Edital nº: {_field(form, 'numero_edital')}")
    return lines


def _parameters(form: DocumentForm) -> list[str]:
    return [
        f"- Modalidade: {form.modalidade.value}",
        f"- Critério de Julgamento: {form.criterio.value}",
        f"- Registro de Preços (SRP): {_yes_no(form.is_srp)}",
        f"- TIC: {_yes_no(form.is_tic)}",
        f"- Benefício ME/EPP: {_yes_no(form.is_meepp)}",
        f"- Margem de Preferência: {_yes_no(form.is_margem_preferencia)}",
        f"- Valor Estimado: {_estimated_value(form)}",
        f"- Modo de Disputa: {form.modo_disputa.value}",
    ]


def _deadlines(form: DocumentForm) -> list[str]:
    vigencia = (
        f"{form.vigencia} {form.unidade_vigencia.value}" if _filled(form.vigencia) else "A definir"
    )
    prazo = f"{form.prazo_entrega} dias" if _filled(form.prazo_entrega) else "Conforme cronograma"
    garantia = "Sim, 5% do valor do contrato" if form.tem_garantia else "Não exigida"
    matriz = "Incluir cláusula/anexo de Matriz de Riscos" if form.tem_matriz_riscos else "Não aplicável"
    return [
        f"- Vigência: {vigencia}",
        f"- Prazo de Entrega/Execução: {prazo}",
        f"- Garantia Contratual: {garantia}",
        f"- Matriz de Riscos: {matriz}",
    ]


def _structure_instructions(form: DocumentForm) -> list[str]:
    doc_type = form.doc_type
    steps = [
        "Atue com rigor técnico (citando artigos da Lei 14.133).",
        "Estruture o documento com cláusulas claras.",
        STRUCTURE_BY_TYPE[doc_type],
    ]
    if doc_type.is_planning:
        steps.append("Inclua seções de sustentabilidade e análise de riscos.")
    if doc_type.is_direct_contracting:
        steps.append("Fundamente expressamente o enquadramento legal da contratação direta.")
    if form.is_srp:
        steps.append("Inclua as disposições do Sistema de Registro de Preços e da Ata de Registro de Preços (arts. 82 a 86).")
    if form.is_meepp:
        steps.append("Preveja o tratamento favorecido às ME/EPP (LC nº 123/2006).")
    if form.is_tic:
        steps.append("Observe as regras específicas para contratações de TIC.")
    if form.is_margem_preferencia:
        steps.append("Preveja a aplicação de margem de preferência (art. 26).")
    if form.tem_garantia:
        steps.append("Crie cláusula de garantia contratual de 5% do valor do contrato (arts. 96 a 98).")
    if form.tem_matriz_riscos:
        steps.append("Inclua cláusula ou anexo de Matriz de Riscos (art. 22).")
    steps.append("Utilize os dados de vigência e garantia para criar as respectivas cláusulas.")
    return [f"{i}. {step}" for i, step in enumerate(steps, 1)]


def build_document_prompt(form: DocumentForm) -> str:
    """Render the form as a drafting instruction for the model.

    Args:
        form: Current generator form (may be incomplete)

    Returns:
        Prompt text. Never raises for blank fields.
    """
    header = render_prompt("drafting", doc_type=form.doc_type.value)
    sections = [
        header,
        "",
        "**IDENTIFICAÇÃO:**",
        *_identification(form),
        "",
        "**LOCALIZAÇÃO:**",
        f"- Endereço: {_address(form)}",
        "",
        "**PARÂMETROS DA CONTRATAÇÃO:**",
        *_parameters(form),
        "",
        "**PRAZOS E DETALHES DE EXECUÇÃO:**",
        *_deadlines(form),
        "",
        "**INSTRUÇÕES DE ESTRUTURA E AGENTE:**",
        *_structure_instructions(form),
        "",
        render_prompt("drafting_rules"),
    ]
    return "\n".join(sections)
