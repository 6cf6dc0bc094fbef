import streamlit as st

from docbr.models.document import ValidationResult
from docbr.utils.config import setting_int
from docbr.utils.formatters_br import format_document
from docbr.utils.validators_br import clean_document, validate

FORMATTED_CNPJ_LEN = 18  # 00.000.000/0000-00

def document_input(label: str = "CPF ou CNPJ", value: str = "", key: str | None = None,
                   required: bool = False, show_validation: bool = True,
                   placeholder: str = "000.000.000-00 ou 00.000.000/0000-00"):
    """
    Campo de CPF/CNPJ para formulários de cadastro.
    Aplica a máscara ao digitado e só valida a partir de DOCBR_MIN_INPUT_DIGITS dígitos.
    Com `key`, a máscara também volta para o próprio campo (via on_change).
    Retorna (valor_formatado, ValidationResult | None).
    """
    shown = f"{label} *" if required else label
    typed = st.text_input(shown, value=value, key=key, placeholder=placeholder,
                          max_chars=FORMATTED_CNPJ_LEN,
                          on_change=mask_in_place if key else None,
                          args=(key,) if key else None)
    formatted = format_document(typed or "")

    min_digits = setting_int("DOCBR_MIN_INPUT_DIGITS", 11)
    if len(clean_document(formatted)) < min_digits:
        return formatted, None

    result = validate(formatted)
    if show_validation:
        validation_feedback(result)
    return result.formatted, result

def mask_in_place(key: str) -> None:
    """Callback do campo: regrava o valor digitado já com a máscara."""
    st.session_state[key] = format_document(st.session_state.get(key) or "")

def validation_feedback(result: ValidationResult) -> None:
    """Mensagens de validação (sucesso ou uma linha por erro)."""
    if result.is_valid:
        st.success(f"✅ {result.summary()}")
        st.caption(f"Tipo: {result.kind.label}")
        return
    for msg in result.errors:
        st.error(f"✖ {msg}")
