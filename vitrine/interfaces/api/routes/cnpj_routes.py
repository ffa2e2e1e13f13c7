# vitrine/interfaces/api/routes/cnpj_routes.py
from fastapi import APIRouter

from vitrine.application.dtos.agencia_dto import ValidacaoCNPJDTO
from vitrine.domain.agencia.value_objects import mascarar_cnpj, normalizar_cnpj, validar_cnpj

router = APIRouter()


@router.get("/cnpj/{cnpj_raw:path}", response_model=ValidacaoCNPJDTO)
def get_validacao_cnpj(cnpj_raw: str) -> ValidacaoCNPJDTO:
    """Aceita CNPJ com ou sem mascara ("11.222.333/0001-81" contem "/")."""
    return ValidacaoCNPJDTO(
        valido=validar_cnpj(cnpj_raw),
        digitos=normalizar_cnpj(cnpj_raw),
        formatado=mascarar_cnpj(cnpj_raw),
    )
