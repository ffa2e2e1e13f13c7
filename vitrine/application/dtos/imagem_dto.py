# vitrine/application/dtos/imagem_dto.py
from pydantic import BaseModel


class ImagemEnviadaDTO(BaseModel):
    chave: str
    url: str
