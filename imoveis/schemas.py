from decimal import Decimal
from typing import Optional

from ninja import Field, FilterSchema, ModelSchema

from imoveis.models import (
    Anexo,
    Caracteristica,
    CorretorPrincipal,
    Empreendimento,
    Endereco,
    Imovel,
    PrecoAluguel,
    PrecoVenda,
)


# --- Related entities ---


class EnderecoSchema(ModelSchema):
    class Meta:
        model = Endereco
        fields = [
            "id",
            "rua",
            "numero",
            "bairro",
            "cidade",
            "estado",
            "cep",
            "latitude",
            "longitude",
        ]


class EmpreendimentoSchema(ModelSchema):
    class Meta:
        model = Empreendimento
        fields = [
            "id",
            "id_integracao",
            "titulo",
            "descricao",
            "data_entrega",
            "etapa_lancamento",
            "finalidade",
            "tipo",
            "status",
            "localizacao",
        ]


class CorretorPrincipalSchema(ModelSchema):
    organizacao_nome: Optional[str] = None

    class Meta:
        model = CorretorPrincipal
        fields = [
            "id",
            "nome",
            "email",
            "whatsapp",
            "idiomas",
            "bairros_atuacao",
            "organizacao",
        ]

    @staticmethod
    def resolve_organizacao_nome(obj):
        return obj.organizacao.nome if obj.organizacao else None


class PrecoVendaSchema(ModelSchema):
    class Meta:
        model = PrecoVenda
        fields = [
            "id",
            "preco",
            "aceita_financiamento_bancario",
            "aceita_financiamento_direto",
            "aceita_permuta",
            "aceita_carta_de_credito",
            "aceita_fgts",
            "ativo",
        ]


class PrecoAluguelSchema(ModelSchema):
    class Meta:
        model = PrecoAluguel
        fields = ["id", "preco", "aceita_fiador", "ativo"]


class AnexoSchema(ModelSchema):
    class Meta:
        model = Anexo
        fields = [
            "id",
            "nome",
            "path",
            "tamanho",
            "tipo",
            "url",
            "can_publish",
            "image",
            "video",
            "is_external_url",
            "created_at",
            "updated_at",
        ]


class CaracteristicaSchema(ModelSchema):
    class Meta:
        model = Caracteristica
        fields = ["id", "nome", "categoria_id", "categoria_nome"]


# --- Imovel ---


class ImovelListSchema(ModelSchema):
    cidade: Optional[str] = None
    preco_venda_valor: Optional[Decimal] = None
    preco_aluguel_valor: Optional[Decimal] = None

    class Meta:
        model = Imovel
        fields = [
            "id",
            "codigo",
            "titulo",
            "tipo",
            "objetivo",
            "finalidade",
            "metragem",
            "num_quartos",
            "num_vagas",
            "status",
            "published",
        ]

    @staticmethod
    def resolve_cidade(obj):
        return obj.endereco.cidade if obj.endereco else None

    @staticmethod
    def resolve_preco_venda_valor(obj):
        return obj.preco_venda.preco if obj.preco_venda else None

    @staticmethod
    def resolve_preco_aluguel_valor(obj):
        return obj.preco_aluguel.preco if obj.preco_aluguel else None


class ImovelSchema(ModelSchema):
    endereco: Optional[EnderecoSchema] = None
    empreendimento: Optional[EmpreendimentoSchema] = None
    corretor_principal: Optional[CorretorPrincipalSchema] = None
    preco_venda: Optional[PrecoVendaSchema] = None
    preco_aluguel: Optional[PrecoAluguelSchema] = None
    anexos: list[AnexoSchema] = []

    class Meta:
        model = Imovel
        fields = [
            "id",
            "id_integracao",
            "codigo",
            "titulo",
            "tipo",
            "objetivo",
            "finalidade",
            "descricao",
            "metragem",
            "num_quartos",
            "num_suites",
            "num_banheiros",
            "num_vagas",
            "num_andar",
            "unidade",
            "condominio",
            "iptu",
            "inscricao_iptu",
            "status",
            "published",
            "closed",
            "visualizacoes",
            "created_at",
            "updated_at",
        ]

    @staticmethod
    def resolve_anexos(obj):
        return list(obj.anexos.all())


class ImovelFilterSchema(FilterSchema):
    tipo: Optional[str] = None
    objetivo: Optional[str] = None
    finalidade: Optional[str] = None
    status: Optional[str] = None
    published: Optional[bool] = None
    cidade: Optional[str] = Field(None, q="endereco__cidade__iexact")
    bairro: Optional[str] = Field(None, q="endereco__bairro__iexact")
    empreendimento_id: Optional[int] = None
    min_quartos: Optional[int] = Field(None, q="num_quartos__gte")
    min_preco_venda: Optional[Decimal] = Field(None, q="preco_venda__preco__gte")
    max_preco_venda: Optional[Decimal] = Field(None, q="preco_venda__preco__lte")
    min_preco_aluguel: Optional[Decimal] = Field(None, q="preco_aluguel__preco__gte")
    max_preco_aluguel: Optional[Decimal] = Field(None, q="preco_aluguel__preco__lte")
