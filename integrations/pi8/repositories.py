"""
Narrow persistence interfaces used by the import engine.

Each repository wraps one model and exposes only what the upserters need:
look up by correlation key, create, update in place. Services receive
them as constructor arguments so tests can swap in failing doubles.
"""

import logging

from django.db import transaction

from imoveis.models import (
    Anexo,
    CorretorPrincipal,
    Empreendimento,
    Endereco,
    Imovel,
    Organizacao,
    PrecoAluguel,
    PrecoVenda,
)

logger = logging.getLogger(__name__)


class ImovelValidationError(Exception):
    """Raised when an Imovel would break a business rule on create."""


class ModelRepository:
    """Lookup-by-key / create / update over a single model."""

    # Never overwritten by an update
    PROTECTED_FIELDS = {"id", "pk", "created_at"}

    def __init__(self, model, key_field="id_integracao"):
        self.model = model
        self.key_field = key_field

    def find_by_key(self, value):
        if not value:
            return None
        return self.model.objects.filter(**{self.key_field: value}).first()

    def create(self, **fields):
        # Unresolved references (None or 0) are omitted, never written as an id
        fields = {k: v for k, v in fields.items() if not (k.endswith("_id") and not v)}
        return self.model.objects.create(**fields)

    def update(self, instance, fields):
        changed = []
        for name, value in fields.items():
            if name in self.PROTECTED_FIELDS or name == self.key_field:
                continue
            setattr(instance, name, value)
            changed.append(name)
        if changed:
            instance.save()
        return instance


class OrganizacaoRepository(ModelRepository):
    """Organizations are keyed by name; there is no provider id for them."""

    def __init__(self):
        super().__init__(Organizacao, key_field="nome")

    def get_or_create_by_name(self, nome, defaults):
        # get_or_create retries the lookup on IntegrityError, so two
        # concurrent imports of the same new name end up on one row.
        return Organizacao.objects.get_or_create(nome=nome, defaults=defaults)


class ImovelRepository(ModelRepository):

    def __init__(self):
        super().__init__(Imovel)

    def create(self, **fields):
        codigo = fields.get("codigo")
        if not codigo:
            raise ImovelValidationError("codigo is required")
        if Imovel.objects.filter(codigo=codigo).exists():
            raise ImovelValidationError(f"property with codigo '{codigo}' already exists")

        id_integracao = fields.get("id_integracao")
        if id_integracao and Imovel.objects.filter(id_integracao=id_integracao).exists():
            raise ImovelValidationError(
                f"property with id_integracao '{id_integracao}' already exists"
            )

        objetivo = fields.get("objetivo")
        if objetivo == "ALUGAR" and not fields.get("preco_aluguel_id"):
            raise ImovelValidationError("rental properties must have a rental price")
        if objetivo == "VENDER" and not fields.get("preco_venda_id"):
            raise ImovelValidationError("properties for sale must have a selling price")

        return super().create(**fields)


class AnexoRepository:

    def list_for_imovel(self, imovel_id):
        return list(Anexo.objects.filter(imovel_id=imovel_id).order_by("id"))

    def replace_for_imovel(self, imovel_id, anexos):
        """
        Hard-delete every anexo owned by the imovel and insert ``anexos``
        (unsaved Anexo instances) in order, atomically.
        """
        with transaction.atomic():
            deleted, _ = Anexo.objects.filter(imovel_id=imovel_id).delete()
            for anexo in anexos:
                anexo.imovel_id = imovel_id
                anexo.save()
        logger.debug(
            "Replaced anexos for imovel %s: %d deleted, %d created",
            imovel_id, deleted, len(anexos),
        )
        return anexos


class Repositories:
    """Bundle of every repository the import engine touches."""

    def __init__(
        self,
        empreendimentos=None,
        precos_venda=None,
        precos_aluguel=None,
        corretores=None,
        organizacoes=None,
        enderecos=None,
        imoveis=None,
        anexos=None,
    ):
        self.empreendimentos = empreendimentos or ModelRepository(Empreendimento)
        self.precos_venda = precos_venda or ModelRepository(PrecoVenda)
        self.precos_aluguel = precos_aluguel or ModelRepository(PrecoAluguel)
        self.corretores = corretores or ModelRepository(CorretorPrincipal)
        self.organizacoes = organizacoes or OrganizacaoRepository()
        self.enderecos = enderecos or ModelRepository(Endereco, key_field="id")
        self.imoveis = imoveis or ImovelRepository()
        self.anexos = anexos or AnexoRepository()
