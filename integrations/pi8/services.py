"""
Import engine that pulls published properties from Pi8 and upserts them
into the imoveis schema.

  - Entity upserters correlate provider records to local rows by
    ``id_integracao`` (organizations by name) and create or update them
  - AnexoSynchronizer replaces an imovel's attachments with the current
    provider image list
  - ImovelReconciler resolves every related entity, then creates or
    updates the imovel, then syncs its attachments
  - ImovelImportService drives the batch, isolates per-item failures and
    records the run in APISyncLog

The import is best-effort: a failed related entity leaves that reference
unresolved, a failed imovel is counted and skipped, and only a failed or
empty published list aborts the run.
"""

import logging

from django.db import transaction
from django.utils import timezone

from imoveis.models import Anexo
from integrations.models import APISyncLog

from .client import Pi8Client
from .mappers import (
    is_ativo,
    map_corretor,
    map_empreendimento,
    map_endereco,
    map_imagens,
    map_imovel,
    map_organizacao,
    map_preco_aluguel,
    map_preco_venda,
)
from .repositories import Repositories

logger = logging.getLogger(__name__)


class ImovelImportError(Exception):
    """An imovel (or the whole batch) could not be imported."""

    def __init__(self, message, codigo=None, entity=None):
        super().__init__(message)
        self.codigo = codigo
        self.entity = entity


# ---------------------------------------------------------------------------
# Entity upserters
# ---------------------------------------------------------------------------


class _BaseUpserter:
    """
    Create-or-update keyed by the record's external id.

    Subclasses set ``mapper``, which returns (id_integracao, defaults).
    """

    entity = ""
    mapper = None

    def __init__(self, repository):
        self.repository = repository

    def upsert(self, record):
        """Returns the local id. Persistence errors propagate to the caller."""
        if not record:
            raise ValueError(f"{self.entity} record is empty")

        id_integracao, defaults = self.mapper(record)
        return self._save(id_integracao, defaults)

    def _save(self, id_integracao, defaults):
        existing = self.repository.find_by_key(id_integracao)
        if existing is not None:
            self.repository.update(existing, defaults)
            logger.debug("Updated %s %s (local %s)", self.entity, id_integracao, existing.pk)
            return existing.pk

        instance = self.repository.create(id_integracao=id_integracao, **defaults)
        logger.debug("Created %s %s (local %s)", self.entity, id_integracao, instance.pk)
        return instance.pk


class EmpreendimentoUpserter(_BaseUpserter):
    entity = "empreendimento"
    mapper = staticmethod(map_empreendimento)


class PrecoVendaUpserter(_BaseUpserter):
    entity = "preco venda"
    mapper = staticmethod(map_preco_venda)


class PrecoAluguelUpserter(_BaseUpserter):
    entity = "preco aluguel"
    mapper = staticmethod(map_preco_aluguel)


class OrganizacaoUpserter:
    """Organizations are correlated by name; two agencies sharing a name share a row."""

    entity = "organizacao"

    def __init__(self, repository):
        self.repository = repository

    def upsert(self, record):
        nome, defaults = map_organizacao(record)
        if not nome:
            raise ValueError("organizacao is empty")

        organizacao, created = self.repository.get_or_create_by_name(nome, defaults)
        if not created and organizacao.perfil != defaults["perfil"]:
            self.repository.update(organizacao, defaults)
        return organizacao.pk


class CorretorUpserter(_BaseUpserter):
    """
    Broker upsert. The organization is resolved first when the broker
    names one; a broker without an organization name is stored unlinked,
    and an existing link is kept.
    """

    entity = "corretor principal"

    def __init__(self, repository, organizacoes):
        super().__init__(repository)
        self.organizacoes = organizacoes

    def upsert(self, record):
        if not record:
            raise ValueError("corretor principal record is empty")

        id_integracao, defaults, organizacao = map_corretor(record)

        nome, _ = map_organizacao(organizacao)
        if nome:
            try:
                defaults["organizacao_id"] = self.organizacoes.upsert(organizacao)
            except Exception as exc:
                raise ImovelImportError(
                    f"failed to upsert organizacao '{nome}': {exc}", entity="organizacao"
                ) from exc

        return self._save(id_integracao, defaults)


# ---------------------------------------------------------------------------
# Attachments
# ---------------------------------------------------------------------------


class AnexoSynchronizer:
    """
    Keeps an imovel's attachments equal to the provider's image list.

    Attachments are not correlated: every run deletes the imovel's anexos
    and inserts one per URL, in the provider's order.
    """

    def __init__(self, repository):
        self.repository = repository

    @staticmethod
    def build_anexo(position, url):
        return Anexo(
            nome=f"Image {position}",
            url=url,
            tipo="image",
            image=True,
            video=False,
            is_external_url=True,
            can_publish=True,
        )

    def sync(self, imovel_id, image_urls):
        """Returns the number of anexos now owned by the imovel."""
        if not imovel_id:
            raise ValueError("invalid property ID")

        anexos = [
            self.build_anexo(position, url)
            for position, url in enumerate(image_urls or [], start=1)
        ]
        self.repository.replace_for_imovel(imovel_id, anexos)
        logger.info("Synced %d anexos for imovel %s", len(anexos), imovel_id)
        return len(anexos)


# ---------------------------------------------------------------------------
# Property reconciler
# ---------------------------------------------------------------------------


class ImovelReconciler:
    """
    Writes one provider property detail into the local schema.

    Order matters and is the same for create and update: related entities
    first (empreendimento, sale price, rent price, broker), then the
    imovel row, then its attachments.
    """

    # Overwritten on update only when the provider sends a non-empty value
    UPDATE_STRING_FIELDS = ("titulo", "tipo", "objetivo", "finalidade", "descricao", "unidade")
    # Always overwritten on update
    UPDATE_NUMERIC_FIELDS = (
        "metragem",
        "num_quartos",
        "num_suites",
        "num_banheiros",
        "num_vagas",
        "num_andar",
        "condominio",
    )
    REFERENCE_FIELDS = (
        "empreendimento_id",
        "preco_venda_id",
        "preco_aluguel_id",
        "corretor_principal_id",
    )

    def __init__(self, repositories=None, synchronizer=None):
        self.repositories = repositories or Repositories()
        self.empreendimentos = EmpreendimentoUpserter(self.repositories.empreendimentos)
        self.precos_venda = PrecoVendaUpserter(self.repositories.precos_venda)
        self.precos_aluguel = PrecoAluguelUpserter(self.repositories.precos_aluguel)
        self.corretores = CorretorUpserter(
            self.repositories.corretores,
            OrganizacaoUpserter(self.repositories.organizacoes),
        )
        self.synchronizer = synchronizer or AnexoSynchronizer(self.repositories.anexos)

    def reconcile(self, external_id, detail):
        """
        Create or update the imovel described by ``detail``.

        Returns (imovel, created). Raises ImovelImportError only when the
        imovel row itself cannot be written.
        """
        if not detail.get("id"):
            detail = {**detail, "id": external_id}
        try:
            id_integracao, fields = map_imovel(detail)
        except ValueError as exc:
            raise ImovelImportError(str(exc)) from exc

        codigo = fields["codigo"] or id_integracao
        references = self._resolve_references(codigo, detail)

        existing = self.repositories.imoveis.find_by_key(id_integracao)
        if existing is not None:
            logger.info("Imovel %s already exists (local %s), updating", codigo, existing.pk)
            imovel = self._update(existing, fields, references, detail, codigo)
            created = False
        else:
            imovel = self._create(id_integracao, fields, references, detail, codigo)
            logger.info("Created imovel %s (local %s)", codigo, imovel.pk)
            created = True

        try:
            self.synchronizer.sync(imovel.pk, map_imagens(detail))
        except Exception as exc:
            logger.warning("Failed to sync anexos for imovel %s: %s", codigo, exc)

        return imovel, created

    # -- related entities ---------------------------------------------------

    def _resolve_references(self, codigo, detail):
        references = dict.fromkeys(self.REFERENCE_FIELDS)

        empreendimento = detail.get("empreendimento")
        if empreendimento:
            references["empreendimento_id"] = self._resolve(
                codigo, self.empreendimentos, empreendimento
            )

        preco_venda = detail.get("precoVenda")
        if preco_venda and is_ativo(preco_venda):
            references["preco_venda_id"] = self._resolve(codigo, self.precos_venda, preco_venda)

        preco_aluguel = detail.get("precoAluguel")
        if preco_aluguel and is_ativo(preco_aluguel):
            references["preco_aluguel_id"] = self._resolve(
                codigo, self.precos_aluguel, preco_aluguel
            )

        corretor = detail.get("corretorPrincipal") or {}
        if corretor.get("email"):
            references["corretor_principal_id"] = self._resolve(codigo, self.corretores, corretor)

        return references

    @staticmethod
    def _resolve(codigo, upserter, record):
        """Run one upsert; a failure is logged and leaves the reference unresolved."""
        try:
            with transaction.atomic():
                return upserter.upsert(record)
        except Exception as exc:
            logger.warning(
                "Failed to handle %s for imovel %s: %s", upserter.entity, codigo, exc
            )
            return None

    def _create_endereco(self, detail):
        fields = map_endereco(detail.get("endereco"))
        if fields is None:
            return None
        return self.repositories.enderecos.create(**fields).pk

    # -- imovel row ---------------------------------------------------------

    def _create(self, id_integracao, fields, references, detail, codigo):
        fields = dict(fields)
        if not fields["descricao"]:
            fields["descricao"] = f"{fields['titulo']} - {fields['tipo']}"

        try:
            with transaction.atomic():
                endereco_id = self._create_endereco(detail)
                return self.repositories.imoveis.create(
                    id_integracao=id_integracao,
                    endereco_id=endereco_id,
                    **fields,
                    **references,
                )
        except Exception as exc:
            raise ImovelImportError(
                f"failed to create imovel {codigo}: {exc}", codigo=codigo, entity="imovel"
            ) from exc

    def _update(self, imovel, fields, references, detail, codigo):
        updates = {
            name: fields[name] for name in self.UPDATE_STRING_FIELDS if fields[name]
        }
        updates.update((name, fields[name]) for name in self.UPDATE_NUMERIC_FIELDS)
        # A reference that failed to resolve this run keeps its previous value
        updates.update((name, value) for name, value in references.items() if value)

        try:
            with transaction.atomic():
                self.repositories.imoveis.update(imovel, updates)
        except Exception as exc:
            raise ImovelImportError(
                f"failed to update imovel {codigo}: {exc}", codigo=codigo, entity="imovel"
            ) from exc

        # Addresses are never reused: a fresh row is attached on every import
        try:
            with transaction.atomic():
                endereco_id = self._create_endereco(detail)
                if endereco_id:
                    self.repositories.imoveis.update(imovel, {"endereco_id": endereco_id})
        except Exception as exc:
            logger.warning("Failed to update endereco for imovel %s: %s", codigo, exc)

        return imovel


# ---------------------------------------------------------------------------
# Batch driver
# ---------------------------------------------------------------------------


class _BaseSyncService:
    """Shared sync scaffolding."""

    source = "pi8"
    endpoint = ""
    sync_type = "full"

    def __init__(self, client=None):
        self.client = client or Pi8Client()

    def _create_log(self, sync_type=None):
        return APISyncLog.objects.create(
            source=self.source,
            endpoint=self.endpoint,
            sync_type=sync_type or self.sync_type,
            status="started",
        )

    def _complete_log(self, log, *, created, updated, failed, fetched, errors=None):
        log.status = "completed" if not errors else "partial"
        log.records_fetched = fetched
        log.records_created = created
        log.records_updated = updated
        log.records_failed = failed
        if errors:
            log.error_message = "\n".join(errors[:50])  # Cap stored errors
        log.completed_at = timezone.now()
        log.save()

    def _fail_log(self, log, error_message):
        log.status = "failed"
        log.error_message = str(error_message)[:2000]
        log.completed_at = timezone.now()
        log.save()


class ImovelImportService(_BaseSyncService):
    """
    Import every published Pi8 property.

    - Fetches the published list; failure or an empty list aborts the run
    - Fetches each property's detail and reconciles it
    - A failed detail fetch or reconcile counts as failed and the run goes on
    """

    endpoint = "api/properties/published"

    def __init__(self, client=None, reconciler=None):
        super().__init__(client=client)
        self.reconciler = reconciler or ImovelReconciler()

    def sync(self, dry_run=False):
        log = self._create_log(sync_type="dry_run" if dry_run else None)
        try:
            summaries = self.client.fetch_published_summaries()
        except Exception as exc:
            self._fail_log(log, exc)
            raise ImovelImportError(f"failed to fetch published properties: {exc}") from exc

        if not summaries:
            exc = ImovelImportError("no properties found in external API")
            self._fail_log(log, exc)
            raise exc

        created_count = 0
        updated_count = 0
        errors = []

        for summary in summaries:
            external_id = summary.get("id") if isinstance(summary, dict) else None
            if not external_id:
                msg = f"Published property without an id: {summary}"
                logger.error(msg)
                errors.append(msg)
                continue

            try:
                detail = self.client.fetch_property_detail(external_id)
            except Exception as exc:
                msg = f"Failed to fetch details for property {external_id}: {exc}"
                logger.error(msg)
                errors.append(msg)
                continue

            if dry_run:
                logger.info(
                    "DRY RUN imovel %s: %s (%s)",
                    external_id, detail.get("codigo"), detail.get("titulo"),
                )
                continue

            try:
                imovel, was_created = self.reconciler.reconcile(external_id, detail)
            except Exception as exc:
                msg = f"Failed to import property {external_id} ({detail.get('codigo')}): {exc}"
                logger.error(msg)
                errors.append(msg)
                continue

            if was_created:
                created_count += 1
            else:
                updated_count += 1

        self._complete_log(
            log,
            created=created_count,
            updated=updated_count,
            failed=len(errors),
            fetched=len(summaries),
            errors=errors,
        )
        logger.info(
            "Import completed: %d created, %d updated, %d failed",
            created_count, updated_count, len(errors),
        )
        return {
            "fetched": len(summaries),
            "created": created_count,
            "updated": updated_count,
            "failed": len(errors),
        }
