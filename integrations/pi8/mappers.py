"""
Field mapping functions: Pi8 API JSON -> Django model field dicts.

Mappers never touch the database. Each returns the correlation key (when
the entity has one) plus a ``defaults`` dict ready for ``create``/update.
Coercion helpers never raise; a missing correlation id does.
"""

import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Safe type coercion helpers
# ---------------------------------------------------------------------------

def _safe_decimal(value):
    """Convert to Decimal or return None."""
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        return Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        return None


def _safe_int(value):
    """Convert to int or return None."""
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        try:
            return int(float(value))
        except (TypeError, ValueError):
            return None


def _safe_date(value):
    """Parse a date string (YYYY-MM-DD, DD/MM/YYYY or ISO datetime) or return None."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    for fmt, length in (("%Y-%m-%dT%H:%M:%S", 19), ("%Y-%m-%d", 10), ("%d/%m/%Y", 10)):
        try:
            return datetime.strptime(str(value)[:length], fmt).date()
        except ValueError:
            continue
    return None


def _safe_bool(value, default=False):
    """Convert to bool or return default."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        return value.lower() in ("true", "1", "yes", "sim")
    return default


def _safe_str(value):
    if value is None:
        return ""
    return str(value).strip()


def _safe_str_list(value):
    """Keep the non-empty string entries of a list; anything else becomes []."""
    if not isinstance(value, (list, tuple)):
        return []
    return [str(v).strip() for v in value if v is not None and str(v).strip()]


def _dict(value):
    return value if isinstance(value, dict) else {}


def external_id(data, label):
    """
    Correlation key for a provider record: the decimal string of its id.
    Ids that are missing, non-numeric or zero are rejected.
    """
    value = _safe_int(_dict(data).get("id"))
    if not value:
        raise ValueError(f"{label} record has no valid external ID: {data}")
    return str(value)


# ---------------------------------------------------------------------------
# Mappers
# ---------------------------------------------------------------------------

def map_endereco(data):
    """
    Map a provider ``endereco`` to Endereco fields.
    Returns None when the address has no street (nothing worth storing).
    """
    data = _dict(data)
    rua = _safe_str(data.get("rua"))
    if not rua:
        return None

    return {
        "rua": rua,
        "numero": _safe_int(data.get("numero")),
        "bairro": _safe_str(data.get("bairro")),
        "cidade": _safe_str(data.get("cidade")),
        "estado": _safe_str(data.get("estado"))[:2],
        "cep": _safe_str(data.get("cep")),
        "latitude": _safe_decimal(data.get("latitude")),
        "longitude": _safe_decimal(data.get("longitude")),
    }


def map_organizacao(data):
    """Returns (nome, defaults). nome is "" when the broker has no organization."""
    data = _dict(data)
    nome = _safe_str(data.get("nome"))
    return nome, {"perfil": _safe_str(data.get("perfil"))}


def map_empreendimento(data):
    """
    Map a provider ``empreendimento`` to Empreendimento fields.

    Delivery date, launch stage and finalidade are left out of the
    defaults when the provider sends them empty, so an update never blanks
    a stored value and a create falls back to the column default.
    Returns (id_integracao, defaults).
    """
    id_integracao = external_id(data, "Empreendimento")

    defaults = {
        "titulo": _safe_str(data.get("titulo")),
        "descricao": _safe_str(data.get("descricao")),
        "tipo": _safe_str(data.get("tipo")),
        "status": _safe_str(data.get("status")),
        "localizacao": _safe_str(data.get("localizacao")),
    }

    finalidade = _safe_str(data.get("finalidade"))
    if finalidade:
        defaults["finalidade"] = finalidade

    data_entrega = _safe_date(data.get("data_entrega") or data.get("dataEntrega"))
    if data_entrega is not None:
        defaults["data_entrega"] = data_entrega

    etapa = _safe_str(data.get("etapa_lancamento") or data.get("etapaLancamento"))
    if etapa:
        defaults["etapa_lancamento"] = etapa

    return id_integracao, defaults


def map_preco_venda(data):
    """Returns (id_integracao, defaults). The nested ``pacote`` is flattened."""
    id_integracao = external_id(data, "PrecoVenda")
    pacote = _dict(data.get("pacote"))

    defaults = {
        "preco": _safe_decimal(data.get("preco")) or Decimal("0"),
        "aceita_financiamento_bancario": _safe_bool(data.get("aceitaFinanciamentoBancario")),
        "aceita_financiamento_direto": _safe_bool(data.get("aceitaFinanciamentoDireto")),
        "aceita_permuta": _safe_bool(data.get("aceitaPermuta")),
        "aceita_carta_de_credito": _safe_bool(data.get("aceitaCartaDeCredito")),
        "aceita_fgts": _safe_bool(data.get("aceitaFGTS")),
        "ativo": _safe_bool(data.get("ativo")),
        "pacote_titulo": _safe_str(pacote.get("titulo")),
        "pacote_descricao": _safe_str(pacote.get("descricao")),
        "pacote_exclusivo": _safe_bool(pacote.get("exclusivo")),
        "pacote_em_destaque": _safe_bool(pacote.get("emDestaque")),
    }
    return id_integracao, defaults


def map_preco_aluguel(data):
    """Returns (id_integracao, defaults)."""
    id_integracao = external_id(data, "PrecoAluguel")

    defaults = {
        "preco": _safe_decimal(data.get("preco")) or Decimal("0"),
        "aceita_fiador": _safe_bool(data.get("aceitaFiador")),
        "ativo": _safe_bool(data.get("ativo")),
    }
    return id_integracao, defaults


def map_corretor(data):
    """
    Map a provider ``corretorPrincipal``.

    The photo is not mapped: it would be an unowned Anexo, and a broker
    without one is stored with ``foto`` unset.
    Returns (id_integracao, defaults, organizacao_dict).
    """
    id_integracao = external_id(data, "CorretorPrincipal")

    defaults = {
        "nome": _safe_str(data.get("nome")),
        "email": _safe_str(data.get("email")),
        "whatsapp": _safe_str(data.get("whatsapp")),
        "idiomas": _safe_str_list(data.get("idiomas")),
        "bairros_atuacao": _safe_str_list(data.get("bairrosAtuacao")),
    }
    return id_integracao, defaults, _dict(data.get("organizacao"))


def map_imovel(data):
    """
    Map a provider property detail to Imovel scalar fields.

    References (endereco, empreendimento, prices, broker) are resolved by
    the reconciler, not here.
    Returns (id_integracao, defaults).
    """
    id_integracao = external_id(data, "Imovel")

    defaults = {
        "codigo": _safe_str(data.get("codigo")),
        "titulo": _safe_str(data.get("titulo")),
        "tipo": _safe_str(data.get("tipo")),
        "objetivo": _safe_str(data.get("objetivo")),
        "finalidade": _safe_str(data.get("finalidade")),
        "descricao": _safe_str(data.get("descricao")),
        "metragem": _safe_decimal(data.get("metragem")) or Decimal("0"),
        "num_quartos": _safe_int(data.get("numQuartos")) or 0,
        "num_suites": _safe_int(data.get("numSuites")) or 0,
        "num_banheiros": _safe_int(data.get("numBanheiros")) or 0,
        "num_vagas": _safe_int(data.get("numVagas")) or 0,
        "num_andar": _safe_int(data.get("numAndar")) or 0,
        "unidade": _safe_str(data.get("unidade")),
        "condominio": _safe_decimal(data.get("condominio")) or Decimal("0"),
    }
    return id_integracao, defaults


def is_ativo(data):
    """Prices are only imported when the provider marks them active."""
    return _safe_bool(_dict(data).get("ativo"))


def map_imagens(data):
    """Ordered image URLs of a property detail, blanks dropped."""
    return _safe_str_list(_dict(data).get("imagens"))
