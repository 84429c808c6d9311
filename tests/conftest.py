"""
Pytest fixtures for the imoveis import tests.
"""
import copy
from unittest.mock import MagicMock

import pytest


PI8_SETTINGS = {
    "BASE_URL": "https://pi8.example.com",
    "API_KEY": "test-key",
    "INTEGRATION_SOURCE": "imoveis-test",
    "TIMEOUT": 30,
}


@pytest.fixture
def pi8_settings(settings):
    """Configured Pi8 credentials."""
    settings.PI8 = dict(PI8_SETTINGS)
    return settings.PI8


def build_detail(external_id=101, codigo=None, **overrides):
    """A complete Pi8 property detail for a sale listing."""
    detail = {
        "id": external_id,
        "codigo": codigo or f"IMV-{external_id}",
        "titulo": f"Apartamento {external_id}",
        "tipo": "APARTAMENTO",
        "objetivo": "VENDER",
        "finalidade": "RESIDENCIAL",
        "descricao": "Apartamento amplo com varanda",
        "metragem": 85.5,
        "numQuartos": 3,
        "numSuites": 1,
        "numBanheiros": 2,
        "numVagas": 1,
        "numAndar": 7,
        "unidade": "71",
        "condominio": 650,
        "endereco": {
            "rua": "Rua das Flores",
            "numero": 120,
            "bairro": "Centro",
            "cidade": "Curitiba",
            "estado": "PR",
            "cep": "80000-000",
            "latitude": -25.4284,
            "longitude": -49.2733,
        },
        "empreendimento": {
            "id": 500,
            "titulo": "Residencial Jardim",
            "descricao": "Condominio com lazer completo",
            "tipo": "VERTICAL",
            "status": "PRONTO",
            "finalidade": "RESIDENCIAL",
            "data_entrega": "2025-06-30",
            "etapa_lancamento": "ENTREGUE",
            "localizacao": "Centro",
        },
        "precoVenda": {
            "id": 700,
            "preco": 450000,
            "aceitaFinanciamentoBancario": True,
            "aceitaFGTS": True,
            "ativo": True,
            "pacote": {"titulo": "Destaque", "emDestaque": True},
        },
        "precoAluguel": None,
        "corretorPrincipal": {
            "id": 900,
            "nome": "Ana Souza",
            "email": "ana@imobiliaria.com.br",
            "whatsapp": "41999990000",
            "idiomas": ["pt", "en"],
            "bairrosAtuacao": ["Centro", "Batel"],
            "organizacao": {"nome": "Imobiliaria Central", "perfil": "IMOBILIARIA"},
        },
        "imagens": [
            f"https://cdn.example.com/{external_id}/1.jpg",
            f"https://cdn.example.com/{external_id}/2.jpg",
        ],
    }
    detail.update(overrides)
    return detail


@pytest.fixture
def detail():
    return build_detail()


@pytest.fixture
def make_detail():
    return build_detail


@pytest.fixture
def fake_client():
    """
    Stand-in for Pi8Client serving ``details`` (external id -> detail).
    Tests fill ``fake_client.details`` before running an import.
    """
    client = MagicMock()
    client.details = {}

    def summaries():
        return [{"id": external_id} for external_id in client.details]

    def fetch_detail(external_id):
        value = client.details[external_id]
        if isinstance(value, Exception):
            raise value
        return copy.deepcopy(value)

    client.fetch_published_summaries.side_effect = summaries
    client.fetch_property_detail.side_effect = fetch_detail
    return client
