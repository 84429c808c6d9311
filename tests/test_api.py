"""
Integration tests for the REST API.

Uses the Django test client against the ninja routers.
"""
from unittest.mock import patch

import pytest
from django.test import Client

from imoveis.models import Imovel
from integrations.pi8.client import Pi8APIError
from integrations.pi8.services import ImovelImportError, ImovelReconciler


@pytest.fixture
def api_client():
    """Create Django test client."""
    return Client()


@pytest.fixture
def imported(make_detail):
    """Two imported listings: a sale in Curitiba and a rental in Londrina."""
    venda, _ = ImovelReconciler().reconcile("1", make_detail(1))
    aluguel_detail = make_detail(
        2,
        objetivo="ALUGAR",
        tipo="CASA",
        precoVenda=None,
        precoAluguel={"id": 800, "preco": 3200, "ativo": True},
    )
    aluguel_detail["endereco"] = {**aluguel_detail["endereco"], "cidade": "Londrina"}
    aluguel, _ = ImovelReconciler().reconcile("2", aluguel_detail)
    return venda, aluguel


@pytest.mark.django_db
class TestAuth:
    """X-API-Key handling."""

    def test_health_is_public(self, api_client, settings):
        settings.IMOVEIS_API_KEY = "secret"
        response = api_client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_key_required_when_configured(self, api_client, settings):
        settings.IMOVEIS_API_KEY = "secret"
        assert api_client.get("/api/imoveis/").status_code == 401

    def test_valid_key_accepted(self, api_client, settings):
        settings.IMOVEIS_API_KEY = "secret"
        response = api_client.get("/api/imoveis/", headers={"X-API-Key": "secret"})
        assert response.status_code == 200


@pytest.mark.django_db
class TestImoveisEndpoints:
    """Read-only listing endpoints."""

    def test_list(self, api_client, imported):
        response = api_client.get("/api/imoveis/")
        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 2
        assert {item["codigo"] for item in body["items"]} == {"IMV-1", "IMV-2"}

    def test_filter_by_objetivo(self, api_client, imported):
        body = api_client.get("/api/imoveis/?objetivo=ALUGAR").json()
        assert [item["codigo"] for item in body["items"]] == ["IMV-2"]

    def test_filter_by_cidade(self, api_client, imported):
        body = api_client.get("/api/imoveis/?cidade=curitiba").json()
        assert [item["codigo"] for item in body["items"]] == ["IMV-1"]
        assert body["items"][0]["cidade"] == "Curitiba"

    def test_detail(self, api_client, imported):
        venda, _ = imported
        response = api_client.get(f"/api/imoveis/{venda.pk}")
        assert response.status_code == 200
        body = response.json()
        assert body["id_integracao"] == "1"
        assert body["empreendimento"]["titulo"] == "Residencial Jardim"
        assert body["corretor_principal"]["organizacao_nome"] == "Imobiliaria Central"
        assert body["preco_aluguel"] is None
        assert len(body["anexos"]) == 2

    def test_detail_not_found(self, api_client):
        assert api_client.get("/api/imoveis/999").status_code == 404

    def test_anexos(self, api_client, imported):
        venda, _ = imported
        body = api_client.get(f"/api/imoveis/{venda.pk}/anexos").json()
        assert [a["nome"] for a in body] == ["Image 1", "Image 2"]
        assert all(a["is_external_url"] for a in body)

    def test_caracteristicas_empty(self, api_client, imported):
        venda, _ = imported
        assert api_client.get(f"/api/imoveis/{venda.pk}/caracteristicas").json() == []


@pytest.mark.django_db
class TestImportEndpoint:
    """POST /api/integrations/pi8/import"""

    def test_success(self, api_client):
        with patch("integrations.api.ImovelImportService") as service_cls:
            service_cls.return_value.sync.return_value = {
                "fetched": 3, "created": 2, "updated": 1, "failed": 0,
            }
            response = api_client.post("/api/integrations/pi8/import")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["created"] == 2
        assert body["updated"] == 1

    def test_partial_failure_reports_unsuccessful(self, api_client):
        with patch("integrations.api.ImovelImportService") as service_cls:
            service_cls.return_value.sync.return_value = {
                "fetched": 3, "created": 2, "updated": 0, "failed": 1,
            }
            body = api_client.post("/api/integrations/pi8/import").json()

        assert body["success"] is False
        assert body["failed"] == 1

    def test_aborted_import_returns_502(self, api_client):
        with patch("integrations.api.ImovelImportService") as service_cls:
            service_cls.return_value.sync.side_effect = ImovelImportError(
                "no properties found in external API"
            )
            response = api_client.post("/api/integrations/pi8/import")

        assert response.status_code == 502
        assert "no properties found" in response.json()["detail"]

    def test_unconfigured_client_returns_502(self, api_client):
        with patch("integrations.api.ImovelImportService", side_effect=Pi8APIError("not configured")):
            response = api_client.post("/api/integrations/pi8/import")

        assert response.status_code == 502
        assert Imovel.objects.count() == 0
