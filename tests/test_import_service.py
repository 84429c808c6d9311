"""
Tests for the batch driver: counts, per-item isolation, fatal list errors
and the APISyncLog record of each run.
"""
import pytest

from imoveis.models import Imovel
from integrations.models import APISyncLog
from integrations.pi8.client import Pi8APIError
from integrations.pi8.services import ImovelImportError, ImovelImportService


@pytest.fixture
def service(fake_client):
    return ImovelImportService(client=fake_client)


def _serve(fake_client, make_detail, ids):
    for external_id in ids:
        fake_client.details[external_id] = make_detail(external_id)


@pytest.mark.django_db
class TestImportBatch:
    """Whole-run behavior."""

    def test_first_run_creates_second_run_updates(self, service, fake_client, make_detail):
        _serve(fake_client, make_detail, [1, 2, 3])

        first = service.sync()
        second = service.sync()

        assert first == {"fetched": 3, "created": 3, "updated": 0, "failed": 0}
        assert second == {"fetched": 3, "created": 0, "updated": 3, "failed": 0}
        assert Imovel.objects.count() == 3

    def test_one_failed_detail_does_not_stop_the_batch(self, service, fake_client, make_detail):
        _serve(fake_client, make_detail, [1, 2, 3, 4, 5])
        fake_client.details[3] = Pi8APIError("API returned 500")

        result = service.sync()

        assert result == {"fetched": 5, "created": 4, "updated": 0, "failed": 1}
        assert not Imovel.objects.filter(id_integracao="3").exists()

    def test_one_invalid_property_does_not_stop_the_batch(self, service, fake_client, make_detail):
        _serve(fake_client, make_detail, [1, 2])
        fake_client.details[2] = make_detail(2, objetivo="ALUGAR", precoAluguel=None)

        result = service.sync()

        assert result["created"] == 1
        assert result["failed"] == 1

    def test_summary_without_id_counts_as_failed(self, fake_client, make_detail):
        fake_client.fetch_published_summaries.side_effect = None
        fake_client.fetch_published_summaries.return_value = [{"id": 1}, {"codigo": "X"}]
        fake_client.details[1] = make_detail(1)

        result = ImovelImportService(client=fake_client).sync()

        assert result == {"fetched": 2, "created": 1, "updated": 0, "failed": 1}

    def test_empty_list_is_fatal(self, service):
        with pytest.raises(ImovelImportError):
            service.sync()

        log = APISyncLog.objects.get()
        assert log.status == "failed"
        assert "no properties found" in log.error_message

    def test_list_fetch_failure_is_fatal(self, service, fake_client):
        fake_client.fetch_published_summaries.side_effect = Pi8APIError("timeout")

        with pytest.raises(ImovelImportError):
            service.sync()

        assert APISyncLog.objects.get().status == "failed"
        fake_client.fetch_property_detail.assert_not_called()

    def test_dry_run_writes_nothing(self, service, fake_client, make_detail):
        _serve(fake_client, make_detail, [1, 2])

        result = service.sync(dry_run=True)

        assert result["created"] == 0
        assert result["fetched"] == 2
        assert Imovel.objects.count() == 0
        assert APISyncLog.objects.get().sync_type == "dry_run"


@pytest.mark.django_db
class TestImportSyncLog:
    """APISyncLog bookkeeping."""

    def test_completed_run(self, service, fake_client, make_detail):
        _serve(fake_client, make_detail, [1, 2])
        service.sync()

        log = APISyncLog.objects.get()
        assert log.source == "pi8"
        assert log.status == "completed"
        assert log.records_fetched == 2
        assert log.records_created == 2
        assert log.records_failed == 0
        assert log.completed_at is not None

    def test_partial_run_keeps_errors(self, service, fake_client, make_detail):
        _serve(fake_client, make_detail, [1, 2])
        fake_client.details[2] = Pi8APIError("API returned 404")
        service.sync()

        log = APISyncLog.objects.get()
        assert log.status == "partial"
        assert log.records_failed == 1
        assert "property 2" in log.error_message
