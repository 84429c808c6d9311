"""
Tests for the import_imoveis management command.
"""
from io import StringIO
from unittest.mock import MagicMock, patch

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from integrations.pi8.client import Pi8APIError
from integrations.pi8.services import ImovelImportError

COMMAND = "integrations.management.commands.import_imoveis"


@pytest.mark.django_db
class TestImportImoveisCommand:

    def test_prints_summary(self):
        out = StringIO()
        with patch(f"{COMMAND}.Pi8Client"), patch(f"{COMMAND}.ImovelImportService") as service_cls:
            service_cls.return_value.sync.return_value = {
                "fetched": 4, "created": 3, "updated": 1, "failed": 0,
            }
            call_command("import_imoveis", stdout=out)

        assert "4 fetched, 3 created, 1 updated, 0 failed" in out.getvalue()

    def test_aborted_import_raises_command_error(self):
        with patch(f"{COMMAND}.Pi8Client"), patch(f"{COMMAND}.ImovelImportService") as service_cls:
            service_cls.return_value.sync.side_effect = ImovelImportError("no properties found")
            with pytest.raises(CommandError, match="Import aborted"):
                call_command("import_imoveis", stdout=StringIO())

    def test_missing_credentials_raise_command_error(self):
        with patch(f"{COMMAND}.Pi8Client", side_effect=Pi8APIError("not configured")):
            with pytest.raises(CommandError):
                call_command("import_imoveis", stdout=StringIO())

    def test_dry_run_only_lists(self):
        out = StringIO()
        client = MagicMock()
        client.fetch_published_summaries.return_value = [{"id": 1}, {"id": 2}]
        with patch(f"{COMMAND}.Pi8Client", return_value=client), \
                patch(f"{COMMAND}.ImovelImportService") as service_cls:
            call_command("import_imoveis", "--dry-run", stdout=out)

        service_cls.assert_not_called()
        assert "2 published properties" in out.getvalue()
