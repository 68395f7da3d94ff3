from unittest.mock import patch

from githubapp import Config

from src.models import PresubmitDefinition
from src.services import ConfigPresubmitService


def test_lookup_presubmit():
    presubmit_service = ConfigPresubmitService(
        ["lint", {"name": "unit-tests", "context": "ci/unit"}, {"name": "e2e"}]
    )
    assert presubmit_service.lookup_presubmit("lint") == PresubmitDefinition(name="lint", context="lint")
    assert presubmit_service.lookup_presubmit("ci/unit") == PresubmitDefinition(name="unit-tests", context="ci/unit")
    assert presubmit_service.lookup_presubmit("e2e") == PresubmitDefinition(name="e2e", context="e2e")
    assert presubmit_service.lookup_presubmit("unit-tests") is None


def test_lookup_presubmit_from_config():
    with patch.object(Config.override_manager, "presubmits", [{"name": "unit-tests", "context": "ci/unit"}]):
        presubmit_service = ConfigPresubmitService()
    assert presubmit_service.lookup_presubmit("ci/unit").name == "unit-tests"


def test_lookup_presubmit_default_config():
    assert ConfigPresubmitService().lookup_presubmit("lint") is None


def test_lookup_presubmit_ignores_invalid_entries(caplog):
    presubmit_service = ConfigPresubmitService(
        [{"context": "ci/unit"}, {"name": ""}, 42, {"name": "lint", "context": None}]
    )
    assert presubmit_service.presubmits == {"lint": PresubmitDefinition(name="lint", context="lint")}
    assert "Ignoring invalid presubmit config" in caplog.text
