import logging

import pytest

from servermanager.server.app import create_registry
from servermanager.server.settings import ServerManagerSettings
from servermanager.tests.mocks.control import ChannelRecorder, MockBridge


@pytest.fixture(autouse=True)
def _cleanup_root_logger():
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)


class TestCreateRegistry:
    def test_seeds_from_config_path(self, tmp_path):
        config = tmp_path / "servers.yaml"
        config.write_text("servers:\n  - displayName: alpha\n    endpoint: wss://alpha/x\n")
        recorder = ChannelRecorder()

        registry = create_registry(
            recorder,
            MockBridge,
            ServerManagerSettings(log_dir=str(tmp_path / "logs"), config_path=config),
        )

        assert [s.get_config().display_name for s in registry.get_servers()] == ["alpha"]
        assert len(recorder.channels) == 1

    def test_without_config_path_registry_is_empty(self, tmp_path):
        registry = create_registry(ChannelRecorder(), MockBridge, ServerManagerSettings(log_dir=str(tmp_path)))
        assert registry.get_servers() == []
