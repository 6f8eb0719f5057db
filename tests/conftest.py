"""
Pytest configuration shared by all test packages.
"""
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(__file__))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from workspace_fakes import FakeWorkspaceServices, RecordingServer


@pytest.fixture
def fake_services():
    return FakeWorkspaceServices()


@pytest.fixture
def recording_server():
    return RecordingServer()
