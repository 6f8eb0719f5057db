"""
Tests for server assembly and tool registration.
"""
import pytest

from core.config import WorkspaceConfig
from core.server import SERVER_NAME, create_server, get_version, register_tools
from workspace_fakes import FakeWorkspaceServices

EXPECTED_TOOLS = {
    "search_files",
    "list_files",
    "get_document",
    "replace_document_content",
    "get_presentation",
    "rewrite_slide",
    "get_spreadsheet",
    "update_spreadsheet",
}


class TestRegisterTools:
    """Tests for register_tools."""

    def test_registers_every_tool_once(self, recording_server, fake_services):
        tools = register_tools(recording_server, fake_services)

        assert set(tools) == EXPECTED_TOOLS
        assert sorted(recording_server.tools) == sorted(EXPECTED_TOOLS)

    @pytest.mark.asyncio
    async def test_tools_share_the_services_context(self, recording_server):
        services = FakeWorkspaceServices(files=[{"id": "f1", "name": "a", "mimeType": "text/plain"}])
        tools = register_tools(recording_server, services)

        await tools["search_files"](query="a")
        await tools["list_files"]()

        assert services.call_names() == ["search_files", "list_files"]


class TestCreateServer:
    """Tests for create_server."""

    @pytest.mark.asyncio
    async def test_server_exposes_all_tools(self, fake_services):
        server = create_server(fake_services, WorkspaceConfig())

        registered = await server.get_tools()

        assert server.name == SERVER_NAME
        assert set(registered) == EXPECTED_TOOLS

    def test_version_is_a_string(self):
        assert isinstance(get_version(), str)
